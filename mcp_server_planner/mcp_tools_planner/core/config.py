from __future__ import annotations

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field

DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_MODEL = "gemini-pro"


class GeminiConfig(BaseModel):
    """Connection settings for the Gemini generateContent endpoint.

    The API key is never hard-coded; use `from_env()` or pass it explicitly.
    """
    api_key: str = Field(..., repr=False)
    model: str = DEFAULT_MODEL
    base_url: str = DEFAULT_BASE_URL
    timeout_s: int = 60

    @property
    def endpoint(self) -> str:
        return f"{self.base_url.rstrip('/')}/models/{self.model}:generateContent"

    @classmethod
    def from_env(cls) -> "GeminiConfig":
        """Build the config from environment variables (a local .env is honoured)."""
        load_dotenv()
        api_key = os.getenv("GEMINI_API_KEY")
        if not api_key:
            raise ValueError("GEMINI_API_KEY not set")
        return cls(
            api_key=api_key,
            model=os.getenv("GEMINI_MODEL", DEFAULT_MODEL),
            base_url=os.getenv("GEMINI_BASE_URL", DEFAULT_BASE_URL),
            timeout_s=int(os.getenv("GEMINI_TIMEOUT_S", "60")),
        )
