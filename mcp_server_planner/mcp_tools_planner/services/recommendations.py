"""Gemini-backed itinerary text and place recommendations.

Two calls, two failure policies:

- generate_itinerary: failures are logged and raised as UpstreamError.
- recommend_places: best effort. Transport or parse failures are logged and
  the result is an empty list.

The JSON-array extraction from free-form model output is a regex heuristic and
lives in `parse_recommendations` so it can be exercised without HTTP.
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any, Dict, List, Optional

import requests
from pydantic import ValidationError

from ..core.config import GeminiConfig
from ..core.errors import ParseError, UpstreamError
from ..core.schemas import Coordinates, PlaceRecommendation

logger = logging.getLogger(__name__)

_JSON_ARRAY_RE = re.compile(r"\[\s*\{.*\}\s*\]", re.DOTALL)


class GeminiClient:
    """Thin client for the Gemini generateContent endpoint."""

    def __init__(self, config: GeminiConfig, session: Optional[requests.Session] = None) -> None:
        self.config = config
        self.session = session or requests.Session()

    def generate_text(self, prompt: str) -> str:
        """Send one prompt and return the first candidate's text."""
        body = {"contents": [{"parts": [{"text": prompt}]}]}
        headers = {
            "Content-Type": "application/json",
            "x-goog-api-key": self.config.api_key,
        }

        logger.debug("Calling Gemini generateContent: model=%s", self.config.model)
        try:
            r = self.session.post(
                self.config.endpoint,
                json=body,
                headers=headers,
                timeout=self.config.timeout_s,
            )
            r.raise_for_status()
            payload = r.json()
        except (requests.RequestException, ValueError) as exc:
            raise UpstreamError(f"Gemini request failed: {exc}") from exc

        return extract_candidate_text(payload)

    def generate_itinerary(self, destination: str, days: int, preferences: str) -> str:
        """Return the model's itinerary text verbatim. Raises UpstreamError."""
        try:
            return self.generate_text(_build_itinerary_prompt(destination, days, preferences))
        except UpstreamError as exc:
            logger.error("Error generating AI itinerary: %s", exc)
            raise

    def recommend_places(self, location: Coordinates, preferences: str) -> List[PlaceRecommendation]:
        """Ask for ~5 places near `location`. Never raises; returns [] on any failure."""
        try:
            text = self.generate_text(_build_recommendation_prompt(location, preferences))
        except UpstreamError as exc:
            logger.error("Error generating place recommendations: %s", exc)
            return []
        try:
            return parse_recommendations(text)
        except Exception:
            logger.exception("Unexpected error parsing place recommendations")
            return []


def extract_candidate_text(payload: Dict[str, Any]) -> str:
    """Pull `candidates[0].content.parts[0].text` out of a generateContent response."""
    try:
        candidates = payload.get("candidates") or []
        if not candidates:
            raise UpstreamError("No valid response from Gemini API")
        text = candidates[0]["content"]["parts"][0]["text"]
    except (AttributeError, KeyError, IndexError, TypeError) as exc:
        raise UpstreamError(f"Malformed Gemini response: {exc}") from exc
    if not isinstance(text, str):
        raise UpstreamError("Malformed Gemini response: text is not a string")
    return text


def parse_recommendations(text: str) -> List[PlaceRecommendation]:
    """Best-effort parse of a JSON array of places embedded in generated text.

    Returns [] when no bracketed array of objects is found or it is not valid JSON.
    """
    try:
        return _parse_recommendations_strict(text)
    except ParseError as exc:
        logger.error("Error parsing JSON from AI response: %s", exc)
        return []


def _parse_recommendations_strict(text: str) -> List[PlaceRecommendation]:
    match = _JSON_ARRAY_RE.search(text or "")
    if not match:
        raise ParseError("no JSON array found in generated text")

    try:
        data = json.loads(match.group(0))
    except (ValueError, RecursionError) as exc:
        raise ParseError(str(exc)) from exc
    if not isinstance(data, list):
        raise ParseError("generated JSON is not an array")

    try:
        return [PlaceRecommendation.from_raw(item) for item in data if isinstance(item, dict)]
    except ValidationError as exc:
        raise ParseError(str(exc)) from exc


# ---------------------------------------------------------------------------
# Prompt construction helpers
# ---------------------------------------------------------------------------

def _build_itinerary_prompt(destination: str, days: int, preferences: str) -> str:
    return (
        f"Create a detailed travel itinerary for {destination} for {days} days. "
        f"Consider preferences: {preferences}. "
        "Include places to visit, activities, and food recommendations. "
        "Format the response with clear day headers, times, and activities."
    )


def _build_recommendation_prompt(location: Coordinates, preferences: str) -> str:
    return (
        f"Based on the location coordinates ({location.lat}, {location.lon}), "
        "suggest 5 interesting places to visit nearby. "
        f"Consider preferences: {preferences}. "
        "Return the response as a JSON array with each place having: "
        "name, description, category, and estimated distance."
    )
