from __future__ import annotations


class PlannerError(Exception):
    """Base class for all planner errors."""


class InvalidInputError(PlannerError, ValueError):
    """Caller passed data the operation cannot work with (e.g. fewer than two route points)."""


class UpstreamError(PlannerError, RuntimeError):
    """The generative-text endpoint failed: network error, non-2xx or malformed envelope."""


class ParseError(PlannerError, ValueError):
    """Generated text did not contain a well-formed JSON array."""
