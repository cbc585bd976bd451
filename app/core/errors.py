"""
Fehlerklassen des Oracle-Endpoints.

Jede Klasse kennt ihren HTTP-Status und den JSON-Body, den die Route
zurückgibt. Alles, was nicht von OracleError erbt, landet in der Route
im Catch-all ("Internal server error").
"""

from typing import Any


class OracleError(Exception):
    status_code: int = 500
    error: str = "Internal server error"

    def payload(self) -> dict[str, Any]:
        return {"error": self.error}


class AuthenticationFailure(OracleError):
    status_code = 401
    error = "Unauthorized - Invalid API key"


class RequestValidationFailure(OracleError):
    status_code = 400
    error = "Missing required fields: prompt, baseline_answer, mre_answer"


class UpstreamTransportError(OracleError):
    """Upstream-API hat mit Non-2xx geantwortet. Body wird für Diagnose durchgereicht."""

    status_code = 500
    error = "OpenAI API error"

    def __init__(self, details: str):
        super().__init__(details)
        self.details = details

    def payload(self) -> dict[str, Any]:
        return {"error": self.error, "details": self.details}


class ScoreRangeError(OracleError):
    """Mindestens ein Sub-Score liegt außerhalb von [0, 1]."""

    status_code = 500
    error = "Invalid scores from GPT (out of range 0-1)"

    def __init__(self, fields: dict[str, float]):
        super().__init__(f"Out-of-range scores: {fields}")
        self.fields = fields


class ScoreParseError(ValueError):
    """Antwort des Judges enthält kein verwertbares Score-Objekt."""


class JSONExtractionError(ScoreParseError):
    def __init__(self, message: str = "No JSON found in response"):
        super().__init__(message)
