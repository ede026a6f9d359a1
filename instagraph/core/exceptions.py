"""Custom exceptions for instagraph."""

from typing import Any, Optional


class InstagraphError(Exception):
    """Base exception for instagraph."""
    pass


class AuthorizationError(InstagraphError):
    """Operation requires a user access token the client does not hold."""
    pass


class InvalidStateError(InstagraphError):
    """Operation is not valid in the object's current state."""
    pass


class ParsingError(InstagraphError):
    """Failed to parse a response body."""
    pass


class ApiError(InstagraphError):
    """
    Instagram answered with a non-2xx status.

    ``error`` holds the provider's error object when the body carried one
    (``{"error": {"message": ..., "type": ..., "code": ...}}``), otherwise
    the decoded body or the raw response text.
    """

    def __init__(self, status_code: int, error: Any = None):
        self.status_code = status_code
        self.error = error
        super().__init__(f"HTTP {status_code}: {self.message}")

    @property
    def message(self) -> str:
        if isinstance(self.error, dict) and self.error.get("message"):
            return str(self.error["message"])
        if self.error:
            return str(self.error)
        return "no error details"

    @property
    def error_type(self) -> Optional[str]:
        if isinstance(self.error, dict):
            return self.error.get("type")
        return None

    @property
    def code(self) -> Optional[int]:
        if not isinstance(self.error, dict):
            return None
        code = self.error.get("code")
        try:
            return int(code) if code is not None else None
        except (TypeError, ValueError):
            return None
