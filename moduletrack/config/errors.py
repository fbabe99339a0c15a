"""
Error Taxonomy - Consistent error codes across the application.

Usage:
    from moduletrack.config.errors import FetchError

    raise FetchError("Erreur lors de la récupération des modules: Erreur HTTP: 500")
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Standardized error codes for machine-readable error responses."""

    # Remote store errors
    FETCH_FAILED = "FETCH_FAILED"

    # Form errors
    VALIDATION_ERROR = "VALIDATION_ERROR"


class ModuleTrackError(Exception):
    """Base exception with error code support."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(f"[{code.value}] {message}")

    def to_dict(self) -> dict[str, Any]:
        """Convert to API-friendly dictionary."""
        return {
            "code": self.code.value,
            "message": self.message,
            "details": self.details,
        }


class FetchError(ModuleTrackError):
    """Remote store call failed (network, non-2xx status or malformed payload)."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(ErrorCode.FETCH_FAILED, message, details)


class ModuleValidationError(ModuleTrackError):
    """Form input rejected before any remote call."""

    def __init__(self, errors: dict[str, str]) -> None:
        self.errors = dict(errors)
        message = "; ".join(f"{field}: {text}" for field, text in self.errors.items())
        super().__init__(ErrorCode.VALIDATION_ERROR, message, {"fields": self.errors})
