"""
Custom exceptions for hevy-notes.

Every exception carries:
- A descriptive message
- An error code
- Optional details for debugging
"""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(str, Enum):
    """Error codes shared by every hevy-notes exception."""

    # General errors
    INTERNAL_ERROR = "INTERNAL_ERROR"
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"

    # Hevy API errors
    FETCH_FAILED = "FETCH_FAILED"

    # Note store errors
    NOTE_NOT_FOUND = "NOTE_NOT_FOUND"
    NOTE_ALREADY_EXISTS = "NOTE_ALREADY_EXISTS"
    NOTE_FORMAT_ERROR = "NOTE_FORMAT_ERROR"


class HevyNotesError(Exception):
    """
    Base exception for all hevy-notes errors.

    Attributes:
        message: Human-readable error message
        code: Error code from ErrorCode enum
        details: Optional dictionary with additional error details
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to a dictionary."""
        result: Dict[str, Any] = {
            "error": {
                "code": self.code.value,
                "message": self.message,
            }
        }
        if self.details:
            result["error"]["details"] = self.details
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code.value}, message={self.message!r})"


class ConfigurationError(HevyNotesError):
    """Raised when a required setting is missing or invalid."""

    def __init__(self, message: str, setting: Optional[str] = None) -> None:
        super().__init__(
            message=message,
            code=ErrorCode.CONFIGURATION_ERROR,
            details={"setting": setting} if setting else None,
        )


# ============================================================================
# Hevy API Errors
# ============================================================================

class FetchError(HevyNotesError):
    """Raised by the request layer when the Hevy API yields no usable data."""

    def __init__(
        self,
        message: str,
        endpoint: str,
        status_code: Optional[int] = None,
    ) -> None:
        details: Dict[str, Any] = {"endpoint": endpoint}
        if status_code is not None:
            details["status_code"] = status_code
        self.endpoint = endpoint
        self.status_code = status_code
        super().__init__(message=message, code=ErrorCode.FETCH_FAILED, details=details)


# ============================================================================
# Note Store Errors
# ============================================================================

class NoteStoreError(HevyNotesError):
    """Base class for document store failures."""

    def __init__(
        self,
        message: str,
        path: str,
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
    ) -> None:
        self.path = path
        super().__init__(message=message, code=code, details={"path": path})


class NoteNotFoundError(NoteStoreError):
    """Raised when reading a note that does not exist."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Note not found: {path}", path, ErrorCode.NOTE_NOT_FOUND)


class NoteExistsError(NoteStoreError):
    """Raised when creating a note over an existing file."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Note already exists: {path}", path, ErrorCode.NOTE_ALREADY_EXISTS)


class NoteFormatError(NoteStoreError):
    """Raised when a note's front matter is not a YAML mapping."""

    def __init__(self, path: str, reason: str) -> None:
        self.reason = reason
        super().__init__(
            f"Invalid front matter in {path}: {reason}",
            path,
            ErrorCode.NOTE_FORMAT_ERROR,
        )
