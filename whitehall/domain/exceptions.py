"""Domain exceptions for the document filter service.

Defines exceptions independent of infrastructure concerns. The presentation
layer maps them to HTTP responses in exception handlers. Transport failures
from the search provider are not wrapped here; they propagate
as httpx errors.
"""

from typing import Any


class WhitehallException(Exception):
    """Base exception for all document filter errors.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. reason).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON error responses."""
        return {"error": self.error_code, "message": self.message, "details": self.details}


class SqlNotConfiguredException(WhitehallException):
    """Raised when an operation needs the system of record but no database is configured."""

    def __init__(self) -> None:
        super().__init__(
            message="This operation requires a SQL database that is not configured.",
            error_code="SERVICE_UNAVAILABLE",
        )


class SearchResponseException(WhitehallException):
    """Raised when the search provider answers with a body we cannot interpret."""

    def __init__(self, reason: str) -> None:
        super().__init__(
            f"Malformed search response: {reason}",
            "SEARCH_RESPONSE_INVALID",
            {"reason": reason},
        )
