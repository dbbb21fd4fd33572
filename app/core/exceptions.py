"""
Simple exception classes for the application.
"""

from typing import List, Optional

from fastapi import HTTPException, status


class BadRequestError(HTTPException):
    """Raised when a request is well-formed JSON but cannot be acted upon."""

    def __init__(self, message: str):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=message)


class ValidationError(BadRequestError):
    """Raised when input validation fails. Names every offending field."""

    def __init__(self, message: str, fields: Optional[List[str]] = None):
        self.message = message
        self.fields = fields or []
        HTTPException.__init__(
            self,
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"message": message, "fields": self.fields},
        )


class AuthError(HTTPException):
    """Raised when the session is missing, invalid or rejected."""

    def __init__(self, message: str = "Not authenticated"):
        super().__init__(status_code=status.HTTP_401_UNAUTHORIZED, detail=message)


class StorageError(HTTPException):
    """Raised when database operations fail."""

    def __init__(self, message: str = "Database operation failed"):
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=message
        )


class ExternalServiceError(HTTPException):
    """Raised when external service calls fail."""

    def __init__(self, service_name: str, message: str):
        super().__init__(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"{service_name} service error: {message}",
        )
