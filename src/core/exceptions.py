"""Custom exceptions and error codes."""

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Standardized error codes for the API."""

    # Validation errors (400/422)
    VALIDATION_ERROR = "VALIDATION_ERROR"

    # Webhook errors (500)
    INVALID_UPDATE = "INVALID_UPDATE"

    # Collaborator errors
    DATABASE_ERROR = "DATABASE_ERROR"
    DELIVERY_ERROR = "DELIVERY_ERROR"

    # Server errors (500)
    INTERNAL_ERROR = "INTERNAL_ERROR"


class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Any | None = None,
    ) -> None:
        self.error_code = error_code
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class InvalidUpdateError(AppException):
    """Inbound webhook payload is not a valid Telegram update."""

    def __init__(self, reason: str) -> None:
        super().__init__(
            error_code=ErrorCode.INVALID_UPDATE,
            message="Internal server error",
            status_code=500,
            details={"reason": reason},
        )


class StoreError(AppException):
    """A data store query failed."""

    def __init__(self, operation: str, reason: str) -> None:
        super().__init__(
            error_code=ErrorCode.DATABASE_ERROR,
            message=f"Data store query failed: {operation}",
            status_code=500,
            details={"operation": operation, "reason": reason},
        )


class DeliveryError(AppException):
    """The messaging gateway could not deliver a message."""

    def __init__(self, chat_id: int, reason: str) -> None:
        super().__init__(
            error_code=ErrorCode.DELIVERY_ERROR,
            message=f"Message delivery failed for chat {chat_id}",
            status_code=502,
            details={"chat_id": chat_id, "reason": reason},
        )
