"""Shared exceptions module."""

from typing import Optional


class GAUniversalException(Exception):
    """Base exception for the Google Analytics adapter."""

    pass


class UnsupportedEventError(GAUniversalException):
    """Exception raised when a message is not a page, screen or track call."""

    def __init__(self, event_type: Optional[str], message: Optional[str] = None):
        """Create a new UnsupportedEventError instance.

        Args:
        ----
            event_type (str, optional): The message type that was received.
            message (str, optional): The error message. Has default message.

        """
        self.event_type = event_type
        self.message = message or f"Unsupported message type: {event_type!r}"
        super().__init__(self.message)


class ConfigurationError(GAUniversalException):
    """Exception raised when the integration settings cannot produce a valid hit."""

    def __init__(self, message: Optional[str] = "No tracking id configured"):
        """Create a new ConfigurationError instance.

        Args:
        ----
            message (str, optional): The error message. Has default message.

        """
        self.message = message
        super().__init__(self.message)


class TransportError(GAUniversalException):
    """Exception raised when a payload could not be delivered to the collection endpoint."""

    def __init__(
        self,
        message: Optional[str] = "Failed to deliver payload",
        status_code: Optional[int] = None,
    ):
        """Create a new TransportError instance.

        Args:
        ----
            message (str, optional): The error message. Has default message.
            status_code (int, optional): HTTP status of the last attempt, if any.

        """
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class BatchDispatchError(TransportError):
    """Raised when any send of a fan-out batch fails.

    Sends that already succeeded are not retracted; the collection endpoint
    has no transactional API.
    """

    def __init__(self, first_error: Exception, failed: int, total: int):
        """Create a new BatchDispatchError instance.

        Args:
        ----
            first_error (Exception): The first failure in payload order.
            failed (int): Number of sends that failed.
            total (int): Number of sends in the batch.

        """
        self.first_error = first_error
        self.failed = failed
        self.total = total
        super().__init__(
            f"{failed} of {total} payloads failed: {first_error}",
            getattr(first_error, "status_code", None),
        )
