"""Errors raised by the records API client and the sync engine."""

GENERIC_ERROR_MESSAGE = "The server could not complete the request"


class RecordsClientError(Exception):
    """Base class for every client-side failure."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class RecordsApiError(RecordsClientError):
    """The server answered with an HTTP error."""

    def __init__(self, message: str, status_code: int):
        super().__init__(message)
        self.status_code = status_code


class TransportError(RecordsClientError):
    """The server could not be reached."""


class SyncError(RecordsClientError):
    """A sync operation was rejected or one of its calls failed."""


class SaveError(SyncError):
    """At least one record update of a bulk save failed."""
