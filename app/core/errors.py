from enum import Enum


class ErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    FETCH_FAILED = "fetch_failed"
    VALIDATION_FAILED = "validation_failed"
    STORE_WRITE_FAILED = "store_write_failed"
    INVALID_STATUS = "invalid_status"


class DashboardError(Exception):
    kind: ErrorKind = ErrorKind.FETCH_FAILED

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class FetchError(DashboardError):
    """A read against the store failed. The message never carries store details."""

    kind = ErrorKind.FETCH_FAILED


class NotFoundError(DashboardError):
    kind = ErrorKind.NOT_FOUND


class InvalidStatusError(DashboardError):
    kind = ErrorKind.INVALID_STATUS
