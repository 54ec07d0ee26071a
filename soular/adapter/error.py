"""Adapter layer errors."""


class AdapterError(Exception):
    """Base adapter error."""

    pass


class RemoteError(AdapterError):
    """Transport failure, timeout, or unexpected server response.

    Attributes:
        status_code: HTTP status of the failed response, None for transport
            failures and timeouts
    """

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)
