class ApiError(Exception):
    """A remote call failed: transport error or non-success status.

    server_message is the 'message' field of the error response body, if the
    server sent one; str(exc) is the underlying transport message.
    """

    def __init__(self, message: str = "", server_message: str | None = None,
                 status_code: int | None = None):
        super().__init__(message)
        self.server_message = server_message
        self.status_code = status_code


class AuthMissingError(ApiError):
    """No bearer token available; raised before any request is sent."""


class ValidationError(ValueError):
    """Form input rejected before submission. errors maps field -> message."""

    def __init__(self, errors: dict[str, str]):
        self.errors = dict(errors)
        super().__init__(next(iter(self.errors.values()), "Invalid input."))


def error_message(exc: BaseException, fallback: str,
                  use_transport_message: bool = True) -> str:
    """Server message, else the exception's own message, else fallback."""
    server_message = getattr(exc, "server_message", None)
    if server_message:
        return server_message
    if use_transport_message and str(exc):
        return str(exc)
    return fallback
