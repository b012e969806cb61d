"""Errors raised when talking to the nutrition backend."""


class BackendError(Exception):
    """The backend answered with a non-2xx status or could not be reached."""

    def __init__(self, status_code: int, detail: str):
        super().__init__(detail)
        self.status_code = status_code
        self.detail = detail


class UnauthorizedError(BackendError):
    """The backend rejected the configured token (HTTP 401)."""

    def __init__(self, detail: str = "Unauthorized"):
        super().__init__(401, detail)
