class GoodDataError(Exception):
    """Base exception for all GoodData API client errors."""


class GoodDataRequestError(GoodDataError):
    """Raised when a request cannot reach the GoodData host."""


class GoodDataHTTPError(GoodDataError):
    """Raised when GoodData answers a required call with an error status."""

    def __init__(self, message: str, *, status_code: int, body: str = "") -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body
