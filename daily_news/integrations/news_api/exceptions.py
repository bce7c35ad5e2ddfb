class NewsApiError(Exception):
    """Base error of the news API integration."""

    code: int = 500


class TransportError(NewsApiError):
    """Raised when the upstream cannot be reached: DNS, connect, timeout."""


class UpstreamStatusError(NewsApiError):
    """Raised when the upstream answers with a non-2xx status."""

    def __init__(self, code: int, message: str):
        super().__init__(message)
        self.code = code


class ShapeError(NewsApiError):
    """Raised when a successful response does not match the expected payload shape."""


class ExhaustionError(NewsApiError):
    """Raised when every attempt failed at the transport level."""


class RequestCancelledError(NewsApiError):
    """Raised when the caller cancels a fetch in flight."""

    code = 499
