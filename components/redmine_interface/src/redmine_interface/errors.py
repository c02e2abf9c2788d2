"""Error taxonomy shared by every Redmine client component."""

__all__ = [
    "RedmineError",
    "NetworkError",
    "ApiError",
    "ResourceNotFoundError",
    "ProtocolError",
    "ParseError",
]


class RedmineError(Exception):
    """Base exception for every failure raised by the client."""


class NetworkError(RedmineError):
    """Raised when the request never produced an HTTP response (DNS, refused connection, TLS, timeout)."""


class ApiError(RedmineError):
    """Raised when Redmine answers a write or delete with a non-2xx status.

    Args:
        status_code: HTTP status code returned by the server
        body:        Raw response body, kept for diagnostics

    """

    def __init__(self, status_code: int, body: str = "") -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"Redmine API error {status_code}: {body}")


class ResourceNotFoundError(ApiError):
    """Raised when the targeted resource does not exist (404)."""


class ProtocolError(RedmineError):
    """Raised when a 2xx response breaks the expected contract, e.g. no Location header after a create."""


class ParseError(RedmineError):
    """Raised when a response body does not match the expected JSON schema."""
