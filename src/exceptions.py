"""Application error taxonomy.

Services raise these; the handlers registered in ``src.main`` turn them into
HTTP responses with an ``{"error": message}`` body.
"""


class BlogApiError(Exception):
    """Base class for errors that map to a client-facing status code."""

    status_code = 500

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message


class ValidationError(BlogApiError):
    """A required field is missing or invalid."""

    status_code = 400


class UniqueConstraintViolation(BlogApiError):
    """A write would break a uniqueness constraint."""

    status_code = 400

    def __init__(self, field: str = "username"):
        super().__init__(f"expected {field} to be unique")
        self.field = field


class NotFound(BlogApiError):
    """The requested record does not exist."""

    status_code = 404


class Unauthorized(BlogApiError):
    """Missing, invalid or mismatched credentials."""

    status_code = 401


class InvalidToken(Exception):
    """A bearer token failed verification."""
