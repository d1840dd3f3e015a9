"""Exception types raised by the client."""
from __future__ import annotations

from genderize.common.schema import RateLimit


class ConfigurationError(ValueError):
    """Raised when a client cannot be built from the given configuration."""


class ServerError(Exception):
    """
    A non-success reply from the Genderize API server.

    Attributes:
        message: The server's ``error`` message, or "" if the body had none.
        status_code: HTTP status code of the reply.
        rate_limit: Quota snapshot from the reply headers, if all were present.
    """

    def __init__(self, message: str, status_code: int, rate_limit: RateLimit | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.rate_limit = rate_limit

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"ServerError(message={self.message!r}, status_code={self.status_code}, "
            f"rate_limit={self.rate_limit!r})"
        )
