"""Exceptions raised by the GitHub publishing workflow."""

from typing import Any, Optional


class GitHubRequestError(Exception):
    """Raised when a GitHub request falls outside its step's success set.

    Carries the status code (None when no response was received), the raw
    message and the response object the caller may want to inspect.
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response: Optional[Any] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response = response

    @property
    def is_unauthorized(self) -> bool:
        """Check if the request was rejected for bad credentials."""
        return self.status_code == 401

    def __repr__(self) -> str:
        return f"GitHubRequestError(status_code={self.status_code!r}, message={self.message!r})"


class MissingConfigurationError(Exception):
    """Raised when a required environment variable is not set."""

    pass
