"""
Result variants returned by the GitHub API client.

Every request resolves to exactly one of four outcomes. Callers branch on
the variant instead of catching exceptions or testing for None.
"""

from dataclasses import dataclass, field
from typing import Any, Optional, Union

import httpx

from common.exception.exceptions import GitHubRequestError


@dataclass(frozen=True)
class Success:
    """2xx response with its decoded JSON payload.

    ``decoded`` is False when the body was present but not valid JSON; the
    payload is then None.
    """

    status_code: int
    payload: Any
    response: httpx.Response = field(repr=False)
    decoded: bool = True


@dataclass(frozen=True)
class NotFound:
    """404 response; the requested resource does not exist."""

    response: httpx.Response = field(repr=False)

    @property
    def status_code(self) -> int:
        return 404


@dataclass(frozen=True)
class StatusFailure:
    """Response outside the 2xx range (other than 404)."""

    status_code: int
    body: str
    response: httpx.Response = field(repr=False)


@dataclass(frozen=True)
class TransportFailure:
    """No response at all: connection refused, DNS failure, timeout."""

    error: Exception

    @property
    def status_code(self) -> Optional[int]:
        return None

    @property
    def response(self) -> Optional[httpx.Response]:
        return None


GitHubResult = Union[Success, NotFound, StatusFailure, TransportFailure]


def to_request_error(result: GitHubResult, action: str) -> GitHubRequestError:
    """Build the exception raised when ``result`` is outside a step's success set.

    Args:
        result: Result of the failed request
        action: Short description of the request, used in the message

    Returns:
        GitHubRequestError carrying status code and response of ``result``
    """
    if isinstance(result, TransportFailure):
        return GitHubRequestError(f"{action} failed: {result.error!r}")

    if isinstance(result, Success):
        message = f"{action} returned an unexpected payload: {result.response.text}"
    else:
        message = f"{action} failed (status {result.status_code}): {result.response.text}"
    return GitHubRequestError(
        message, status_code=result.status_code, response=result.response
    )
