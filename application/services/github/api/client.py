"""
GitHub API client for making authenticated requests against one repository.
"""

import logging
from typing import Optional, Dict, Any

import httpx

from application.services.github.models.results import (
    GitHubResult,
    NotFound,
    StatusFailure,
    Success,
    TransportFailure,
)
from application.services.github.models.types import RepositoryIdentity
from common.config.config import (
    GITHUB_ACCEPT_HEADER,
    GITHUB_API_URL,
    GITHUB_API_VERSION,
    GITHUB_CONNECT_TIMEOUT,
    GITHUB_REQUEST_TIMEOUT,
)

logger = logging.getLogger(__name__)


class GitHubAPIClient:
    """Client for GitHub REST API calls scoped to a single repository."""

    def __init__(
        self,
        identity: RepositoryIdentity,
        base_url: str = GITHUB_API_URL,
        timeout: float = GITHUB_REQUEST_TIMEOUT,
        connect_timeout: float = GITHUB_CONNECT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize GitHub API client.

        Args:
            identity: Repository owner, name and bearer token
            base_url: API root URL
            timeout: Overall request timeout in seconds
            connect_timeout: Connection timeout in seconds
            transport: Custom httpx transport (tests pass a MockTransport)
        """
        self.identity = identity
        self.base_url = base_url.rstrip("/")
        self.timeout_config = httpx.Timeout(timeout, connect=connect_timeout)
        self._transport = transport

    @property
    def owner(self) -> str:
        return self.identity.owner

    @property
    def repo(self) -> str:
        return self.identity.repo

    def repo_path(self, suffix: str = "") -> str:
        """Build an API path under ``repos/{owner}/{repo}``."""
        path = f"repos/{self.owner}/{self.repo}"
        return f"{path}/{suffix}" if suffix else path

    def _get_headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.identity.token}",
            "Accept": GITHUB_ACCEPT_HEADER,
            "X-GitHub-Api-Version": GITHUB_API_VERSION,
            "Content-Type": "application/json",
        }

    async def send(
        self,
        method: str,
        path: str,
        data: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> GitHubResult:
        """Make a GitHub API request.

        Args:
            method: HTTP method (GET, POST, PUT)
            path: API path (without base URL)
            data: Request body data
            params: Query parameters

        Returns:
            Success, NotFound, StatusFailure or TransportFailure

        Raises:
            ValueError: If HTTP method is unsupported
        """
        url = f"{self.base_url}/{path}"
        method_upper = method.upper()
        if method_upper not in ("GET", "POST", "PUT"):
            raise ValueError(f"Unsupported HTTP method: {method}")

        try:
            response = await self._execute_http_request(method_upper, url, data, params)
        except (httpx.RequestError, httpx.InvalidURL) as e:
            logger.error(f"GitHub API {method_upper} request to {url} failed: {e!r}")
            return TransportFailure(error=e)

        return self._process_response(response, method_upper, url)

    async def _execute_http_request(
        self,
        method: str,
        url: str,
        data: Optional[Dict[str, Any]],
        params: Optional[Dict[str, Any]],
    ) -> httpx.Response:
        async with httpx.AsyncClient(
            timeout=self.timeout_config, trust_env=False, transport=self._transport
        ) as client:
            if method == "GET":
                return await client.get(url, headers=self._get_headers(), params=params)
            elif method == "POST":
                return await client.post(url, json=data, headers=self._get_headers(), params=params)
            else:
                return await client.put(url, json=data, headers=self._get_headers(), params=params)

    def _process_response(
        self, response: httpx.Response, method: str, url: str
    ) -> GitHubResult:
        """Map an HTTP response onto a result variant."""
        status = response.status_code

        if 200 <= status < 300:
            logger.info(
                f"GitHub API {method} request to {url} "
                f"successful (status: {status})"
            )
            payload: Any = {}
            if response.content:
                try:
                    payload = response.json()
                except ValueError:
                    logger.warning(
                        f"GitHub API {method} request to {url} returned a non-JSON body"
                    )
                    return Success(
                        status_code=status, payload=None, response=response, decoded=False
                    )
            return Success(status_code=status, payload=payload, response=response)

        if status == 404:
            logger.info(f"GitHub API {method} request to {url} returned 404")
            return NotFound(response=response)

        logger.warning(
            f"GitHub API {method} request to {url} failed (status {status}): {response.text}"
        )
        return StatusFailure(status_code=status, body=response.text, response=response)

    async def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> GitHubResult:
        return await self.send("GET", path, params=params)

    async def post(self, path: str, data: Optional[Dict[str, Any]] = None) -> GitHubResult:
        return await self.send("POST", path, data=data)

    async def put(self, path: str, data: Optional[Dict[str, Any]] = None) -> GitHubResult:
        return await self.send("PUT", path, data=data)
