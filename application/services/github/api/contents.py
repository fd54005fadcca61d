"""
GitHub repository contents operations.

Provides the file probe and the create-or-update call used when publishing.
"""

import logging
from typing import Optional, Dict, Any
from urllib.parse import quote

from application.services.github.api.client import GitHubAPIClient
from application.services.github.models.results import (
    GitHubResult,
    NotFound,
    Success,
    to_request_error,
)

logger = logging.getLogger(__name__)


class ContentsOperations:
    """Handles GitHub repository contents operations."""

    def __init__(self, client: GitHubAPIClient):
        """Initialize contents operations.

        Args:
            client: GitHub API client
        """
        self.client = client

    def _contents_path(self, file_path: str) -> str:
        # "#" and "?" in a file name would otherwise end the URL path
        return self.client.repo_path(f"contents/{quote(file_path, safe='/')}")

    async def get_file_sha(self, file_path: str, ref: str) -> Optional[str]:
        """Get the content SHA of a file, if it exists.

        Args:
            file_path: Path to file
            ref: Git reference (branch, tag, commit SHA)

        Returns:
            Content SHA, or None if the file does not exist

        Raises:
            GitHubRequestError: If GitHub answers with anything but 200 or 404,
                or the 200 body is not JSON
        """
        result = await self.client.get(self._contents_path(file_path), params={"ref": ref})

        if isinstance(result, NotFound):
            logger.info(f"File {file_path} does not exist on {ref}, creating it")
            return None

        if not isinstance(result, Success) or result.status_code != 200 or not result.decoded:
            raise to_request_error(result, f"Get contents of {file_path}")

        # Directory listings come back as a list and carry no single SHA
        if isinstance(result.payload, dict):
            sha = result.payload.get("sha")
            logger.info(f"File {file_path} exists on {ref} (sha: {sha}), updating it")
            return sha
        logger.warning(f"Contents of {file_path} on {ref} is not a single file")
        return None

    async def put_file(
        self,
        file_path: str,
        content: str,
        message: str,
        branch: str,
        sha: Optional[str] = None,
    ) -> GitHubResult:
        """Create or update a file as a commit on ``branch``.

        Args:
            file_path: Path to file
            content: Base64 encoded file content
            message: Commit message
            branch: Branch to commit to
            sha: Current content SHA; required by GitHub to overwrite an
                existing file, omitted to create a new one

        Returns:
            Raw request result; the caller decides what it means
        """
        data: Dict[str, Any] = {
            "message": message,
            "content": content,
            "branch": branch,
        }
        if sha:
            data["sha"] = sha

        result = await self.client.put(self._contents_path(file_path), data=data)
        if not isinstance(result, Success):
            logger.warning(
                f"Upload of {file_path} to {branch} was not accepted "
                f"(status {result.status_code})"
            )
        return result
