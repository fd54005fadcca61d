"""
GitHub repository metadata operations.
"""

from application.services.github.api.client import GitHubAPIClient
from application.services.github.models.results import Success, to_request_error
from common.constants import DEFAULT_BRANCH_FALLBACK


class RepositoryOperations:
    """Handles GitHub repository metadata operations."""

    def __init__(self, client: GitHubAPIClient):
        """Initialize repository operations.

        Args:
            client: GitHub API client
        """
        self.client = client

    async def get_default_branch(self) -> str:
        """Get the repository's default branch name.

        Returns:
            Default branch name, or "main" when GitHub omits it

        Raises:
            GitHubRequestError: If the request does not return 200 with a JSON object
        """
        result = await self.client.get(self.client.repo_path())

        if (
            not isinstance(result, Success)
            or result.status_code != 200
            or not isinstance(result.payload, dict)
        ):
            raise to_request_error(result, "Get repository")

        return result.payload.get("default_branch") or DEFAULT_BRANCH_FALLBACK
