"""
GitHub pull request operations.
"""

from application.services.github.api.client import GitHubAPIClient
from application.services.github.models.results import GitHubResult


class PullRequestOperations:
    """Handles GitHub pull request operations."""

    def __init__(self, client: GitHubAPIClient):
        self.client = client

    async def create_pull_request(
        self, head: str, base: str, title: str, body: str
    ) -> GitHubResult:
        """Open a pull request merging ``head`` into ``base``.

        Returns:
            Raw request result. GitHub answers 422 when there is nothing to
            merge; interpreting that is left to the caller.
        """
        return await self.client.post(
            self.client.repo_path("pulls"),
            data={"title": title, "head": head, "base": base, "body": body},
        )
