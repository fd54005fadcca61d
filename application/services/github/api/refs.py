"""
GitHub git reference operations (branch heads and branch creation).
"""

import logging

from application.services.github.api.client import GitHubAPIClient
from application.services.github.models.results import (
    StatusFailure,
    Success,
    to_request_error,
)

logger = logging.getLogger(__name__)

# 201 = created, 422 = reference already exists
BRANCH_CREATED_STATUSES = (201, 422)


class RefOperations:
    """Handles GitHub git reference operations."""

    def __init__(self, client: GitHubAPIClient):
        self.client = client

    async def get_branch_sha(self, branch: str) -> str:
        """Get the commit SHA a branch currently points to.

        Args:
            branch: Branch name

        Returns:
            Head commit SHA of the branch

        Raises:
            GitHubRequestError: If the request does not return 200 or the
                reference carries no object SHA
        """
        result = await self.client.get(self.client.repo_path(f"git/ref/heads/{branch}"))

        if not isinstance(result, Success) or result.status_code != 200:
            raise to_request_error(result, f"Get branch {branch}")

        try:
            return result.payload["object"]["sha"]
        except (KeyError, TypeError):
            raise to_request_error(result, f"Get branch {branch}")

    async def create_branch(self, branch_name: str, sha: str) -> None:
        """Create a branch pointing at ``sha``.

        An already existing branch (422) counts as created.

        Raises:
            GitHubRequestError: For any other outcome
        """
        result = await self.client.post(
            self.client.repo_path("git/refs"),
            data={"ref": f"refs/heads/{branch_name}", "sha": sha},
        )

        if isinstance(result, (Success, StatusFailure)) and result.status_code in BRANCH_CREATED_STATUSES:
            if result.status_code == 422:
                logger.info(f"Branch {branch_name} already exists, reusing it")
            return

        raise to_request_error(result, f"Create branch {branch_name}")
