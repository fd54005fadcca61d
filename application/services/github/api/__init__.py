"""
GitHub API Module

Handles the GitHub REST API interactions used for publishing:
- Repository metadata
- Git references (branches)
- Repository contents
- Pull requests
"""

from application.services.github.api.client import GitHubAPIClient
from application.services.github.api.contents import ContentsOperations
from application.services.github.api.pulls import PullRequestOperations
from application.services.github.api.refs import RefOperations
from application.services.github.api.repositories import RepositoryOperations

__all__ = [
    "GitHubAPIClient",
    "ContentsOperations",
    "PullRequestOperations",
    "RefOperations",
    "RepositoryOperations",
]
