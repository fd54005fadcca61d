"""
GitHub Service Package

Publishes design token files to a GitHub repository.

Main Components:
- RepositoryPublisher: Branch, commit and pull request workflow
- API Client: GitHub REST API interactions scoped to one repository
- Models: Request models, workflow state and request result variants
"""

from application.services.github.api.client import GitHubAPIClient
from application.services.github.models.types import (
    RepositoryIdentity,
    UploadRequest,
    UploadSettings,
)
from application.services.github.publisher import (
    CallbackResponseHandler,
    RepositoryPublisher,
)

__all__ = [
    "CallbackResponseHandler",
    "GitHubAPIClient",
    "RepositoryIdentity",
    "RepositoryPublisher",
    "UploadRequest",
    "UploadSettings",
]
