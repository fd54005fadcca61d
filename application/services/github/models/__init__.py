"""
GitHub Models Module

Shared types, request models and result variants for publishing.
"""

from application.services.github.models.results import (
    GitHubResult,
    NotFound,
    StatusFailure,
    Success,
    TransportFailure,
)
from application.services.github.models.types import (
    BranchHeadResolved,
    DefaultBranchResolved,
    FileProbed,
    PublishStep,
    RepositoryIdentity,
    UploadRequest,
    UploadSettings,
    WorkingBranchCreated,
)

__all__ = [
    "GitHubResult",
    "NotFound",
    "StatusFailure",
    "Success",
    "TransportFailure",
    "BranchHeadResolved",
    "DefaultBranchResolved",
    "FileProbed",
    "PublishStep",
    "RepositoryIdentity",
    "UploadRequest",
    "UploadSettings",
    "WorkingBranchCreated",
]
