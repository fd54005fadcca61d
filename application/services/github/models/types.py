"""
Shared types and models for publishing to a GitHub repository.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from common.config.config import (
    GITHUB_OWNER_ENV,
    GITHUB_REPO_ENV,
    GITHUB_TOKEN_ENV,
    get_env,
)


class PublishStep(str, Enum):
    DEFAULT_BRANCH = "default_branch"
    BRANCH_HEAD = "branch_head"
    CREATE_BRANCH = "create_branch"
    FILE_PROBE = "file_probe"
    UPLOAD = "upload"
    PULL_REQUEST = "pull_request"


@dataclass(frozen=True)
class RepositoryIdentity:
    """Target repository and the bearer token used to reach it."""

    owner: str
    repo: str
    token: str = field(repr=False)

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"

    @classmethod
    def from_env(cls) -> "RepositoryIdentity":
        """Build identity from GITHUB_OWNER, GITHUB_REPO and GITHUB_TOKEN.

        Raises:
            MissingConfigurationError: If any of the variables is unset
        """
        return cls(
            owner=get_env(GITHUB_OWNER_ENV),
            repo=get_env(GITHUB_REPO_ENV),
            token=get_env(GITHUB_TOKEN_ENV),
        )


class UploadRequest(BaseModel):
    """Token file the caller wants published."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    tokens: str = Field(..., description="Raw text content of the token file")
    filename: str = Field(..., description="Target path inside the repository")
    commit_message: Optional[str] = Field(
        default=None, alias="commitMessage", description="Commit message for the upload"
    )

    @classmethod
    def from_export_body(cls, body: Dict[str, Any]) -> "UploadRequest":
        """Build a request from an export envelope ``{"client_payload": {...}}``."""
        return cls.model_validate(body["client_payload"])


class UploadSettings(BaseModel):
    """Caller-side export settings."""

    model_config = ConfigDict(frozen=True)

    reference: Optional[str] = Field(
        default=None, description="Logical base branch requested by the caller"
    )


# Workflow state. Each stage is produced by exactly one publish step and
# extends the previous stage; fields are never rewritten.


@dataclass(frozen=True)
class DefaultBranchResolved:
    default_branch: str

    def with_branch_head(self, sha: str) -> "BranchHeadResolved":
        return BranchHeadResolved(self.default_branch, sha)


@dataclass(frozen=True)
class BranchHeadResolved(DefaultBranchResolved):
    default_branch_sha: str

    def with_working_branch(self, new_branch: str) -> "WorkingBranchCreated":
        return WorkingBranchCreated(
            self.default_branch, self.default_branch_sha, new_branch
        )


@dataclass(frozen=True)
class WorkingBranchCreated(BranchHeadResolved):
    new_branch: str

    def with_existing_file(self, sha: Optional[str]) -> "FileProbed":
        return FileProbed(
            self.default_branch, self.default_branch_sha, self.new_branch, sha
        )


@dataclass(frozen=True)
class FileProbed(WorkingBranchCreated):
    existing_file_sha: Optional[str]

    @property
    def file_exists(self) -> bool:
        return self.existing_file_sha is not None
