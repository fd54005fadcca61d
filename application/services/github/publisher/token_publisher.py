"""
Publishes a design token file to a GitHub repository through a pull request.

The workflow is a fixed sequence of dependent REST calls:

1. resolve the repository's default branch
2. resolve the commit SHA at the head of that branch
3. create a timestamp-named working branch from that SHA
4. probe the working branch for an existing copy of the file
5. create or update the file as a commit on the working branch
6. open a pull request from the working branch into the default branch

Steps 1-4 short-circuit on failure. The upload outcome decides whether a pull
request is opened. Nothing is retried and nothing is rolled back: a failed
upload leaves the working branch in place.
"""

import time
from typing import Callable, Optional

from application.services.github.api.client import GitHubAPIClient
from application.services.github.api.contents import ContentsOperations
from application.services.github.api.pulls import PullRequestOperations
from application.services.github.api.refs import RefOperations
from application.services.github.api.repositories import RepositoryOperations
from application.services.github.models.results import (
    Success,
    TransportFailure,
    to_request_error,
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
from application.services.github.publisher.handlers import ResponseHandler
from application.services.github.publisher.observer import (
    LoggingPublishObserver,
    PublishObserver,
)
from common.constants import (
    DEFAULT_COMMIT_MESSAGE_TEMPLATE,
    DEFAULT_PULL_REQUEST_TITLE,
    PULL_REQUEST_BODY_TEMPLATE,
    TOKEN_BRANCH_PREFIX,
)
from common.exception.exceptions import GitHubRequestError
from common.utils.base64_utils import utf8_to_base64


def _unix_millis() -> int:
    return int(time.time() * 1000)


class RepositoryPublisher:
    """Drives the branch, commit and pull request sequence for one repository."""

    def __init__(
        self,
        identity: RepositoryIdentity,
        client: Optional[GitHubAPIClient] = None,
        encoder: Callable[[str], str] = utf8_to_base64,
        observer: Optional[PublishObserver] = None,
        clock: Optional[Callable[[], int]] = None,
    ):
        """Initialize the publisher.

        Args:
            identity: Repository owner, name and bearer token
            client: GitHub API client (built from ``identity`` if not provided)
            encoder: Turns the raw token text into the Base64 upload payload
            observer: Receives lifecycle events (logs them if not provided)
            clock: Returns the current Unix time in milliseconds
        """
        self.identity = identity
        self.client = client or GitHubAPIClient(identity)
        self.encoder = encoder
        self.observer: PublishObserver = observer or LoggingPublishObserver()
        self.clock = clock or _unix_millis

        self.repositories = RepositoryOperations(self.client)
        self.refs = RefOperations(self.client)
        self.contents = ContentsOperations(self.client)
        self.pulls = PullRequestOperations(self.client)

    def generate_branch_name(self) -> str:
        """Build a fresh working branch name, e.g. ``figma-tokens-update-1700000000000``."""
        return f"{TOKEN_BRANCH_PREFIX}-{self.clock()}"

    async def publish(
        self,
        request: UploadRequest,
        settings: UploadSettings,
        handler: ResponseHandler,
    ) -> None:
        """Publish ``request.tokens`` to ``request.filename`` via a pull request.

        The outcome is reported only through ``handler``:

        - ``on_loaded(response)`` with the pull request response after a
          successful upload, with the upload response if the upload was
          rejected, or with the response of an early step rejected with 401
        - ``on_error()`` when a request got no response, or an early step
          failed with any status other than 401

        Args:
            request: Token content, target path and optional commit message
            settings: Caller export settings
            handler: Receives the final outcome
        """
        self.observer.publish_started(
            self.identity.full_name, request.filename, settings.reference
        )
        encoded_content = self.encoder(request.tokens)

        step = PublishStep.DEFAULT_BRANCH
        try:
            resolved = await self._resolve_default_branch()
            step = PublishStep.BRANCH_HEAD
            head = await self._resolve_branch_head(resolved)
            step = PublishStep.CREATE_BRANCH
            created = await self._create_working_branch(head)
            step = PublishStep.FILE_PROBE
            state = await self._probe_file(created, request.filename)
        except GitHubRequestError as e:
            self.observer.publish_failed(step, e)
            if e.is_unauthorized and e.response is not None:
                handler.on_loaded(e.response)
            else:
                handler.on_error()
            return

        commit_message = request.commit_message or DEFAULT_COMMIT_MESSAGE_TEMPLATE.format(
            timestamp=self.clock()
        )
        if await self._upload_file(state, request.filename, encoded_content, commit_message, handler):
            await self._open_pull_request(state, request.commit_message, commit_message, handler)

    async def _resolve_default_branch(self) -> DefaultBranchResolved:
        self.observer.step_started(PublishStep.DEFAULT_BRANCH, "Getting default branch")
        default_branch = await self.repositories.get_default_branch()
        self.observer.step_completed(PublishStep.DEFAULT_BRANCH, default_branch)
        return DefaultBranchResolved(default_branch)

    async def _resolve_branch_head(self, state: DefaultBranchResolved) -> BranchHeadResolved:
        self.observer.step_started(
            PublishStep.BRANCH_HEAD, f"Getting head SHA of {state.default_branch}"
        )
        sha = await self.refs.get_branch_sha(state.default_branch)
        self.observer.step_completed(PublishStep.BRANCH_HEAD, sha)
        return state.with_branch_head(sha)

    async def _create_working_branch(self, state: BranchHeadResolved) -> WorkingBranchCreated:
        new_branch = self.generate_branch_name()
        self.observer.step_started(
            PublishStep.CREATE_BRANCH, f"Creating branch {new_branch} at {state.default_branch_sha}"
        )
        await self.refs.create_branch(new_branch, state.default_branch_sha)
        self.observer.step_completed(PublishStep.CREATE_BRANCH, new_branch)
        return state.with_working_branch(new_branch)

    async def _probe_file(self, state: WorkingBranchCreated, filename: str) -> FileProbed:
        self.observer.step_started(
            PublishStep.FILE_PROBE, f"Checking if {filename} exists on {state.new_branch}"
        )
        sha = await self.contents.get_file_sha(filename, state.new_branch)
        self.observer.step_completed(
            PublishStep.FILE_PROBE, sha or "file does not exist, will create it"
        )
        return state.with_existing_file(sha)

    async def _upload_file(
        self,
        state: FileProbed,
        filename: str,
        encoded_content: str,
        commit_message: str,
        handler: ResponseHandler,
    ) -> bool:
        """Commit the file; returns True when a pull request should follow."""
        action = "Updating" if state.file_exists else "Creating"
        self.observer.step_started(
            PublishStep.UPLOAD, f"{action} {filename} on {state.new_branch}"
        )
        result = await self.contents.put_file(
            filename,
            encoded_content,
            commit_message,
            state.new_branch,
            sha=state.existing_file_sha,
        )

        if isinstance(result, Success):
            self.observer.step_completed(PublishStep.UPLOAD, f"status {result.status_code}")
            return True

        self.observer.branch_left_behind(state.new_branch)
        if isinstance(result, TransportFailure):
            self.observer.publish_failed(
                PublishStep.UPLOAD, to_request_error(result, f"Upload {filename}")
            )
            handler.on_error()
        else:
            self.observer.publish_finished(PublishStep.UPLOAD, result.status_code)
            handler.on_loaded(result.response)
        return False

    async def _open_pull_request(
        self,
        state: FileProbed,
        requested_message: Optional[str],
        commit_message: str,
        handler: ResponseHandler,
    ) -> None:
        self.observer.step_started(
            PublishStep.PULL_REQUEST,
            f"Opening pull request {state.new_branch} -> {state.default_branch}",
        )
        result = await self.pulls.create_pull_request(
            head=state.new_branch,
            base=state.default_branch,
            title=requested_message or DEFAULT_PULL_REQUEST_TITLE,
            body=PULL_REQUEST_BODY_TEMPLATE.format(commit_message=commit_message),
        )

        if isinstance(result, TransportFailure):
            self.observer.publish_failed(
                PublishStep.PULL_REQUEST, to_request_error(result, "Create pull request")
            )
            handler.on_error()
            return

        self.observer.publish_finished(PublishStep.PULL_REQUEST, result.status_code)
        handler.on_loaded(result.response)
