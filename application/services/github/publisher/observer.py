"""
Lifecycle observer for the publish workflow.

The workflow reports what it is doing through a PublishObserver instead of
logging directly, so the sequencing stays free of side effects and tests can
record the lifecycle.
"""

import logging
from typing import Optional, Protocol

from application.services.github.models.types import PublishStep

logger = logging.getLogger(__name__)


class PublishObserver(Protocol):
    def publish_started(self, repository: str, filename: str, reference: Optional[str]) -> None:
        ...

    def step_started(self, step: PublishStep, detail: str) -> None:
        ...

    def step_completed(self, step: PublishStep, detail: str) -> None:
        ...

    def branch_left_behind(self, branch: str) -> None:
        ...

    def publish_failed(self, step: PublishStep, error: Exception) -> None:
        ...

    def publish_finished(self, step: PublishStep, status_code: Optional[int]) -> None:
        ...


class LoggingPublishObserver:
    """PublishObserver that writes the lifecycle to the standard logger."""

    def __init__(self, log: Optional[logging.Logger] = None):
        self.log = log or logger

    def publish_started(self, repository: str, filename: str, reference: Optional[str]) -> None:
        self.log.info(
            f"Publishing {filename} to {repository} "
            f"(requested reference: {reference or 'default branch'})"
        )

    def step_started(self, step: PublishStep, detail: str) -> None:
        self.log.info(f"[{step.value}] {detail}")

    def step_completed(self, step: PublishStep, detail: str) -> None:
        self.log.info(f"[{step.value}] done: {detail}")

    def branch_left_behind(self, branch: str) -> None:
        self.log.warning(f"Upload failed; working branch {branch} was not removed")

    def publish_failed(self, step: PublishStep, error: Exception) -> None:
        self.log.error(f"Publishing failed at {step.value}: {error}")

    def publish_finished(self, step: PublishStep, status_code: Optional[int]) -> None:
        if status_code is None:
            self.log.error(f"Publishing ended at {step.value} without a response")
        else:
            self.log.info(f"Publishing ended at {step.value} with status {status_code}")
