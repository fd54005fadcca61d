"""
Publisher Module

Publishes generated token files to GitHub through a working branch and a
pull request.
"""

from application.services.github.publisher.handlers import (
    CallbackResponseHandler,
    ResponseHandler,
)
from application.services.github.publisher.observer import (
    LoggingPublishObserver,
    PublishObserver,
)
from application.services.github.publisher.token_publisher import RepositoryPublisher

__all__ = [
    "CallbackResponseHandler",
    "ResponseHandler",
    "LoggingPublishObserver",
    "PublishObserver",
    "RepositoryPublisher",
]
