"""
Application services package.

Contains the services that publish generated design tokens to GitHub.
"""

from application.services.github.publisher import RepositoryPublisher

__all__ = [
    "RepositoryPublisher",
]
