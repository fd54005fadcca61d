"""
Configuration module for the design token publisher.

Settings are read from the process environment, optionally seeded from a
.env file in the working directory.
"""

import os

from dotenv import load_dotenv

from common.exception.exceptions import MissingConfigurationError

# Load environment variables from .env file
load_dotenv()


def get_env(key: str) -> str:
    """Get environment variable or raise exception if not found."""
    value = os.getenv(key)
    if value is None:
        raise MissingConfigurationError(f"{key} not found")
    return value


# GitHub API Configuration
GITHUB_API_URL = os.getenv("GITHUB_API_URL", "https://api.github.com")
GITHUB_API_VERSION = os.getenv("GITHUB_API_VERSION", "2022-11-28")
GITHUB_ACCEPT_HEADER = "application/vnd.github+json"

# Request timeouts (seconds)
GITHUB_REQUEST_TIMEOUT = float(os.getenv("GITHUB_REQUEST_TIMEOUT", "150"))
GITHUB_CONNECT_TIMEOUT = float(os.getenv("GITHUB_CONNECT_TIMEOUT", "60"))

# Repository identity variables read by RepositoryIdentity.from_env()
GITHUB_OWNER_ENV = "GITHUB_OWNER"
GITHUB_REPO_ENV = "GITHUB_REPO"
GITHUB_TOKEN_ENV = "GITHUB_TOKEN"
