"""Publishing workflow constants."""

# ============================================================================
# Branch Configuration
# ============================================================================

# Working branches are named "<prefix>-<unix millis>"
TOKEN_BRANCH_PREFIX = "figma-tokens-update"

# Used when the repository metadata carries no default branch
DEFAULT_BRANCH_FALLBACK = "main"

# ============================================================================
# Commit and Pull Request Text
# ============================================================================

DEFAULT_COMMIT_MESSAGE_TEMPLATE = "Update design tokens at {timestamp}"

DEFAULT_PULL_REQUEST_TITLE = "Update design tokens from Figma"

PULL_REQUEST_BODY_TEMPLATE = (
    "## Design Token Update\n\n"
    "This PR was automatically created by the Figma Design Tokens plugin.\n\n"
    "### Changes\n"
    "- Updated design tokens from Figma\n"
    "- Commit: {commit_message}\n\n"
    "**Note:** Please review the changes and run the transformation workflow before merging."
)

__all__ = [
    'TOKEN_BRANCH_PREFIX',
    'DEFAULT_BRANCH_FALLBACK',
    'DEFAULT_COMMIT_MESSAGE_TEMPLATE',
    'DEFAULT_PULL_REQUEST_TITLE',
    'PULL_REQUEST_BODY_TEMPLATE',
]
