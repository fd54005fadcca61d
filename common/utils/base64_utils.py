"""UTF-8 aware Base64 helpers for GitHub contents payloads."""

import base64


def utf8_to_base64(text: str) -> str:
    """Encode text as UTF-8 and return it Base64 encoded.

    Args:
        text: Arbitrary text, including non-ASCII characters

    Returns:
        ASCII Base64 string suitable for the contents API ``content`` field
    """
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


def base64_to_utf8(encoded: str) -> str:
    """Reverse of utf8_to_base64."""
    return base64.b64decode(encoded).decode("utf-8")
