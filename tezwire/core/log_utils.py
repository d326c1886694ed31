"""
Log-safe rendering of raw node payloads.

Node payloads are untrusted text: they may contain newlines or terminal
escape sequences and can be megabytes long. Everything that ends up in a log
line or an error summary goes through sanitize_for_log first.
"""

from typing import Any

from tezwire.config.settings import settings


# Characters that can be used for log injection
LOG_INJECTION_CHARS = {
    "\n": "\\n",
    "\r": "\\r",
    "\x00": "\\x00",
    "\x1b": "\\x1b",  # ANSI escape
    "\t": "\\t",
}


def sanitize_for_log(value: Any, limit: int | None = None) -> str:
    """
    Sanitize a raw fragment before logging.

    Args:
        value: Raw fragment (bytes, str or any other value)
        limit: Maximum rendered length, defaults to Settings.RAW_PREVIEW_LIMIT

    Returns:
        Safe, possibly truncated string representation
    """
    if value is None:
        return "null"

    if limit is None:
        limit = settings.RAW_PREVIEW_LIMIT

    if isinstance(value, (bytes, bytearray, memoryview)):
        value = bytes(value).decode("utf-8", errors="replace")
    elif not isinstance(value, str):
        value = str(value)

    result = value
    for char, replacement in LOG_INJECTION_CHARS.items():
        result = result.replace(char, replacement)

    if len(result) > limit:
        result = result[:limit] + f"...[truncated {len(result) - limit} chars]"
    return result
