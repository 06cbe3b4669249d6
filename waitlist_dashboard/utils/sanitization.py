"""Utilities for making upstream text safe to log."""

import re
from typing import Optional

_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")


def sanitize_for_log(input_str, max_length: Optional[int] = None) -> str:
    """
    Sanitize a string for logging to prevent Log Injection (CWE-117).

    Control characters (newlines included) are escaped as ``\\xNN``. When
    ``max_length`` is given the input is cut to that many characters first
    and an ellipsis is appended.
    """
    if input_str is None or input_str == "":
        return ""
    text = str(input_str)
    truncated = max_length is not None and len(text) > max_length
    if truncated:
        text = text[:max_length]
    text = _CONTROL_CHARS.sub(lambda m: f"\\x{ord(m.group(0)):02x}", text)
    return text + "..." if truncated else text
