"""
Text helpers for generated job descriptions.
"""

import re
from urllib.parse import quote

MAX_PREVIEW_LENGTH = 500

UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9._-]")


def clean_for_hr(text: str) -> str:
    """Strip markdown so the text pastes cleanly into an ATS or job board."""
    text = re.sub(r"\*\*(.*?)\*\*", r"\1", text)
    text = re.sub(r"\*(.*?)\*", r"\1", text)
    text = re.sub(r"\n\n\n+", "\n\n", text)
    text = re.sub(r"^#+\s*", "", text, flags=re.MULTILINE)
    return text.strip()


def to_filename(text: str) -> str:
    return re.sub(r"\s+", "-", text)


def attachment_disposition(filename: str) -> str:
    """
    Content-Disposition value for a download.

    `filename*` carries the UTF-8 name (RFC 5987); `filename` is an ASCII-only
    copy for clients that ignore it.
    """
    fallback = UNSAFE_FILENAME_CHARS.sub("", filename)
    if not fallback.strip("."):
        fallback = "job-description.txt"
    elif fallback.startswith("."):
        fallback = "job-description" + fallback
    return f"attachment; filename=\"{fallback}\"; filename*=UTF-8''{quote(filename, safe='')}"


def truncate(text: str, max_length: int = MAX_PREVIEW_LENGTH) -> str:
    if len(text) > max_length:
        return text[:max_length] + "..."
    return text
