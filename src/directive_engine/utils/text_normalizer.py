# ============================================================================
# src/directive_engine/utils/text_normalizer.py
# ============================================================================
"""
Text Normalization Utilities

Cleans raw directive text before keyword scanning:
- Rejects non-text, undecodable and oversized input
- Lowercases
- Replaces tabs/newlines with spaces
- Collapses runs of whitespace
"""

import re
import logging
from typing import Union

from .exceptions import InvalidInputError

logger = logging.getLogger(__name__)

_WHITESPACE_RUN = re.compile(r"\s+")


def validate_directive_text(text: Union[str, bytes], max_chars: int) -> str:
    """
    Validate raw directive text and return it as ``str``.

    Bytes are decoded as UTF-8. Nothing is normalized here; callers get
    the raw text back so cost estimates can use its full length.

    Raises:
        InvalidInputError: wrong type, bad encoding, or longer than max_chars
    """
    if isinstance(text, bytes):
        try:
            text = text.decode("utf-8")
        except UnicodeDecodeError as e:
            raise InvalidInputError(
                "Directive text is not valid UTF-8",
                {"reason": "encoding", "position": e.start},
            ) from e

    if not isinstance(text, str):
        raise InvalidInputError(
            "Directive text must be a string",
            {"reason": "type", "received_type": type(text).__name__},
        )

    try:
        text.encode("utf-8")
    except UnicodeEncodeError as e:
        raise InvalidInputError(
            "Directive text contains characters that cannot be encoded",
            {"reason": "encoding", "position": e.start},
        ) from e

    if len(text) > max_chars:
        raise InvalidInputError(
            f"Directive text exceeds {max_chars} characters",
            {"reason": "too_long", "length": len(text), "max_chars": max_chars},
        )

    return text


def normalize_text(text: str) -> str:
    """
    Normalize directive text for substring matching.

    >>> normalize_text("I  do NOT\\twant\\nCPR ")
    'i do not want cpr'
    """
    return _WHITESPACE_RUN.sub(" ", text.lower()).strip()
