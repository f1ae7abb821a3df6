"""Whitespace normalization for extracted text."""

import re

_WHITESPACE_RE = re.compile(r"\s+")


def normalize_whitespace(text: str) -> str:
    """Collapse every run of whitespace into one space and strip the ends.

    Idempotent: ``normalize_whitespace(normalize_whitespace(s))`` equals
    ``normalize_whitespace(s)``.
    """
    return _WHITESPACE_RE.sub(" ", text).strip()
