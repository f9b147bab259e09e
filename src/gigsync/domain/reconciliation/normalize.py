"""Comparison keys for free-text event fields.

Keys are used only to compare and identify records; display fields keep the
text the source provided.
"""

from __future__ import annotations

import re

# Any maximal run of characters that are neither letters nor digits.
_SEPARATORS = re.compile(r"[\W_]+")


def normalize(text: str | None) -> str:
    """Lower-case ``text`` and collapse every non-alphanumeric run into one space.

    Total and idempotent: ``None`` and empty input yield ``""``.
    """

    if not text:
        return ""
    return _SEPARATORS.sub(" ", text.lower()).strip()


def slug(text: str | None) -> str:
    """Comparison key with hyphens in place of spaces, for identifiers."""

    return normalize(text).replace(" ", "-")


__all__ = ["normalize", "slug"]
