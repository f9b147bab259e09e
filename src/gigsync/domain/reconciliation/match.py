"""Decide whether two records describe the same real-world event."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from rapidfuzz.distance import Levenshtein

from .normalize import normalize

if TYPE_CHECKING:
    from gigsync.domain.model import EventRecord

MAX_EDIT_DISTANCE: Final[int] = 2


def edit_distance(left: str, right: str) -> int:
    """Classic Levenshtein distance with unit insert/delete/substitute costs."""

    return Levenshtein.distance(left, right)


def fields_match(left: str | None, right: str | None) -> bool:
    """Exact or near (at most two edits) equality of two free-text fields."""

    left_key = normalize(left)
    right_key = normalize(right)
    if left_key == right_key:
        return True
    distance = Levenshtein.distance(left_key, right_key, score_cutoff=MAX_EDIT_DISTANCE)
    return distance <= MAX_EDIT_DISTANCE


def same_event(left: EventRecord, right: EventRecord) -> bool:
    """Same date, and city and venue each match exactly or within two edits.

    Reflexive and symmetric but not transitive: "ab" ~ "abcd" ~ "abcdef" while
    "ab" and "abcdef" are four edits apart.
    """

    return (
        left.date == right.date
        and fields_match(left.city, right.city)
        and fields_match(left.venue, right.venue)
    )


__all__ = ["MAX_EDIT_DISTANCE", "edit_distance", "fields_match", "same_event"]
