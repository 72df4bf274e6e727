"""Candidate dataclass, record normalization, and the ranking order."""

import re
from dataclasses import dataclass

_DIGITS = re.compile(r"[0-9]+")

# 9999-12-31T23:59:59Z, the last second datetime can render
MAX_TIMESTAMP = 253402300799
_MAX_TIMESTAMP_DIGITS = len(str(MAX_TIMESTAMP))


class MalformedRecord(ValueError):
    """A raw record is missing a required field or has it mistyped."""


@dataclass(frozen=True)
class Candidate:
    """A validated submission, ready for ranking and rendering."""
    score: int
    title: str
    author: str
    timestamp: int  # seconds since the epoch, UTC


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _parse_timestamp(value) -> int:
    if _is_int(value):
        ts = value
    elif isinstance(value, str) and _DIGITS.fullmatch(value):
        # int() refuses very long digit strings; anything this long is out of range anyway
        if len(value.lstrip("0")) > _MAX_TIMESTAMP_DIGITS:
            raise MalformedRecord(f"created_utc out of range: {value[:20]}... ({len(value)} digits)")
        ts = int(value)
    else:
        raise MalformedRecord(f"created_utc is not an integer: {value!r}")
    if not 0 <= ts <= MAX_TIMESTAMP:
        raise MalformedRecord(f"created_utc out of range: {ts}")
    return ts


def _is_utf8_text(value: str) -> bool:
    """False for strings carrying lone surrogates (JSON allows \\ud800 escapes)."""
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def normalize(raw: dict) -> Candidate:
    """Validate a decoded record and convert it to a Candidate.

    Raises MalformedRecord when any of score/title/author/created_utc is
    missing or of the wrong type.
    """
    if not isinstance(raw, dict):
        raise MalformedRecord(f"record is not an object: {type(raw).__name__}")
    for key in ("score", "title", "author", "created_utc"):
        if key not in raw:
            raise MalformedRecord(f"missing field {key!r}")

    score = raw["score"]
    if not _is_int(score):
        raise MalformedRecord(f"score is not an integer: {score!r}")

    title = raw["title"]
    if not isinstance(title, str) or not title.strip() or not _is_utf8_text(title):
        raise MalformedRecord(f"title is empty or not text: {title!r}")

    author = raw["author"]
    if not isinstance(author, str) or not _is_utf8_text(author):
        raise MalformedRecord(f"author is not text: {author!r}")

    return Candidate(
        score=score,
        title=title,
        author=author,
        timestamp=_parse_timestamp(raw["created_utc"]),
    )


# ─────────────────────────────────────────────────────
# Ranking — lower key ranks better
# ─────────────────────────────────────────────────────
def rank_key(candidate: Candidate) -> tuple:
    """Sort key: higher score, then earlier timestamp, then smaller title."""
    return (-candidate.score, candidate.timestamp, candidate.title)


def ranks_before(a: Candidate, b: Candidate) -> bool:
    """True when ``a`` is strictly preferred over ``b``."""
    return rank_key(a) < rank_key(b)
