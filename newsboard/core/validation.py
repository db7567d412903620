"""Whitelists and parsers applied to raw request input before any store access."""

from __future__ import annotations

import math
import re
from typing import Any, Optional

from newsboard.core.errors import InvalidSyntax, MalformedInput, Messages


SORT_FIELDS = frozenset(
    {"article_id", "title", "topic", "author", "created_at", "votes", "comment_count"}
)
DEFAULT_SORT = "created_at"

ORDERS = frozenset({"ASC", "DESC"})
DEFAULT_ORDER = "DESC"

PAGE_SIZE = 10

# Store bounds: vote counts are int4 and OFFSET is int8.
INT4_MIN = -(2**31)
INT4_MAX = 2**31 - 1
MAX_PAGE = (2**63 - 1) // PAGE_SIZE

# Longer digit strings exceed int()'s default conversion limit.
_MAX_DIGITS = 4000
_INT_RE = re.compile(r"[0-9]{1,%d}" % _MAX_DIGITS)
_DELTA_RE = re.compile(r"-?[0-9]{1,%d}" % _MAX_DIGITS)


def is_valid_id(raw: Any, message: str = Messages.INVALID_SYNTAX) -> int:
    """Return ``raw`` as an int or raise InvalidSyntax with ``message``."""
    if isinstance(raw, bool):
        raise InvalidSyntax(message)
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str) and _INT_RE.fullmatch(raw):
        return int(raw)
    raise InvalidSyntax(message)


def is_known_sort_field(field: Optional[str]) -> bool:
    return field in SORT_FIELDS


def is_known_order(order: Optional[str]) -> bool:
    return isinstance(order, str) and order.upper() in ORDERS


def is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    return False


def any_empty(*values: Any) -> bool:
    return any(is_empty(v) for v in values)


def parse_inc_votes(raw: Any) -> int:
    """Signed int4 vote delta; integral floats and digit strings are accepted."""
    delta = _vote_delta(raw)
    if not INT4_MIN <= delta <= INT4_MAX:
        raise MalformedInput(Messages.INVALID_VOTES)
    return delta


def _vote_delta(raw: Any) -> int:
    if isinstance(raw, bool) or raw is None:
        raise MalformedInput(Messages.INVALID_VOTES)
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        if math.isfinite(raw) and raw.is_integer():
            return int(raw)
        raise MalformedInput(Messages.INVALID_VOTES)
    if isinstance(raw, str) and _DELTA_RE.fullmatch(raw.strip()):
        return int(raw.strip())
    raise MalformedInput(Messages.INVALID_VOTES)


def parse_page(raw: Any) -> int:
    if raw is None or raw == "":
        return 1
    page = is_valid_id(raw)
    if page < 1:
        raise InvalidSyntax()
    # Pages past the last representable offset are empty anyway.
    return min(page, MAX_PAGE)
