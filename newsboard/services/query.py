from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

from newsboard.core.errors import MalformedInput, Messages
from newsboard.core.validation import (
    DEFAULT_ORDER,
    DEFAULT_SORT,
    PAGE_SIZE,
    is_known_order,
    is_known_sort_field,
    parse_page,
)


logger = logging.getLogger("newsboard.query")


@dataclass(frozen=True)
class ArticleQuery:
    topic: Optional[str]
    sort_by: str
    order: str
    limit: int
    offset: int

    @property
    def page(self) -> int:
        return self.offset // self.limit + 1


def resolve_article_query(
    topic: Optional[str] = None,
    sortby: Optional[str] = None,
    order: Optional[str] = None,
    page: Any = None,
) -> ArticleQuery:
    """
    Turn raw listing parameters into a bounded query.

    Sort is checked before order and both before the page number; none of
    these checks touch the store. Absent values fall back to created_at/DESC
    and the first page.
    """
    sort_by = sortby if sortby not in (None, "") else DEFAULT_SORT
    if not is_known_sort_field(sort_by):
        logger.info("Rejected sort parameter", extra={"event": "bad_sort", "sortby": sortby})
        raise MalformedInput(Messages.BAD_SORT)

    resolved_order = order if order not in (None, "") else DEFAULT_ORDER
    if not is_known_order(resolved_order):
        logger.info("Rejected order parameter", extra={"event": "bad_order", "order": order})
        raise MalformedInput(Messages.BAD_ORDER)

    page_no = parse_page(page)
    return ArticleQuery(
        topic=topic or None,
        sort_by=sort_by,
        order=resolved_order.upper(),
        limit=PAGE_SIZE,
        offset=(page_no - 1) * PAGE_SIZE,
    )
