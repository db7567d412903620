from __future__ import annotations

import logging
from typing import Any, Optional

from newsboard.config import DEFAULT_ARTICLE_IMG_URL
from newsboard.core.errors import Messages, NotFound, UnprocessableContent
from newsboard.core.validation import any_empty, is_valid_id, parse_inc_votes
from newsboard.db import repository as repo
from newsboard.models.schemas import (
    Article,
    ArticleDetail,
    ArticleDetailEnvelope,
    ArticleEnvelope,
    ArticleList,
    ArticleSummary,
    NewArticle,
)
from newsboard.services.query import resolve_article_query


logger = logging.getLogger("newsboard.articles")


async def list_articles(
    topic: Optional[str] = None,
    sortby: Optional[str] = None,
    order: Optional[str] = None,
    page: Any = None,
) -> ArticleList:
    query = resolve_article_query(topic, sortby, order, page)

    # An existing topic with no articles is an empty page, not an error.
    if query.topic is not None and await repo.find_topic(query.topic) is None:
        raise NotFound(Messages.TOPIC_MISSING)

    rows = await repo.list_articles(
        topic=query.topic,
        sort_by=query.sort_by,
        order=query.order,
        limit=query.limit,
        offset=query.offset,
    )
    total = await repo.count_articles(topic=query.topic)
    logger.debug(
        "Listed articles",
        extra={"event": "articles_listed", "page": query.page, "total_count": total},
    )
    return ArticleList(articles=[ArticleSummary.model_validate(r) for r in rows], total_count=total)


async def get_article(raw_id: Any) -> ArticleDetailEnvelope:
    article_id = is_valid_id(raw_id)
    row = await repo.find_article(article_id)
    if not row:
        raise NotFound(Messages.ITEM_MISSING)
    return ArticleDetailEnvelope(article=ArticleDetail.model_validate(row))


async def create_article(payload: Optional[NewArticle]) -> ArticleEnvelope:
    payload = payload or NewArticle()
    if any_empty(payload.title, payload.body, payload.topic, payload.username):
        raise UnprocessableContent(Messages.EMPTY_ARTICLE)
    if await repo.find_topic(payload.topic) is None:
        raise NotFound(Messages.TOPIC_MISSING)
    if await repo.find_user(payload.username) is None:
        raise NotFound(Messages.USER_MISSING)

    row = await repo.insert_article(
        title=payload.title,
        body=payload.body,
        topic=payload.topic,
        author=payload.username,
        article_img_url=payload.article_img_url or DEFAULT_ARTICLE_IMG_URL,
    )
    logger.info(
        "Article created",
        extra={"event": "article_created", "article_id": row["article_id"], "author": payload.username},
    )
    return ArticleEnvelope(article=Article.model_validate(row))


async def update_votes(raw_id: Any, inc_votes: Any) -> ArticleEnvelope:
    article_id = is_valid_id(raw_id, Messages.INVALID_ARTICLE_ID)
    delta = parse_inc_votes(inc_votes)
    row = await repo.update_article_votes(article_id, delta)
    if not row:
        raise NotFound(Messages.ARTICLE_MISSING)
    logger.info(
        "Article votes changed",
        extra={"event": "article_voted", "article_id": article_id, "inc_votes": delta},
    )
    return ArticleEnvelope(article=Article.model_validate(row))


async def delete_article(raw_id: Any) -> None:
    article_id = is_valid_id(raw_id)
    if not await repo.delete_article(article_id):
        raise NotFound(Messages.article_missing(raw_id))
    logger.info("Article deleted", extra={"event": "article_deleted", "article_id": article_id})
