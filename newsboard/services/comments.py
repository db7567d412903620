from __future__ import annotations

import logging
from typing import Any, Optional

from newsboard.core.errors import MalformedInput, Messages, NotFound
from newsboard.core.validation import any_empty, is_valid_id
from newsboard.db import repository as repo
from newsboard.models.schemas import Comment, CommentEnvelope, CommentList, NewComment


logger = logging.getLogger("newsboard.comments")


async def list_for_article(raw_id: Any) -> CommentList:
    article_id = is_valid_id(raw_id)
    if await repo.find_article(article_id) is None:
        raise NotFound(Messages.ITEM_MISSING)
    rows = await repo.list_comments(article_id)
    return CommentList(comments=[Comment.model_validate(r) for r in rows], comment_count=len(rows))


async def create_comment(raw_id: Any, payload: Optional[NewComment]) -> CommentEnvelope:
    """
    Post a comment on an article.

    Checks run in a fixed order: article id syntax, then empty fields (400 here,
    unlike articles and topics), then article existence, then author existence.
    """
    article_id = is_valid_id(raw_id, Messages.INVALID_ARTICLE_ID)
    payload = payload or NewComment()
    if any_empty(payload.body, payload.username):
        raise MalformedInput(Messages.EMPTY_COMMENT)
    if await repo.find_article(article_id) is None:
        raise NotFound(Messages.ARTICLE_MISSING)
    if await repo.find_user(payload.username) is None:
        raise NotFound(Messages.USER_MISSING)

    row = await repo.insert_comment(article_id=article_id, author=payload.username, body=payload.body)
    logger.info(
        "Comment created",
        extra={"event": "comment_created", "comment_id": row["comment_id"], "article_id": article_id},
    )
    return CommentEnvelope(comment=Comment.model_validate(row))


async def delete_comment(raw_id: Any) -> None:
    comment_id = is_valid_id(raw_id)
    if not await repo.delete_comment(comment_id):
        raise NotFound(Messages.COMMENT_MISSING)
    logger.info("Comment deleted", extra={"event": "comment_deleted", "comment_id": comment_id})
