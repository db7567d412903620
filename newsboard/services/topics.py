from __future__ import annotations

import logging
from typing import Optional

from newsboard.core.errors import Messages, UnprocessableContent
from newsboard.core.validation import any_empty
from newsboard.db import repository as repo
from newsboard.models.schemas import NewTopic, Topic, TopicEnvelope, TopicList


logger = logging.getLogger("newsboard.topics")


async def list_topics() -> TopicList:
    rows = await repo.list_topics()
    return TopicList(topics=[Topic.model_validate(r) for r in rows])


async def create_topic(payload: Optional[NewTopic]) -> TopicEnvelope:
    payload = payload or NewTopic()
    if any_empty(payload.slug, payload.description):
        raise UnprocessableContent(Messages.EMPTY_TOPIC)
    # slug uniqueness is reported before description uniqueness
    if await repo.find_topic(payload.slug) is not None:
        raise UnprocessableContent(Messages.DUPLICATE_SLUG)
    if await repo.find_topic_by_description(payload.description) is not None:
        raise UnprocessableContent(Messages.DUPLICATE_DESCRIPTION)

    row = await repo.insert_topic(slug=payload.slug, description=payload.description)
    logger.info("Topic created", extra={"event": "topic_created", "slug": payload.slug})
    return TopicEnvelope(topic=Topic.model_validate(row))
