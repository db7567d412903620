from typing import Optional

from fastapi import APIRouter

from newsboard.models.schemas import NewTopic, TopicEnvelope, TopicList
from newsboard.services import topics as svc

router = APIRouter(prefix="/api/topics", tags=["topics"])


@router.get("", response_model=TopicList, summary="All topics")
async def api_list_topics():
    return await svc.list_topics()


@router.post("", response_model=TopicEnvelope, status_code=201, summary="Create a topic")
async def api_create_topic(payload: Optional[NewTopic] = None):
    return await svc.create_topic(payload)
