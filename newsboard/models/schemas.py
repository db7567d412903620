# newsboard/models/schemas.py
from pydantic import BaseModel, ConfigDict, field_serializer, field_validator
from typing import Any, List, Optional
from datetime import datetime, timezone


def iso_millis(value: datetime) -> str:
    """UTC ISO-8601 with millisecond precision, e.g. 2020-07-09T20:11:00.000Z."""
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


# --- Request bodies ---
# Fields are optional here: emptiness and type rules are enforced in services
# so that each entity gets its own status code and message.
class NewComment(BaseModel):
    username: Optional[str] = None
    body: Optional[str] = None


class NewArticle(BaseModel):
    title: Optional[str] = None
    body: Optional[str] = None
    topic: Optional[str] = None
    username: Optional[str] = None
    article_img_url: Optional[str] = None


class NewTopic(BaseModel):
    slug: Optional[str] = None
    description: Optional[str] = None


class VotePatch(BaseModel):
    inc_votes: Any = None


# --- Topics / users ---
class Topic(BaseModel):
    slug: str
    description: str


class User(BaseModel):
    username: str
    name: str
    avatar_url: Optional[str] = None


# --- Articles ---
# List rows carry no body; comment_count comes out of COUNT() and is rendered
# as a string in list responses.
class ArticleSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    article_id: int
    title: str
    topic: str
    author: str
    created_at: datetime
    votes: int
    article_img_url: Optional[str] = None
    comment_count: str = "0"

    @field_validator("comment_count", mode="before")
    def count_as_text(cls, v):
        return str(v if v is not None else 0)

    @field_serializer("created_at")
    def created_at_text(self, v: datetime) -> str:
        return iso_millis(v)


class Article(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    article_id: int
    title: str
    topic: str
    author: str
    body: str
    created_at: datetime
    votes: int
    article_img_url: Optional[str] = None

    @field_serializer("created_at")
    def created_at_text(self, v: datetime) -> str:
        return iso_millis(v)


class ArticleDetail(Article):
    comment_count: int = 0


class Comment(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    comment_id: int
    body: str
    article_id: int
    author: str
    votes: int = 0
    created_at: datetime

    @field_serializer("created_at")
    def created_at_text(self, v: datetime) -> str:
        return iso_millis(v)


# --- Envelopes ---
class TopicList(BaseModel):
    topics: List[Topic]


class UserList(BaseModel):
    users: List[User]


class ArticleList(BaseModel):
    articles: List[ArticleSummary]
    total_count: int


class ArticleEnvelope(BaseModel):
    article: Article


class ArticleDetailEnvelope(BaseModel):
    article: ArticleDetail


class CommentList(BaseModel):
    comments: List[Comment]
    comment_count: int


class CommentEnvelope(BaseModel):
    comment: Comment


class TopicEnvelope(BaseModel):
    topic: Topic
