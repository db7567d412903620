from __future__ import annotations

import pytest

from newsboard.core.errors import MalformedInput, NotFound, UnprocessableContent
from newsboard.models.schemas import NewArticle, NewComment, NewTopic
from newsboard.services import articles, comments, topics, users


@pytest.mark.anyio
async def test_topic_is_verified_before_listing(store):
    with pytest.raises(NotFound):
        await articles.list_articles(topic="doesntexist")
    assert store.calls == ["find_topic"]


@pytest.mark.anyio
async def test_listing_counts_full_filtered_set(store):
    result = await articles.list_articles(topic="mitch", page="2")
    assert result.total_count == 12
    assert len(result.articles) == 2
    assert store.calls == ["find_topic", "list_articles", "count_articles"]


@pytest.mark.anyio
async def test_comment_emptiness_is_400_not_422(store):
    with pytest.raises(MalformedInput):
        await comments.create_comment("1", NewComment(username="  ", body="hi"))
    with pytest.raises(UnprocessableContent):
        await articles.create_article(NewArticle(title="t", body=" ", topic="cats", username="rogersop"))
    with pytest.raises(UnprocessableContent):
        await topics.create_topic(NewTopic(slug="x"))
    assert store.calls == []


@pytest.mark.anyio
async def test_create_article_checks_topic_then_user(store):
    with pytest.raises(NotFound) as err:
        await articles.create_article(NewArticle(title="t", body="b", topic="nope", username="nobody"))
    assert err.value.message == "Topic does not exist"
    assert store.calls == ["find_topic"]


@pytest.mark.anyio
async def test_delete_article_message_uses_literal_id(store):
    with pytest.raises(NotFound) as err:
        await articles.delete_article("0099")
    assert err.value.message == "Article 0099 does not exist"


@pytest.mark.anyio
async def test_list_users(store):
    result = await users.list_users()
    assert {u.username for u in result.users} == {"butter_bridge", "icellusedkars", "rogersop", "lurker"}
