"""
Store access for articles, comments, topics and users (raw SQL over asyncpg).

Absence is reported as ``None``/``False``; only transport and constraint
failures raise. Sort columns are taken from ``SORT_COLUMNS`` and never from
caller input directly.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from newsboard.db.pool import pool


# Serial primary keys are int4; larger ids cannot match a row.
_MAX_ID = 2**31 - 1

SORT_COLUMNS: Dict[str, str] = {
    "article_id": "a.article_id",
    "title": "a.title",
    "topic": "a.topic",
    "author": "a.author",
    "created_at": "a.created_at",
    "votes": "a.votes",
    "comment_count": "comment_count",
}

_ARTICLE_COLUMNS = "a.article_id, a.title, a.topic, a.author, a.body, a.created_at, a.votes, a.article_img_url"
_COMMENT_COLUMNS = "comment_id, body, article_id, author, votes, created_at"


def _id_in_range(value: int) -> bool:
    return 0 <= value <= _MAX_ID


# -----------------------
#  Articles
# -----------------------

async def find_article(article_id: int) -> Optional[Dict[str, Any]]:
    if not _id_in_range(article_id):
        return None
    sql = f"""
    SELECT {_ARTICLE_COLUMNS}, COUNT(c.comment_id) AS comment_count
    FROM articles a
    LEFT JOIN comments c ON c.article_id = a.article_id
    WHERE a.article_id = $1
    GROUP BY a.article_id
    """
    p = pool()
    async with p.acquire() as conn:
        row = await conn.fetchrow(sql, article_id)
        return dict(row) if row else None


async def list_articles(
    topic: Optional[str] = None,
    sort_by: str = "created_at",
    order: str = "DESC",
    limit: int = 10,
    offset: int = 0,
) -> List[Dict[str, Any]]:
    column = SORT_COLUMNS[sort_by]
    direction = "ASC" if order.upper() == "ASC" else "DESC"
    sql = f"""
    SELECT
        a.article_id, a.title, a.topic, a.author, a.created_at, a.votes, a.article_img_url,
        COUNT(c.comment_id) AS comment_count
    FROM articles a
    LEFT JOIN comments c ON c.article_id = a.article_id
    WHERE ($1::text IS NULL OR a.topic = $1::text)
    GROUP BY a.article_id
    ORDER BY {column} {direction}, a.article_id ASC
    LIMIT $2 OFFSET $3
    """
    p = pool()
    async with p.acquire() as conn:
        rows = await conn.fetch(sql, topic, limit, offset)
        return [dict(r) for r in rows]


async def count_articles(topic: Optional[str] = None) -> int:
    p = pool()
    async with p.acquire() as conn:
        total = await conn.fetchval(
            "SELECT COUNT(*) FROM articles WHERE ($1::text IS NULL OR topic = $1::text)",
            topic,
        )
        return int(total or 0)


async def insert_article(
    *, title: str, body: str, topic: str, author: str, article_img_url: str
) -> Dict[str, Any]:
    sql = """
    INSERT INTO articles (title, body, topic, author, article_img_url, votes, created_at)
    VALUES ($1, $2, $3, $4, $5, 0, now())
    RETURNING article_id, title, topic, author, body, created_at, votes, article_img_url
    """
    p = pool()
    async with p.acquire() as conn:
        row = await conn.fetchrow(sql, title, body, topic, author, article_img_url)
        return dict(row)


async def update_article_votes(article_id: int, inc_votes: int) -> Optional[Dict[str, Any]]:
    if not _id_in_range(article_id):
        return None
    sql = """
    UPDATE articles
    SET votes = votes + $2
    WHERE article_id = $1
    RETURNING article_id, title, topic, author, body, created_at, votes, article_img_url
    """
    p = pool()
    async with p.acquire() as conn:
        row = await conn.fetchrow(sql, article_id, inc_votes)
        return dict(row) if row else None


async def delete_article(article_id: int) -> bool:
    """Delete an article together with its comments in one transaction."""
    if not _id_in_range(article_id):
        return False
    p = pool()
    async with p.acquire() as conn:
        async with conn.transaction():
            await conn.execute("DELETE FROM comments WHERE article_id = $1", article_id)
            row = await conn.fetchrow(
                "DELETE FROM articles WHERE article_id = $1 RETURNING article_id",
                article_id,
            )
            return row is not None


# -----------------------
#  Comments
# -----------------------

async def list_comments(article_id: int) -> List[Dict[str, Any]]:
    sql = f"""
    SELECT {_COMMENT_COLUMNS}
    FROM comments
    WHERE article_id = $1
    ORDER BY created_at DESC, comment_id DESC
    """
    p = pool()
    async with p.acquire() as conn:
        rows = await conn.fetch(sql, article_id)
        return [dict(r) for r in rows]


async def insert_comment(*, article_id: int, author: str, body: str) -> Dict[str, Any]:
    sql = f"""
    INSERT INTO comments (article_id, author, body, votes, created_at)
    VALUES ($1, $2, $3, 0, now())
    RETURNING {_COMMENT_COLUMNS}
    """
    p = pool()
    async with p.acquire() as conn:
        row = await conn.fetchrow(sql, article_id, author, body)
        return dict(row)


async def delete_comment(comment_id: int) -> bool:
    if not _id_in_range(comment_id):
        return False
    p = pool()
    async with p.acquire() as conn:
        row = await conn.fetchrow(
            "DELETE FROM comments WHERE comment_id = $1 RETURNING comment_id",
            comment_id,
        )
        return row is not None


# -----------------------
#  Topics / users
# -----------------------

async def find_topic(slug: str) -> Optional[Dict[str, Any]]:
    p = pool()
    async with p.acquire() as conn:
        row = await conn.fetchrow("SELECT slug, description FROM topics WHERE slug = $1", slug)
        return dict(row) if row else None


async def find_topic_by_description(description: str) -> Optional[Dict[str, Any]]:
    p = pool()
    async with p.acquire() as conn:
        row = await conn.fetchrow(
            "SELECT slug, description FROM topics WHERE description = $1",
            description,
        )
        return dict(row) if row else None


async def list_topics() -> List[Dict[str, Any]]:
    p = pool()
    async with p.acquire() as conn:
        rows = await conn.fetch("SELECT slug, description FROM topics ORDER BY slug")
        return [dict(r) for r in rows]


async def insert_topic(*, slug: str, description: str) -> Dict[str, Any]:
    p = pool()
    async with p.acquire() as conn:
        row = await conn.fetchrow(
            "INSERT INTO topics (slug, description) VALUES ($1, $2) RETURNING slug, description",
            slug,
            description,
        )
        return dict(row)


async def find_user(username: str) -> Optional[Dict[str, Any]]:
    p = pool()
    async with p.acquire() as conn:
        row = await conn.fetchrow(
            "SELECT username, name, avatar_url FROM users WHERE username = $1",
            username,
        )
        return dict(row) if row else None


async def list_users() -> List[Dict[str, Any]]:
    p = pool()
    async with p.acquire() as conn:
        rows = await conn.fetch("SELECT username, name, avatar_url FROM users ORDER BY username")
        return [dict(r) for r in rows]
