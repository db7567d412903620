"""
Load a JSON dataset into freshly recreated tables.

Expected layout::

    {"topics": [...], "users": [...], "articles": [...], "comments": [...]}

Articles are inserted in file order so their serial ids are 1..n; comments
refer to articles by that id. ``created_at`` may be an ISO-8601 string or a
millisecond epoch.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict

from newsboard.db import sa as db_sa
from newsboard.models.tables import Article, Comment, Topic, User


logger = logging.getLogger("newsboard.seed")


def parse_timestamp(value: Any) -> datetime:
    if value is None:
        return datetime.now(timezone.utc)
    if isinstance(value, (int, float)):
        return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
    dt = datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def load_dataset(path: str | Path) -> Dict[str, list]:
    with open(path, encoding="utf-8") as fh:
        data = json.load(fh)
    return {key: list(data.get(key) or []) for key in ("topics", "users", "articles", "comments")}


async def seed(data: Dict[str, list]) -> Dict[str, int]:
    await db_sa.create_tables(drop_first=True)
    async with db_sa.session_scope() as session:
        session.add_all(Topic(slug=t["slug"], description=t["description"]) for t in data["topics"])
        session.add_all(
            User(username=u["username"], name=u["name"], avatar_url=u.get("avatar_url"))
            for u in data["users"]
        )
        await session.flush()

        for a in data["articles"]:
            session.add(
                Article(
                    title=a["title"],
                    topic=a["topic"],
                    author=a["author"],
                    body=a["body"],
                    created_at=parse_timestamp(a.get("created_at")),
                    votes=a.get("votes", 0),
                    article_img_url=a.get("article_img_url"),
                )
            )
            # flush per row keeps serial ids in file order
            await session.flush()

        session.add_all(
            Comment(
                body=c["body"],
                article_id=c["article_id"],
                author=c["author"],
                votes=c.get("votes", 0),
                created_at=parse_timestamp(c.get("created_at")),
            )
            for c in data["comments"]
        )

    counts = {key: len(rows) for key, rows in data.items()}
    logger.info("Database seeded", extra={"event": "db_seeded", **counts})
    return counts


async def seed_from_file(path: str | Path) -> Dict[str, int]:
    await db_sa.init_sa_engine()
    try:
        return await seed(load_dataset(path))
    finally:
        await db_sa.close_sa_engine()
