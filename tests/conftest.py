import copy
from datetime import datetime, timedelta, timezone

import pytest
import sys
from pathlib import Path

# Ensure repository root is on sys.path for `import newsboard`
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))
from fastapi.testclient import TestClient


IMG = "https://images.pexels.com/photos/158651/news-newsletter-newspaper-information-158651.jpeg?w=700&h=700"


def _ts(y, m, d, H=0, M=0):
    return datetime(y, m, d, H, M, tzinfo=timezone.utc)


TOPICS = [
    {"slug": "mitch", "description": "The man, the Mitch, the legend"},
    {"slug": "cats", "description": "Not dogs"},
    {"slug": "paper", "description": "what books are made of"},
]

USERS = [
    {"username": "butter_bridge", "name": "jonny", "avatar_url": "https://example.com/lime.jpg"},
    {"username": "icellusedkars", "name": "sam", "avatar_url": "https://example.com/sam.png"},
    {"username": "rogersop", "name": "paul", "avatar_url": "https://example.com/paul.png"},
    {"username": "lurker", "name": "do_nothing", "avatar_url": "https://example.com/lurker.png"},
]

# (title, topic, author, created_at, votes)
_ARTICLES = [
    ("Living in the shadow of a great man", "mitch", "butter_bridge", _ts(2020, 7, 9, 20, 11), 100),
    ("Sony Vaio; or, The Laptop", "mitch", "icellusedkars", _ts(2020, 10, 16, 5, 3), 0),
    ("Eight pug gifs that remind me of mitch", "mitch", "icellusedkars", _ts(2020, 11, 3, 9, 12), 0),
    ("Student SUES Mitch!", "mitch", "rogersop", _ts(2020, 5, 6, 1, 14), 0),
    ("UNCOVERED: catspiracy to bring down democracy", "cats", "rogersop", _ts(2020, 8, 3, 13, 14), 0),
    ("A", "mitch", "icellusedkars", _ts(2020, 10, 18, 1, 0), 0),
    ("Z", "mitch", "icellusedkars", _ts(2020, 1, 7, 14, 8), 0),
    ("Does Mitch predate civilisation?", "mitch", "icellusedkars", _ts(2020, 4, 17, 1, 8), 0),
    ("They're not exactly dogs, are they?", "mitch", "butter_bridge", _ts(2020, 6, 6, 9, 10), 0),
    ("Seven inspirational thought leaders from Manchester UK", "mitch", "rogersop", _ts(2020, 5, 14, 4, 15), 0),
    ("Am I a cat?", "mitch", "icellusedkars", _ts(2020, 1, 15, 22, 21), 0),
    ("Moustache", "mitch", "butter_bridge", _ts(2020, 10, 11, 11, 24), 0),
    ("Another article about Mitch", "mitch", "butter_bridge", _ts(2020, 10, 11, 11, 24), 0),
]

# article 1 has eleven comments, article 2 none; 18 comments in total
_COMMENT_ARTICLES = [1] * 11 + [3, 3, 5, 5, 6, 9, 9]


def build_dataset():
    articles = [
        {
            "article_id": i,
            "title": title,
            "topic": topic,
            "author": author,
            "body": "I find this existence challenging" if i == 1 else f"body of article {i}",
            "created_at": created_at,
            "votes": votes,
            "article_img_url": IMG,
        }
        for i, (title, topic, author, created_at, votes) in enumerate(_ARTICLES, start=1)
    ]
    base = _ts(2020, 1, 1)
    comments = [
        {
            "comment_id": i,
            "body": f"comment {i}",
            "article_id": article_id,
            "author": USERS[i % 3]["username"],
            "votes": i,
            "created_at": base + timedelta(days=i),
        }
        for i, article_id in enumerate(_COMMENT_ARTICLES, start=1)
    ]
    return {
        "topics": copy.deepcopy(TOPICS),
        "users": copy.deepcopy(USERS),
        "articles": articles,
        "comments": comments,
    }


class FakeStore:
    """In-memory stand-in for newsboard.db.repository, recording every call."""

    def __init__(self):
        data = build_dataset()
        self.topics = data["topics"]
        self.users = data["users"]
        self.articles = data["articles"]
        self.comments = data["comments"]
        self.calls = []

    def _log(self, name):
        self.calls.append(name)

    def _comment_count(self, article_id):
        return sum(1 for c in self.comments if c["article_id"] == article_id)

    # --- articles ---
    async def find_article(self, article_id):
        self._log("find_article")
        for a in self.articles:
            if a["article_id"] == article_id:
                return {**a, "comment_count": self._comment_count(article_id)}
        return None

    async def list_articles(self, topic=None, sort_by="created_at", order="DESC", limit=10, offset=0):
        self._log("list_articles")
        rows = [
            {k: v for k, v in a.items() if k != "body"} | {"comment_count": self._comment_count(a["article_id"])}
            for a in self.articles
            if topic is None or a["topic"] == topic
        ]
        rows.sort(key=lambda r: r["article_id"])
        rows.sort(key=lambda r: r[sort_by], reverse=order == "DESC")
        return rows[offset:offset + limit]

    async def count_articles(self, topic=None):
        self._log("count_articles")
        return sum(1 for a in self.articles if topic is None or a["topic"] == topic)

    async def insert_article(self, *, title, body, topic, author, article_img_url):
        self._log("insert_article")
        row = {
            "article_id": max((a["article_id"] for a in self.articles), default=0) + 1,
            "title": title,
            "topic": topic,
            "author": author,
            "body": body,
            "created_at": datetime.now(timezone.utc),
            "votes": 0,
            "article_img_url": article_img_url,
        }
        self.articles.append(row)
        return dict(row)

    async def update_article_votes(self, article_id, inc_votes):
        self._log("update_article_votes")
        for a in self.articles:
            if a["article_id"] == article_id:
                a["votes"] += inc_votes
                return dict(a)
        return None

    async def delete_article(self, article_id):
        self._log("delete_article")
        before = len(self.articles)
        self.articles = [a for a in self.articles if a["article_id"] != article_id]
        if len(self.articles) == before:
            return False
        self.comments = [c for c in self.comments if c["article_id"] != article_id]
        return True

    # --- comments ---
    async def list_comments(self, article_id):
        self._log("list_comments")
        rows = [dict(c) for c in self.comments if c["article_id"] == article_id]
        return sorted(rows, key=lambda c: (c["created_at"], c["comment_id"]), reverse=True)

    async def insert_comment(self, *, article_id, author, body):
        self._log("insert_comment")
        row = {
            "comment_id": max((c["comment_id"] for c in self.comments), default=0) + 1,
            "body": body,
            "article_id": article_id,
            "author": author,
            "votes": 0,
            "created_at": datetime.now(timezone.utc),
        }
        self.comments.append(row)
        return dict(row)

    async def delete_comment(self, comment_id):
        self._log("delete_comment")
        before = len(self.comments)
        self.comments = [c for c in self.comments if c["comment_id"] != comment_id]
        return len(self.comments) != before

    # --- topics / users ---
    async def find_topic(self, slug):
        self._log("find_topic")
        return next((dict(t) for t in self.topics if t["slug"] == slug), None)

    async def find_topic_by_description(self, description):
        self._log("find_topic_by_description")
        return next((dict(t) for t in self.topics if t["description"] == description), None)

    async def list_topics(self):
        self._log("list_topics")
        return [dict(t) for t in self.topics]

    async def insert_topic(self, *, slug, description):
        self._log("insert_topic")
        row = {"slug": slug, "description": description}
        self.topics.append(row)
        return dict(row)

    async def find_user(self, username):
        self._log("find_user")
        return next((dict(u) for u in self.users if u["username"] == username), None)

    async def list_users(self):
        self._log("list_users")
        return [dict(u) for u in self.users]


STORE_FUNCTIONS = [
    "find_article", "list_articles", "count_articles", "insert_article", "update_article_votes",
    "delete_article", "list_comments", "insert_comment", "delete_comment",
    "find_topic", "find_topic_by_description", "list_topics", "insert_topic", "find_user", "list_users",
]


@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"


@pytest.fixture()
def store(monkeypatch):
    from newsboard.db import repository

    fake = FakeStore()
    for name in STORE_FUNCTIONS:
        monkeypatch.setattr(repository, name, getattr(fake, name))
    return fake


@pytest.fixture()
def app(monkeypatch):
    # Patch DB init/close in lifespan to no-op
    import newsboard.db.pool as db_pool
    import newsboard.db.sa as db_sa

    async def _noop(*args, **kwargs):
        return None

    monkeypatch.setattr(db_pool, "connect_db", _noop)
    monkeypatch.setattr(db_pool, "close_db", _noop)
    monkeypatch.setattr(db_sa, "init_sa_engine", _noop)
    monkeypatch.setattr(db_sa, "close_sa_engine", _noop)
    monkeypatch.setattr(db_sa, "create_tables", _noop)

    from newsboard import main as main_mod

    return main_mod.app


@pytest.fixture()
def client(app, store):
    with TestClient(app) as test_client:
        yield test_client
