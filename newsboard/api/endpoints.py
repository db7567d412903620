"""Self-description served at ``GET /api``."""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter

from newsboard.core.validation import ORDERS, PAGE_SIZE, SORT_FIELDS


router = APIRouter(tags=["meta"])


ENDPOINTS: Dict[str, Dict[str, Any]] = {
    "GET /api": {
        "description": "serves a json representation of all the available endpoints of the api",
    },
    "GET /api/topics": {
        "description": "serves an array of all topics",
        "queries": [],
        "exampleResponse": {"topics": [{"slug": "football", "description": "Footie!"}]},
    },
    "POST /api/topics": {
        "description": "creates a topic; slug and description are required and must both be unique",
        "exampleRequest": {"slug": "basketball", "description": "Amazing game for all people"},
    },
    "GET /api/users": {
        "description": "serves an array of all users",
        "queries": [],
    },
    "GET /api/articles": {
        "description": f"serves a page of {PAGE_SIZE} articles and the total number of matching articles",
        "queries": ["topic", "sortby", "order", "page"],
        "sortby": sorted(SORT_FIELDS),
        "order": sorted(ORDERS),
    },
    "POST /api/articles": {
        "description": "creates an article with zero votes",
        "exampleRequest": {"title": "...", "body": "...", "topic": "cats", "username": "butter_bridge"},
    },
    "GET /api/articles/:article_id": {
        "description": "serves a single article including its comment_count",
    },
    "PATCH /api/articles/:article_id": {
        "description": "adds inc_votes (may be negative) to the article's votes and serves the updated article",
        "exampleRequest": {"inc_votes": 1},
    },
    "DELETE /api/articles/:article_id": {
        "description": "deletes an article together with its comments",
    },
    "GET /api/articles/:article_id/comments": {
        "description": "serves the comments of an article, newest first, and their count",
    },
    "POST /api/articles/:article_id/comments": {
        "description": "posts a comment on an article",
        "exampleRequest": {"username": "butter_bridge", "body": "I love treasure hunting!"},
    },
    "DELETE /api/comments/:comment_id": {
        "description": "deletes a comment",
    },
}


@router.get("/api", summary="Available endpoints")
async def api_endpoints() -> Dict[str, Dict[str, Any]]:
    return ENDPOINTS
