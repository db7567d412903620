# newsboard/api/articles.py
from fastapi import APIRouter, Query, Response
from typing import Optional

from newsboard.services import articles as svc
from newsboard.services import comments as comments_svc
from newsboard.models.schemas import (
    ArticleDetailEnvelope,
    ArticleEnvelope,
    ArticleList,
    CommentEnvelope,
    CommentList,
    NewArticle,
    NewComment,
    VotePatch,
)

router = APIRouter(prefix="/api/articles", tags=["articles"])

# -----------------------
#  Collection
# -----------------------

@router.get("", response_model=ArticleList, summary="Filtered, sorted, paginated article list")
async def api_list_articles(
    topic: Optional[str] = Query(None, description="Topic slug to filter by"),
    sortby: Optional[str] = Query(None, description="Sort column, created_at by default"),
    order: Optional[str] = Query(None, description="ASC or DESC, DESC by default"),
    page: Optional[str] = Query(None, description="1-based page number, 10 articles per page"),
):
    # sortby/order/page arrive as raw strings; whitelisting happens in the service
    return await svc.list_articles(topic=topic, sortby=sortby, order=order, page=page)


@router.post("", response_model=ArticleEnvelope, status_code=201, summary="Create an article")
async def api_create_article(payload: Optional[NewArticle] = None):
    return await svc.create_article(payload)

# -----------------------
#  Single article
# -----------------------

@router.get("/{article_id}", response_model=ArticleDetailEnvelope, summary="Article by id with comment_count")
async def api_get_article(article_id: str):
    return await svc.get_article(article_id)


@router.patch("/{article_id}", response_model=ArticleEnvelope, summary="Increment article votes")
async def api_patch_article(article_id: str, payload: Optional[VotePatch] = None):
    inc_votes = payload.inc_votes if payload else None
    return await svc.update_votes(article_id, inc_votes)


@router.delete("/{article_id}", status_code=204, response_class=Response, summary="Delete an article and its comments")
async def api_delete_article(article_id: str):
    await svc.delete_article(article_id)
    return Response(status_code=204)

# -----------------------
#  Comments of an article
# -----------------------

@router.get("/{article_id}/comments", response_model=CommentList, summary="Comments of an article, newest first")
async def api_list_comments(article_id: str):
    return await comments_svc.list_for_article(article_id)


@router.post("/{article_id}/comments", response_model=CommentEnvelope, status_code=201, summary="Post a comment")
async def api_post_comment(article_id: str, payload: Optional[NewComment] = None):
    return await comments_svc.create_comment(article_id, payload)
