from fastapi import APIRouter, Response

from newsboard.services import comments as svc

router = APIRouter(prefix="/api/comments", tags=["comments"])


@router.delete("/{comment_id}", status_code=204, response_class=Response, summary="Delete a comment")
async def api_delete_comment(comment_id: str):
    await svc.delete_comment(comment_id)
    return Response(status_code=204)
