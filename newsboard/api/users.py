from fastapi import APIRouter

from newsboard.models.schemas import UserList
from newsboard.services import users as svc

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("", response_model=UserList, summary="All users")
async def api_list_users():
    return await svc.list_users()
