from __future__ import annotations

from newsboard.db import repository as repo
from newsboard.models.schemas import User, UserList


async def list_users() -> UserList:
    rows = await repo.list_users()
    return UserList(users=[User.model_validate(r) for r in rows])
