from fastapi import Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ncnews.core.database import get_db
from ncnews.models.users import User
from ncnews.utils.exc_handler import NotFound


class UserService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_users(self):
        result = await self.db.execute(select(User))
        return result.scalars().all()

    async def get_user(self, username: str):
        query = select(User).where(User.username == username)
        result = await self.db.execute(query)
        user = result.scalar_one_or_none()
        if user is None:
            raise NotFound.of("user")
        return user


def get_user_service(db: AsyncSession = Depends(get_db)) -> 'UserService':
    return UserService(db)
