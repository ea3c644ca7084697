from fastapi import APIRouter, Depends

from ncnews.schemas import users as schema_user
from ncnews.services.user_service import UserService, get_user_service

router = APIRouter()
' prefix="/api/users"'


@router.get("", response_model=schema_user.UsersResponse)
async def get_users(user_service: UserService = Depends(get_user_service)):
    users = await user_service.get_users()
    return {"users": users}


@router.get("/{username}",
            response_model=schema_user.UserResponse,
            responses={404: {
                "description": "Unknown username",
                "content": {"application/json": {"example": {"msg": "User not found"}}}
            }})
async def get_user_by_username(username: str,
                               user_service: UserService = Depends(get_user_service)):
    user = await user_service.get_user(username)
    return {"user": user}
