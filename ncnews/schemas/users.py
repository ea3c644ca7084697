from pydantic import BaseModel, ConfigDict


class UserOut(BaseModel):
    username: str
    name: str
    avatar_url: str
    model_config = ConfigDict(from_attributes=True)


class UserResponse(BaseModel):
    user: UserOut


class UsersResponse(BaseModel):
    users: list[UserOut]
