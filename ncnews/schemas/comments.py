from datetime import datetime

from pydantic import BaseModel, ConfigDict, StrictStr


class CommentIn(BaseModel):
    username: StrictStr
    body: StrictStr


class CommentOut(BaseModel):
    comment_id: int
    body: str
    votes: int
    author: str
    article_id: int
    created_at: datetime
    model_config = ConfigDict(from_attributes=True)


class CommentResponse(BaseModel):
    comment: CommentOut


class CommentsResponse(BaseModel):
    comments: list[CommentOut]
