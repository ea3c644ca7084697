from fastapi import APIRouter, Depends, Response, status

from ncnews.apis.params import CommentId
from ncnews.schemas import comments as schema_comment
from ncnews.schemas.votes import VotesIn
from ncnews.services.comment_service import CommentService, get_comment_service

router = APIRouter()
' prefix="/api/comments"'


@router.get("/{comment_id}", response_model=schema_comment.CommentResponse)
async def get_comment(comment_id: CommentId,
                      comment_service: CommentService = Depends(get_comment_service)):
    comment = await comment_service.get_comment(comment_id)
    return {"comment": comment}


@router.patch("/{comment_id}",
              response_model=schema_comment.CommentResponse,
              responses={404: {
                  "description": "Unknown comment",
                  "content": {"application/json": {"example": {"msg": "Comment not found"}}}
              }})
async def patch_comment(comment_id: CommentId,
                        votes_in: VotesIn,
                        comment_service: CommentService = Depends(get_comment_service)):
    comment = await comment_service.update_comment_votes(comment_id, votes_in.inc_votes)
    return {"comment": comment}


@router.delete("/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_comment(comment_id: CommentId,
                         comment_service: CommentService = Depends(get_comment_service)):
    await comment_service.delete_comment(comment_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
