import logging
from typing import Optional

from fastapi import Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ncnews.core.database import get_db
from ncnews.models.articles import Comment
from ncnews.schemas.comments import CommentIn
from ncnews.services.checks import check_article_exists
from ncnews.utils.exc_handler import NotFound, translate_db_errors
from ncnews.utils.listing import parse_pagination, is_past_last_row

logger = logging.getLogger(__name__)


def _comment_listing_query(article_id: int, limit: int, offset: int):
    return (
        select(Comment)
        .where(Comment.article_id == article_id)
        .order_by(Comment.created_at.desc())
        .limit(limit)
        .offset(offset)
    )


class CommentService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_comments(self, article_id: int,
                            limit: Optional[str] = None,
                            p: Optional[str] = None):
        size, offset = parse_pagination(limit, p)
        # 댓글이 0개인 게시글과 없는 게시글을 구분하기 위해 먼저 확인
        await check_article_exists(self.db, article_id)
        if is_past_last_row(offset):
            return []

        result = await self.db.execute(_comment_listing_query(article_id, size, offset))
        return result.scalars().all()

    async def create_comment(self, article_id: int, comment_in: CommentIn) -> Comment:
        await check_article_exists(self.db, article_id)

        create_comment = Comment(body=comment_in.body,
                                 author=comment_in.username,
                                 article_id=article_id)

        # 없는 username은 FK 위반으로 400
        async with translate_db_errors(self.db):
            self.db.add(create_comment)
            await self.db.commit()
        await self.db.refresh(create_comment)

        logger.info("Created comment %s on article %s", create_comment.comment_id, article_id)
        return create_comment

    async def get_comment(self, comment_id: int) -> Comment:
        query = select(Comment).where(Comment.comment_id == comment_id)
        result = await self.db.execute(query)
        comment = result.scalar_one_or_none()
        if comment is None:
            raise NotFound.of("comment")
        return comment

    async def update_comment_votes(self, comment_id: int, inc_votes: int) -> Comment:
        comment = await self.get_comment(comment_id)
        comment.votes = Comment.votes + inc_votes
        async with translate_db_errors(self.db):
            await self.db.commit()
        await self.db.refresh(comment)
        return comment

    async def delete_comment(self, comment_id: int) -> None:
        comment = await self.get_comment(comment_id)
        await self.db.delete(comment)
        await self.db.commit()
        logger.info("Deleted comment %s", comment_id)


def get_comment_service(db: AsyncSession = Depends(get_db)) -> 'CommentService':
    return CommentService(db)
