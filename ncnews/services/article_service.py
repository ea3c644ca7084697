import logging
from typing import Optional

from fastapi import Depends
from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from ncnews.core.database import get_db
from ncnews.core.settings import CONFIG
from ncnews.models.articles import Article, Comment
from ncnews.schemas.articles import ArticleIn
from ncnews.services.checks import check_topic_exists
from ncnews.utils.exc_handler import NotFound, translate_db_errors
from ncnews.utils.listing import parse_sort_by, parse_order, parse_pagination, is_past_last_row

logger = logging.getLogger(__name__)

COMMENT_COUNT = func.count(Comment.comment_id).label("comment_count")


def _apply_topic_filter(stmt, topic: Optional[str]):
    if topic is None:
        return stmt
    return stmt.where(Article.topic == topic)


def _article_listing_query(sort_column, direction, topic: Optional[str], limit: int, offset: int):
    stmt = (
        select(Article.author,
               Article.title,
               Article.article_id,
               Article.topic,
               Article.created_at,
               Article.votes,
               Article.article_img_url,
               COMMENT_COUNT)
        .outerjoin(Comment, Comment.article_id == Article.article_id)
    )
    stmt = _apply_topic_filter(stmt, topic)
    # 같은 정렬 값끼리는 article_id 역순으로 고정해야 페이지 경계가 흔들리지 않는다.
    return (
        stmt
        .group_by(Article.article_id)
        .order_by(direction(sort_column), Article.article_id.desc())
        .limit(limit)
        .offset(offset)
    )


def _article_count_query(topic: Optional[str]):
    stmt = select(func.count(Article.article_id)).select_from(Article)
    return _apply_topic_filter(stmt, topic)


class ArticleService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_articles(self,
                            sort_by: Optional[str] = None,
                            order: Optional[str] = None,
                            topic: Optional[str] = None,
                            limit: Optional[str] = None,
                            p: Optional[str] = None) -> tuple[list[dict], int]:
        sort_column = parse_sort_by(sort_by)
        direction = parse_order(order)
        size, offset = parse_pagination(limit, p)

        if topic is not None:
            await check_topic_exists(self.db, topic)

        result = await self.db.execute(_article_count_query(topic))
        total_count = int(result.scalar_one() or 0)
        if is_past_last_row(offset):
            return [], total_count

        result = await self.db.execute(_article_listing_query(sort_column, direction, topic, size, offset))
        articles = [dict(row) for row in result.mappings().all()]
        return articles, total_count

    async def get_article(self, article_id: int) -> dict:
        query = (
            select(Article, COMMENT_COUNT)
            .outerjoin(Comment, Comment.article_id == Article.article_id)
            .where(Article.article_id == article_id)
            .group_by(Article.article_id)
        )
        result = await self.db.execute(query)
        row = result.one_or_none()
        if row is None:
            raise NotFound.of("article")
        article, comment_count = row
        return {**_article_columns(article), "comment_count": int(comment_count)}

    async def _get_article_row(self, article_id: int) -> Article:
        query = select(Article).where(Article.article_id == article_id)
        result = await self.db.execute(query)
        article = result.scalar_one_or_none()
        if article is None:
            raise NotFound.of("article")
        return article

    async def create_article(self, article_in: ArticleIn) -> dict:
        data = article_in.model_dump()
        if data.get("article_img_url") is None:
            data["article_img_url"] = CONFIG.DEFAULT_ARTICLE_IMG_URL
        create_article = Article(**data)

        # author/topic FK 위반은 400
        async with translate_db_errors(self.db):
            self.db.add(create_article)
            await self.db.commit()
        await self.db.refresh(create_article)

        logger.info("Created article %s by %s", create_article.article_id, create_article.author)
        return {**_article_columns(create_article), "comment_count": 0}

    async def update_article_votes(self, article_id: int, inc_votes: int) -> Article:
        article = await self._get_article_row(article_id)
        # DB에서 votes = votes + :inc 로 증가시킨다.
        article.votes = Article.votes + inc_votes
        async with translate_db_errors(self.db):
            await self.db.commit()
        await self.db.refresh(article)
        return article

    async def delete_article(self, article_id: int) -> None:
        article = await self._get_article_row(article_id)
        await self.db.delete(article)
        await self.db.commit()
        logger.info("Deleted article %s", article_id)


def _article_columns(article: Article) -> dict:
    return {
        "article_id": article.article_id,
        "author": article.author,
        "title": article.title,
        "body": article.body,
        "topic": article.topic,
        "created_at": article.created_at,
        "votes": article.votes,
        "article_img_url": article.article_img_url,
    }


def get_article_service(db: AsyncSession = Depends(get_db)) -> 'ArticleService':
    return ArticleService(db)
