"""Precondition lookups run before a dependent query.

A missing parent must surface as its own 404 instead of an empty result.
The check and the following query are separate round-trips; a row deleted
in between is not guarded against.
"""
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ncnews.models.articles import Article
from ncnews.models.topics import Topic
from ncnews.utils.exc_handler import NotFound


async def check_article_exists(db: AsyncSession, article_id: int) -> None:
    query = select(Article.article_id).where(Article.article_id == article_id)
    result = await db.execute(query)
    if result.scalar_one_or_none() is None:
        raise NotFound.of("article")


async def check_topic_exists(db: AsyncSession, slug: str) -> None:
    query = select(Topic.slug).where(Topic.slug == slug)
    result = await db.execute(query)
    if result.scalar_one_or_none() is None:
        raise NotFound.of("topic")
