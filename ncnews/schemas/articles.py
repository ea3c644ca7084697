from datetime import datetime

from pydantic import BaseModel, ConfigDict, StrictStr


class ArticleIn(BaseModel):
    author: StrictStr
    title: StrictStr
    body: StrictStr
    topic: StrictStr
    article_img_url: StrictStr | None = None


class ArticleSummary(BaseModel):
    """Listing row: everything but the body, plus the live comment count."""
    author: str
    title: str
    article_id: int
    topic: str
    created_at: datetime
    votes: int
    article_img_url: str
    comment_count: int
    model_config = ConfigDict(from_attributes=True)


class ArticleOut(BaseModel):
    article_id: int
    author: str
    title: str
    body: str
    topic: str
    created_at: datetime
    votes: int
    article_img_url: str
    model_config = ConfigDict(from_attributes=True)


class ArticleDetail(ArticleOut):
    comment_count: int


class ArticleResponse(BaseModel):
    article: ArticleDetail


class ArticleVotesResponse(BaseModel):
    article: ArticleOut


class ArticlesResponse(BaseModel):
    articles: list[ArticleSummary]
    total_count: int
