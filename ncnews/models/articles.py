from datetime import datetime, timezone

from sqlalchemy import ForeignKey, Integer, String, Text, DateTime
from sqlalchemy.orm import relationship, Mapped, mapped_column

from ncnews.core.database import Base
from ncnews.core.settings import CONFIG


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Article(Base):
    __tablename__ = "articles"

    article_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    topic: Mapped[str] = mapped_column(String(100), ForeignKey("topics.slug", name="fk_article_topic"), nullable=False, index=True)
    author: Mapped[str] = mapped_column(String(100), ForeignKey("users.username", name="fk_article_author"), nullable=False)
    body: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=_utcnow)
    votes: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    article_img_url: Mapped[str] = mapped_column(String(1000), nullable=False,
                                                 default=lambda: CONFIG.DEFAULT_ARTICLE_IMG_URL)

    # 게시글 삭제 시 댓글은 DB의 ON DELETE CASCADE로 지운다(passive_deletes).
    comments: Mapped[list["Comment"]] = relationship("Comment",
                                                     back_populates="article",
                                                     cascade="all, delete-orphan",
                                                     passive_deletes=True)

    def __repr__(self):
        return f"<Article(article_id={self.article_id}, title='{self.title}', author='{self.author}', created_at={self.created_at})>"


class Comment(Base):
    __tablename__ = "comments"

    comment_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    body: Mapped[str] = mapped_column(Text, nullable=False)
    article_id: Mapped[int] = mapped_column(Integer, ForeignKey("articles.article_id", name="fk_comment_article", ondelete="CASCADE"),
                                            nullable=False, index=True)
    author: Mapped[str] = mapped_column(String(100), ForeignKey("users.username", name="fk_comment_author"), nullable=False)
    votes: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=_utcnow)

    article: Mapped["Article"] = relationship("Article", back_populates="comments")

    def __repr__(self):
        return f"<Comment(comment_id={self.comment_id}, article_id={self.article_id}, author='{self.author}')>"
