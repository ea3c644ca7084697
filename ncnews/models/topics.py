from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from ncnews.core.database import Base


class Topic(Base):
    __tablename__ = "topics"

    slug: Mapped[str] = mapped_column(String(100), primary_key=True)
    description: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self):
        return f"<Topic(slug='{self.slug}')>"
