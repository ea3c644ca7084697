from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from ncnews.core.database import Base


class User(Base):
    __tablename__ = "users"

    # String은 제한 글자수를 지정해야 한다.
    username: Mapped[str] = mapped_column(String(100), primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    avatar_url: Mapped[str] = mapped_column(String(500), nullable=False)

    def __repr__(self):
        return f"<User(username='{self.username}')>"
