from typing import Annotated

from fastapi import Path

from ncnews.core.database import MAX_INT

# 범위를 넘는 id는 DB에 보내기 전에 검증 에러(400)로 끝낸다.
ArticleId = Annotated[int, Path(ge=-MAX_INT - 1, le=MAX_INT)]
CommentId = Annotated[int, Path(ge=-MAX_INT - 1, le=MAX_INT)]
