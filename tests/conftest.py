import os

os.environ["APP_ENV"] = "test"

import pytest
from httpx import AsyncClient, ASGITransport

from ncnews.core.database import ASYNC_ENGINE
from ncnews.db.data import test_data
from ncnews.db.seed import seed
from ncnews.main import app


@pytest.fixture(autouse=True)
async def seeded_db():
    await seed(ASYNC_ENGINE, test_data)
    yield
    # 인메모리 DB 커넥션은 테스트마다 새 이벤트 루프에서 다시 연다.
    await ASYNC_ENGINE.dispose()


@pytest.fixture
async def client():
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
