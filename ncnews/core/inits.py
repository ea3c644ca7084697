import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from ncnews.apis import api as apis_api
from ncnews.apis import articles as apis_articles
from ncnews.apis import comments as apis_comments
from ncnews.apis import topics as apis_topics
from ncnews.apis import users as apis_users
from ncnews.core.database import ASYNC_ENGINE
from ncnews.core.settings import CONFIG
from ncnews.utils import exc_handler
from ncnews.utils.logger import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting up %s (%s)...", CONFIG.APP_NAME, CONFIG.APP_ENV)
    yield
    # FastAPI 인스턴스 종료시 커넥션 풀 정리
    await ASYNC_ENGINE.dispose()
    logger.info("Shutting down...")


def including_middleware(app):
    app.add_middleware(CORSMiddleware,
                       allow_origins=CONFIG.ORIGINS,
                       allow_methods=["*"],
                       allow_headers=["*"],
                       allow_credentials=True)


def including_exception_handler(app):
    app.add_exception_handler(exc_handler.NcNewsException,
                              exc_handler.ncnews_exception_handler)
    app.add_exception_handler(RequestValidationError,
                              exc_handler.validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException,
                              exc_handler.custom_http_exception_handler)
    app.add_exception_handler(Exception,
                              exc_handler.unhandled_exception_handler)


def including_router(app):
    app.include_router(apis_api.router, prefix="/api", tags=["API"])
    app.include_router(apis_topics.router, prefix="/api/topics", tags=["TopicsAPI"])
    app.include_router(apis_articles.router, prefix="/api/articles", tags=["ArticlesAPI"])
    app.include_router(apis_comments.router, prefix="/api/comments", tags=["CommentsAPI"])
    app.include_router(apis_users.router, prefix="/api/users", tags=["UsersAPI"])


def initialize_app():
    setup_logging(CONFIG.LOG_LEVEL)

    app = FastAPI(title=CONFIG.APP_NAME,
                  version=CONFIG.APP_VERSION,
                  description=CONFIG.APP_DESCRIPTION,
                  lifespan=lifespan)

    including_middleware(app)
    including_exception_handler(app)
    including_router(app)

    return app
