import json

from starlette.requests import Request

from ncnews.utils.exc_handler import (
    NotFound,
    BadRequest,
    InvalidOrder,
    InternalError,
    ncnews_exception_handler,
    unhandled_exception_handler,
)


def make_request(path="/api/articles"):
    return Request({"type": "http", "method": "GET", "path": path,
                    "headers": [], "query_string": b""})


def test_not_found_message():
    assert NotFound.of("article").msg == "Article not found"
    assert NotFound.of("topic").status_code == 404


def test_bad_request_family():
    exc = InvalidOrder()
    assert isinstance(exc, BadRequest)
    assert exc.status_code == 400
    assert exc.msg == "Invalid order query"


async def test_app_exception_is_translated():
    response = await ncnews_exception_handler(make_request(), NotFound.of("comment"))
    assert response.status_code == 404
    assert json.loads(response.body) == {"msg": "Comment not found"}


async def test_unhandled_exception_hides_details():
    exc = RuntimeError('relation "articles" does not exist')
    response = await unhandled_exception_handler(make_request(), exc)
    assert response.status_code == 500
    assert json.loads(response.body) == {"msg": "Internal Server Error"}
    assert b"relation" not in response.body


def test_internal_error_defaults():
    exc = InternalError()
    assert exc.status_code == 500
    assert exc.msg == "Internal Server Error"
