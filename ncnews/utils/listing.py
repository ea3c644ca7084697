"""Validation of the query-string parameters shared by listing endpoints.

Everything here is pure: no session, no I/O. Values arrive as raw strings
(or ``None`` when absent) and come out as values safe to hand to a
SQLAlchemy statement. Sort columns are looked up in a fixed allow-list so
caller text never reaches the SQL string.
"""
import re
from typing import Optional, Tuple

from sqlalchemy import asc, desc
from sqlalchemy.sql.elements import ColumnElement

from ncnews.core.database import MAX_BIGINT
from ncnews.core.settings import CONFIG
from ncnews.models.articles import Article
from ncnews.utils.exc_handler import BadRequest, InvalidSortColumn, InvalidOrder, InvalidPagination

DEFAULT_SORT_BY = "created_at"
DEFAULT_ORDER = "desc"

SORTABLE_COLUMNS: dict[str, ColumnElement] = {
    "title": Article.title,
    "topic": Article.topic,
    "author": Article.author,
    "created_at": Article.created_at,
    "votes": Article.votes,
}

ORDER_DIRECTIONS = {
    "asc": asc,
    "desc": desc,
}

_INTEGER_RE = re.compile(r"([+-]?)([0-9]+)")
_MAX_DIGITS = len(str(MAX_BIGINT))


def parse_sort_by(sort_by: Optional[str]) -> ColumnElement:
    key = DEFAULT_SORT_BY if sort_by is None else sort_by
    column = SORTABLE_COLUMNS.get(key)
    if column is None:
        raise InvalidSortColumn()
    return column


def parse_order(order: Optional[str]):
    key = DEFAULT_ORDER if order is None else order.lower()
    direction = ORDER_DIRECTIONS.get(key)
    if direction is None:
        raise InvalidOrder()
    return direction


def _parse_positive_int(value: Optional[str], default: int) -> int:
    if value is None:
        return default
    match = _INTEGER_RE.fullmatch(value)
    if match is None:
        raise BadRequest()
    sign, digits = match.groups()
    digits = digits.lstrip("0") or "0"
    # BIGINT보다 긴 값은 변환하지 않고 상한으로 자른다.
    number = MAX_BIGINT if len(digits) > _MAX_DIGITS else min(int(digits), MAX_BIGINT)
    if sign == "-":
        number = -number
    if number < 1:
        raise InvalidPagination()
    return number


def parse_pagination(limit: Optional[str], p: Optional[str]) -> Tuple[int, int]:
    """Return ``(limit, offset)`` for 1-based page ``p``."""
    size = _parse_positive_int(limit, CONFIG.DEFAULT_PAGE_LIMIT)
    page = _parse_positive_int(p, 1)
    return size, (page - 1) * size


def is_past_last_row(offset: int) -> bool:
    """True when ``offset`` cannot be sent to the store; such a page is always empty."""
    return offset > MAX_BIGINT
