"""Logging setup shared by the application and the seed script."""
import logging
import sys

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Attach a single stderr handler to the ``ncnews`` logger.

    Calling this more than once (app factory in tests, seed script) only
    updates the level.
    """
    logger = logging.getLogger("ncnews")
    logger.setLevel(level.upper())

    if logger.handlers:
        return logger

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(console_handler)

    # uvicorn이 루트 로거에 핸들러를 붙이는 경우 중복 출력 방지
    logger.propagate = False

    return logger
