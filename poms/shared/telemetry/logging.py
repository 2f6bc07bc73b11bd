"""Logging configuration for the application."""

import logging
import sys

from poms.core.config import get_settings
from poms.shared.context import get_current_session, get_request_id

LOG_FORMAT = (
    "%(asctime)s - %(name)s - %(levelname)s - [%(request_id)s user=%(user_id)s] %(message)s"
)


class RequestContextFilter(logging.Filter):
    """Attach the current request id and session user id (or '-') to every record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = get_request_id() or "-"
        session = get_current_session()
        record.user_id = session.user_id if session is not None else "-"
        return True


def setup_logging() -> None:
    """Configure application-wide logging.

    Level is DEBUG when settings.debug is True, otherwise INFO.
    Output goes to stdout.
    """
    settings = get_settings()
    log_level = logging.DEBUG if settings.debug else logging.INFO
    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(RequestContextFilter())
    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        handlers=[handler],
    )
