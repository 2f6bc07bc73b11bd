"""Log records carry the request id and session user from the request context."""

import logging

from poms.domain.enums import Role
from poms.domain.session import SessionIdentity
from poms.shared.context import clear_current_session, set_current_session, set_request_id
from poms.shared.telemetry import RequestContextFilter


def _record() -> logging.LogRecord:
    return logging.LogRecord("poms.test", logging.INFO, __file__, 1, "hello", None, None)


def test_defaults_outside_a_request() -> None:
    record = _record()
    assert RequestContextFilter().filter(record) is True
    assert record.request_id == "-"
    assert record.user_id == "-"


def test_values_from_context() -> None:
    set_request_id("req-7")
    set_current_session(SessionIdentity(user_id="u-1", role=Role.USER))
    try:
        record = _record()
        RequestContextFilter().filter(record)
        assert record.request_id == "req-7"
        assert record.user_id == "u-1"
    finally:
        set_request_id(None)
        clear_current_session()
