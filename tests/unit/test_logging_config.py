"""Unit tests for structured logging."""

import json
import logging
import sys

from haste.observability.logging_config import JSONFormatter, RequestIDFilter
from haste.observability.request_id import (
    get_request_id,
    reset_request_id,
    resolve_request_id,
    set_request_id,
)


def make_record(**extra):
    record = logging.LogRecord(
        name="haste.documents.service",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="Document created",
        args=(),
        exc_info=None,
    )
    for name, value in extra.items():
        setattr(record, name, value)
    return record


class TestJSONFormatter:

    def test_includes_request_id_and_document_key(self):
        set_request_id("req-123")
        record = make_record(document_key="bakuda")
        RequestIDFilter().filter(record)

        data = json.loads(JSONFormatter().format(record))

        assert data["message"] == "Document created"
        assert data["level"] == "INFO"
        assert data["request_id"] == "req-123"
        assert data["document_key"] == "bakuda"

    def test_unknown_extra_fields_omitted(self):
        record = make_record(secret="value")

        data = json.loads(JSONFormatter().format(record))

        assert "secret" not in data

    def test_exception_traceback_included(self):
        try:
            raise ValueError("boom")
        except ValueError:
            record = logging.LogRecord(
                "haste", logging.ERROR, __file__, 1, "failed", (), sys.exc_info()
            )

        data = json.loads(JSONFormatter().format(record))

        assert data["error"] == "boom"
        assert "ValueError" in data["traceback"]


class TestRequestID:

    def test_well_formed_header_kept(self):
        assert resolve_request_id("req-42") == "req-42"

    def test_malformed_header_replaced(self):
        request_id = resolve_request_id("bad id\nwith newline")

        assert request_id != "bad id\nwith newline"
        assert len(request_id) == 36

    def test_reset_restores_previous_id(self):
        outer = set_request_id("outer")
        inner = set_request_id("inner")

        reset_request_id(inner)
        assert get_request_id() == "outer"

        reset_request_id(outer)
