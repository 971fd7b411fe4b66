from __future__ import annotations

import logging

from infra.logging_config import setup_logging
from infra.operational_support import (
    TraceIdLogFilter,
    bind_trace_id,
    create_incident_id,
    current_trace_id,
)


def test_bind_trace_id_scopes_the_context():
    assert current_trace_id() is None

    with bind_trace_id("inc-test-123") as trace_id:
        assert trace_id == "inc-test-123"
        assert current_trace_id() == "inc-test-123"

    assert current_trace_id() is None


def test_bind_trace_id_generates_incident_id_when_blank():
    with bind_trace_id("  ") as trace_id:
        assert trace_id.startswith("inc-")
        assert current_trace_id() == trace_id
    assert create_incident_id() != create_incident_id()


def test_trace_filter_stamps_records():
    record = logging.LogRecord("finance", logging.INFO, __file__, 1, "hello", None, None)

    TraceIdLogFilter().filter(record)
    assert record.trace_id == "-"

    with bind_trace_id("inc-abc"):
        TraceIdLogFilter().filter(record)
    assert record.trace_id == "inc-abc"


def test_setup_logging_writes_trace_ids_to_rotating_file(tmp_path):
    root = logging.getLogger()
    previous_handlers = list(root.handlers)
    previous_level = root.level
    try:
        log_file = setup_logging(log_dir=tmp_path / "logs")
        with bind_trace_id("inc-log-1"):
            logging.getLogger("core.services.finance").warning("margin batch degraded")
        for handler in root.handlers:
            handler.flush()

        text = log_file.read_text(encoding="utf-8")
        assert "trace=inc-log-1" in text
        assert "margin batch degraded" in text
    finally:
        for handler in list(root.handlers):
            root.removeHandler(handler)
            handler.close()
        for handler in previous_handlers:
            root.addHandler(handler)
        root.setLevel(previous_level)
