from __future__ import annotations

import io
import logging

from paramtable.logging_config import setup_logging
from paramtable.main import main


def test_setup_logging_replaces_handlers():
    first = setup_logging(level=logging.INFO, stream=io.StringIO())
    second = setup_logging(level=logging.INFO, stream=io.StringIO())
    assert first is second
    assert len(second.handlers) == 1


def test_messages_reach_stream():
    stream = io.StringIO()
    setup_logging(level=logging.INFO, stream=stream)
    logging.getLogger("paramtable.model.params_io").info("hello")
    assert "paramtable.model.params_io - INFO - hello" in stream.getvalue()


def test_log_file_records_debug(tmp_path, param_file):
    log_file = tmp_path / "run.log"
    out = tmp_path / "table.dat"
    assert main(["--log-file", str(log_file), "tabulate", str(param_file), str(out)]) == 0
    text = log_file.read_text(encoding="utf-8")
    assert "Reading parameters from" in text
    assert "DEBUG" in text
