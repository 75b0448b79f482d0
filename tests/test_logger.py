from __future__ import annotations

import re

import pytest

from cnfchart import Logger

header_regex = re.compile(r"\[\d\d/\d\d \d\d:\d\d:\d\d\], (INF|DEB|ERR), test: ")

def test_lines_carry_header(logger):
    logger.log("hello")
    line = logger.log_path.read_text().splitlines()[0]
    assert header_regex.match(line)
    assert line.endswith("hello")

def test_levels_filter_messages(tmp_path):
    logger = Logger("cnfchart", "test", log_level="info", log_dir=str(tmp_path))
    logger.log_debug("hidden")
    logger.log("shown")
    assert logger.log_path.read_text().count("\n") == 1
    assert "hidden" not in logger.log_path.read_text()

def test_errors_are_mirrored(logger):
    logger.log_error("broken")
    assert "ERR" in logger.log_path.read_text()
    assert "broken" in logger.error_log_path.read_text()

def test_error_level_writes_nothing_else(tmp_path):
    logger = Logger("cnfchart", "test", log_level="error", log_dir=str(tmp_path / "logs"))
    logger.log("info")
    logger.log_debug("debug")
    assert not logger.log_path.exists()

def test_raise_exception_logs_then_raises(logger):
    with pytest.raises(KeyError):
        logger.raise_exception(KeyError("missing"))
    assert "missing" in logger.error_log_path.read_text()

def test_child_shares_files(logger):
    child = logger.child("other")
    child.log("from child")
    assert ", INF, other: from child" in logger.log_path.read_text()

def test_unknown_level():
    with pytest.raises(ValueError):
        Logger("cnfchart", "test", log_level="verbose")

def test_silent_level_writes_nothing(tmp_path):
    logger = Logger("cnfchart", "test", log_level="silent", log_dir=str(tmp_path / "logs"))
    logger.log_error("broken")
    with pytest.raises(KeyError):
        logger.raise_exception(KeyError("missing"))
    assert not (tmp_path / "logs").exists()
