# tests/test_logging_setup.py

from __future__ import annotations

import logging
from pathlib import Path

from daytasks.logging_setup import _ConsoleNoiseFilter, setup_logging


def _record(name: str, level: int) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, "msg", None, None)


def test_console_filter_keeps_own_logs_and_mutes_others() -> None:
    f = _ConsoleNoiseFilter()
    assert f.filter(_record("daytasks.core.session", logging.DEBUG))
    assert f.filter(_record("daytasks", logging.INFO))
    assert not f.filter(_record("daytasksfoo", logging.INFO))
    assert not f.filter(_record("urllib3", logging.WARNING))
    assert f.filter(_record("urllib3", logging.ERROR))
    assert f.filter(_record("py.warnings", logging.WARNING))
    assert not f.filter(_record("py.warnings", logging.INFO))


def test_setup_logging_writes_file(tmp_path: Path) -> None:
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    try:
        setup_logging(log_dir=tmp_path / "logs", console_level=logging.WARNING)
        logging.getLogger("daytasks.test").debug("hello file")
        for h in root.handlers:
            h.flush()
        assert "hello file" in (tmp_path / "logs" / "daytasks.log").read_text("utf-8")
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
            h.close()
        for h in saved_handlers:
            root.addHandler(h)
        root.setLevel(saved_level)
        logging.captureWarnings(False)
