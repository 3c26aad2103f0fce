# tests/test_logging_setup.py

from __future__ import annotations

import logging

from taskview.logging_setup import _ConsoleNoiseFilter, setup_logging


def _record(name: str, level: int) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, "msg", None, None)


def test_console_filter_keeps_app_records_and_quiets_the_rest() -> None:
    f = _ConsoleNoiseFilter()
    assert f.filter(_record("taskview.core.controller", logging.DEBUG))
    assert not f.filter(_record("httpx", logging.WARNING))
    assert not f.filter(_record("py.warnings", logging.WARNING))
    assert f.filter(_record("py.warnings", logging.ERROR))
    assert f.filter(_record("asyncio", logging.CRITICAL))


def test_setup_logging_writes_file_and_quiets_http_libraries(tmp_path) -> None:
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    try:
        log_file = setup_logging(log_dir=tmp_path / "logs", console_level=logging.WARNING)
        logging.getLogger("taskview.test").debug("written to file only")
        for h in root.handlers:
            h.flush()

        assert log_file == tmp_path / "logs" / "taskview.log"
        assert "written to file only" in log_file.read_text(encoding="utf-8")
        assert root.level == logging.DEBUG
        assert logging.getLogger("httpx").level == logging.WARNING
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
            h.close()
        for h in saved_handlers:
            root.addHandler(h)
        root.setLevel(saved_level)
        logging.captureWarnings(False)
