# File: tests/test_logger.py
import logging
import sys
from logging.handlers import RotatingFileHandler

import pytest

from site_crawler.logger import LOGGER_NAME, configure, get_logger, init_logging


@pytest.fixture(autouse=True)
def restore_logging():
    yield
    init_logging()


def test_console_handler_writes_to_stderr():
    lg = configure(level="DEBUG")
    streams = [h.stream for h in lg.handlers if type(h) is logging.StreamHandler]
    assert streams == [sys.stderr]
    assert lg.level == logging.DEBUG
    assert lg.propagate is False


def test_log_output_stays_off_stdout(capsys):
    configure(level="INFO")
    get_logger("crawler").info("Depth %d: processing %d URLs", 0, 1)
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "SiteCrawler.crawler" in captured.err
    assert "Depth 0: processing 1 URLs" in captured.err


def test_file_handler_added(tmp_path):
    log_file = tmp_path / "crawl.log"
    lg = configure(level="INFO", log_file=log_file)
    files = [h for h in lg.handlers if isinstance(h, RotatingFileHandler)]
    assert len(files) == 1

    get_logger("fetcher").warning("Failed %s: %s", "http://a.com/x", "timeout")
    files[0].flush()
    assert "Failed http://a.com/x: timeout" in log_file.read_text(encoding="utf-8")


def test_replace_handlers():
    configure()
    assert len(configure(replace_handlers=False).handlers) == 2
    assert len(configure().handlers) == 1


def test_child_logger_name():
    assert get_logger("scanner").name == f"{LOGGER_NAME}.scanner"
