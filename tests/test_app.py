from __future__ import annotations

import logging
import os

import pytest

from portfolio3d.config import DEFAULT_CONTENT_PATH
from portfolio3d.logging_config import default_log_path, setup_logging
from portfolio3d.main import parse_args


@pytest.fixture
def app_logger():
    logger = logging.getLogger("portfolio3d")
    yield logger
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


def test_parse_args_defaults() -> None:
    args = parse_args([])
    assert args.content == DEFAULT_CONTENT_PATH
    assert not args.debug
    assert not args.no_3d
    assert args.log_file is None


def test_parse_args_custom_content() -> None:
    args = parse_args(["my.json", "--debug", "--no-3d"])
    assert args.content == "my.json"
    assert args.debug
    assert args.no_3d


def test_parse_args_log_file_without_value_uses_home_default() -> None:
    assert parse_args(["--log-file"]).log_file == default_log_path()
    assert parse_args(["--log-file", "run.log"]).log_file == "run.log"


def test_default_log_path_is_under_home(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    assert default_log_path() == os.path.join(str(tmp_path), ".portfolio3d", "portfolio3d.log")


def test_setup_logging_does_not_duplicate_handlers(tmp_path, app_logger) -> None:
    log_file = tmp_path / "app.log"
    setup_logging(level=logging.DEBUG, log_file=str(log_file))
    setup_logging(level=logging.DEBUG, log_file=str(log_file))

    assert len(app_logger.handlers) == 2
    logging.getLogger("portfolio3d.tests").debug("hello")
    for handler in app_logger.handlers:
        handler.flush()
    assert "hello" in log_file.read_text(encoding="utf-8")


def test_setup_logging_creates_log_directory(monkeypatch, tmp_path, app_logger) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    setup_logging(log_file="~/.portfolio3d/run.log")
    for handler in app_logger.handlers:
        handler.flush()

    log_file = tmp_path / ".portfolio3d" / "run.log"
    assert log_file.is_file()
    assert "Logging initialized" in log_file.read_text(encoding="utf-8")


@pytest.mark.parametrize(
    "level, expected",
    [(logging.INFO, logging.WARNING), (logging.DEBUG, logging.DEBUG)],
)
def test_setup_logging_quiets_3d_stack(app_logger, level: int, expected: int) -> None:
    setup_logging(level=level)
    assert logging.getLogger("pyvista").level == expected
    assert logging.getLogger("pyvistaqt").level == expected
