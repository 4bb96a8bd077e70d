from __future__ import annotations

import json
import logging

import pytest

from zoning.infra.logging import (
    JsonFormatter,
    LoggingConfig,
    build_logging_config,
    configure_logging,
    setup_logging,
    shutdown_logging,
)


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    yield root
    shutdown_logging()
    root.handlers.clear()
    root.handlers.extend(original_handlers)
    root.setLevel(original_level)


def test_json_formatter_includes_fields_and_message() -> None:
    logger = logging.getLogger("test.json.formatter")
    record = logger.makeRecord(
        name=logger.name,
        level=logging.INFO,
        fn=__file__,
        lno=1,
        msg="hello %s",
        args=("world",),
        exc_info=None,
        extra={"custom": 1},
    )
    payload = json.loads(JsonFormatter().format(record))
    assert payload["msg"] == "hello world"
    assert payload["level"] == "INFO"
    assert payload["fields"] == {"custom": 1}


def test_build_logging_config_reads_env(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("ZONING_LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.setenv("ZONING_LOG_LEVEL", "debug")
    monkeypatch.setenv("LOG_FORMAT", "JSON")

    config = build_logging_config()

    assert config.level_name == "DEBUG"
    assert config.console_format == "json"
    assert config.file_path is not None
    assert config.file_path.startswith(str(tmp_path / "logs"))
    assert config.file_path.endswith(".jsonl")


def test_configure_logging_console_only(restore_root_logger) -> None:
    configure_logging(LoggingConfig(level_name="WARNING", console_format="text"))
    assert restore_root_logger.level == logging.WARNING
    assert len(restore_root_logger.handlers) == 1


def test_setup_logging_writes_json_lines(monkeypatch, tmp_path, restore_root_logger) -> None:
    log_dir = tmp_path / "logs"
    monkeypatch.setenv("ZONING_LOG_DIR", str(log_dir))
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.delenv("ZONING_LOG_LEVEL", raising=False)
    monkeypatch.setenv("LOG_FORMAT", "text")

    setup_logging()
    logging.getLogger("test.logging.file").info("hello", extra={"zone_count": 2})
    shutdown_logging()

    assert restore_root_logger.level == logging.DEBUG
    files = list(log_dir.glob("zoning_run_*.jsonl"))
    assert len(files) == 1
    lines = [json.loads(line) for line in files[0].read_text(encoding="utf-8").splitlines()]
    assert any(line["msg"] == "hello" and line["fields"] == {"zone_count": 2} for line in lines)
