"""Tests for logger configuration."""

from loguru import logger

from liftguard.core.logger import configure_logging, setup_logger


def test_setup_logger_writes_file(tmp_path, restore_logger) -> None:
    """Test that a file sink is created when a log file is given."""
    log_file = tmp_path / "logs" / "liftguard.log"

    setup_logger(level="DEBUG", log_file=str(log_file))
    logger.info("hello", component="test")
    logger.complete()

    content = log_file.read_text(encoding="utf-8")
    assert "Logger initialized" in content
    assert "'level': 'DEBUG'" in content
    assert "hello" in content


def test_setup_logger_respects_level(tmp_path, restore_logger) -> None:
    """Test that records below the configured level are dropped."""
    log_file = tmp_path / "liftguard.log"

    setup_logger(level="WARNING", log_file=str(log_file))
    logger.info("quiet")
    logger.warning("loud")
    logger.complete()

    content = log_file.read_text(encoding="utf-8")
    assert "quiet" not in content
    assert "loud" in content


def test_configure_logging_uses_settings(tmp_path, monkeypatch, restore_logger) -> None:
    """Test that LIFTGUARD_* env vars drive the default sinks."""
    log_file = tmp_path / "env.log"
    monkeypatch.setenv("LIFTGUARD_LOG_LEVEL", "error")
    monkeypatch.setenv("LIFTGUARD_LOG_FILE", str(log_file))

    configure_logging()
    logger.warning("dropped")
    logger.error("kept")
    logger.complete()

    content = log_file.read_text(encoding="utf-8")
    assert "dropped" not in content
    assert "kept" in content
