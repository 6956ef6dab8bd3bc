"""
Unit Tests for docsegment.utils.logging_config

Captures loguru output with an in-memory sink.
"""

import pytest
from docsegment.utils import logging_config
from docsegment.utils.logging_config import (
    get_logger,
    log_step_complete,
    log_step_start,
    logger,
)


@pytest.fixture
def captured():
    """Collect log records for the test's duration."""
    messages = []
    handler_id = logger.add(
        lambda message: messages.append(message.record),
        level="DEBUG",
    )
    yield messages
    logger.remove(handler_id)


def _texts(records):
    return [(r["level"].name, r["message"]) for r in records]


class TestStepBanners:
    """Tests for log_step_start() / log_step_complete()"""

    def test_start_banner(self, captured):
        """Start banner names the run"""
        log_step_start("Segmenting report.txt")
        assert ("INFO", "STARTING: Segmenting report.txt") in _texts(captured)

    def test_complete_reports_sections(self, captured):
        """Completion banner reports section count and duration"""
        log_step_complete("Segmenting report.txt", 1.234, section_count=4)
        texts = _texts(captured)

        assert ("SUCCESS", "COMPLETED: Segmenting report.txt") in texts
        assert ("INFO", "Sections extracted: 4") in texts
        assert ("INFO", "Duration: 1.23 seconds") in texts

    def test_zero_sections_is_warning(self, captured):
        """Nothing extracted is flagged as a warning"""
        log_step_complete("Segmenting empty.txt", 0.5, section_count=0)
        assert ("WARNING", "Sections extracted: 0") in _texts(captured)

    def test_section_count_optional(self, captured):
        """Without a count no section line is logged"""
        log_step_complete("Segmenting report.txt", 0.5)
        assert not any("Sections extracted" in m for _, m in _texts(captured))


class TestGetLogger:
    """Tests for get_logger()"""

    def test_binds_component_name(self, captured):
        """Bound name is carried in record extras"""
        get_logger("segmenter").info("Chapter located")
        assert captured[-1]["extra"]["name"] == "segmenter"


class TestSetupLogger:
    """Tests for setup_logger()"""

    def test_console_only_creates_no_files(self, tmp_path, monkeypatch):
        """log_to_file=False leaves the logs directory untouched"""
        logs_dir = tmp_path / "logs"
        monkeypatch.setattr(logging_config, "LOGS_DIR", logs_dir)

        try:
            logging_config.setup_logger(level="debug", log_to_file=False)
        finally:
            logger.remove()

        assert not logs_dir.exists()

    def test_file_sinks_created(self, tmp_path, monkeypatch):
        """Run and error logs are created under LOGS_DIR"""
        logs_dir = tmp_path / "logs"
        monkeypatch.setattr(logging_config, "LOGS_DIR", logs_dir)

        try:
            logging_config.setup_logger(level="INFO")
            logger.complete()
        finally:
            logger.remove()

        names = sorted(p.name for p in logs_dir.iterdir())
        assert any(n.startswith("segmentation_") for n in names)
        assert any(n.startswith("errors_") for n in names)
