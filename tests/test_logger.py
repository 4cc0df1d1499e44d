"""
Tests for logger functionality.
"""

from pathlib import Path

from admitview.logger import StructuredLogger, get_logger, reset_logger


class TestStructuredLogger:
    """Test structured logging functionality."""

    def test_logger_creation(self, tmp_path):
        """Logger should be created with default settings."""
        logger = StructuredLogger(
            name="test",
            level="INFO",
            log_dir=tmp_path,
            enable_console=False,
        )

        assert logger.logger.name == "test"
        assert logger.metrics["fetches_attempted"] == 0

    def test_log_methods(self, tmp_path):
        """All log level methods should work."""
        logger = StructuredLogger(name="test", log_dir=tmp_path, enable_console=False)

        logger.debug("Debug message")
        logger.info("Info message")
        logger.warning("Warning message")
        logger.error("Error message")
        logger.critical("Critical message")

    def test_context_written_to_file(self, tmp_path):
        """Logging with context should include extra data."""
        logger = StructuredLogger(name="test", log_dir=tmp_path, enable_console=False)

        logger.info("Fetched application", application_id="app-001", score=25.5)

        log_files = list(tmp_path.glob("admitview_*.log"))
        assert len(log_files) == 1
        content = log_files[0].read_text(encoding="utf-8")
        assert '"application_id": "app-001"' in content
        assert "Fetched application" in content

    def test_file_disabled(self, tmp_path):
        logger = StructuredLogger(name="test", log_dir=tmp_path, enable_file=False, enable_console=False)
        logger.info("nothing on disk")
        assert list(tmp_path.iterdir()) == []

    def test_fetch_metrics(self, tmp_path):
        logger = StructuredLogger(name="test", log_dir=tmp_path, enable_console=False)

        logger.record_fetch_attempt()
        logger.record_fetch_success()
        logger.record_fetch_attempt()
        logger.record_fetch_failure("Timeout")
        logger.record_fetch_attempt()
        logger.record_fetch_failure("Timeout")

        metrics = logger.get_metrics()
        assert metrics["fetches_attempted"] == 3
        assert metrics["fetches_successful"] == 1
        assert metrics["fetches_failed"] == 2
        assert metrics["errors_by_type"] == {"Timeout": 2}
        assert metrics["fetch_success_rate"] == 0.333

    def test_success_rate_without_attempts(self, tmp_path):
        logger = StructuredLogger(name="test", log_dir=tmp_path, enable_console=False)
        assert logger.get_metrics()["fetch_success_rate"] == 0

    def test_normalization_metrics(self, tmp_path):
        logger = StructuredLogger(name="test", log_dir=tmp_path, enable_console=False)

        logger.record_normalization("Aptitude Assessment")
        logger.record_normalization("Aptitude Assessment")
        logger.record_normalization(None)

        assert logger.metrics["normalizations_by_method"] == {
            "Aptitude Assessment": 2,
            "unknown": 1,
        }

    def test_metrics_summary(self, tmp_path):
        logger = StructuredLogger(name="test", log_dir=tmp_path, enable_console=False)
        logger.record_fetch_attempt()
        logger.record_fetch_failure("HTTPError_500")
        logger.record_normalization("Aptitude Assessment")

        logger.log_metrics_summary()

        content = next(tmp_path.glob("admitview_*.log")).read_text(encoding="utf-8")
        assert "Fetches: 0/1" in content
        assert "HTTPError_500: 1" in content


class TestGlobalLogger:
    """Test the process-wide logger instance."""

    def setup_method(self):
        reset_logger()

    def teardown_method(self):
        reset_logger()

    def test_get_logger_singleton(self):
        assert get_logger() is get_logger()

    def test_reset_logger(self):
        first = get_logger()
        reset_logger()
        assert get_logger() is not first

    def test_no_file_logging_by_default(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        get_logger().info("console only")
        assert not (tmp_path / "logs").exists()

    def test_log_dir_from_environment(self, tmp_path, monkeypatch):
        log_dir = tmp_path / "logs"
        monkeypatch.setenv("ADMITVIEW_LOG_DIR", str(log_dir))

        get_logger().info("to disk")

        assert Path(log_dir).exists()
        assert list(log_dir.glob("admitview_*.log"))
