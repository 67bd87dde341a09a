"""
Tests for the logging module.
"""

import json
import logging

import structlog


class TestConfigureLogging:
    """Tests for configure_logging function."""

    def test_configure_development_mode(self):
        from bodyfit.core.logging import configure_logging

        # Should not raise
        configure_logging(json_logs=False, log_level="DEBUG")

    def test_configure_log_level(self):
        from bodyfit.core.logging import configure_logging

        configure_logging(log_level="WARNING")

        assert logging.getLogger().level == logging.WARNING

    def test_json_renderer_output(self):
        """JSON mode renders event and bound keys as one JSON object."""
        from bodyfit.core.logging import configure_logging

        configure_logging(json_logs=True, log_level="INFO")
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

        rendered = processors[-1](None, "info", {"event": "Analysis complete", "body_type": "pear"})
        assert json.loads(rendered) == {"event": "Analysis complete", "body_type": "pear"}


class TestGetLogger:

    def test_get_named_logger(self):
        from bodyfit.core.logging import get_logger

        logger = get_logger("bodyfit.test")
        assert hasattr(logger, "info")
        assert hasattr(logger, "warning")

    def test_logger_can_log(self):
        from bodyfit.core.logging import configure_logging, get_logger

        configure_logging(json_logs=False, log_level="DEBUG")
        logger = get_logger("test")

        # Should not raise
        logger.info("Test message", key="value")
        logger.debug("Debug", sizes={"tops": "M"})


class TestContextBinding:

    def test_bind_and_clear(self):
        from bodyfit.core.logging import bind_context, clear_context

        clear_context()
        bind_context(submission_id=7)
        assert structlog.contextvars.get_contextvars() == {"submission_id": 7}

        clear_context()
        assert structlog.contextvars.get_contextvars() == {}
