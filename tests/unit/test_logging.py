"""Unit tests for logging configuration."""

import logging
import os
import tempfile
from pathlib import Path
from unittest.mock import patch

import pytest

from university.logging import get_logger, setup_logging


@pytest.mark.unit
class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_creates_log_directory(self) -> None:
        """Log directory is created if it doesn't exist."""
        with tempfile.TemporaryDirectory() as tmpdir:
            log_dir = Path(tmpdir) / "nested" / "logs"
            setup_logging(log_dir=log_dir, console=False)

            assert log_dir.exists()

    def test_writes_to_log_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            logger = setup_logging(log_dir=tmpdir, console=False)
            logger.info("registry message 42")

            content = (Path(tmpdir) / "university.log").read_text()
            assert "registry message 42" in content
            assert " | INFO" in content
            assert " | university | " in content

    def test_component_loggers_propagate(self) -> None:
        """Module loggers under university.* land in the same file."""
        with tempfile.TemporaryDirectory() as tmpdir:
            setup_logging(log_dir=tmpdir, console=False)
            logging.getLogger("university.services.course").info("course created")

            content = (Path(tmpdir) / "university.log").read_text()
            assert "university.services.course | course created" in content

    def test_level_from_environment(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            with patch.dict(os.environ, {"UNIVERSITY_LOG_LEVEL": "DEBUG"}):
                logger = setup_logging(log_dir=tmpdir, console=False)

            assert logger.level == logging.DEBUG

    def test_dir_from_environment(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            with patch.dict(os.environ, {"UNIVERSITY_LOG_DIR": tmpdir}):
                setup_logging(console=False)

            assert (Path(tmpdir) / "university.log").exists()

    def test_repeated_setup_does_not_duplicate_handlers(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            setup_logging(log_dir=tmpdir, console=True)
            logger = setup_logging(log_dir=tmpdir, console=True)

            assert len(logger.handlers) == 2

    def test_unknown_level_falls_back_to_info(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            logger = setup_logging(log_dir=tmpdir, level="chatty", console=False)

            assert logger.level == logging.INFO


@pytest.mark.unit
class TestGetLogger:
    def test_prefixes_component(self) -> None:
        assert get_logger("api").name == "university.api"

    def test_keeps_qualified_name(self) -> None:
        assert get_logger("university.services").name == "university.services"
        assert get_logger("university").name == "university"
