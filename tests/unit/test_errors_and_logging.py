"""Tests for the exception hierarchy and logging setup."""

import io
import logging
from pathlib import Path

import pytest

from zviz import Table, configure_logging
from zviz.exceptions import OutputWriteError, RenderingError, ValidationError, ZvizError
from zviz.logging_utils import LIBRARY_LOGGER_NAME


@pytest.mark.unit
class TestExceptionHierarchy:
    """Test exception classes and their attributes."""

    def test_all_derive_from_base(self) -> None:
        """Test that every library error is a ZvizError."""
        for exc_type in (ValidationError, RenderingError, OutputWriteError):
            assert issubclass(exc_type, ZvizError)

    def test_base_keeps_original_error(self) -> None:
        """Test that the wrapped error is preserved."""
        cause = ValueError("boom")
        error = ZvizError("failed", original_error=cause)
        assert error.message == "failed"
        assert error.original_error is cause
        assert str(error) == "failed"

    def test_validation_error_parameters(self) -> None:
        """Test the parameter details on ValidationError."""
        with pytest.raises(ValidationError) as exc_info:
            Table("t").cell(-1, 0)
        assert exc_info.value.parameter_name == "column"
        assert exc_info.value.parameter_value == -1

    def test_output_write_error_default_message(self) -> None:
        """Test the default OutputWriteError message."""
        error = OutputWriteError("out.html")
        assert error.message == "Failed to write output file: out.html"
        assert error.rendering_stage == "file_write"


@pytest.mark.unit
class TestConfigureLogging:
    """Test configure_logging on the library logger."""

    @pytest.fixture(autouse=True)
    def restore_loggers(self):
        """Restore the zviz logger after each test."""
        library_logger = logging.getLogger(LIBRARY_LOGGER_NAME)
        saved = (list(library_logger.handlers), library_logger.level, library_logger.propagate)
        yield
        for handler in library_logger.handlers:
            if handler not in saved[0]:
                handler.close()
        library_logger.handlers[:] = saved[0]
        library_logger.setLevel(saved[1])
        library_logger.propagate = saved[2]

    def test_configures_library_logger(self) -> None:
        """Test that the zviz logger is configured and the root is untouched."""
        root_handlers = list(logging.getLogger().handlers)
        logger = configure_logging("debug")
        assert logger is logging.getLogger("zviz")
        assert logger.level == logging.DEBUG
        assert logger.propagate is False
        assert len(logger.handlers) == 1
        assert logging.getLogger().handlers == root_handlers

    def test_unknown_level_defaults_to_info(self) -> None:
        """Test that unknown level names fall back to INFO."""
        assert configure_logging("chatty").level == logging.INFO

    def test_reconfigure_replaces_own_handlers(self) -> None:
        """Test that repeated calls do not stack handlers."""
        foreign = logging.NullHandler()
        logging.getLogger(LIBRARY_LOGGER_NAME).addHandler(foreign)

        configure_logging(logging.INFO)
        logger = configure_logging(logging.WARNING)

        assert foreign in logger.handlers
        assert len(logger.handlers) == 2
        logger.removeHandler(foreign)

    def test_records_from_builders_reach_stream(self) -> None:
        """Test that module loggers below zviz reach the configured stream."""
        stream = io.StringIO()
        configure_logging(logging.DEBUG, stream=stream, trace_mode=True)

        Table("grid").cell(2, 2)

        output = stream.getvalue()
        assert "grew to 3 columns x 3 rows" in output
        assert "[zviz.html.nodes]" in output

    def test_brief_format(self) -> None:
        """Test the default record format."""
        stream = io.StringIO()
        configure_logging(logging.DEBUG, stream=stream)
        Table("grid").cell(0, 0)
        assert stream.getvalue().startswith("DEBUG: Table 'grid' grew to 1 columns x 1 rows")

    def test_log_file(self, tmp_path: Path) -> None:
        """Test teeing log output to a file."""
        log_file = tmp_path / "zviz.log"
        logger = configure_logging(logging.DEBUG, log_file=str(log_file), stream=io.StringIO())
        assert len(logger.handlers) == 2

        Table("grid").cell(1, 0)
        for handler in logger.handlers:
            handler.flush()

        assert "grew to 2 columns x 1 rows" in log_file.read_text(encoding="utf-8")

    def test_unwritable_log_file_warns(self, tmp_path: Path) -> None:
        """Test that a bad log file path keeps console logging and warns."""
        stream = io.StringIO()
        logger = configure_logging(logging.INFO, log_file=str(tmp_path / "missing" / "zviz.log"), stream=stream)
        assert len(logger.handlers) == 1
        assert "Could not open log file" in stream.getvalue()
