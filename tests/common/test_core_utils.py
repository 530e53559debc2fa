import logging
import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from common.core_utils import SymbolFormatter, resolve_log_level, setup_logging


@pytest.fixture
def mock_root_logger(mocker):
    """Fixture to mock the root logger."""
    mock_logger = MagicMock()
    mocker.patch("logging.getLogger", return_value=mock_logger)
    mock_logger.handlers = []
    return mock_logger


def test_setup_logging_with_file_and_console(mocker, mock_root_logger):
    """Test setup_logging when both log_file and log_to_console are provided."""
    mock_file_handler = mocker.patch("logging.FileHandler")
    mock_stream_handler = mocker.patch("logging.StreamHandler")
    mock_formatter = mocker.patch("common.core_utils.SymbolFormatter")
    mocker.patch("pathlib.Path.mkdir")

    log_file_path = str(Path("logs/test.log"))

    setup_logging(log_file=log_file_path, log_to_console=True)

    mock_file_handler.assert_called_once_with(Path(log_file_path), mode="a")
    mock_stream_handler.assert_called_once_with(sys.stderr)
    assert mock_formatter.call_count == 1
    mock_root_logger.addHandler.assert_any_call(mock_file_handler.return_value)
    mock_root_logger.addHandler.assert_any_call(mock_stream_handler.return_value)


def test_setup_logging_without_handlers(mocker, mock_root_logger):
    """Test setup_logging when no handlers are requested."""
    mock_stream_handler = mocker.patch("logging.StreamHandler")
    mocker.patch("common.core_utils.SymbolFormatter")

    setup_logging(log_to_console=False, log_file=None)

    mock_stream_handler.assert_called_once_with(sys.stderr)
    mock_root_logger.addHandler.assert_any_call(mock_stream_handler.return_value)


def test_setup_logging_with_custom_format(mocker, mock_root_logger):
    """Test setup_logging with a custom log format."""
    mock_formatter = mocker.patch("common.core_utils.SymbolFormatter")

    custom_format = "{log_prefix}%(asctime)s - %(levelname)s - %(message)s"
    custom_prefix = "[TestPrefix]"

    setup_logging(log_format_str=custom_format, log_prefix=custom_prefix)

    expected_format = custom_format.format(log_prefix=custom_prefix + " ")
    mock_formatter.assert_called_once_with(
        fmt=expected_format,
        datefmt="%Y-%m-%d %H:%M:%S",
        symbols=None,
    )


def test_setup_logging_prefix_without_placeholder(mocker, mock_root_logger):
    mock_formatter = mocker.patch("common.core_utils.SymbolFormatter")

    setup_logging(log_prefix="[DEV-BOOTSTRAP]")

    fmt = mock_formatter.call_args.kwargs["fmt"]
    assert fmt.startswith("[DEV-BOOTSTRAP] %(asctime)s")


def test_setup_logging_with_default_level(mock_root_logger):
    """Test setup_logging with default logging level."""
    setup_logging()

    mock_root_logger.setLevel.assert_called_once_with(logging.INFO)


def test_setup_logging_accepts_level_names(mock_root_logger):
    setup_logging(log_level="debug")

    mock_root_logger.setLevel.assert_called_once_with(logging.DEBUG)


def test_setup_logging_replaces_existing_handlers(mocker, mock_root_logger):
    mocker.patch("logging.StreamHandler")
    stale_handler = MagicMock()
    mock_root_logger.handlers = [stale_handler]

    setup_logging()

    mock_root_logger.removeHandler.assert_called_once_with(stale_handler)


def test_setup_logging_warning_on_file_handler_failure(
    capsys, mocker, mock_root_logger
):
    """Test setup_logging gracefully handles file handler creation failure."""
    mocker.patch("pathlib.Path.mkdir")
    mocker.patch("logging.FileHandler", side_effect=OSError("read-only"))

    setup_logging(log_file="invalid/path.log")
    captured = capsys.readouterr()

    assert (
        "Warning: Could not create file handler for log file" in captured.err
    )


@pytest.mark.parametrize(
    "level, expected",
    [
        ("DEBUG", logging.DEBUG),
        ("warning", logging.WARNING),
        (" error ", logging.ERROR),
        (logging.CRITICAL, logging.CRITICAL),
        ("nonsense", logging.INFO),
        (None, logging.INFO),
        ("", logging.INFO),
    ],
)
def test_resolve_log_level(level, expected):
    assert resolve_log_level(level) == expected


def _record(level: int, msg: str) -> logging.LogRecord:
    return logging.LogRecord(
        name="test",
        level=level,
        pathname="",
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None,
    )


def test_symbol_formatter():
    """Test that the SymbolFormatter adds the correct symbols."""
    formatter = SymbolFormatter(fmt="%(symbol)s %(message)s")

    assert formatter.format(_record(logging.DEBUG, "Debug")) == "🐛 Debug"
    assert formatter.format(_record(logging.INFO, "Info")) == "ℹ️ Info"
    assert formatter.format(_record(logging.WARNING, "Warn")) == "⚠️ Warn"
    assert formatter.format(_record(logging.ERROR, "Error")) == "❌ Error"
    assert formatter.format(_record(logging.CRITICAL, "Crit")) == "🔥 Crit"


def test_symbol_formatter_custom_symbols():
    formatter = SymbolFormatter(
        fmt="%(symbol)s %(message)s", symbols={"info": "[i]"}
    )

    assert formatter.format(_record(logging.INFO, "hello")) == "[i] hello"
    # Missing keys fall back to the built-in symbol.
    assert formatter.format(_record(logging.ERROR, "bad")) == "❌ bad"
