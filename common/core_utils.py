#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Core utility functions for the project.

This module provides the logging setup shared by the bootstrap entry points.
"""

import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional, Union

from setup.config_models import SYMBOLS_DEFAULT

module_logger = logging.getLogger(__name__)

DETAILED_LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(module)s.%(funcName)s:%(lineno)d - %(message)s"
SIMPLE_LOG_FORMAT_WITH_PREFIX_PLACEHOLDER = "{log_prefix}%(asctime)s - %(levelname)s - %(symbol)s %(name)s - %(message)s"
SIMPLE_LOG_FORMAT_NO_PREFIX = (
    "%(asctime)s - %(levelname)s - %(symbol)s %(name)s - %(message)s"
)


class SymbolFormatter(logging.Formatter):
    """
    A custom formatter that adds symbols to log messages based on the log level.
    """

    def __init__(
        self,
        fmt=None,
        datefmt=None,
        style="%",
        validate=True,
        symbols: Optional[Dict[str, str]] = None,
    ):
        super().__init__(fmt, datefmt, style, validate)
        self.symbols = symbols or SYMBOLS_DEFAULT

    def format(self, record):
        if record.levelno == logging.DEBUG:
            record.symbol = self.symbols.get("debug", "🐛")
        elif record.levelno == logging.INFO:
            record.symbol = self.symbols.get("info", "ℹ️")
        elif record.levelno == logging.WARNING:
            record.symbol = self.symbols.get("warning", "⚠️")
        elif record.levelno == logging.ERROR:
            record.symbol = self.symbols.get("error", "❌")
        elif record.levelno == logging.CRITICAL:
            record.symbol = self.symbols.get("critical", "🔥")
        else:
            record.symbol = ""

        return super().format(record)


def resolve_log_level(level: Union[int, str, None]) -> int:
    """Maps a level name such as "debug" to its numeric value, falling back to INFO."""
    if isinstance(level, int):
        return level
    if not level:
        return logging.INFO
    numeric_level = getattr(logging, str(level).strip().upper(), None)
    if not isinstance(numeric_level, int):
        return logging.INFO
    return numeric_level


def setup_logging(
    log_level: Union[int, str] = logging.INFO,
    log_file: Optional[str] = None,
    log_to_console: bool = True,
    log_format_str: Optional[str] = None,
    log_prefix: Optional[str] = None,
    symbols: Optional[Dict[str, str]] = None,
) -> None:
    """
    Configures logging for an entry point.

    Logging can be directed to a file, the console, or both. The format can be
    customised and optionally prefixed; level symbols are injected by
    SymbolFormatter.

    Parameters:
    log_level: Union[int, str]
        The logging level to configure. Defaults to logging.INFO.
    log_file: Optional[str]
        The file path for the log file. If specified, logs will be appended to this file.
    log_to_console: bool
        Whether to log to the console (stderr). Defaults to True.
    log_format_str: Optional[str]
        A custom log format string. May contain a ``{log_prefix}`` placeholder.
    log_prefix: Optional[str]
        An optional string to prefix log messages with.
    symbols: Optional[Dict[str, str]]
        Level symbols for SymbolFormatter. Defaults to SYMBOLS_DEFAULT.

    Returns:
    None
    """
    numeric_level = resolve_log_level(log_level)
    handlers: List[logging.Handler] = []
    if log_file:
        try:
            log_file_path = Path(log_file)
            log_file_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_file_path, mode="a")
            handlers.append(file_handler)
        except OSError as e:
            print(
                f"Warning: Could not create file handler for log file {log_file}: {e}",
                file=sys.stderr,
            )

    if log_to_console:
        # Package managers write their own progress to stdout.
        console_handler = logging.StreamHandler(sys.stderr)
        handlers.append(console_handler)

    if not handlers:  # pragma: no cover
        handlers.append(logging.StreamHandler(sys.stderr))

    final_format_str: str
    actual_prefix = (
        (log_prefix.strip() + " ")
        if log_prefix and log_prefix.strip()
        else ""
    )

    if log_format_str:
        if "{log_prefix}" in log_format_str:
            final_format_str = log_format_str.format(log_prefix=actual_prefix)
        else:
            final_format_str = actual_prefix + log_format_str
    else:
        if actual_prefix:
            final_format_str = (
                SIMPLE_LOG_FORMAT_WITH_PREFIX_PLACEHOLDER.format(
                    log_prefix=actual_prefix
                )
            )
        else:
            final_format_str = SIMPLE_LOG_FORMAT_NO_PREFIX

    formatter = SymbolFormatter(
        fmt=final_format_str,
        datefmt="%Y-%m-%d %H:%M:%S",
        symbols=symbols,
    )

    for handler in handlers:
        handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    for handler in handlers:
        root_logger.addHandler(handler)

    module_logger.debug(
        f"Logging configured. Level: {logging.getLevelName(numeric_level)}. Format: '{final_format_str}'"
    )
