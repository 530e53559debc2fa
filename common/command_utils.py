# common/command_utils.py
# -*- coding: utf-8 -*-
"""
Utilities for executing external commands and logging their output.
"""

import logging
import shutil
import subprocess
from typing import Dict, List, Optional, Sequence

from setup.config_models import SYMBOLS_DEFAULT, AppSettings

module_logger = logging.getLogger(__name__)


def get_symbols(app_settings: Optional[AppSettings]) -> Dict[str, str]:
    """Returns the logging symbols from the settings, or the defaults."""
    if app_settings and app_settings.symbols:
        return app_settings.symbols
    return SYMBOLS_DEFAULT


def log_bootstrap(
    message: str,
    level: str = "info",
    current_logger: Optional[logging.Logger] = None,
    exc_info: bool = False,
) -> None:
    """
    Logs a message at the named level.

    Args:
        message (str): The log message to be recorded.
        level (str): The severity level of the log message. Defaults to "info". Common options
            include "debug", "info", "warning", "error", and "critical".
        current_logger (Optional[logging.Logger]): A logger instance to use for logging. If not provided,
            a module-level logger will be used.
        exc_info (bool): Indicator to include exception details in the log. By default, this is set to False.
    """
    effective_logger = current_logger if current_logger else module_logger

    if level == "warning":
        effective_logger.warning(message, exc_info=exc_info)
    elif level == "error":
        effective_logger.error(message, exc_info=exc_info)
    elif level == "critical":
        effective_logger.critical(message, exc_info=exc_info)
    elif level == "debug":
        effective_logger.debug(message, exc_info=exc_info)
    else:
        effective_logger.info(message, exc_info=exc_info)


def format_command(command: Sequence[str]) -> str:
    """Renders an argv list the way a shell user would type it."""
    return subprocess.list2cmdline(list(command))


def run_command(
    command: Sequence[str],
    app_settings: Optional[AppSettings],
    check: bool = True,
    capture_output: bool = False,
    current_logger: Optional[logging.Logger] = None,
    cwd: Optional[str] = None,
    env: Optional[Dict[str, str]] = None,
) -> subprocess.CompletedProcess:
    """
    Executes an external command and logs the process details and results.

    The command's standard streams are inherited unless ``capture_output`` is
    set, so interactive tools keep their own prompts and progress output. No
    timeout is applied.

    Args:
        command (Sequence[str]): The argv of the command to execute.
        app_settings (Optional[AppSettings]): Settings providing logging symbols.
        check (bool): Whether to raise a CalledProcessError when a non-zero exit code is returned.
            Defaults to True.
        capture_output (bool): Whether to capture standard output and standard error. Defaults to False.
        current_logger (Optional[logging.Logger]): A logger to use for logging details.
        cwd (Optional[str]): The working directory to execute the command in.
        env (Optional[Dict[str, str]]): Environment for the command. Defaults to the inherited environment.

    Returns:
        subprocess.CompletedProcess: The completed process instance.

    Raises:
        subprocess.CalledProcessError: Raised if the process returns a non-zero exit code and the check
            parameter is set to True.
        FileNotFoundError: Raised if the specified command is not found on the system.
    """
    effective_logger = current_logger if current_logger else module_logger
    symbols = get_symbols(app_settings)
    command_to_run: List[str] = list(command)
    command_to_log_str = format_command(command_to_run)

    log_bootstrap(
        f"{symbols.get('gear', '⚙️')} Executing: {command_to_log_str} {f'(in {cwd})' if cwd else ''}".rstrip(),
        "info",
        effective_logger,
    )
    try:
        result = subprocess.run(
            command_to_run,
            check=check,
            capture_output=capture_output,
            text=True,
            cwd=cwd,
            env=env,
        )
        if capture_output:
            if result.stdout and result.stdout.strip():
                log_bootstrap(
                    f"   stdout: {result.stdout.strip()}",
                    "debug",
                    effective_logger,
                )
            if result.stderr and result.stderr.strip():
                log_bootstrap(
                    f"   stderr: {result.stderr.strip()}",
                    "debug",
                    effective_logger,
                )
        return result
    except subprocess.CalledProcessError as e:
        log_bootstrap(
            f"{symbols.get('error', '❌')} Command `{command_to_log_str}` failed (rc {e.returncode}).",
            "error",
            effective_logger,
        )
        if e.stderr and hasattr(e.stderr, "strip") and e.stderr.strip():
            log_bootstrap(
                f"   stderr: {e.stderr.strip()}",
                "error",
                effective_logger,
            )
        raise
    except FileNotFoundError as e:
        log_bootstrap(
            f"{symbols.get('error', '❌')} Command not found: {e.filename or command_to_run[0]}. Ensure it's installed and in PATH.",
            "error",
            effective_logger,
        )
        raise


def command_exists(command_name: str, path: Optional[str] = None) -> bool:
    """
    Check if a command exists in the system's PATH.

    Parameters:
        command_name (str): The name of the command to check for existence.
        path (Optional[str]): Search path to use instead of $PATH.

    Returns:
        bool: True if the command is found, False otherwise.
    """
    return shutil.which(command_name, path=path) is not None
