# common/orchestrator.py
# -*- coding: utf-8 -*-
"""
Centralized orchestrator for managing and executing sequences of tasks.
"""

import logging
from typing import Any, Callable, Dict, List, Optional


class OrchestrationError(Exception):
    """Raised when a fatal task fails and the orchestration halts."""

    def __init__(self, task_name: str, exit_code: int, cause: BaseException):
        super().__init__(f"Task '{task_name}' failed: {cause}")
        self.task_name = task_name
        self.exit_code = exit_code
        self.cause = cause


def exit_code_for(exc: BaseException) -> int:
    """Exit status to report for a failed task: the child's return code if it had one."""
    if isinstance(exc, FileNotFoundError):
        return 127
    returncode = getattr(exc, "returncode", None)
    if isinstance(returncode, int) and returncode > 0:
        return returncode
    if isinstance(returncode, int) and returncode < 0:
        # Killed by a signal, reported the way a shell would.
        return 128 - returncode
    return 1


class Orchestrator:
    """A centralized orchestrator to run a series of defined tasks."""

    def __init__(
        self,
        app_settings: Any,
        orchestrator_logger: Optional[logging.Logger] = None,
    ):
        """
        Initializes the Orchestrator.

        Args:
            app_settings: The application settings object.
            orchestrator_logger: An optional logger instance.
        """
        self.app_settings = app_settings
        self.logger = orchestrator_logger or logging.getLogger(__name__)
        self.tasks: List[Dict[str, Any]] = []
        # Shared context for tasks to pass state between each other
        self.context: Dict[str, Any] = {}

    def add_task(
        self,
        name: str,
        func: Callable,
        args: Optional[List[Any]] = None,
        kwargs: Optional[Dict[str, Any]] = None,
        fatal: bool = True,
    ):
        """
        Adds a task to the execution list.

        Args:
            name: A human-readable name for the task.
            func: The function to execute for this task.
            args: A list of positional arguments to pass to the function.
            kwargs: A dictionary of keyword arguments to pass to the function.
            fatal: If True, a failure in this task will halt the entire orchestration.
        """
        self.tasks.append({
            "name": name,
            "func": func,
            "args": args or [],
            "kwargs": kwargs or {},
            "fatal": fatal,
        })
        self.logger.debug(f"Task '{name}' added to the queue.")

    def run(self) -> bool:
        """
        Executes all added tasks in sequence.

        Returns:
            True if every task completed successfully, False if a non-fatal
            task failed.

        Raises:
            OrchestrationError: A fatal task failed; later tasks were not run.
        """
        self.logger.info("Orchestration started.")
        all_succeeded = True
        for i, task in enumerate(self.tasks):
            task_name = task["name"]
            self.logger.info(
                f"--- Stage {i + 1}: Running task '{task_name}' ---"
            )

            try:
                # Pass the shared context to every function
                task["kwargs"]["context"] = self.context
                task["kwargs"]["app_settings"] = self.app_settings

                result = task["func"](*task["args"], **task["kwargs"])

                self.context[f"{task_name}_result"] = result

                self.logger.info(
                    f"✅ Task '{task_name}' completed successfully."
                )

            except Exception as e:
                self.logger.critical(f"🔥 Task '{task_name}' failed: {e}")
                if task.get("fatal", True):
                    self.logger.error(
                        "A fatal error occurred. Halting orchestration."
                    )
                    raise OrchestrationError(
                        task_name, exit_code_for(e), e
                    ) from e
                self.logger.warning(
                    f"Task '{task_name}' was non-fatal. Continuing orchestration."
                )
                all_succeeded = False

        if all_succeeded:
            self.logger.info("✨ Orchestration finished successfully.")
        else:
            self.logger.warning(
                "Orchestration finished with non-fatal task failures."
            )
        return all_succeeded
