# linux_deps/escalation.py
# -*- coding: utf-8 -*-
"""
Privilege escalation prefix resolution.
"""

import logging
from typing import Optional, Sequence

from linux_deps.probe import EnvironmentProbe

module_logger = logging.getLogger(__name__)

DEFAULT_ESCALATORS = ("sudo", "doas")


def resolve_privilege_escalator(
    probe: EnvironmentProbe,
    candidates: Sequence[str] = DEFAULT_ESCALATORS,
    current_logger: Optional[logging.Logger] = None,
) -> Optional[str]:
    """
    Returns the first escalation command available on the search path.

    None means no prefix is used; the caller is assumed to be privileged
    already (e.g. root inside a container).
    """
    logger_to_use = current_logger if current_logger else module_logger
    if not candidates:
        logger_to_use.info(
            "Privilege escalation disabled; running the package manager directly."
        )
        return None
    for candidate in candidates:
        if probe.is_executable_available(candidate):
            logger_to_use.debug(f"Using '{candidate}' for privilege escalation.")
            return candidate
    logger_to_use.info(
        f"None of {', '.join(candidates)} found; running the package manager without escalation."
    )
    return None
