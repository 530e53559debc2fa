# dev_bootstrap/__init__.py
# -*- coding: utf-8 -*-
"""
Developer machine bootstrap.

Installs native dependencies or the process manager, then creates, migrates
and seeds the development database through their own command-line tools.
"""

from dev_bootstrap.orchestrator import run_dev_bootstrap

__all__ = ["run_dev_bootstrap"]
