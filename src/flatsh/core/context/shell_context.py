# src/flatsh/core/context/shell_context.py
import logging
import os
from typing import Mapping, Optional

from flatsh.core.managers.config_manager import config_manager

logger = logging.getLogger(__name__)


class ShellContext:
    """
    Session state shared by every command: the environment the shell reads
    PATH and HOME from, the settings the handlers need and the status of the
    last command. Nothing that belongs to a single input line is kept here.
    """

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        self.environ: Mapping[str, str] = os.environ if environ is None else environ
        self.report_launch_failures: bool = bool(
            config_manager.get_nested("shell.report_launch_failures", True)
        )
        self.last_status: int = 0

    def getenv(self, key: str) -> Optional[str]:
        """Looks up an environment variable. Returns None if it is not set."""
        return self.environ.get(key)

    def __repr__(self) -> str:
        return f"<ShellContext last_status={self.last_status} vars_count={len(self.environ)}>"
