# src/flatsh/core/handlers/core/exit_handler.py
import logging
import sys

from flatsh.core.context.shell_context import ShellContext
from flatsh.model import Command

logger = logging.getLogger(__name__)


def handle_exit(command: Command, _ctx: ShellContext) -> int:
    """Terminates the shell process with the requested status. Never returns."""
    code = command.kind.action.code
    logger.info("exit requested with status %d", code)
    sys.exit(code)
