# src/flatsh/core/core.py
from __future__ import annotations

import logging

from flatsh.core.command_registry import run_builtin
from flatsh.core.context.shell_context import ShellContext
from flatsh.core.handlers.external_handler import handle_external
from flatsh.core.resolver import resolve
from flatsh.core.xngine import ExecuteEngine

logger = logging.getLogger(__name__)


def _post_refresh(ctx: ShellContext) -> None:
    """Callback after every executed command."""
    logger.debug("Command finished with status %d", ctx.last_status)


# The engine wired to the real resolver and handlers.
XNGINE = ExecuteEngine(
    resolve_fn=resolve,
    builtin_runner=run_builtin,
    external_runner=handle_external,
    post_refresh=_post_refresh,
    logger=logger,
)

execute_line = XNGINE.execute_line
execute = XNGINE.execute

__all__ = ["execute", "execute_line", "resolve", "XNGINE"]
