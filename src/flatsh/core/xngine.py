from __future__ import annotations

import logging
from typing import Callable, Mapping, Optional

from flatsh.core.context.shell_context import ShellContext
from flatsh.core.errors import NoCmd, ParseError
from flatsh.model import Builtin, Command, External, NotFound

# Status returned when a name could not be resolved.
NOT_FOUND = 127


class ExecuteEngine:
    """
    Core engine: resolves one input line into a Command and dispatches it
    to the builtin registry or the external runner.
    """

    def __init__(
            self,
            *,
            resolve_fn: Callable[[str, Optional[Mapping[str, str]]], Command],
            builtin_runner: Callable[[Command, ShellContext], int],
            external_runner: Callable[[Command, ShellContext], int],
            post_refresh: Optional[Callable[[ShellContext], None]] = None,
            logger: Optional[logging.Logger] = None,
    ) -> None:
        self._resolve = resolve_fn
        self._run_builtin = builtin_runner
        self._run_external = external_runner
        self._post_refresh = post_refresh or (lambda ctx: None)
        self._log = logger or logging.getLogger(__name__)

    def execute_line(self, line: str, context: Optional[ShellContext] = None) -> int:
        """
        Resolves and executes a single line.

        Parse errors are reported once and yield status 2; a blank line is
        silently ignored. CommandConstructionError and SystemExit (from the
        exit builtin) propagate to the caller.
        """
        ctx = context or ShellContext()
        try:
            command = self._resolve(line, ctx.environ)
        except NoCmd:
            return ctx.last_status
        except ParseError as e:
            self._log.debug("Parse error %s for line %r", type(e).__name__, line)
            print(e.message)
            ctx.last_status = 2
            return ctx.last_status

        try:
            ctx.last_status = self.execute(command, ctx)
        finally:
            self._post_refresh(ctx)
        return ctx.last_status

    def execute(self, command: Command, ctx: ShellContext) -> int:
        """Runs an already resolved command."""
        kind = command.kind
        if isinstance(kind, Builtin):
            return self._run_builtin(command, ctx)
        if isinstance(kind, External):
            return self._run_external(command, ctx)
        if isinstance(kind, NotFound):
            print(f"{command.name}: not found")
            return NOT_FOUND
        raise TypeError(f"Unhandled command kind: {type(kind).__name__}")
