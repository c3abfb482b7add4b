from __future__ import annotations

import logging
import sys
from typing import Iterable, Iterator, Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.history import InMemoryHistory

from flatsh.core.context.shell_context import ShellContext
from flatsh.core.core import execute_line
from flatsh.core.errors import CommandConstructionError
from flatsh.core.managers.config_manager import config_manager
from flatsh.core.utils.configure_logging import configure_logger

logger = logging.getLogger(__name__)

# Status of the shell when it dies on a fatal error.
FATAL_STATUS = 1


def _prompt_lines(session: PromptSession, prompt_text: str) -> Iterator[str]:
    """Yields lines typed at an interactive terminal until EOF or Ctrl-C."""
    while True:
        try:
            yield session.prompt(prompt_text)
        except (EOFError, KeyboardInterrupt):
            return


def _accept_raw_bytes(stream) -> None:
    """Lets bytes that are not valid in the stream's encoding pass through as surrogates."""
    if hasattr(stream, "reconfigure"):
        stream.reconfigure(errors="surrogateescape")


def _stdin_lines(prompt_text: str) -> Iterator[str]:
    """Yields lines from a non-interactive stdin (a pipe or a file)."""
    _accept_raw_bytes(sys.stdin)
    while True:
        sys.stdout.write(prompt_text)
        sys.stdout.flush()
        line = sys.stdin.readline()
        if not line:
            return
        yield line


def run_shell(lines: Iterable[str], ctx: Optional[ShellContext] = None) -> int:
    """
    The read-eval-print loop: executes each line in order, one at a time.

    Args:
        lines (Iterable[str]): Input lines; trailing newlines are stripped.
        ctx (Optional[ShellContext]): Session state. A fresh one is made if omitted.

    Returns:
        int: 0 when input ends, or the fatal status if the shell had to stop.
             The 'exit' builtin ends the process through SystemExit instead.
    """
    ctx = ctx or ShellContext()
    max_len = config_manager.get_nested("prompt.max_line_length")

    for raw in lines:
        line = raw.rstrip("\r\n")
        if max_len is not None and len(line.encode("utf-8", "surrogateescape")) > int(max_len):
            print("input line too long")
            continue

        try:
            execute_line(line, ctx)
        except CommandConstructionError as e:
            logger.critical("Could not build command for %r: %s", e.line, e.cause)
            print(str(e))
            return FATAL_STATUS

    return 0


def start_shell() -> int:
    """Starts the shell on the process's stdin/stdout."""
    configure_logger(
        config_manager.get_nested("debug.level", "WARNING"),
        config_manager.get_nested("debug.modules", {}),
    )
    # Echoed input may carry undecodable bytes; write them back unchanged.
    _accept_raw_bytes(sys.stdout)
    prompt_text = config_manager.get_nested("prompt.text", "$ ")
    ctx = ShellContext()

    if sys.stdin.isatty():
        session = PromptSession(history=InMemoryHistory())
        lines = _prompt_lines(session, prompt_text)
    else:
        lines = _stdin_lines(prompt_text)

    logger.info("Shell startup; interactive=%s", sys.stdin.isatty())
    return run_shell(lines, ctx)


def main(argv: list[str] | None = None) -> int:
    """Entrypoint for running the shell from the command line."""
    return start_shell()


if __name__ == "__main__":
    sys.exit(main())
