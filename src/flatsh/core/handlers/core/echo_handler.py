# src/flatsh/core/handlers/core/echo_handler.py
from flatsh.core.context.shell_context import ShellContext
from flatsh.model import Command


def handle_echo(command: Command, _ctx: ShellContext) -> int:
    """
    Handles the 'echo' command.

    Prints the raw text that followed the command word, spacing intact,
    followed by one newline.
    """
    print(command.kind.action.text)
    return 0
