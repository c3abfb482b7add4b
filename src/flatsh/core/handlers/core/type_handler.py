# src/flatsh/core/handlers/core/type_handler.py
from flatsh.core.context.shell_context import ShellContext
from flatsh.model import Builtin, Command, External, NotFound


def describe(target: Command) -> str:
    """Returns the one-line 'type' description of a resolved command."""
    kind = target.kind
    if isinstance(kind, Builtin):
        return f"{target.name} is a shell builtin"
    if isinstance(kind, External):
        return f"{target.name} is {kind.resolved_path}"
    if isinstance(kind, NotFound):
        return f"{target.name}: not found"
    raise TypeError(f"Unhandled command kind: {type(kind).__name__}")


def handle_type(command: Command, _ctx: ShellContext) -> int:
    """
    Handles the 'type' command.

    Reports how the argument would be interpreted: builtin, the resolved
    path of an external program, or not found.

    Returns:
        int: 1 when the target could not be found, 0 otherwise.
    """
    target = command.kind.action.target
    if target is None:
        # 'type type'
        print("type is a shell builtin")
        return 0

    print(describe(target))
    return 1 if isinstance(target.kind, NotFound) else 0
