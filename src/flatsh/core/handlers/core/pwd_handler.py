# src/flatsh/core/handlers/core/pwd_handler.py
from flatsh.core.context.shell_context import ShellContext
from flatsh.core.utils.path_utils import PathUtils
from flatsh.model import Command


def handle_pwd(_command: Command, _ctx: ShellContext) -> int:
    """Prints the canonical absolute path of the working directory."""
    try:
        print(PathUtils.get_canonical_cwd())
    except OSError as e:
        # The working directory was removed from under us.
        print(f"pwd: {e.strerror or e}")
        return 1
    return 0
