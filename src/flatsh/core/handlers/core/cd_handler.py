# src/flatsh/core/handlers/core/cd_handler.py
import logging
import os

from flatsh.core.context.shell_context import ShellContext
from flatsh.core.utils.path_utils import PathUtils
from flatsh.model import Command

logger = logging.getLogger(__name__)


def handle_cd(command: Command, ctx: ShellContext) -> int:
    """
    Handles the 'cd' command.

    Expands a leading '~' to HOME and changes the process working directory.
    Failures are reported with the path as the user typed it and leave the
    working directory untouched.

    Args:
        command (Command): The resolved 'cd' command.
        ctx (ShellContext): Supplies HOME through its environment.

    Returns:
        int: 0 on success, 1 if the directory could not be changed.
    """
    raw_path = command.kind.action.path
    target = PathUtils.expand_home(raw_path, ctx.getenv("HOME"))

    try:
        os.chdir(target)
    except FileNotFoundError:
        print(f"cd: {raw_path}: No such file or directory")
        return 1
    except NotADirectoryError:
        print(f"{raw_path}: not a dir")
        return 1
    except (OSError, ValueError) as e:
        logger.warning("chdir to '%s' failed: %s", target, e)
        print(f"cd: {raw_path}: could not change directory")
        return 1

    logger.debug("Working directory is now '%s'", target)
    return 0
