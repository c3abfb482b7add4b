# src/flatsh/core/services/path_search_service.py
import logging
import os
import stat
from typing import Optional, Sequence

from flatsh.model import Command, External, NotFound

logger = logging.getLogger(__name__)

# Owner, group or other execute bit.
EXEC_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


def is_executable(candidate: str) -> bool:
    """
    Checks whether a path is a regular file with any execute bit set.

    Every stat failure (missing file, permission denied, dangling link,
    a NUL byte in the name) simply means "not a match".
    """
    try:
        st = os.stat(candidate)
    except OSError as e:
        logger.debug("Skipping '%s': %s", candidate, e.strerror or e)
        return False
    except ValueError as e:
        logger.debug("Skipping %r: %s", candidate, e)
        return False

    if not stat.S_ISREG(st.st_mode):
        logger.debug("Skipping '%s': not a regular file", candidate)
        return False

    if st.st_mode & EXEC_BITS == 0:
        logger.debug("Skipping '%s': no execute permission", candidate)
        return False

    return True


def search(program_name: str, search_path: Optional[str], args: Sequence[str] = ()) -> Command:
    """
    Looks up a program in a colon-separated list of directories.

    Directories are tried left to right and the first executable match wins.

    Args:
        program_name (str): The command name as the user typed it.
        search_path (Optional[str]): The PATH value, or None when unset.
        args (Sequence[str]): Remaining tokens, forwarded as argv[1:].

    Returns:
        Command: An External command for the first match, otherwise NotFound.
    """
    if search_path is None:
        logger.debug("PATH is not set; '%s' cannot be resolved.", program_name)
        return Command(name=program_name, kind=NotFound())

    for directory in search_path.split(":"):
        if not directory:
            continue

        candidate = os.path.join(directory, program_name)
        if not os.path.isabs(candidate):
            candidate = os.path.abspath(candidate)

        if is_executable(candidate):
            logger.debug("Resolved '%s' to '%s'", program_name, candidate)
            return Command(
                name=program_name,
                kind=External(resolved_path=candidate, argv=(program_name, *args)),
            )

    logger.debug("'%s' not found in any PATH directory.", program_name)
    return Command(name=program_name, kind=NotFound())
