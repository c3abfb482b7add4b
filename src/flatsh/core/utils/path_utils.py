# src/flatsh/core/utils/path_utils.py
import logging
import os
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


class PathUtils:
    """
    A central utility for retrieving the shell's own paths and for the
    path handling the builtins need.
    """

    # --- Package paths ---

    @staticmethod
    def get_shell_package_root() -> Path:
        """Returns the directory of the installed 'flatsh' package."""
        return Path(__file__).resolve().parent.parent.parent

    @staticmethod
    def get_settings_file() -> Path:
        return PathUtils.get_shell_package_root() / "settings.json"

    # --- Working directory helpers ---

    @staticmethod
    def get_canonical_cwd() -> str:
        """Returns the current working directory with every symlink resolved."""
        return os.path.realpath(os.getcwd())

    @staticmethod
    def expand_home(path: str, home: Optional[str]) -> str:
        """
        Replaces a leading '~' with the value of HOME.

        Only the first character is replaced ('~/src' -> '<HOME>/src').
        When `home` is None the literal '~' is kept. An empty path means '~'.
        """
        if not path:
            path = "~"
        if not path.startswith("~"):
            return path
        if home is None:
            logger.debug("HOME is not set; keeping literal '~' in '%s'.", path)
            home = "~"
        return home + path[1:]
