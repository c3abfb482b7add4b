import logging
import sys
from typing import Mapping, Optional, Union

from tqdm import tqdm

LOG_FORMAT = "%(asctime)s - %(levelname)s - [%(name)s:%(lineno)d] - %(message)s"

LevelSpec = Union[str, int]


class LogWithTqdm(logging.Handler):
    """
    Sends records through `tqdm.write()` on stderr, so log output never
    tears through the prompt line or command output on stdout.
    """
    def emit(self, record):
        try:
            msg = self.format(record)
            tqdm.write(msg, file=sys.stderr)
            self.flush()
        except Exception:
            self.handleError(record)


def _to_level(level: LevelSpec, fallback: int) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), fallback)
    return level


def configure_logger(
        general_level: LevelSpec = 'WARNING',
        module_specific_levels: Optional[Mapping[str, LevelSpec]] = None,
) -> logging.Handler:
    """
    Installs a single tqdm-aware handler on the root logger.

    Args:
        general_level: Root level, as a name ('DEBUG') or a number.
        module_specific_levels: Per-logger overrides, e.g. {'flatsh.core.resolver': 'DEBUG'}.

    Returns:
        logging.Handler: The handler that was installed.
    """
    handler = LogWithTqdm()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root_logger = logging.getLogger()
    root_logger.setLevel(_to_level(general_level, logging.WARNING))
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    for name, level in (module_specific_levels or {}).items():
        logging.getLogger(name).setLevel(_to_level(level, logging.WARNING))

    return handler
