# src/flatsh/core/handlers/external_handler.py
import logging
import signal
import subprocess
import sys

from flatsh.core.context.shell_context import ShellContext
from flatsh.model import Command

logger = logging.getLogger(__name__)

# Status for a program that was found but could not be started.
LAUNCH_FAILED = 126


def handle_external(command: Command, ctx: ShellContext) -> int:
    """
    Runs a resolved external program and waits for it to finish.

    The child inherits stdin/stdout/stderr. argv[0] is the name the user
    typed; the program itself is started from its resolved path.

    Returns:
        int: The child's exit status, 128 + N when killed by signal N,
             or 126 when it could not be launched.
    """
    ext = command.kind
    # Anything we printed must reach the terminal before the child writes.
    sys.stdout.flush()
    try:
        proc = subprocess.run(
            list(ext.argv),
            executable=ext.resolved_path,
            env=dict(ctx.environ),
            check=False,
        )
    except (OSError, ValueError) as e:
        logger.warning("Failed to launch '%s' (%s): %s", command.name, ext.resolved_path, e)
        if ctx.report_launch_failures:
            print(f"{command.name}: failed to launch")
        return LAUNCH_FAILED

    code = proc.returncode
    if code == 0:
        return 0

    if code < 0:
        try:
            sig_name = signal.Signals(-code).name
        except ValueError:
            sig_name = str(-code)
        logger.info("'%s' was terminated by signal %s", command.name, sig_name)
        code = 128 - code
    else:
        logger.debug("'%s' exited with status %d", command.name, code)

    print(f"{command.name}: exited abnormally")
    return code
