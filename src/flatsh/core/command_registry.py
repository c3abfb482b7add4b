# src/flatsh/core/command_registry.py
import logging
from types import MappingProxyType
from typing import Callable, Mapping, Type, get_args

from flatsh.core.context.shell_context import ShellContext
from flatsh.core.handlers.core.cd_handler import handle_cd
from flatsh.core.handlers.core.echo_handler import handle_echo
from flatsh.core.handlers.core.exit_handler import handle_exit
from flatsh.core.handlers.core.pwd_handler import handle_pwd
from flatsh.core.handlers.core.type_handler import handle_type
from flatsh.core.resolver import BUILTIN_NAMES
from flatsh.model import (
    BuiltinAction,
    CdAction,
    Command,
    EchoAction,
    ExitAction,
    PwdAction,
    TypeAction,
)

logger = logging.getLogger(__name__)

Handler = Callable[[Command, ShellContext], int]

# The central builtin registry: one handler per action type.
CommandRegistry: Mapping[Type, Handler] = MappingProxyType({
    ExitAction: handle_exit,
    EchoAction: handle_echo,
    TypeAction: handle_type,
    PwdAction: handle_pwd,
    CdAction: handle_cd,
})


def _builtin_action_types() -> tuple:
    # BuiltinAction is Annotated[Union[...], Field(...)]
    union = get_args(BuiltinAction)[0]
    return get_args(union)


def verify_registry() -> None:
    """
    Checks that every builtin action has exactly one handler and that the
    resolver's name table covers the same set of builtins.

    Raises:
        RuntimeError: If a builtin was added on one side only.
    """
    action_types = set(_builtin_action_types())
    missing = action_types - set(CommandRegistry)
    extra = set(CommandRegistry) - action_types
    if missing or extra:
        raise RuntimeError(
            f"Builtin registry out of sync: missing={sorted(t.__name__ for t in missing)} "
            f"extra={sorted(t.__name__ for t in extra)}"
        )

    action_names = {t.model_fields["action"].default for t in action_types}
    if action_names != set(BUILTIN_NAMES):
        raise RuntimeError(
            f"Builtin names out of sync: actions={sorted(action_names)} parsers={sorted(BUILTIN_NAMES)}"
        )
    logger.debug("Builtin registry verified: %d handlers.", len(CommandRegistry))


def run_builtin(command: Command, ctx: ShellContext) -> int:
    """Dispatches a builtin command to its handler and returns the handler's status."""
    action = command.kind.action
    handler = CommandRegistry[type(action)]
    return int(handler(command, ctx))


verify_registry()
