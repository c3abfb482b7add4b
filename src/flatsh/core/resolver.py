# src/flatsh/core/resolver.py
from __future__ import annotations

import logging
import os
import re
from types import MappingProxyType
from typing import Callable, Iterator, Mapping, Optional

from flatsh.core.errors import CommandConstructionError, FailedParseArgs, MissingArg, NoCmd, TooManyArgs
from flatsh.core.services.path_search_service import search
from flatsh.core.tokenizer import Token, Tokenizer
from flatsh.model import (
    Builtin,
    CdAction,
    Command,
    EchoAction,
    ExitAction,
    PwdAction,
    TypeAction,
)

logger = logging.getLogger(__name__)

_EXIT_CODE_PATTERN = re.compile(r"[0-9]+")
_MAX_EXIT_CODE = 255

# (tokenizer, command token, remaining-token iterator, environ) -> Command
BuiltinParser = Callable[[Tokenizer, Token, Iterator[Token], Mapping[str, str]], Command]


def _builtin(name: str, action) -> Command:
    return Command(name=name, kind=Builtin(action=action))


def _parse_exit(tokens: Tokenizer, cmd: Token, rest: Iterator[Token], _environ: Mapping[str, str]) -> Command:
    code_tok = next(rest, None)
    if code_tok is None:
        return _builtin(cmd.text, ExitAction(code=0))

    if not _EXIT_CODE_PATTERN.fullmatch(code_tok.text):
        raise FailedParseArgs(tokens.line)
    code = int(code_tok.text)
    if code > _MAX_EXIT_CODE:
        raise FailedParseArgs(tokens.line)

    if next(rest, None) is not None:
        raise TooManyArgs(tokens.line)
    return _builtin(cmd.text, ExitAction(code=code))


def _parse_echo(tokens: Tokenizer, cmd: Token, _rest: Iterator[Token], _environ: Mapping[str, str]) -> Command:
    return _builtin(cmd.text, EchoAction(text=tokens.remainder(cmd)))


def _parse_type(tokens: Tokenizer, cmd: Token, rest: Iterator[Token], environ: Mapping[str, str]) -> Command:
    target_tok = next(rest, None)
    if target_tok is None:
        raise MissingArg(tokens.line)
    if next(rest, None) is not None:
        raise TooManyArgs(tokens.line)

    # 'type type' would otherwise resolve itself forever.
    if target_tok.text == "type":
        return _builtin(cmd.text, TypeAction(target=None))

    nested = resolve(target_tok.text, environ)
    return _builtin(cmd.text, TypeAction(target=nested))


def _parse_pwd(tokens: Tokenizer, cmd: Token, rest: Iterator[Token], _environ: Mapping[str, str]) -> Command:
    if next(rest, None) is not None:
        raise TooManyArgs(tokens.line)
    return _builtin(cmd.text, PwdAction())


def _parse_cd(tokens: Tokenizer, cmd: Token, _rest: Iterator[Token], _environ: Mapping[str, str]) -> Command:
    return _builtin(cmd.text, CdAction(path=tokens.remainder(cmd)))


# Built once; read-only for the lifetime of the process.
BUILTIN_PARSERS: Mapping[str, BuiltinParser] = MappingProxyType({
    "exit": _parse_exit,
    "echo": _parse_echo,
    "type": _parse_type,
    "pwd": _parse_pwd,
    "cd": _parse_cd,
})
BUILTIN_NAMES = frozenset(BUILTIN_PARSERS)


def is_builtin(name: str) -> bool:
    """Case-sensitive, exact membership test against the builtin table."""
    return name in BUILTIN_PARSERS


def resolve(line: str, environ: Optional[Mapping[str, str]] = None) -> Command:
    """
    Classifies one input line as a builtin, an external program or NotFound.

    Args:
        line (str): The raw input line (without its trailing newline).
        environ (Optional[Mapping[str, str]]): Where PATH is read from.
            Defaults to the process environment.

    Returns:
        Command: The resolved command tree for this line.

    Raises:
        NoCmd: The line holds no token.
        FailedParseArgs, TooManyArgs, MissingArg: Invalid builtin arguments.
        CommandConstructionError: Memory ran out while building the command.
    """
    env = os.environ if environ is None else environ
    tokens = Tokenizer(line)
    rest = iter(tokens)

    cmd = next(rest, None)
    if cmd is None:
        raise NoCmd(line)

    try:
        if is_builtin(cmd.text):
            return BUILTIN_PARSERS[cmd.text](tokens, cmd, rest, env)

        args = [tok.text for tok in rest]
        return search(cmd.text, env.get("PATH"), args)
    except MemoryError as e:
        raise CommandConstructionError(line, e) from e
