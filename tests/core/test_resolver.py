# tests/core/test_resolver.py
import pytest

from flatsh.core.errors import FailedParseArgs, MissingArg, NoCmd, TooManyArgs
from flatsh.core.resolver import BUILTIN_NAMES, is_builtin, resolve
from flatsh.model import (
    Builtin,
    CdAction,
    EchoAction,
    ExitAction,
    External,
    NotFound,
    PwdAction,
    TypeAction,
)


@pytest.fixture
def environ(tmp_path):
    """An environment whose PATH holds a single executable 'tool'."""
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    tool = bin_dir / "tool"
    tool.write_text("#!/bin/sh\nexit 0\n")
    tool.chmod(0o755)
    return {"PATH": str(bin_dir), "HOME": str(tmp_path)}


def test_builtin_table():
    assert BUILTIN_NAMES == {"exit", "echo", "type", "pwd", "cd"}
    assert is_builtin("echo")
    assert not is_builtin("ECHO")
    assert not is_builtin("ech")


@pytest.mark.parametrize("line", ["", " ", "      "])
def test_blank_line_is_no_cmd(line, environ):
    with pytest.raises(NoCmd):
        resolve(line, environ)


# --- exit ---

def test_exit_defaults_to_zero(environ):
    assert resolve("exit", environ) == resolve("exit 0", environ)
    cmd = resolve("exit", environ)
    assert cmd.kind.action == ExitAction(code=0)


def test_exit_with_code(environ):
    assert resolve("exit 255", environ).kind.action.code == 255
    assert resolve("exit   7  ", environ).kind.action.code == 7


@pytest.mark.parametrize("line", ["exit 256", "exit abc", "exit -1", "exit +1", "exit 1.5", "exit abc 1"])
def test_exit_rejects_bad_codes(line, environ):
    with pytest.raises(FailedParseArgs) as exc:
        resolve(line, environ)
    assert exc.value.message == f"{line}: bad arguments"


def test_exit_rejects_extra_arguments(environ):
    with pytest.raises(TooManyArgs) as exc:
        resolve("exit 0 1", environ)
    assert exc.value.message == "Too many arguments: exit 0 1"


# --- echo ---

def test_echo_preserves_interior_spacing(environ):
    cmd = resolve("echo   hello   world", environ)
    assert cmd.name == "echo"
    assert cmd.kind.action == EchoAction(text="hello   world")


def test_echo_without_text(environ):
    assert resolve("echo", environ).kind.action.text == ""
    assert resolve("echo    ", environ).kind.action.text == ""


# --- type ---

def test_type_type_short_circuits(environ):
    cmd = resolve("type type", environ)
    assert cmd.kind.action == TypeAction(target=None)


def test_type_of_builtin(environ):
    target = resolve("type echo", environ).kind.action.target
    assert target.name == "echo"
    assert isinstance(target.kind, Builtin)


def test_type_of_external_matches_direct_resolution(environ):
    direct = resolve("tool", environ)
    via_type = resolve("type tool", environ).kind.action.target
    assert isinstance(direct.kind, External)
    assert via_type.kind.resolved_path == direct.kind.resolved_path


def test_type_of_unknown(environ):
    target = resolve("type nosuchprogram", environ).kind.action.target
    assert target.name == "nosuchprogram"
    assert isinstance(target.kind, NotFound)


def test_type_argument_count(environ):
    with pytest.raises(MissingArg) as exc:
        resolve("type", environ)
    assert exc.value.message == "Missing argument in command: type"
    with pytest.raises(TooManyArgs):
        resolve("type echo exit", environ)


# --- pwd / cd ---

def test_pwd(environ):
    assert resolve("pwd", environ).kind.action == PwdAction()
    with pytest.raises(TooManyArgs):
        resolve("pwd /tmp", environ)


def test_cd_keeps_raw_path(environ):
    assert resolve("cd ~/src", environ).kind.action == CdAction(path="~/src")
    assert resolve("cd   /a b", environ).kind.action.path == "/a b"
    assert resolve("cd", environ).kind.action.path == ""


# --- external ---

def test_external_forwards_arguments(environ):
    cmd = resolve("tool  -v   file", environ)
    assert cmd.kind.argv == ("tool", "-v", "file")
    assert cmd.kind.resolved_path.endswith("/bin/tool")


def test_builtin_lookup_is_case_sensitive(environ):
    cmd = resolve("ECHO hi", environ)
    assert isinstance(cmd.kind, NotFound)
    assert cmd.name == "ECHO"


def test_unset_path_is_not_found():
    cmd = resolve("tool", {})
    assert isinstance(cmd.kind, NotFound)
