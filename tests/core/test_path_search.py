# tests/core/test_path_search.py
import os

import pytest

from flatsh.core.services.path_search_service import is_executable, search
from flatsh.model import External, NotFound


def _make_program(directory, name="tool", mode=0o755):
    directory.mkdir(parents=True, exist_ok=True)
    program = directory / name
    program.write_text("#!/bin/sh\nexit 0\n")
    program.chmod(mode)
    return program


@pytest.fixture
def two_dirs(tmp_path):
    a = tmp_path / "a"
    b = tmp_path / "b"
    _make_program(a)
    _make_program(b)
    return a, b


def test_first_match_wins(two_dirs):
    a, b = two_dirs
    cmd = search("tool", f"{a}:{b}")
    assert isinstance(cmd.kind, External)
    assert cmd.kind.resolved_path == str(a / "tool")

    cmd = search("tool", f"{b}:{a}")
    assert cmd.kind.resolved_path == str(b / "tool")


def test_remaining_tokens_become_argv(two_dirs):
    a, _ = two_dirs
    cmd = search("tool", str(a), ["-v", "file"])
    assert cmd.name == "tool"
    assert cmd.kind.argv == ("tool", "-v", "file")


def test_missing_path_is_not_found():
    cmd = search("tool", None)
    assert cmd.name == "tool"
    assert isinstance(cmd.kind, NotFound)


def test_no_match_is_not_found(tmp_path):
    cmd = search("nosuchprogram", f"{tmp_path}:/definitely/not/here")
    assert isinstance(cmd.kind, NotFound)


def test_non_executable_is_skipped(tmp_path):
    plain = tmp_path / "plain"
    runnable = tmp_path / "runnable"
    _make_program(plain, mode=0o644)
    _make_program(runnable)

    cmd = search("tool", f"{plain}:{runnable}")
    assert cmd.kind.resolved_path == str(runnable / "tool")


@pytest.mark.parametrize("mode", [0o100, 0o010, 0o001])
def test_any_execute_bit_counts(tmp_path, mode):
    program = _make_program(tmp_path, mode=0o600 | mode)
    assert is_executable(str(program))


def test_directory_is_not_a_match(tmp_path):
    shadow = tmp_path / "first"
    (shadow / "tool").mkdir(parents=True)
    real = tmp_path / "second"
    _make_program(real)

    assert not is_executable(str(shadow / "tool"))
    cmd = search("tool", f"{shadow}:{real}")
    assert cmd.kind.resolved_path == str(real / "tool")


def test_empty_entries_are_skipped(tmp_path):
    _make_program(tmp_path)
    cmd = search("tool", f"::{tmp_path}:")
    assert cmd.kind.resolved_path == str(tmp_path / "tool")


def test_relative_directory_resolves_to_absolute_path(tmp_path, monkeypatch):
    _make_program(tmp_path / "bin")
    monkeypatch.chdir(tmp_path)

    cmd = search("tool", "bin")
    assert os.path.isabs(cmd.kind.resolved_path)
    assert cmd.kind.resolved_path == os.path.join(os.getcwd(), "bin", "tool")


def test_nul_byte_in_name_is_not_found(tmp_path):
    _make_program(tmp_path)
    assert not is_executable(str(tmp_path / "to\x00ol"))

    cmd = search("to\x00ol", str(tmp_path))
    assert isinstance(cmd.kind, NotFound)
    assert cmd.name == "to\x00ol"
