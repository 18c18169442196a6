"""Tests for the process finder."""

from types import SimpleNamespace
from unittest.mock import patch

import psutil
import pytest

from shellbelt.commands.processes import find_processes
from shellbelt.errors import ValidationError


def fake_proc(pid, name, username="me", rss=1024):
    return SimpleNamespace(info={
        "pid": pid,
        "name": name,
        "username": username,
        "memory_info": SimpleNamespace(rss=rss) if rss is not None else None,
    })


class VanishingProc:
    @property
    def info(self):
        raise psutil.NoSuchProcess(99)


PROCS = [
    fake_proc(10, "python3"),
    fake_proc(11, "bash"),
    fake_proc(12, "Python", rss=None),
    fake_proc(13, "", username=None),
]


class TestFindProcesses:

    def test_case_insensitive_regex(self):
        found = find_processes("^py", processes=PROCS)
        assert [(p.pid, p.name) for p in found] == [(12, "Python"), (10, "python3")]

    def test_no_match_is_empty(self):
        assert find_processes("zsh", processes=PROCS) == []

    def test_vanished_process_is_skipped(self):
        found = find_processes("bash", processes=[VanishingProc(), fake_proc(11, "bash")])
        assert [p.pid for p in found] == [11]

    def test_missing_memory_is_zero(self):
        found = find_processes("^Python$", processes=PROCS)
        assert found[0].memory_rss == 0

    def test_invalid_pattern(self):
        with pytest.raises(ValidationError):
            find_processes("(", processes=PROCS)

    def test_uses_live_process_list(self):
        with patch("shellbelt.commands.processes.psutil.process_iter",
                   return_value=iter(PROCS)) as mock_iter:
            found = find_processes("bash")

        mock_iter.assert_called_once()
        assert [p.name for p in found] == ["bash"]
