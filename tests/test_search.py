"""Tests for search-and-open."""

import pytest

from shellbelt.commands.search import (
    RipGrep,
    path_from_match,
    resolve_editor,
    search_and_open,
)
from shellbelt.errors import ToolError

from fakes import StubSelector


class TestResolveEditor:

    def test_override_wins(self):
        assert resolve_editor("nano", {"EDITOR": "emacs"}) == "nano"

    def test_env_next(self):
        assert resolve_editor(None, {"EDITOR": "emacs"}) == "emacs"

    def test_default_last(self):
        assert resolve_editor(None, {}, default="vi") == "vi"


class TestPathFromMatch:

    def test_splits_on_first_colon(self):
        assert path_from_match("src/app.py:12:def main():") == "src/app.py"

    def test_no_colon_is_whole_line(self):
        assert path_from_match("README") == "README"


class TestSearchAndOpen:

    def test_content_mode_opens_path(self, runner):
        runner.respond("rg", "--line-number", stdout="a.py:3:x = 1\nb.py:7:x = 2\n")
        selector = StubSelector("b.py:7:x = 2")

        result = search_and_open("x =", selector, "vim", rg=RipGrep(runner=runner))

        assert selector.offered == ["a.py:3:x = 1", "b.py:7:x = 2"]
        assert result.path == "b.py"
        assert runner.argvs[-1] == ["vim", "b.py"]
        assert runner.argvs[0] == [
            "rg", "--line-number", "--no-heading", "--color", "never", "--", "x =",
        ]

    def test_filename_mode_filters_with_second_pass(self, runner):
        runner.respond("rg", "--files", stdout="a.py\nb.txt\nsub/c.py\n")
        runner.respond("rg", "--color", stdout="a.py\nsub/c.py\n")
        selector = StubSelector("sub/c.py")

        result = search_and_open(r"\.py$", selector, "code -w", files_only=True,
                                 rg=RipGrep(runner=runner))

        assert runner.calls[1]["input"] == "a.py\nb.txt\nsub/c.py\n"
        assert selector.offered == ["a.py", "sub/c.py"]
        assert result.path == "sub/c.py"
        assert runner.argvs[-1] == ["code", "-w", "sub/c.py"]

    def test_no_matches_opens_nothing(self, runner):
        runner.respond("rg", returncode=1)
        selector = StubSelector("x")

        result = search_and_open("nothing", selector, "vim", rg=RipGrep(runner=runner))

        assert result.selection is None
        assert selector.offered is None
        assert len(runner.calls) == 1

    def test_cancelled_selection_opens_nothing(self, runner):
        runner.respond("rg", stdout="a.py:1:x\n")

        result = search_and_open("x", StubSelector(None), "vim", rg=RipGrep(runner=runner))

        assert result.path is None
        assert len(runner.calls) == 1

    def test_rg_error_raises(self, runner):
        runner.respond("rg", returncode=2, stderr="regex parse error")

        with pytest.raises(ToolError, match="regex parse error"):
            search_and_open("(", StubSelector("x"), "vim", rg=RipGrep(runner=runner))

    def test_line_without_colon_is_opened_as_is(self, runner):
        runner.respond("rg", stdout="odd line\n")

        result = search_and_open("odd", StubSelector("odd line"), "vim", rg=RipGrep(runner=runner))

        assert runner.argvs[-1] == ["vim", "odd line"]
        assert result.path == "odd line"

    def test_editor_failure_raises(self, runner):
        runner.respond("rg", stdout="a.py:1:x\n")
        runner.respond("vim", returncode=1, stderr="E325: ATTENTION")

        with pytest.raises(ToolError, match="vim a.py"):
            search_and_open("x", StubSelector("a.py:1:x"), "vim", rg=RipGrep(runner=runner))
