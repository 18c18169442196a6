"""Tests for recursive forced removal."""

import os
import stat
import sys

import pytest

from shellbelt.commands.remove import force_remove


class TestForceRemove:

    def test_removes_tree(self, tmp_path):
        root = tmp_path / "tree"
        for i in range(5):
            sub = root / f"d{i}"
            sub.mkdir(parents=True)
            (sub / "f.txt").write_text(str(i))

        removed = force_remove(root)

        assert removed == root
        assert not root.exists()

    def test_removes_single_file(self, tmp_path):
        path = tmp_path / "f.txt"
        path.write_text("x")

        force_remove(path)

        assert not path.exists()

    def test_relative_path_is_made_absolute(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "rel").mkdir()

        removed = force_remove("rel")

        assert removed.is_absolute()
        assert removed == tmp_path / "rel"
        assert not (tmp_path / "rel").exists()

    def test_read_only_file_is_removed(self, tmp_path):
        root = tmp_path / "tree"
        root.mkdir()
        locked = root / "ro.txt"
        locked.write_text("x")
        os.chmod(locked, stat.S_IREAD)

        force_remove(root)

        assert not root.exists()

    def test_missing_path_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            force_remove(tmp_path / "missing")

    @pytest.mark.skipif(sys.platform == "win32", reason="symlinks need privileges on Windows")
    def test_symlink_to_directory_removes_only_link(self, tmp_path):
        target = tmp_path / "keep"
        target.mkdir()
        (target / "f").write_text("x")
        link = tmp_path / "link"
        os.symlink(target, link)

        force_remove(link)

        assert not os.path.lexists(link)
        assert (target / "f").exists()

    @pytest.mark.posix
    @pytest.mark.skipif(
        sys.platform == "win32" or (hasattr(os, "geteuid") and os.geteuid() == 0),
        reason="needs POSIX permissions enforced for the current user",
    )
    def test_blocked_removal_raises(self, tmp_path):
        root = tmp_path / "tree"
        inner = root / "inner"
        inner.mkdir(parents=True)
        (inner / "f").write_text("x")
        os.chmod(inner, stat.S_IREAD | stat.S_IEXEC)

        try:
            with pytest.raises(OSError):
                force_remove(root)
            assert (inner / "f").exists()
        finally:
            os.chmod(inner, stat.S_IRWXU)
