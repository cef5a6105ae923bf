"""
Tests for the atomic writer and the old output cleanup.
"""

from __future__ import annotations

import os
import stat

import pytest

from ldap_schema_to_code.pipeline.errors import ArtifactWriteError
from ldap_schema_to_code.pipeline.writer import AtomicWriter, remove_old_output


def failing_chunks():
    yield "class Person:\n"
    raise RuntimeError("render failed")


class TestAtomicWriter:
    def test_writes_and_creates_directories(self, tmp_path):
        target = tmp_path / "acme" / "types" / "Person.py"

        AtomicWriter().write(target, ["class Person:\n", "    pass\n"])

        assert target.read_text() == "class Person:\n    pass\n"
        assert list(target.parent.iterdir()) == [target]

    def test_failed_render_leaves_target_untouched(self, tmp_path):
        target = tmp_path / "Person.py"
        target.write_text("previous = True\n")

        with pytest.raises(RuntimeError):
            AtomicWriter().write(target, failing_chunks())

        assert target.read_text() == "previous = True\n"
        assert list(tmp_path.iterdir()) == [target]

    def test_invalid_python_is_rejected(self, tmp_path):
        target = tmp_path / "Broken.py"

        with pytest.raises(ArtifactWriteError):
            AtomicWriter().write(target, "class Broken(\n")

        assert not target.exists()
        assert list(tmp_path.iterdir()) == []

    def test_validation_can_be_disabled(self, tmp_path):
        target = tmp_path / "Broken.py"

        AtomicWriter().write(target, "class Broken(\n", validate=False)

        assert target.exists()

    def test_new_file_follows_umask(self, tmp_path):
        target = tmp_path / "Person.py"
        umask = os.umask(0o022)
        try:
            AtomicWriter().write(target, "class Person:\n    pass\n")
        finally:
            os.umask(umask)

        mode = stat.S_IMODE(target.stat().st_mode)
        assert mode & stat.S_IRGRP
        assert mode == 0o644

    def test_rewrite_keeps_existing_mode(self, tmp_path):
        target = tmp_path / "Person.py"
        target.write_text("previous = True\n")
        target.chmod(0o640)

        AtomicWriter().write(target, "class Person:\n    pass\n")

        assert stat.S_IMODE(target.stat().st_mode) == 0o640

    def test_only_python_is_validated(self, tmp_path):
        target = tmp_path / "Person.java"

        AtomicWriter().write(target, "public class Person {")

        assert target.read_text() == "public class Person {"


class TestRemoveOldOutput:
    def test_removes_only_matching_files_directly_inside(self, tmp_path):
        (tmp_path / "Person.py").write_text("")
        (tmp_path / "Employee.py").write_text("")
        (tmp_path / "notes.txt").write_text("")
        (tmp_path / "nested").mkdir()
        (tmp_path / "nested" / "Deep.py").write_text("")
        (tmp_path / "package.py").mkdir()

        removed = remove_old_output(tmp_path, "py")

        assert removed == [tmp_path / "Employee.py", tmp_path / "Person.py"]
        assert sorted(p.name for p in tmp_path.iterdir()) == ["nested", "notes.txt", "package.py"]
        assert (tmp_path / "nested" / "Deep.py").exists()

    def test_missing_directory(self, tmp_path):
        assert remove_old_output(tmp_path / "missing", "py") == []
