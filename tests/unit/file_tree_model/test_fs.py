"""Tests for directory listing order and per-entry skip results."""

from __future__ import annotations

import os
import sys
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from xtree.errors import EntryReadError
from xtree.file_tree_model import list_directory_children


class _FakeDirEntry:
    def __init__(self, directory: Path, name: str, is_dir: bool = False, error: OSError | None = None) -> None:
        self.name = name
        self.path = str(directory / name)
        self._is_dir = is_dir
        self._error = error

    def is_dir(self, follow_symlinks: bool = True) -> bool:
        if self._error is not None:
            raise self._error
        return self._is_dir


class _FakeScandir:
    def __init__(self, entries: list[_FakeDirEntry]) -> None:
        self._entries = entries

    def __enter__(self):
        return iter(self._entries)

    def __exit__(self, *exc_info) -> bool:
        return False


class ListDirectoryChildrenTests(unittest.TestCase):
    def test_children_are_sorted_case_insensitively_with_stable_ties(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            for name in ("beta", "Alpha", "alpha.txt", "Gamma"):
                (root / name).mkdir()

            children, skipped = list_directory_children(root)

            self.assertEqual([child.name for child in children], ["Alpha", "alpha.txt", "beta", "Gamma"])
            self.assertEqual(skipped, [])
            self.assertTrue(all(child.is_dir for child in children))

    def test_hidden_entries_can_be_dropped(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / ".cache").mkdir()
            (root / "visible.txt").write_text("x", encoding="utf-8")

            shown, _ = list_directory_children(root, show_hidden=True)
            hidden, _ = list_directory_children(root, show_hidden=False)

            self.assertEqual([child.name for child in shown], [".cache", "visible.txt"])
            self.assertEqual([child.name for child in hidden], ["visible.txt"])

    def test_file_flags_and_paths(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "notes.md").write_text("x", encoding="utf-8")

            children, _ = list_directory_children(root)

            self.assertEqual(len(children), 1)
            self.assertFalse(children[0].is_dir)
            self.assertEqual(children[0].path, root / "notes.md")

    def test_entry_that_cannot_be_stat_ed_is_skipped_with_reason(self) -> None:
        root = Path("/virtual")
        entries = [
            _FakeDirEntry(root, "ok_dir", is_dir=True),
            _FakeDirEntry(root, "gone", error=FileNotFoundError(2, "No such file or directory")),
        ]
        with mock.patch("xtree.file_tree_model.fs.os.scandir", return_value=_FakeScandir(entries)):
            children, skipped = list_directory_children(root)

        self.assertEqual([child.name for child in children], ["ok_dir"])
        self.assertEqual(len(skipped), 1)
        self.assertEqual(skipped[0].path, root / "gone")
        self.assertEqual(skipped[0].reason, "No such file or directory")
        self.assertIsInstance(skipped[0].error, FileNotFoundError)

    @unittest.skipUnless(sys.getfilesystemencoding() == "utf-8", "needs a UTF-8 filesystem encoding")
    def test_undecodable_name_is_made_printable_but_path_stays_raw(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            raw_path = os.path.join(os.fsencode(tmp), b"\xffsrc.txt")
            try:
                with open(raw_path, "wb"):
                    pass
            except OSError as exc:
                self.skipTest(f"filesystem rejects non-UTF-8 names: {exc}")

            children, _ = list_directory_children(Path(tmp))

            self.assertEqual([child.name for child in children], ["�src.txt"])
            self.assertEqual(os.fsencode(children[0].path), raw_path)
            self.assertTrue(children[0].path.exists())

    def test_unlistable_directory_raises_entry_read_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            missing = Path(tmp) / "missing"
            with self.assertRaises(EntryReadError) as exc_info:
                list_directory_children(missing)

            self.assertEqual(exc_info.exception.path, missing)
            self.assertIsInstance(exc_info.exception.error, FileNotFoundError)


if __name__ == "__main__":
    unittest.main()
