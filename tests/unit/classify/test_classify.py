"""Tests for argument classification, glob expansion and probe errors."""

from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path

from dirlist.classify import classify_paths, expand_paths
from dirlist.errors import Severity


class ClassifyPathsTests(unittest.TestCase):
    def test_defaults_to_current_directory(self) -> None:
        classified = classify_paths([])
        self.assertEqual(classified.dirs, (".",))
        self.assertEqual(classified.files, ())

    def test_files_and_dirs_are_split_and_sorted(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            for name in ("zdir", "adir"):
                (root / name).mkdir()
            for name in ("z.txt", "a.txt"):
                (root / name).write_text("", encoding="utf-8")
            args = [str(root / name) for name in ("zdir", "z.txt", "adir", "a.txt")]

            classified = classify_paths(args)

            self.assertEqual(classified.dirs, (str(root / "adir"), str(root / "zdir")))
            self.assertEqual([item.path for item in classified.files], [str(root / "a.txt"), str(root / "z.txt")])
            self.assertTrue(all(item.metadata.is_file for item in classified.files))

    def test_missing_path_is_reported_and_others_still_classified(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            missing = os.path.join(tmp, "nope")

            classified = classify_paths([missing, tmp])

            self.assertEqual(classified.dirs, (tmp,))
            self.assertEqual(len(classified.errors), 1)
            error = classified.errors[0]
            self.assertEqual(error.severity, Severity.MISSING)
            self.assertEqual(error.message, f"ls: cannot access {missing}: No such file or directory")


class ExpandPathsTests(unittest.TestCase):
    def test_glob_patterns_expand_sorted(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            for name in ("b.py", "a.py", "c.txt"):
                (root / name).write_text("", encoding="utf-8")

            expanded = expand_paths([os.path.join(tmp, "*.py")])

            self.assertEqual(expanded, [str(root / "a.py"), str(root / "b.py")])

    def test_unmatched_pattern_is_kept_literally(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            pattern = os.path.join(tmp, "*.none")
            self.assertEqual(expand_paths([pattern, "plain"]), [pattern, "plain"])


if __name__ == "__main__":
    unittest.main()
