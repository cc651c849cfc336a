"""End-to-end listing behavior through ``list_paths`` with a buffer sink.

Covers ordering, hidden-file policy, ``-d``, multi-directory sections,
recursion, totals and partial-failure error reporting.
"""

from __future__ import annotations

import os
import stat
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from dirlist.ansi import strip_ansi
from dirlist.fs import Metadata, RawEntry, list_children as real_list_children
from dirlist.listing import BufferSink, StreamSink, list_entries, list_paths
from dirlist.options import ListingOptions
from dirlist.render import RenderContext
from dirlist.theme import DEFAULT_THEME


def _touch(path: Path, content: str = "") -> None:
    path.write_text(content, encoding="utf-8")


class ListPathsTests(unittest.TestCase):
    def _list(self, paths: list[str], **flags: object) -> tuple[int, BufferSink]:
        sink = BufferSink()
        status = list_paths(paths, ListingOptions(**flags), sink)
        return status, sink

    def test_default_listing_is_name_ordered_and_tiled(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            for name in ("C", "b", "A"):
                _touch(Path(tmp, name))

            status, sink = self._list([tmp])

            self.assertEqual(status, 0)
            self.assertEqual(sink.stdout, ["A  b  C"])

    def test_hidden_file_policy(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            os.mkdir(os.path.join(tmp, ".git"))
            _touch(Path(tmp, "file.txt"))

            _status, default = self._list([tmp], one_column=True)
            _status, everything = self._list([tmp], one_column=True, all=True)
            _status, almost = self._list([tmp], one_column=True, almost_all=True)

            self.assertEqual(default.text, "file.txt")
            self.assertEqual(everything.text.splitlines(), [".", "..", "file.txt", ".git"])
            self.assertEqual(almost.text.splitlines(), ["file.txt", ".git"])

    def test_directory_flag_shows_only_the_directory_path(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            _touch(Path(tmp, "inner.txt"))

            status, sink = self._list([tmp], directory=True)

            self.assertEqual(status, 0)
            self.assertEqual(sink.text, tmp)

    def test_multiple_directories_get_headers_and_single_blank_line(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            dir_a = Path(tmp, "dirA")
            dir_b = Path(tmp, "dirB")
            dir_a.mkdir()
            dir_b.mkdir()
            _touch(dir_a / "a.txt")
            _touch(dir_b / "b.txt")

            _status, sink = self._list([str(dir_b), str(dir_a)])

            self.assertEqual(sink.text, f"{dir_a}:\na.txt\n\n{dir_b}:\nb.txt")

    def test_files_are_listed_before_directory_sections(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            sub = Path(tmp, "sub")
            sub.mkdir()
            _touch(sub / "inside.txt")
            _touch(Path(tmp, "z.txt"))
            _touch(Path(tmp, "a.txt"))

            _status, sink = self._list(
                [str(sub), str(Path(tmp, "z.txt")), str(Path(tmp, "a.txt"))],
                one_column=True,
            )

            self.assertEqual(sink.text, f"a.txt\nz.txt\n\n{sub}:\ninside.txt")

    def test_bare_file_arguments_have_no_implied_entries(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp, "only.txt")
            _touch(target)

            _status, sink = self._list([str(target)], all=True, long=True)

            lines = sink.text.splitlines()
            self.assertEqual(len(lines), 1)
            self.assertTrue(lines[0].endswith(" only.txt"))
            self.assertFalse(lines[0].startswith("total"))

    def test_recursive_listing_visits_subdirectories_depth_first(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            nested = Path(tmp, "a", "deep")
            nested.mkdir(parents=True)
            Path(tmp, "b").mkdir()
            _touch(nested / "leaf.txt")

            _status, sink = self._list([tmp], recursive=True, one_column=True)

            headers = [line for line in sink.text.splitlines() if line.endswith(":")]
            self.assertEqual(
                headers,
                [f"{tmp}:", f"{os.path.join(tmp, 'a')}:", f"{nested}:", f"{os.path.join(tmp, 'b')}:"],
            )
            self.assertIn(f"{nested}:\nleaf.txt", sink.text)

    def test_recursive_listing_skips_hidden_directories_without_all(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            Path(tmp, ".hid").mkdir()
            sub = Path(tmp, "sub")
            sub.mkdir()
            _touch(sub / "x")

            _status, plain = self._list([tmp], recursive=True, one_column=True)
            _status, almost = self._list([tmp], recursive=True, one_column=True, almost_all=True)

            self.assertEqual(plain.text, f"{tmp}:\nsub\n\n{sub}:\nx")
            hidden_dir = os.path.join(tmp, ".hid")
            self.assertEqual(almost.text, f"{tmp}:\n.hid\nsub\n\n{hidden_dir}:\n\n\n{sub}:\nx")

    def test_long_listing_has_total_line_and_aligned_rows(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            _touch(Path(tmp, "small"), "x")
            _touch(Path(tmp, "large"), "x" * 1234)

            _status, sink = self._list([tmp], long=True)

            lines = sink.text.splitlines()
            self.assertTrue(lines[0].startswith("total "))
            rows = lines[1:]
            self.assertEqual([row.split()[-1] for row in rows], ["large", "small"])
            self.assertEqual(rows[0].index("large"), rows[1].index("small"))
            self.assertTrue(all(row.startswith("-rw") for row in rows))

    def test_missing_path_reports_error_and_lists_siblings(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            _touch(Path(tmp, "present.txt"))
            missing = os.path.join(tmp, "absent")

            status, sink = self._list([missing, tmp])

            self.assertEqual(status, 1)
            self.assertEqual(sink.stderr, [f"ls: cannot access {missing}: No such file or directory"])
            self.assertEqual(sink.text, "present.txt")

    def test_unreadable_directory_is_serious_but_not_fatal(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            locked = Path(tmp, "locked")
            other = Path(tmp, "other")
            locked.mkdir()
            other.mkdir()
            _touch(other / "fine.txt")
            denied = PermissionError(13, "Permission denied")

            def fake_list_children(directory: str):
                if directory == str(locked):
                    return [], [(directory, denied)]
                return real_list_children(directory)

            with mock.patch("dirlist.assemble.list_children", side_effect=fake_list_children):
                status, sink = self._list([str(locked), str(other)])

            self.assertEqual(status, 2)
            self.assertEqual(sink.stderr, [f"ls: cannot open directory '{locked}': Permission denied"])
            self.assertEqual(sink.text, f"{locked}:\n\n\n{other}:\nfine.txt")

    def test_unsorted_mode_follows_enumeration_order(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            for name in ("zeta", "alpha", "mid"):
                _touch(Path(tmp, name))
            enumerated = [name for name in os.listdir(tmp)]

            _status, sink = self._list([tmp], no_sort=True, one_column=True)
            _status, reversed_sink = self._list([tmp], no_sort=True, reverse=True, one_column=True)

            self.assertEqual(sink.text.splitlines(), enumerated)
            self.assertEqual(reversed_sink.text.splitlines(), list(reversed(enumerated)))

    def test_colored_names_strip_back_to_filesystem_names(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            os.mkdir(os.path.join(tmp, "docs"))
            script = Path(tmp, "run.sh")
            _touch(script)
            script.chmod(0o755)
            sink = BufferSink()

            list_paths([tmp], ListingOptions(one_column=True, classify=True), sink, theme=DEFAULT_THEME)

            self.assertNotEqual(sink.text, strip_ansi(sink.text))
            self.assertEqual(strip_ansi(sink.text).splitlines(), ["docs/", "run.sh"])

    def test_stream_sink_terminates_blocks_with_newline(self) -> None:
        sink = StreamSink(stdout=mock.Mock(), stderr=mock.Mock())
        sink.out("listing")
        sink.err("problem")
        sink.stdout.write.assert_called_once_with("listing\n")
        sink.stderr.write.assert_called_once_with("problem\n")


class ListEntriesTests(unittest.TestCase):
    def test_total_counts_hidden_entries(self) -> None:
        def entry(name: str, size: int) -> RawEntry:
            return RawEntry(
                name=name,
                metadata=Metadata(
                    mode=stat.S_IFREG | 0o644,
                    link_count=1,
                    owner_id=0,
                    group_id=0,
                    size=size,
                    modified_time=0.0,
                    inode=1,
                ),
            )

        entries = [entry(".secret", 100), entry("a", 10), entry("b", 20)]
        listing = list_entries(entries, RenderContext(options=ListingOptions(long=True)))

        self.assertEqual(listing.total_size, "130")
        self.assertEqual([line.split()[-1] for line in listing.text.splitlines()], ["a", "b"])


if __name__ == "__main__":
    unittest.main()
