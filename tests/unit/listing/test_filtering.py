"""Tests for hidden-name and pattern inclusion rules."""

from __future__ import annotations

import unittest
from datetime import datetime
from pathlib import Path

from edls.entry_model import FileEntry, RawDirectoryEntry
from edls.errors import InvalidPatternError
from edls.listing import build_listing_options, compile_pattern, should_include


def _raw(name: str) -> RawDirectoryEntry:
    return RawDirectoryEntry(name=name, path=Path("/tmp") / name, is_dir=False)


class HiddenRuleTests(unittest.TestCase):
    def test_dot_entry_excluded_unless_include_all(self) -> None:
        self.assertFalse(should_include(_raw(".env"), build_listing_options()))
        self.assertTrue(should_include(_raw(".env"), build_listing_options(include_all=True)))

    def test_plain_name_never_hidden(self) -> None:
        self.assertTrue(should_include(_raw("env"), build_listing_options()))
        self.assertTrue(should_include(_raw("env"), build_listing_options(include_all=True)))

    def test_dot_and_dotdot_names_follow_hidden_rule(self) -> None:
        self.assertFalse(should_include(_raw("."), build_listing_options()))
        self.assertFalse(should_include(_raw(".."), build_listing_options()))

    def test_classified_entries_follow_the_same_hidden_rule(self) -> None:
        for name, hidden in ((".env", True), ("env", False)):
            entry = FileEntry(
                name=name,
                path=Path("/tmp") / name,
                is_dir=False,
                size_bytes=0,
                modified_at=datetime(2024, 1, 1),
                mode_string="-rw-r--r--",
            )
            self.assertEqual(entry.is_hidden, hidden)
            self.assertEqual(should_include(entry, build_listing_options()), not hidden)
            self.assertTrue(should_include(entry, build_listing_options(include_all=True)))


class PatternRuleTests(unittest.TestCase):
    def test_pattern_is_case_insensitive(self) -> None:
        options = build_listing_options(pattern="IMG")
        self.assertTrue(should_include(_raw("img_001.png"), options))

    def test_pattern_is_a_search_not_a_full_match(self) -> None:
        options = build_listing_options(pattern="00")
        self.assertTrue(should_include(_raw("img_001.png"), options))
        self.assertFalse(should_include(_raw("readme.md"), options))

    def test_pattern_supports_regular_expressions(self) -> None:
        options = build_listing_options(pattern=r"\.(png|jpg)$")
        self.assertTrue(should_include(_raw("a.JPG"), options))
        self.assertFalse(should_include(_raw("a.jpg.bak"), options))

    def test_rules_are_conjunctive(self) -> None:
        options = build_listing_options(pattern="secret")
        self.assertFalse(should_include(_raw(".secret"), options))
        options = build_listing_options(pattern="secret", include_all=True)
        self.assertTrue(should_include(_raw(".secret"), options))
        self.assertFalse(should_include(_raw(".env"), options))

    def test_empty_pattern_disables_rule(self) -> None:
        self.assertIsNone(compile_pattern(""))
        self.assertIsNone(compile_pattern(None))
        self.assertTrue(should_include(_raw("anything"), build_listing_options(pattern="")))

    def test_invalid_pattern_raises_when_options_are_built(self) -> None:
        with self.assertRaises(InvalidPatternError) as exc_info:
            build_listing_options(pattern="[abc")
        self.assertEqual(exc_info.exception.pattern, "[abc")
        self.assertIn("[abc", str(exc_info.exception))


if __name__ == "__main__":
    unittest.main()
