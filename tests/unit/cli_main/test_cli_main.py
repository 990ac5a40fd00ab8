"""CLI argument and default-path behavior tests.

Verifies how ``edls.cli.main`` maps flags to listing options and reports
fatal errors.
"""

from __future__ import annotations

import io
import os
import sys
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from edls import cli
from edls.listing import SortKey


class CliTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name).resolve()
        config_patch = mock.patch("edls.config.CONFIG_PATH", self.root / "no-such-config.json")
        config_patch.start()
        self.addCleanup(config_patch.stop)
        self.addCleanup(self._tmp.cleanup)

    def run_cli(self, *argv: str, default_path: Path | None = None) -> str:
        stdout = io.StringIO()
        with mock.patch.object(sys, "argv", ["edls", *argv]), mock.patch("sys.stdout", stdout):
            cli.main(default_path=default_path)
        return stdout.getvalue()


class CliDefaultPathTests(CliTestCase):
    def test_main_defaults_to_current_working_directory_when_no_path_arg(self) -> None:
        (self.root / "here.txt").write_text("x", encoding="utf-8")
        previous_cwd = Path.cwd()
        try:
            os.chdir(self.root)
            output = self.run_cli()
        finally:
            os.chdir(previous_cwd)
        self.assertTrue(output.rstrip("\n").endswith(" here.txt"))

    def test_main_uses_explicit_path_argument_over_default(self) -> None:
        target = self.root / "target"
        target.mkdir()
        (target / "inside.txt").write_text("x", encoding="utf-8")
        output = self.run_cli(str(target), default_path=self.root / "unused")
        self.assertIn(" inside.txt", output)


class CliOptionMappingTests(CliTestCase):
    def test_flags_map_to_listing_options(self) -> None:
        with mock.patch("edls.cli.build_listing", wraps=cli.build_listing) as build_listing:
            self.run_cli(str(self.root), "-a", "-p", "txt", "-n", "3", "-t", "-s", "-r")
        options = build_listing.call_args.args[1]
        self.assertTrue(options.include_all)
        self.assertEqual(options.pattern.pattern, "txt")
        self.assertEqual(options.limit, 3)
        self.assertEqual(options.sort_key, SortKey.TIME)
        self.assertTrue(options.reverse)

    def test_config_show_all_enables_hidden_entries(self) -> None:
        (self.root / ".dot").write_text("x", encoding="utf-8")
        with mock.patch("edls.config.load_show_all", return_value=True):
            output = self.run_cli(str(self.root))
        self.assertIn(" .dot", output)

    def test_negative_limit_is_rejected(self) -> None:
        stderr = io.StringIO()
        with mock.patch("sys.stderr", stderr):
            with self.assertRaises(SystemExit) as exc_info:
                self.run_cli(str(self.root), "-n", "-1")
        self.assertEqual(exc_info.exception.code, 2)
        self.assertIn("value must be >= 0", stderr.getvalue())

    def test_output_is_plain_when_stdout_is_not_a_tty(self) -> None:
        (self.root / "docs").mkdir()
        output = self.run_cli(str(self.root), "--theme", "ocean")
        self.assertNotIn("\033", output)
        self.assertTrue(output.rstrip("\n").endswith(" docs/"))

    def test_colors_used_on_tty_unless_disabled(self) -> None:
        (self.root / "docs").mkdir()
        with mock.patch("edls.cli._color_disabled", return_value=False):
            output = self.run_cli(str(self.root))
        self.assertIn("\033[1;34mdocs\033[0m/", output)


class CliErrorTests(CliTestCase):
    def test_missing_directory_exits_with_message_and_no_output(self) -> None:
        stdout = io.StringIO()
        missing = self.root / "missing"
        with mock.patch.object(sys, "argv", ["edls", str(missing)]), mock.patch("sys.stdout", stdout):
            with self.assertRaises(SystemExit) as exc_info:
                cli.main()
        self.assertIn("cannot read directory", str(exc_info.exception.code))
        self.assertIn(str(missing), str(exc_info.exception.code))
        self.assertEqual(stdout.getvalue(), "")

    def test_invalid_pattern_exits_before_listing(self) -> None:
        (self.root / "a.txt").write_text("x", encoding="utf-8")
        stdout = io.StringIO()
        with (
            mock.patch.object(sys, "argv", ["edls", str(self.root), "-p", "[unclosed"]),
            mock.patch("sys.stdout", stdout),
            mock.patch("edls.cli.build_listing") as build_listing,
        ):
            with self.assertRaises(SystemExit) as exc_info:
                cli.main()
        build_listing.assert_not_called()
        self.assertIn("invalid pattern", str(exc_info.exception.code))
        self.assertEqual(stdout.getvalue(), "")


if __name__ == "__main__":
    unittest.main()
