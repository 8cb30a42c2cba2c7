"""CLI argument handling for ``panecmder.cli.main``."""

from __future__ import annotations

import io
import logging
import tempfile
import unittest
from contextlib import redirect_stdout
from pathlib import Path
from unittest import mock

from panecmder import __version__, cli
from panecmder.config import Config


class CliMainTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name).resolve()
        (self.root / "left").mkdir()
        (self.root / "right").mkdir()
        patcher = mock.patch("panecmder.cli.setup_logging")
        self.setup_logging = patcher.start()
        self.addCleanup(patcher.stop)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_two_paths_open_one_repository_per_pane(self) -> None:
        with mock.patch("panecmder.cli.run_app") as run_app:
            cli.main([str(self.root / "left"), str(self.root / "right"), "--config", str(self.root / "none.json")])

        repos, config = run_app.call_args.args
        self.assertEqual(repos[0].initial_path, self.root / "left")
        self.assertEqual(repos[1].initial_path, self.root / "right")
        self.assertIsInstance(config, Config)

    def test_right_pane_defaults_to_left_path(self) -> None:
        with mock.patch("panecmder.cli.run_app") as run_app:
            cli.main([str(self.root / "left")])

        repos, _ = run_app.call_args.args
        self.assertEqual(repos[0].initial_path, repos[1].initial_path)

    def test_missing_directory_exits_before_starting(self) -> None:
        with mock.patch("panecmder.cli.run_app") as run_app:
            with self.assertRaises(SystemExit) as ctx:
                cli.main([str(self.root / "missing")])

        run_app.assert_not_called()
        self.assertIn("Directory not found", str(ctx.exception))

    def test_debug_flag_reaches_logging_setup(self) -> None:
        with mock.patch("panecmder.cli.run_app"):
            cli.main([str(self.root / "left"), "--debug"])

        self.assertTrue(self.setup_logging.call_args.args[1])

    def test_version_flag_prints_version(self) -> None:
        stdout = io.StringIO()
        with redirect_stdout(stdout), self.assertRaises(SystemExit):
            cli.main(["--version"])

        self.assertIn(__version__, stdout.getvalue())


class SetupLoggingTests(unittest.TestCase):
    def test_log_file_is_created_in_configured_location(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            log_file = Path(tmp) / "logs" / "panecmder.log"
            with mock.patch("panecmder.cli.logging.basicConfig") as basic_config:
                cli.setup_logging(Config(log_file=log_file), debug=True)

            self.assertTrue(log_file.parent.is_dir())
            kwargs = basic_config.call_args.kwargs
            self.assertEqual(kwargs["filename"], str(log_file))
            self.assertEqual(kwargs["level"], logging.DEBUG)


if __name__ == "__main__":
    unittest.main()
