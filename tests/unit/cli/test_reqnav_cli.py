"""CLI argument handling, ``--render`` output and interactive wiring."""

from __future__ import annotations

import io
import json
import sys
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from reqnav import cli
from reqnav.navigator import RequestSelected, ViewMode
from reqnav.runtime.config import NavigatorSettings

FIXTURE = {
    "collections": [
        {
            "name": "Accounts",
            "requests": [{"name": "Login", "method": "POST", "url": "https://api.test/login"}],
        }
    ],
    "history": [
        {
            "id": "h1",
            "method": "GET",
            "url": "https://api.test/me",
            "status": 200,
            "timestamp": "2024-01-01T00:00:00+00:00",
        }
    ],
}


class CliTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.fixture_path = Path(self._tmp.name) / "fixture.json"
        self.fixture_path.write_text(json.dumps(FIXTURE), encoding="utf-8")
        patcher = mock.patch("reqnav.cli.load_navigator_settings", return_value=NavigatorSettings())
        patcher.start()
        self.addCleanup(patcher.stop)

    def run_cli(self, *argv: str) -> str:
        stdout = io.StringIO()
        with mock.patch.object(sys, "argv", ["reqnav", *argv]), mock.patch.object(sys, "stdout", stdout):
            cli.main()
        return stdout.getvalue()


class RenderModeTests(CliTestCase):
    def test_render_prints_sized_sidebar(self) -> None:
        output = self.run_cli(str(self.fixture_path), "--render", "--width", "40", "--height", "12", "--keys", "l j")

        lines = output.splitlines()
        self.assertEqual(len(lines), 12)
        self.assertTrue(all(len(line) == 40 for line in lines))
        self.assertIn("→    POST Login", output)

    def test_render_in_history_mode(self) -> None:
        output = self.run_cli(str(self.fixture_path), "--render", "--width", "50", "--height", "12", "--mode", "history")

        self.assertIn("▶ GET  api.test/me 200", output)
        self.assertIn("Collections (C)", output)

    def test_render_without_fixture(self) -> None:
        output = self.run_cli("--render", "--width", "30", "--height", "10")

        self.assertIn("History not available", output)

    def test_invalid_fixture_exits_with_message(self) -> None:
        self.fixture_path.write_text("[]", encoding="utf-8")

        with self.assertRaises(SystemExit) as ctx:
            self.run_cli(str(self.fixture_path), "--render")

        self.assertIn("Invalid fixture", str(ctx.exception.code))

    def test_rejects_non_positive_sizes(self) -> None:
        stderr = io.StringIO()
        with mock.patch.object(sys, "stderr", stderr), self.assertRaises(SystemExit):
            self.run_cli("--render", "--width", "0")


class SettingsResolutionTests(unittest.TestCase):
    def test_flags_override_config(self) -> None:
        args = cli.build_parser().parse_args(["--history-limit", "5", "--timeout", "0.5", "--mode", "history"])

        settings = cli.resolve_settings(args, NavigatorSettings(history_limit=50))

        self.assertEqual(settings, NavigatorSettings(5, 0.5, ViewMode.HISTORY))

    def test_missing_flags_keep_config(self) -> None:
        base = NavigatorSettings(history_limit=50, query_timeout_seconds=1.0, view_mode=ViewMode.HISTORY)

        self.assertEqual(cli.resolve_settings(cli.build_parser().parse_args([]), base), base)


class InteractiveModeTests(CliTestCase):
    def test_interactive_run_saves_mode_and_prints_selection(self) -> None:
        def fake_run(navigator):
            navigator.set_view_mode(ViewMode.HISTORY)
            return RequestSelected(navigator.collections[0].requests[0])

        stdin = mock.Mock()
        stdin.isatty.return_value = True
        with mock.patch("reqnav.cli.run_interactive", side_effect=fake_run), mock.patch(
            "reqnav.cli.save_view_mode"
        ) as save_view_mode, mock.patch.object(sys, "stdin", stdin):
            output = self.run_cli(str(self.fixture_path))

        save_view_mode.assert_called_once_with(ViewMode.HISTORY)
        self.assertEqual(output, "request: POST Login https://api.test/login\n")

    def test_interactive_requires_a_terminal(self) -> None:
        stdin = mock.Mock()
        stdin.isatty.return_value = False
        with mock.patch("reqnav.cli.run_interactive") as run_interactive, mock.patch.object(sys, "stdin", stdin):
            with self.assertRaises(SystemExit):
                self.run_cli()

        run_interactive.assert_not_called()


if __name__ == "__main__":
    unittest.main()
