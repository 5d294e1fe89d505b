"""Health report tests."""

from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from buftree.health import (
    LEVEL_ERROR,
    LEVEL_INFO,
    LEVEL_OK,
    check_health,
    format_health,
    has_errors,
)
from buftree.ui_theme import PLAIN_THEME


class CheckHealthTests(unittest.TestCase):
    def test_old_python_is_an_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch("buftree.config.CONFIG_PATH", Path(tmp) / "config.json"):
                checks = check_health(version_info=(3, 8, 10))

        self.assertEqual(checks[0].level, LEVEL_ERROR)
        self.assertIn("3.8.10", checks[0].message)
        self.assertTrue(has_errors(checks))

    def test_missing_config_file_is_informational(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch("buftree.config.CONFIG_PATH", Path(tmp) / "config.json"):
                checks = check_health(version_info=(3, 12, 1))

        self.assertEqual(checks[0].level, LEVEL_OK)
        self.assertEqual(checks[-1].level, LEVEL_INFO)

    def test_invalid_config_file_is_reported(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            config_path.write_text(json.dumps({"initial_style": "grid"}), encoding="utf-8")
            with mock.patch("buftree.config.CONFIG_PATH", config_path):
                checks = check_health(version_info=(3, 12, 1))

        self.assertEqual(checks[-1].level, LEVEL_ERROR)
        self.assertIn("initial_style", checks[-1].message)

    def test_malformed_config_file_is_reported(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            config_path.write_text("{not json", encoding="utf-8")
            with mock.patch("buftree.config.CONFIG_PATH", config_path):
                checks = check_health(version_info=(3, 12, 1))

        self.assertEqual(checks[-1].level, LEVEL_ERROR)
        self.assertIn("Unreadable config", checks[-1].message)
        self.assertTrue(has_errors(checks))

    def test_non_object_config_file_is_reported(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            config_path.write_text(json.dumps(["tree"]), encoding="utf-8")
            with mock.patch("buftree.config.CONFIG_PATH", config_path):
                checks = check_health(version_info=(3, 12, 1))

        self.assertEqual(checks[-1].level, LEVEL_ERROR)
        self.assertIn("expected a JSON object", checks[-1].message)

    def test_valid_config_file_is_ok(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            config_path.write_text(json.dumps({"diagnostics": True}), encoding="utf-8")
            with mock.patch("buftree.config.CONFIG_PATH", config_path):
                checks = check_health(version_info=(3, 12, 1))

        self.assertEqual(checks[-1].level, LEVEL_OK)
        self.assertFalse(has_errors(checks))

    def test_format_health_lists_each_check(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch("buftree.config.CONFIG_PATH", Path(tmp) / "config.json"):
                checks = check_health(version_info=(3, 12, 1))

        text = format_health(checks, PLAIN_THEME)
        self.assertEqual(len(text.splitlines()), len(checks) + 1)
        self.assertIn("- OK Python 3.12.1", text)


if __name__ == "__main__":
    unittest.main()
