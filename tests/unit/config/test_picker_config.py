"""Tests for config layering, JSON loading, and option validation.

Malformed config files load as empty; invalid option values raise
``ConfigError`` when decoded.
"""

from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from buftree import config
from buftree.config import ConfigError, PickerConfig
from buftree.tree_model.types import Decoration


class MergeConfigTests(unittest.TestCase):
    def test_defaults_are_copied_not_shared(self) -> None:
        merged = config.merge_config()
        merged["actions"]["x"] = print

        self.assertEqual(config.DEFAULTS["actions"], {})
        self.assertEqual(config.merge_config()["initial_style"], "tree")

    def test_later_layers_win_and_nested_mappings_merge(self) -> None:
        merged = config.merge_config(
            {"diagnostics": {"signs": {"error": "E1", "warn": "W1"}}, "theme": "ocean"},
            None,
            {"diagnostics": {"signs": {"error": "E2"}}},
        )

        self.assertEqual(merged["diagnostics"], {"signs": {"error": "E2", "warn": "W1"}})
        self.assertEqual(merged["theme"], "ocean")
        self.assertTrue(merged["switch_on_filter"])

    def test_deep_merge_replaces_non_mapping_values(self) -> None:
        self.assertEqual(config.deep_merge({"a": False}, {"a": {"b": 1}}), {"a": {"b": 1}})
        self.assertEqual(config.deep_merge({"a": {"b": 1}}, {"a": True}), {"a": True})


class PickerConfigDecodeTests(unittest.TestCase):
    def test_defaults_decode(self) -> None:
        decoded = PickerConfig.from_mapping(config.merge_config())

        self.assertEqual(decoded, PickerConfig())
        self.assertFalse(decoded.diagnostics.enabled)

    def test_diagnostics_decoded_once_at_the_boundary(self) -> None:
        decoded = PickerConfig.from_mapping(
            config.merge_config({"diagnostics": {"signs": {"warn": ["!", "Warn"]}}})
        )

        self.assertTrue(decoded.diagnostics.enabled)
        self.assertEqual(decoded.diagnostics.signs["warn"], Decoration("!", "Warn"))

    def test_icons_false_means_none(self) -> None:
        self.assertEqual(PickerConfig.from_mapping(config.merge_config({"icons": False})).icons, "none")

    def test_actions_keep_only_named_callables(self) -> None:
        def action(picker, row) -> None:
            return None

        decoded = PickerConfig.from_mapping(
            config.merge_config({"actions": {"<C-v>": action, "": action, "x": "not callable"}})
        )

        self.assertEqual(dict(decoded.actions), {"<C-v>": action})

    def test_invalid_values_raise_config_error(self) -> None:
        bad_layers = [
            {"initial_style": "grid"},
            {"icons": "devicons"},
            {"theme": "neon"},
            {"diagnostics": "loud"},
            {"switch_on_filter": "yes"},
            {"action_close": 1},
            {"actions": ["x"]},
            {"on_folder_select": "cd"},
        ]
        for layer in bad_layers:
            with self.subTest(layer=layer):
                with self.assertRaises(ConfigError):
                    PickerConfig.from_mapping(config.merge_config(layer))


class ConfigFileTests(unittest.TestCase):
    def test_load_config_reads_json_object(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            config_path.write_text(json.dumps({"theme": "ocean"}), encoding="utf-8")
            with mock.patch("buftree.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_config(), {"theme": "ocean"})

    def test_load_config_tolerates_missing_and_malformed_files(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("buftree.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_config(), {})
                config_path.write_text("{not json", encoding="utf-8")
                self.assertEqual(config.load_config(), {})
                config_path.write_text("[1, 2]", encoding="utf-8")
                self.assertEqual(config.load_config(), {})

    def test_resolve_config_layers_file_under_overrides(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            config_path.write_text(
                json.dumps({"theme": "ocean", "initial_style": "flat", "diagnostics": True}),
                encoding="utf-8",
            )
            with mock.patch("buftree.config.CONFIG_PATH", config_path):
                resolved = config.resolve_config({"initial_style": "tree"})
                skipped = config.resolve_config(use_file=False)

        self.assertEqual(resolved.theme, "ocean")
        self.assertEqual(resolved.initial_style, "tree")
        self.assertTrue(resolved.diagnostics.enabled)
        self.assertEqual(skipped, PickerConfig())

    def test_resolve_config_never_writes_the_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("buftree.config.CONFIG_PATH", config_path):
                config.resolve_config({"theme": "ocean"})

            self.assertFalse(config_path.exists())


if __name__ == "__main__":
    unittest.main()
