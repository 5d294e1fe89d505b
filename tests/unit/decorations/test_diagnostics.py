"""Diagnostics config decoding and severity lookup tests."""

from __future__ import annotations

import unittest

from buftree.decorations import DiagnosticIndex, DiagnosticsConfig, DiagnosticsConfigError, parse_diagnostics_config
from buftree.decorations.diagnostics import (
    DEFAULT_DIAGNOSTIC_SIGNS,
    SEVERITY_ERROR,
    SEVERITY_HINT,
    SEVERITY_INFO,
    worst_severity,
)
from buftree.tree_model.types import Decoration


class ParseDiagnosticsConfigTests(unittest.TestCase):
    def test_true_enables_default_signs(self) -> None:
        config = parse_diagnostics_config(True)

        self.assertTrue(config.enabled)
        self.assertEqual(dict(config.signs), {})
        self.assertEqual(config.sign_for(SEVERITY_ERROR), DEFAULT_DIAGNOSTIC_SIGNS["error"])

    def test_falsy_values_disable(self) -> None:
        for value in (False, None, 0):
            with self.subTest(value=value):
                self.assertFalse(parse_diagnostics_config(value).enabled)

    def test_mapping_decodes_sign_table(self) -> None:
        config = parse_diagnostics_config({"signs": {"error": ["✗", "MyError"], "hint": "?"}})

        self.assertTrue(config.enabled)
        self.assertEqual(config.sign_for(SEVERITY_ERROR), Decoration("✗", "MyError"))
        self.assertEqual(config.sign_for(SEVERITY_HINT), Decoration("?", "DiagnosticHint"))
        self.assertEqual(config.sign_for(SEVERITY_INFO), Decoration("I", "DiagnosticInfo"))

    def test_mapping_without_signs_is_enabled(self) -> None:
        config = parse_diagnostics_config({"signs": None})

        self.assertTrue(config.enabled)
        self.assertEqual(dict(config.signs), {})

    def test_invalid_shapes_raise(self) -> None:
        for value in ("yes", {"signs": ["E"]}, {"signs": {"fatal": "F"}}, {"signs": {"error": 3}}):
            with self.subTest(value=value):
                with self.assertRaises(DiagnosticsConfigError):
                    parse_diagnostics_config(value)

    def test_already_decoded_config_passes_through(self) -> None:
        config = DiagnosticsConfig(enabled=True)

        self.assertIs(parse_diagnostics_config(config), config)


class SeverityLookupTests(unittest.TestCase):
    def test_unknown_or_missing_severity_has_no_sign(self) -> None:
        config = DiagnosticsConfig(enabled=True)

        self.assertIsNone(config.sign_for(None))
        self.assertIsNone(config.sign_for(9))

    def test_worst_severity_is_lowest_known_rank(self) -> None:
        self.assertEqual(worst_severity([4, 2, 3]), 2)
        self.assertIsNone(worst_severity([]))
        self.assertIsNone(worst_severity([7]))

    def test_diagnostic_index_tracks_items(self) -> None:
        index = DiagnosticIndex({5: [4]})
        index.add(5, 1)
        index.add(6, 3)

        self.assertEqual(index(5), 1)
        self.assertEqual(index(6), 3)
        self.assertIsNone(index(7))


if __name__ == "__main__":
    unittest.main()
