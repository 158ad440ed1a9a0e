"""Unit tests for the key-combo dispatch table."""

from __future__ import annotations

import unittest

from reqnav.input import KeyComboBinding, KeyComboRegistry


class KeyComboRegistryTests(unittest.TestCase):
    def test_dispatch_runs_bound_handler(self) -> None:
        calls: list[str] = []
        registry = KeyComboRegistry().register_bindings(
            KeyComboBinding(("j", "DOWN"), lambda: calls.append("down") or True),
        )

        self.assertTrue(registry.dispatch("DOWN"))
        self.assertTrue(registry.dispatch("j"))
        self.assertEqual(calls, ["down", "down"])

    def test_unbound_key_returns_none(self) -> None:
        registry = KeyComboRegistry()

        self.assertIsNone(registry.dispatch("z"))
        self.assertFalse(registry.bound("z"))

    def test_later_binding_wins(self) -> None:
        registry = KeyComboRegistry()
        registry.register_binding(KeyComboBinding(("x",), lambda: False))
        registry.register_binding(KeyComboBinding(("x",), lambda: True))

        self.assertTrue(registry.dispatch("x"))

    def test_normalizer_applies_to_registration_and_lookup(self) -> None:
        registry = KeyComboRegistry(normalize=str.lower).register_binding(
            KeyComboBinding(("ENTER",), lambda: True),
        )

        self.assertTrue(registry.bound("Enter"))
        self.assertTrue(registry.dispatch("enter"))


if __name__ == "__main__":
    unittest.main()
