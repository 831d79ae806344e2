"""
Help providers and shared helpers behavioral tests.

Scope
- Validate NoHelp and MappingHelp lookups (case-insensitive, "" fallback).
- Validate the Unset sentinel, coalesce() and casefold().

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import copy
import unittest
from unittest import TestCase

from rich.text import Text

from argpattern import MappingHelp, NoHelp
from argpattern.utils import Unset, UnsetType, casefold, coalesce


class TestHelpProviders(TestCase):
    """Behavioral tests for NoHelp and MappingHelp."""

    def testNoHelp(self):
        self.assertEqual(NoHelp().get("anything"), "")

    def testMappingLookupIgnoresCase(self):
        provider = MappingHelp({"Count": "how many"}, label="  the label ")
        self.assertEqual(provider.get("COUNT"), "how many")
        self.assertEqual(provider.get("label"), "the label")
        self.assertIn("count", provider)

    def testMissingIsEmpty(self):
        self.assertEqual(MappingHelp().get("count"), "")

    def testRichTextKept(self):
        text = Text("bold help", style="bold")
        self.assertIs(MappingHelp(count=text).get("count"), text)

    def testInvalidInputs(self):
        with self.assertRaises(TypeError):
            MappingHelp([("count", "x")])
        with self.assertRaises(TypeError):
            MappingHelp({"count": 3})


class TestUtils(TestCase):
    """Behavioral tests for the shared helpers."""

    def testUnsetSingleton(self):
        self.assertIs(UnsetType(), Unset)
        self.assertIs(copy.deepcopy(Unset), Unset)
        self.assertFalse(Unset)
        self.assertEqual(repr(Unset), "Unset")

    def testUnsetNotSubclassable(self):
        with self.assertRaises(TypeError):
            type("Other", (UnsetType,), {})

    def testCoalesce(self):
        self.assertEqual(coalesce(Unset, "x"), "x")
        self.assertIsNone(coalesce(None, "x"))
        self.assertEqual(coalesce("", "x"), "")

    def testCasefold(self):
        self.assertEqual(casefold(" Count "), "count")
        with self.assertRaises(TypeError):
            casefold(None)


if __name__ == "__main__":
    unittest.main()
