"""
Requests module behavioral tests (argument matching).

Scope
- Validate how positional arguments are dealt to positional descriptions.
- Validate case-insensitive grouping of named arguments, unknown and
  unexpected leftovers.
- Validate create_request() defaults and validator plumbing.

Conventions
- Test method names follow CamelCase per project convention.
- Patterns use prefix "-" and separator ":" unless stated otherwise.
"""

from __future__ import annotations

import unittest
from unittest import TestCase

from argpattern import (
    CliOptions,
    NoHelp,
    Request,
    WINDOWS_STYLE,
    create_request,
    parse_all,
    tokenize_with,
)

OPTIONS = CliOptions("-", ":")


def match(pattern, tokens):
    return Request(tokenize_with(OPTIONS, tokens), parse_all(OPTIONS, NoHelp(), pattern))


class RecordingValidator:
    """Validator accepting everything and remembering what it was given."""

    def __init__(self, verdict=True):
        self.verdict = verdict
        self.calls = []

    def validate(self, descriptions, request, /):
        self.calls.append((descriptions, request))
        return self.verdict


class TestRequest(TestCase):
    """Behavioral tests for Request matching."""

    def testSingleThenRepeatable(self):
        request = match("first rest#", ["1", "2", "3"])
        self.assertEqual(request.values("first"), ("1",))
        self.assertEqual(request.values("rest"), ("2", "3"))
        self.assertEqual(request.unexpected, ())

    def testPositionalsDealtInOrder(self):
        request = match("source [dest]", ["a", "b"])
        self.assertEqual(request.first("source").value, "a")
        self.assertEqual(request.first("dest").value, "b")

    def testOptionalPositionalServedFirstComeFirstServed(self):
        request = match("[dest] source", ["a"])
        self.assertEqual(request.values("dest"), ("a",))
        self.assertNotIn("source", request)

    def testRepeatableTakesEverythingLeft(self):
        request = match("rest# last", ["1", "2"])
        self.assertEqual(request.values("rest"), ("1", "2"))
        self.assertEqual(request.all("last"), ())

    def testLeftoverPositionalsAreUnexpected(self):
        request = match("one", ["1", "2", "3"])
        self.assertEqual(request.values("one"), ("1",))
        self.assertEqual([argument.value for argument in request.unexpected], ["2", "3"])

    def testUndescribedNamedIsUnknown(self):
        request = match("-verbose", ["-verbos"])
        self.assertEqual([argument.name for argument in request.unknown], ["verbos"])
        self.assertNotIn("verbose", request)

    def testNamedNeverMatchesPositionalDescription(self):
        request = match("file", ["-file:x", "a"])
        self.assertEqual([argument.raw for argument in request.unknown], ["-file:x"])
        self.assertEqual(request.values("file"), ("a",))

    def testNamedGroupedCaseInsensitively(self):
        request = match("-Label:str", ["-LABEL:x", "-label:y"])
        self.assertTrue(request.contains("label"))
        self.assertIn("LABEL", request)
        self.assertEqual(request.values("Label"), ("x", "y"))

    def testNamedAndPositionalInterleaved(self):
        request = match("files# -count:int", ["a", "-count:2", "b"])
        self.assertEqual(request.values("files"), ("a", "b"))
        self.assertEqual(request.values("count"), ("2",))

    def testSameNamedPositionalsKeepTheirOwnSlot(self):
        with self.assertWarns(Warning):
            request = match("file file", ["a", "b"])
        self.assertEqual([argument.value for argument in request.slot(0)], ["a"])
        self.assertEqual([argument.value for argument in request.slot(1)], ["b"])
        self.assertEqual(request.values("file"), ("a", "b"))

    def testNamedSlotHoldsEveryOccurrence(self):
        request = match("file -tag#:str", ["-tag:x", "a", "-tag:y"])
        self.assertEqual([argument.value for argument in request.slot(1)], ["x", "y"])

    def testFirstWithoutMatch(self):
        request = match("[dest]", [])
        with self.assertRaises(KeyError):
            request.first("dest")
        self.assertIsNone(request.first("dest", None))
        self.assertEqual(request.first("dest", "fallback"), "fallback")

    def testNotValidUntilValidated(self):
        self.assertFalse(match("file", ["a"]).valid)

    def testArgumentsKept(self):
        request = match("file", ["a", "-x"])
        self.assertEqual([argument.raw for argument in request.arguments], ["a", "-x"])
        self.assertEqual([description.name for description in request.descriptions], ["file"])

    def testInputsChecked(self):
        with self.assertRaises(TypeError):
            Request("a", [])
        with self.assertRaises(TypeError):
            Request(["a"], [])
        with self.assertRaises(TypeError):
            Request([], ["file"])

    def testRepr(self):
        self.assertIn("unexpected=['2']", repr(match("one", ["1", "2"])))


class TestCreateRequest(TestCase):
    """Behavioral tests for create_request()."""

    def testDefaultsToWindowsStyle(self):
        descriptions = parse_all(WINDOWS_STYLE, NoHelp(), "/out:string")
        request = create_request(["/out:x"], descriptions)
        self.assertTrue(request.valid)
        self.assertEqual(request.values("out"), ("x",))

    def testDefaultValidatorRejects(self):
        descriptions = parse_all(OPTIONS, NoHelp(), "count:int")
        self.assertFalse(create_request(["five"], descriptions, OPTIONS).valid)
        self.assertTrue(create_request(["5"], descriptions, OPTIONS).valid)

    def testSameNamedPositionalsEachRequired(self):
        with self.assertWarns(Warning):
            descriptions = parse_all(OPTIONS, NoHelp(), "file file")
        self.assertTrue(create_request(["a", "b"], descriptions, OPTIONS).valid)
        self.assertFalse(create_request(["a"], descriptions, OPTIONS).valid)

    def testNoValidator(self):
        descriptions = parse_all(OPTIONS, NoHelp(), "count:int")
        request = create_request(["5"], descriptions, OPTIONS, validator=None)
        self.assertFalse(request.valid)
        self.assertEqual(request.values("count"), ("5",))

    def testCustomValidator(self):
        validator = RecordingValidator()
        descriptions = parse_all(OPTIONS, NoHelp(), "count:int")
        request = create_request(["five", "six"], descriptions, OPTIONS, validator=validator)
        self.assertTrue(request.valid)
        self.assertEqual(len(validator.calls), 1)
        self.assertEqual(validator.calls[0][0], descriptions)
        self.assertIs(validator.calls[0][1], request)

    def testVerdictCoercedToBool(self):
        validator = RecordingValidator(verdict=1)
        self.assertIs(create_request([], [], OPTIONS, validator=validator).valid, True)

    def testOptionsMustBeCliOptions(self):
        with self.assertRaises(TypeError):
            create_request([], [], ("-", ":"))


if __name__ == "__main__":
    unittest.main()
