"""
Faults module behavioral tests (codes, hierarchy and rich rendering).

Scope
- Validate code values and exception hierarchy (ValueError/TypeError bases).
- Validate rendering through a rich Console (header, message, hint, panel).
- Validate getdoc() lookups and ArgumentFault records.

Conventions
- Test method names follow CamelCase per project convention.
- Rendering is captured with a plain (colorless) console.
"""

from __future__ import annotations

import io
import unittest
from unittest import TestCase

from rich.console import Console
from rich.panel import Panel

from argpattern import (
    ArgumentFault,
    BindingError,
    DuplicateDescriptionWarning,
    EmptyPatternError,
    FaultCode,
    MissingNameError,
    PatternException,
    PatternSyntaxError,
    PatternWarning,
    UnknownTypeError,
    getdoc,
)


def render(renderable):
    console = Console(file=io.StringIO(), width=120, color_system=None)
    console.print(renderable)
    return console.file.getvalue()


class TestFaultCode(TestCase):
    """Behavioral tests for FaultCode."""

    def testStableValues(self):
        self.assertEqual(FaultCode.EMPTY_PATTERN, 21101)
        self.assertEqual(FaultCode.MISSING_NAME, 21102)
        self.assertEqual(FaultCode.UNKNOWN_TYPE, 21103)
        self.assertEqual(FaultCode.UNKNOWN_ARGUMENT, 21201)
        self.assertEqual(FaultCode.INVALID_VALUE, 21207)
        self.assertEqual(FaultCode.UNCONVERTIBLE_VALUE, 21301)
        self.assertEqual(FaultCode.DUPLICATED_DESCRIPTION, 22101)

    def testNormalizeDefaultsToNumber(self):
        self.assertEqual(FaultCode.MISSING_NAME.normalize(), "21102")


class TestHierarchy(TestCase):
    """Behavioral tests for the exception and warning classes."""

    def testSyntaxErrorsAreValueErrors(self):
        for kind in (EmptyPatternError, MissingNameError, UnknownTypeError):
            with self.subTest(kind=kind):
                self.assertTrue(issubclass(kind, PatternSyntaxError))
                self.assertTrue(issubclass(kind, ValueError))
                self.assertTrue(issubclass(kind, PatternException))

    def testBindingErrorIsTypeError(self):
        self.assertTrue(issubclass(BindingError, TypeError))
        self.assertTrue(issubclass(BindingError, PatternException))

    def testWarnings(self):
        self.assertTrue(issubclass(DuplicateDescriptionWarning, PatternWarning))
        self.assertTrue(issubclass(PatternWarning, Warning))

    def testMessageAndOptions(self):
        error = MissingNameError("no name", code=FaultCode.MISSING_NAME, pattern="--")
        self.assertEqual(str(error), "no name")
        self.assertEqual(error.message, "no name")
        self.assertIs(error.code, FaultCode.MISSING_NAME)
        self.assertEqual(error.options["pattern"], "--")
        with self.assertRaises(TypeError):
            error.options["pattern"] = "x"

    def testReplaceKeepsKindAndMessage(self):
        error = UnknownTypeError("unknown", tag="x").__replace__(pattern="a=x")
        self.assertIsInstance(error, UnknownTypeError)
        self.assertEqual(error.message, "unknown")
        self.assertEqual(dict(error.options), {"tag": "x", "pattern": "a=x"})


class TestRendering(TestCase):
    """Behavioral tests for __rich__ rendering."""

    def testErrorRendering(self):
        error = MissingNameError(
            "pattern token '--' has no name",
            code=FaultCode.MISSING_NAME,
            title="missing name",
            hint="write a name after the prefix"
        )
        output = render(error)
        self.assertIn("21102", output)
        self.assertIn("Missing Name", output)
        self.assertIn("pattern token '--' has no name", output)
        self.assertIn("→ write a name after the prefix", output)

    def testBareErrorRenders(self):
        output = render(PatternSyntaxError("bad"))
        self.assertIn("bad", output)

    def testFancyRendering(self):
        error = EmptyPatternError("empty", code=FaultCode.EMPTY_PATTERN, title="empty pattern", fancy=True)
        self.assertIsInstance(error.__rich__(), Panel)
        self.assertIn("Empty Pattern", render(error))

    def testWarningRendering(self):
        warning = DuplicateDescriptionWarning(
            "duplicate",
            code=FaultCode.DUPLICATED_DESCRIPTION,
            title="duplicated description"
        )
        self.assertIn("22101", render(warning))

    def testArgumentFaultRendering(self):
        fault = ArgumentFault("missing required argument 'file'", code=FaultCode.MISSING_REQUIRED, title="missing argument")
        output = render(fault)
        self.assertIn("21203", output)
        self.assertIn("Missing Argument", output)


class TestArgumentFault(TestCase):
    """Behavioral tests for ArgumentFault records."""

    def testRecord(self):
        fault = ArgumentFault("oops", code=FaultCode.INVALID_VALUE)
        self.assertEqual(str(fault), "oops")
        self.assertIs(fault.code, FaultCode.INVALID_VALUE)
        self.assertIn("oops", repr(fault))
        self.assertNotIsInstance(fault, Exception)

    def testMessageMustBeString(self):
        with self.assertRaises(TypeError):
            ArgumentFault(None)


class TestGetDoc(TestCase):
    """Behavioral tests for getdoc()."""

    def testMissingDocsIsNone(self):
        self.assertIsNone(getdoc(FaultCode.UNKNOWN_TYPE))

    def testNonCodeRejected(self):
        with self.assertRaises(TypeError):
            getdoc(21103)


if __name__ == "__main__":
    unittest.main()
