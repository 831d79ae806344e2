"""
Argpattern faults (errors, warnings and validation records) and rendering.

Scope
- FaultCode: stable numeric identifiers for every issue the engine reports.
  Codes are grouped by domain: pattern syntax (211xx), argument validation
  (212xx), schema binding (213xx) and warnings (221xx).
- PatternException: base for every error the engine raises. Carries a message
  plus read-only options (code, title, hint, pattern, ...) and knows how to
  render itself through rich.
- PatternSyntaxError and subclasses: a pattern token is malformed. Raised at
  parse time; patterns are authored by developers, so these are programmer
  errors rather than user input to recover from.
- BindingError: a validated value could not be written onto a schema field.
- PatternWarning: emitted through warnings.warn, never changes a result.
- ArgumentFault: one validation problem found in end-user input. It is a
  record, not an exception: validation failure is an expected outcome and is
  reported as a boolean by the validator.
- getdoc(): optional description lookup for a code from the host application.

Host hooks (read from __main__ when present)
- __prog__: program name shown in headers (defaults to basename of argv[0]).
- __styles__: style overrides merged over the defaults.
- __codes__: mapping FaultCode -> label, see FaultCode.normalize().
- __docs__: mapping FaultCode -> documentation string, see getdoc().

Rendering
- Every fault implements __rich__, so `Console().print(fault)` shows a header
  "[ prog — code | title ]", the message, and a "→ hint" line.
- Options "colorful" (default True) and "fancy" (default False, wraps the
  output in a Panel) change the presentation only.
"""
import os.path
import sys
from collections import defaultdict
from enum import IntEnum
from types import MappingProxyType

from rich.console import Group
from rich.panel import Panel
from rich.text import Text

from .utils import Unset


class FaultCode(IntEnum):
    """
    canonical fault codes (stable identifiers).

    grouping
    - pattern syntax (211xx)
      • EMPTY_PATTERN, MISSING_NAME, UNKNOWN_TYPE
    - argument validation (212xx)
      • UNKNOWN_ARGUMENT, UNEXPECTED_POSITIONAL, MISSING_REQUIRED,
        DUPLICATED_ARGUMENT, FLAG_ASSIGNMENT, MISSING_VALUE, INVALID_VALUE
    - schema binding (213xx)
      • UNCONVERTIBLE_VALUE
    - warnings (221xx)
      • DUPLICATED_DESCRIPTION
    """
    # --- pattern syntax errors (211xx) ---
    EMPTY_PATTERN               = 21101
    MISSING_NAME                = 21102
    UNKNOWN_TYPE                = 21103

    # --- argument validation faults (212xx) ---
    UNKNOWN_ARGUMENT            = 21201
    UNEXPECTED_POSITIONAL       = 21202
    MISSING_REQUIRED            = 21203
    DUPLICATED_ARGUMENT         = 21204
    FLAG_ASSIGNMENT             = 21205
    MISSING_VALUE               = 21206
    INVALID_VALUE               = 21207

    # --- schema binding errors (213xx) ---
    UNCONVERTIBLE_VALUE         = 21301

    # --- warnings (221xx) ---
    DUPLICATED_DESCRIPTION      = 22101

    def normalize(self):
        """
        label shown for this code in rendered faults.

        a host may relabel codes through a `__codes__` dict in __main__;
        otherwise the number itself is used.
        """
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, self.value))


_ERROR_STYLES = {
    "prog-name": "bold #E6E6F0",  # near-white program name
    "code": "bold #00E5FF",  # neon cyan fault code
    "title": "bold #FF4DA6",  # friendly pinky title
    "message": "#C8C8D0",  # soft light gray message
    "hint-arrow": "#9CE19C dim",  # gentle green arrow
    "hint": "italic #9CE19C",  # gentle green hint text
}

_WARNING_STYLES = _ERROR_STYLES | {
    "code": "bold #FFB400",  # amber fault code
    "title": "bold #FFC2E0",  # softer pinky title
    "message": "#D6D6DE",
}


def _render(fault, defaults, /):
    """
    Build the rich renderable shared by every fault kind.

    The fault must expose `message` and a mapping `options`; missing options
    fall back to neutral defaults so that a bare `PatternSyntaxError("x")`
    still renders.
    """
    main = __import__("__main__")
    options = fault.options
    colorful = options.get("colorful", True)
    styles = defaultdict(str, defaults | getattr(main, "__styles__", {}))

    def text(fragment, style):
        if not fragment:
            return Text("")
        if isinstance(fragment, Text):
            return fragment if colorful else Text(fragment.plain)
        return Text(str(fragment), styles[style] if colorful else "")

    prog = getattr(main, "__prog__", os.path.basename(sys.argv[0]) or "argpattern")
    code = options.get("code")
    title = options.get("title", type(fault).__name__)

    header = Text.assemble(
        "[ ",
        text(prog, "prog-name"),
        " — ",
        text(code.normalize() if isinstance(code, FaultCode) else "-", "code"),
        " | ",
        text(title.title(), "title"),
        " ]"
    )
    message = text(fault.message or "", "message")

    parts = [message]
    if hint := options.get("hint"):
        parts.append(Text.assemble(text(" → ", "hint-arrow"), text(hint, "hint")))

    if options.get("fancy", False):
        return Panel(Group(*parts), title=header, title_align="left")
    return Group(header, *parts)


class PatternException(Exception):
    """
    Base of every error raised by the engine.

    Parameters
    - message: str, the one-sentence description of the problem.
    - options: keyword context kept read-only in `self.options`; the usual
      keys are code, title, hint and pattern.
    """

    def __init__(self, message=Unset, /, **options):
        assert message is Unset or isinstance(message, str)
        super().__init__(*(() if message is Unset else (message,)))
        self.message = message
        self.options = MappingProxyType(options)

    @property
    def code(self):
        return self.options.get("code")

    def __rich__(self):
        return _render(self, _ERROR_STYLES)

    def __replace__(self, *unused, **overrides):
        assert not unused, "positional arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


class PatternSyntaxError(PatternException, ValueError): ...
class EmptyPatternError(PatternSyntaxError): ...
class MissingNameError(PatternSyntaxError): ...
class UnknownTypeError(PatternSyntaxError): ...

class BindingError(PatternException, TypeError): ...


class PatternWarning(Warning):
    def __init__(self, message=Unset, /, **options):
        assert message is Unset or isinstance(message, str)
        super().__init__(*(() if message is Unset else (message,)))
        self.message = message
        self.options = MappingProxyType(options)

    def __rich__(self):
        return _render(self, _WARNING_STYLES)


class DuplicateDescriptionWarning(PatternWarning): ...


class ArgumentFault:
    """
    One problem found while validating end-user arguments.

    Faults are collected by the validator and handed to its reporter; they are
    never raised. `argument` and `description` (when known) are available in
    `options` for hosts that want to build their own messages.
    """

    def __init__(self, message, /, **options):
        if not isinstance(message, str):
            raise TypeError("ArgumentFault() argument must be a string")
        self.message = message
        self.options = MappingProxyType(options)

    @property
    def code(self):
        return self.options.get("code")

    def __rich__(self):
        return _render(self, _ERROR_STYLES)

    def __repr__(self):
        return f"ArgumentFault({self.message!r}, code={self.code!r})"

    def __str__(self):
        return self.message


def getdoc(code, /):
    """
    documentation attached to `code` by the host, or None.

    hosts register it through a `__docs__` dict (FaultCode -> str) in
    __main__; every raised error and reported fault carries the result
    under the "docs" option.
    """
    if not isinstance(code, FaultCode):
        raise TypeError("getdoc() argument must be a fault-code")
    try:
        return getattr(__import__("__main__"), "__docs__", {})[code]
    except KeyError:
        return None


__all__ = (
    "FaultCode",
    "PatternException",
    "PatternSyntaxError",
    "EmptyPatternError",
    "MissingNameError",
    "UnknownTypeError",
    "BindingError",
    "PatternWarning",
    "DuplicateDescriptionWarning",
    "ArgumentFault",
    "getdoc",
)
