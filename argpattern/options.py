"""
Parser configuration.

CliOptions is the one immutable value shared by every parsing call of a run:
- prefix: the string that marks a named parameter ("--", "-", "/").
- equal_char: the single character separating a name from its type tag in a
  pattern ("count=int") and a name from its value in an argument
  ("--count=5").

Presets
- WINDOWS_STYLE: "/name:value" (the default of create_request()).
- UNIX_STYLE:    "--name=value".
"""
from .internals import ValueType


class CliOptions(metaclass=ValueType):
    """
    Immutable prefix/separator configuration.

    Parameters
    - prefix: str
      Non-empty, no whitespace.
    - equal_char: str
      Exactly one non-whitespace character.

    Raises
    - TypeError: when either argument is not a string.
    - ValueError: when either argument has the wrong shape.
    """

    __introspectable__ = (
        "prefix",
        "equal_char",
    )

    def __init__(self, prefix, equal_char, /):
        if not isinstance(prefix, str):
            raise TypeError(f"{type(self).__typename__} 'prefix' must be a string")
        elif not prefix or any(char.isspace() for char in prefix):
            raise ValueError(f"{type(self).__typename__} 'prefix' must be non-empty and contain no whitespace")

        if not isinstance(equal_char, str):
            raise TypeError(f"{type(self).__typename__} 'equal_char' must be a string")
        elif len(equal_char) != 1 or equal_char.isspace():
            raise ValueError(f"{type(self).__typename__} 'equal_char' must be a single non-whitespace character")

        self._prefix = prefix
        self._equal_char = equal_char

    def __replace__(self, /, **changes):
        return type(self)(changes.pop("prefix", self.prefix), changes.pop("equal_char", self.equal_char), **changes)


WINDOWS_STYLE = CliOptions("/", ":")
UNIX_STYLE = CliOptions("--", "=")


__all__ = (
    "CliOptions",
    "WINDOWS_STYLE",
    "UNIX_STYLE",
)
