"""
Argpattern arguments: raw invocation tokens as name/value pairs.

tokenize() is the argument factory consumed by requests and schema binding.
Its rules are deliberately small:

- A token that starts with the prefix, and has something after it, is named.
  The name runs up to the first separator; the value is what follows it, or
  None when there is no separator ("--verbose").
- Anything else, including a bare prefix ("-" often means stdin), is a
  positional argument whose value is the whole token.

No quoting, no clustering of short flags, no end-of-options marker: the
tokens are expected to be split already (e.g. sys.argv[1:]).

Examples (prefix "-", separator ":")
    "-label:hello"  →  Argument("label", "hello")
    "-verbose"      →  Argument("verbose", None)
    "-label:"       →  Argument("label", "")
    "5"             →  Argument(None, "5")
"""
from collections.abc import Iterable

from .internals import ValueType
from .options import CliOptions


class Argument(metaclass=ValueType):
    """
    One invocation token.

    Properties
    - name: str | None, None for positional arguments.
    - value: str | None, None for a named argument without separator.
    - raw: str, the token as given.
    """

    __introspectable__ = (
        "name",
        "value",
        "raw",
    )

    def __init__(self, name, value, /, raw=None):
        if not isinstance(name, str | None):
            raise TypeError(f"{type(self).__typename__} 'name' must be a string or None")
        elif isinstance(name, str) and not name:
            raise ValueError(f"{type(self).__typename__} 'name' cannot be empty")
        if not isinstance(value, str | None):
            raise TypeError(f"{type(self).__typename__} 'value' must be a string or None")
        if name is None and value is None:
            raise ValueError(f"positional {type(self).__typename__} must have a value")

        self._name = name
        self._value = value
        self._raw = raw if raw is not None else value if name is None else name

    @property
    def named(self):
        return self._name is not None

    @property
    def positional(self):
        return self._name is None


def tokenize(prefix, equal_char, arguments, /):
    """
    Turn raw invocation strings into Arguments, preserving order.

    Parameters
    - prefix: str, the named-argument prefix.
    - equal_char: str, the name/value separator.
    - arguments: Iterable[str], the raw tokens.

    Returns
    - list[Argument]

    Raises
    - TypeError: when `arguments` is a plain string or holds non-strings.
    """
    if not isinstance(prefix, str) or not prefix:
        raise TypeError("tokenize() first argument must be a non-empty string")
    if not isinstance(equal_char, str) or len(equal_char) != 1:
        raise TypeError("tokenize() second argument must be a single character")
    if isinstance(arguments, str) or not isinstance(arguments, Iterable):
        raise TypeError("tokenize() third argument must be an iterable of strings")

    tokens = []
    for token in arguments:
        if not isinstance(token, str):
            raise TypeError("tokenize() third argument must be an iterable of strings")
        if token.startswith(prefix) and len(token) > len(prefix):
            name, separator, value = token[len(prefix):].partition(equal_char)
            if name:
                tokens.append(Argument(name, value if separator else None, raw=token))
                continue
        tokens.append(Argument(None, token, raw=token))
    return tokens


def tokenize_with(options, arguments, /):
    """
    tokenize() with the prefix and separator taken from CliOptions.
    """
    if not isinstance(options, CliOptions):
        raise TypeError("tokenize_with() first argument must be cli-options")
    return tokenize(options.prefix, options.equal_char, arguments)


__all__ = (
    "Argument",
    "tokenize",
    "tokenize_with",
)
