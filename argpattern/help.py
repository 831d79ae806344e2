"""
Help providers.

A help provider is any object with a `get(name) -> str | Text` method. The
parser calls it once per description with the final parameter name and stores
the result untouched: fallback rules belong to the provider, not the parser.

Providers shipped here
- NoHelp: always "" (the default for hand-written patterns).
- MappingHelp: case-insensitive lookup in a mapping, "" when absent.

The schema-scoped provider, SchemaHelp, lives in argpattern.schemas next to
the schema descriptor it reads.
"""
from collections.abc import Mapping

from rich.text import Text

from .utils import casefold


class NoHelp:
    """
    Help provider for patterns without documentation.
    """

    def get(self, name, /):
        return ""

    def __repr__(self):
        return "no-help()"


class MappingHelp:
    """
    Help provider backed by a mapping of parameter name to help text.

    Keys are matched case-insensitively. Values must be str or rich Text;
    surrounding whitespace of str values is dropped.
    """

    def __init__(self, mapping=None, /, **texts):
        if mapping is None:
            mapping = {}
        elif not isinstance(mapping, Mapping):
            raise TypeError("MappingHelp() argument must be a mapping")

        self._texts = {}
        for name, text in {**mapping, **texts}.items():
            if not isinstance(name, str):
                raise TypeError("MappingHelp() names must be strings")
            if not isinstance(text, str | Text):
                raise TypeError("MappingHelp() texts must be strings")
            self._texts[casefold(name)] = text.strip() if isinstance(text, str) else text

    def get(self, name, /):
        return self._texts.get(casefold(name), "")

    def __contains__(self, name, /):
        return isinstance(name, str) and casefold(name) in self._texts

    def __repr__(self):
        return f"mapping-help({", ".join(map(repr, self._texts))})"


__all__ = (
    "NoHelp",
    "MappingHelp",
)
