"""
Parameter types and the registry that resolves type tags.

A type tag is the lower-cased text after the separator in a pattern token
("count=int" → "int"). The registry maps every tag (a type's name and its
aliases) to a ParamType, which knows how to convert a raw argument value.

Default registry
- string  (str)
- int     (integer, int32, int64, long)
- float   (double, decimal, single)
- bool    (boolean), accepts true/false, yes/no, on/off, 1/0

Hosts may build their own ParamTypeRegistry, or register extra types on the
default one, and pass it to parse()/parse_all()/bind() through `types=`.
"""
from .faults import FaultCode, UnknownTypeError, getdoc
from .internals import ValueType
from .utils import casefold


class ParamType(metaclass=ValueType):
    """
    A named converter for raw argument values.

    Parameters
    - name: str, the canonical tag (lower-case).
    - converter: Callable[[str], T]; must raise ValueError or TypeError for
      values it does not accept.
    - aliases: Iterable[str], extra tags resolving to this type.
    """

    __introspectable__ = (
        "name",
        "converter",
        "aliases",
    )
    __displayable__ = (
        "name",
        "aliases",
    )
    __identity__ = (
        "name",
    )

    def __init__(self, name, converter, /, aliases=()):
        if not isinstance(name, str):
            raise TypeError(f"{type(self).__typename__} 'name' must be a string")
        elif not (name := casefold(name)):
            raise ValueError(f"{type(self).__typename__} 'name' cannot be empty")
        if not callable(converter):
            raise TypeError(f"{type(self).__typename__} 'converter' must be callable")
        if isinstance(aliases, str):
            raise TypeError(f"{type(self).__typename__} 'aliases' must be an iterable of strings, not a string")

        sanitized = []
        for alias in aliases:
            if not isinstance(alias, str):
                raise TypeError(f"{type(self).__typename__} 'aliases' must be strings")
            elif not (alias := casefold(alias)):
                raise ValueError(f"{type(self).__typename__} 'aliases' cannot be empty-strings")
            elif alias == name or alias in sanitized:
                raise ValueError(f"{type(self).__typename__} 'aliases' cannot contain duplicates")
            sanitized.append(alias)

        self._name = name
        self._converter = converter
        self._aliases = tuple(sanitized)

    @property
    def tags(self):
        return (self.name, *self.aliases)

    def convert(self, value, /):
        """
        Convert a raw value; ValueError/TypeError propagate from the converter.
        """
        return self.converter(value)

    def validate(self, value, /):
        """
        Return True when convert(value) succeeds.
        """
        try:
            self.converter(value)
        except (ValueError, TypeError):
            return False
        return True


def _boolean(value, /):
    if not isinstance(value, str):
        raise TypeError("boolean value must be a string")
    match value.strip().casefold():
        case "true" | "yes" | "on" | "1":
            return True
        case "false" | "no" | "off" | "0":
            return False
    raise ValueError(f"invalid boolean value {value!r}")


class ParamTypeRegistry:
    """
    Mapping from type tag to ParamType.

    resolve() is the only operation the parser relies on; it must be a pure
    lookup so that parsing stays deterministic.
    """

    def __init__(self, types=(), /):
        self._types = {}
        for type in types:
            self.register(type)

    def register(self, type, /, *, replace=False):
        """
        Register a ParamType under its name and aliases.

        Raises
        - TypeError: when `type` is not a ParamType.
        - ValueError: when a tag is already taken and `replace` is False.
        """
        if not isinstance(type, ParamType):
            raise TypeError("register() argument must be a param-type")
        if not replace:
            for tag in type.tags:
                if tag in self._types:
                    raise ValueError(f"register() tag {tag!r} is already in use")
        for tag in type.tags:
            self._types[tag] = type
        return type

    def resolve(self, tag, /):
        """
        Return the ParamType registered for `tag` (case-insensitive).

        Raises
        - UnknownTypeError: no type is registered under that tag.
        """
        if not isinstance(tag, str):
            raise TypeError("resolve() argument must be a string")
        try:
            return self._types[casefold(tag)]
        except KeyError:
            raise UnknownTypeError(
                "unknown parameter type %r" % tag,
                title="unknown type",
                code=FaultCode.UNKNOWN_TYPE,
                hint="use one of: %s" % ", ".join(sorted(self._types)),
                tag=tag,
                docs=getdoc(FaultCode.UNKNOWN_TYPE)
            ) from None

    def __contains__(self, tag, /):
        return isinstance(tag, str) and casefold(tag) in self._types

    def __iter__(self):
        return iter(dict.fromkeys(self._types.values()))

    def __repr__(self):
        return f"param-type-registry({", ".join(type.name for type in self)})"


STRING = ParamType("string", str, aliases=("str",))
INTEGER = ParamType("int", int, aliases=("integer", "int32", "int64", "long"))
FLOAT = ParamType("float", float, aliases=("double", "decimal", "single"))
BOOLEAN = ParamType("bool", _boolean, aliases=("boolean",))

registry = ParamTypeRegistry((STRING, INTEGER, FLOAT, BOOLEAN))


__all__ = (
    "ParamType",
    "ParamTypeRegistry",
    "STRING",
    "INTEGER",
    "FLOAT",
    "BOOLEAN",
    "registry",
)
