"""
Argpattern schemas: dataclasses as parameter descriptions.

A schema is a dataclass whose public fields are the parameters of a program.
The engine turns it into a pattern string, parses that pattern like any
hand-written one, and writes the matched values back into a new instance.

Declaring a schema
    >>> from dataclasses import dataclass
    >>> @dataclass
    ... class Copy:
    ...     source: str = ""
    ...     count: int = 1
    ...     label: str = param("", role=Role.NAMED, help="label of the copy")
    ...
    >>> derive_syntax(CliOptions("-", ":"), Copy)
    'source:str count:int -label:str'
    >>> bind(Copy, CliOptions("-", ":"), ["a.txt", "5", "-label:hello"])
    Copy(source='a.txt', count=5, label='hello')

Field overrides
- Every field is positional by default and named after the lower-cased
  field name.
- metadata["cli"] holds a CliName(role, name) record overriding the role and,
  when given, the name; named()/passed() build one, param() builds the whole
  dataclasses.field.
- metadata["help"] holds the help text served by SchemaHelp.

Derived patterns
- One token per public field: "<prefix if named><name>:<type name>", where
  the type name is the lower-cased class name of the annotation (str, int,
  float, bool, or any class the type registry knows under that tag).
- The separator is always ":". derive_syntax() and bind() reject options
  with any other separator (ValueError): the derived tokens would not parse
  back into the fields they came from.
- Derived parameters are always required, single and typed.

Binding
- bind() returns None when validation fails; that is the expected outcome of
  bad user input and never raises.
- Values are written onto the field whose name matches the description name
  (case-insensitive); a description renamed by an override to something that
  is not a field name is validated but not written.
- Repeatable parameters are not collected: only the first value is bound.
- A value the field's type cannot convert raises BindingError; validation
  already checked it, so this means the schema and the registry disagree.
- The instance is built with cls() and then dataclasses.replace(), so every
  public field needs a default and frozen dataclasses are supported.
"""
import dataclasses
import functools
import typing

from rich.text import Text

from .descriptions import Role, parse_all
from .faults import BindingError, FaultCode, getdoc
from .internals import ValueType
from .options import CliOptions
from .paramtypes import registry
from .requests import create_request
from .utils import Unset, casefold, coalesce


class CliName(metaclass=ValueType):
    """
    Override record for one schema field: role and, optionally, name.
    """

    __introspectable__ = (
        "role",
        "name",
    )

    def __init__(self, role, name=None, /):
        if not isinstance(role, Role):
            raise TypeError(f"{type(self).__typename__} 'role' must be a role")
        if not isinstance(name, str | None):
            raise TypeError(f"{type(self).__typename__} 'name' must be a string")
        elif isinstance(name, str) and not (name := name.strip()):
            raise ValueError(f"{type(self).__typename__} 'name' cannot be empty")
        elif isinstance(name, str) and any(char.isspace() for char in name):
            raise ValueError(f"{type(self).__typename__} 'name' cannot contain whitespace")
        self._role = role
        self._name = name


def named(name=None, /):
    return CliName(Role.NAMED, name)


def passed(name=None, /):
    return CliName(Role.PASSED, name)


def param(default=Unset, /, *, role=Unset, name=Unset, help=Unset, **kwargs):
    """
    Build a dataclasses.field carrying CLI metadata.

    Parameters
    - default: the field default (omit it together with default_factory for
      fields that must be given to the constructor).
    - role: Role, overrides the positional default.
    - name: str, overrides the lower-cased field name.
    - help: str | Text, served by SchemaHelp.
    - kwargs: forwarded to dataclasses.field (default_factory, repr, ...).
    """
    metadata = dict(kwargs.pop("metadata", None) or {})
    if role is not Unset or name is not Unset:
        metadata["cli"] = CliName(coalesce(role, Role.PASSED), coalesce(name))
    if help is not Unset:
        if not isinstance(help, str | Text):
            raise TypeError("param() 'help' must be a string")
        metadata["help"] = help
    if default is not Unset:
        kwargs["default"] = default
    return dataclasses.field(metadata=metadata, **kwargs)


class SchemaField(metaclass=ValueType):
    """
    One public field of a schema, as the engine sees it.

    Properties
    - name: the attribute name.
    - type: the annotated class.
    - role: Role after overrides.
    - alias: the parameter name after overrides.
    - help: str | Text
    """

    __introspectable__ = (
        "name",
        "type",
        "role",
        "alias",
        "help",
    )
    __identity__ = (
        "name",
        "type",
        "role",
        "alias",
    )

    def __init__(self, name, type, role, alias, help="", /):
        self._name = name
        self._type = type
        self._role = role
        self._alias = alias
        self._help = help

    def token(self, options, /):
        return "%s%s:%s" % (
            options.prefix if self.role is Role.NAMED else "",
            self.alias,
            self.type.__name__.lower(),
        )


class Schema(metaclass=ValueType):
    """
    The parameter view of a dataclass, built once per type by schema().
    """

    __introspectable__ = (
        "type",
        "fields",
    )

    def __init__(self, type, fields, /):
        self._type = type
        self._fields = tuple(fields)

    def field(self, name, /):
        """
        The field whose attribute name matches `name` (case-insensitive), or None.
        """
        key = casefold(name)
        for field in self.fields:
            if casefold(field.name) == key:
                return field
        return None

    def help(self, name, /):
        """
        The help text of the field whose parameter name matches `name`, or "".
        """
        key = casefold(name)
        for field in self.fields:
            if casefold(field.alias) == key:
                return field.help
        return ""


@functools.cache
def schema(cls, /):
    """
    Build (once) the Schema of a dataclass type.

    Public fields are those not starting with "_" and accepted by __init__.

    Raises
    - TypeError: `cls` is not a dataclass type, a field is annotated with
      something other than a plain class, or carries a malformed override.
    """
    if not isinstance(cls, type) or not dataclasses.is_dataclass(cls):
        raise TypeError("schema() argument must be a dataclass type")

    hints = typing.get_type_hints(cls)

    fields = []
    for field in dataclasses.fields(cls):
        if field.name.startswith("_") or not field.init:
            continue

        hint = hints.get(field.name, field.type)
        if not isinstance(hint, type):
            raise TypeError(f"schema() field {field.name!r} must be annotated with a plain class, not {hint!r}")

        override = field.metadata.get("cli")
        if override is not None and not isinstance(override, CliName):
            raise TypeError(f"schema() field {field.name!r} 'cli' metadata must be a cli-name")

        help = field.metadata.get("help", "")
        if not isinstance(help, str | Text):
            raise TypeError(f"schema() field {field.name!r} 'help' metadata must be a string")

        fields.append(SchemaField(
            field.name,
            hint,
            override.role if override is not None else Role.PASSED,
            override.name if override is not None and override.name else field.name.lower(),
            help,
        ))

    return Schema(cls, fields)


class SchemaHelp:
    """
    Help provider scoped to a schema type: serves the fields' "help" metadata.
    """

    def __init__(self, cls, /):
        self._schema = schema(cls)

    def get(self, name, /):
        return self._schema.help(name)

    def __repr__(self):
        return f"schema-help({self._schema.type.__qualname__})"


def derive_syntax(options, cls, /):
    """
    Synthesize the pattern string describing the public fields of `cls`.
    """
    if not isinstance(options, CliOptions):
        raise TypeError("derive_syntax() first argument must be cli-options")
    if options.equal_char != ":":
        raise ValueError("derive_syntax() cli-options separator must be ':', not %r" % options.equal_char)
    return " ".join(field.token(options) for field in schema(cls).fields)


def bind(cls, options, arguments, /, *, validator=Unset, types=registry):
    """
    Populate a new `cls` instance from raw invocation arguments.

    Parameters
    - cls: a dataclass type whose public fields all have defaults.
    - options: CliOptions, used both for the derived pattern and to tokenize.
    - arguments: Iterable[str], e.g. sys.argv[1:].
    - validator: anything with validate(descriptions, request) -> bool;
      Unset uses the default Validator.
    - types: the type registry used to parse and to convert.

    Returns
    - a new instance of `cls`, or None when the arguments are invalid.

    Raises
    - ValueError: the options separator is not ":".
    - PatternSyntaxError: the derived pattern does not parse (e.g. a field
      type the registry does not know).
    - BindingError: a validated value cannot be converted to its field type.
    """
    if not isinstance(options, CliOptions):
        raise TypeError("bind() second argument must be cli-options")
    if options.equal_char != ":":
        raise ValueError("bind() cli-options separator must be ':', not %r" % options.equal_char)
    if validator is not Unset and (not hasattr(validator, "validate") or not callable(validator.validate)):
        raise TypeError("bind() 'validator' must have a validate method")

    descriptor = schema(cls)
    descriptions = parse_all(options, SchemaHelp(cls), derive_syntax(options, cls), types=types)

    request = create_request(arguments, descriptions, options, validator=validator)
    if not request.valid:
        return None

    values = {}
    for description in descriptions:
        if (field := descriptor.field(description.name)) is None or not request.contains(description.name):
            continue
        # Repeatable parameters bind their first value only.
        argument = request.first(description.name)
        try:
            values[field.name] = types.resolve(field.type.__name__.lower()).convert(argument.value)
        except (ValueError, TypeError) as exception:
            raise BindingError(
                "cannot convert %r to %s for field %r of %s" % (
                    argument.value,
                    field.type.__name__,
                    field.name,
                    cls.__qualname__,
                ),
                title="unconvertible value",
                code=FaultCode.UNCONVERTIBLE_VALUE,
                hint="make the field type and its parameter type agree",
                field=field,
                argument=argument,
                docs=getdoc(FaultCode.UNCONVERTIBLE_VALUE)
            ) from exception

    try:
        instance = cls()
    except TypeError:
        raise TypeError(f"bind() schema {cls.__qualname__!r} must be constructible without arguments") from None
    return dataclasses.replace(instance, **values)


__all__ = (
    "CliName",
    "named",
    "passed",
    "param",
    "SchemaField",
    "Schema",
    "schema",
    "SchemaHelp",
    "derive_syntax",
    "bind",
)
