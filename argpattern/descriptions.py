r"""
Argpattern descriptions: the pattern grammar and its parser.

A pattern is a whitespace-separated list of tokens, one per expected
parameter. Each token compiles into an immutable Description.

Grammar (with prefix "--" and separator "=")
    [--count#=int]
    │ │     │ │
    │ │     │ └─ type tag: text after the first separator, lower-cased and
    │ │     │    resolved through the type registry
    │ │     └─── multiplicity: a trailing "#" makes the parameter repeatable
    │ └───────── role: the prefix makes the parameter named, otherwise it is
    │            positional (passed)
    └─────────── scope: surrounding brackets make the parameter optional

The parts are peeled off in a fixed order: trim, brackets, prefix, "#",
separator. The order is part of the grammar: "[--count#=int]" only reads as
an optional, named, repeatable integer because the brackets go before the
prefix, the prefix before the "#", and the "#" before the separator search.

Repeat marker
- "#" is read as the repeat marker in two places: at the very end of the
  token ("count=int#"), and at the end of the name just before the separator
  ("count#=int"). Either way it is stripped, so a "#" cannot end a name:
  "c#=string" describes a repeatable "c".

Typing rules
- A positional parameter without a type tag is a string.
- A named parameter without a type tag stays untyped: it is a flag, its
  presence is the whole signal.

Quick example
    >>> from argpattern import UNIX_STYLE, NoHelp, parse_all
    >>> [d.name for d in parse_all(UNIX_STYLE, NoHelp(), "file [--count#=int] --verbose")]
    ['file', 'count', 'verbose']

Errors
- EmptyPatternError: parse() was given an empty or whitespace-only token.
- MissingNameError: nothing is left of the name once the grammar is stripped.
- UnknownTypeError: the type registry does not know the tag.
All three are PatternSyntaxError; parsing is all-or-nothing.
"""
import builtins
import warnings
from enum import Enum

from rich.text import Text

from .faults import *
from .internals import ValueType
from .options import CliOptions
from .paramtypes import STRING, ParamType, registry
from .utils import casefold


class Scope(Enum):
    REQUIRED = "required"
    OPTIONAL = "optional"


class Role(Enum):
    NAMED = "named"
    PASSED = "passed"


class Multiplicity(Enum):
    ONCE = "once"
    MULTIPLE = "multiple"


class Description(metaclass=ValueType):
    """
    Immutable description of one expected parameter.

    Scope, role and multiplicity are independent: all eight combinations are
    legal. `type` is None only for named flags.

    Parameters
    - name: str
      Non-blank; compared case-insensitively by requests and validators.
    - help: str | Text
    - role: Role
    - type: ParamType | None
    - scope: Scope
    - multiplicity: Multiplicity
    """

    __introspectable__ = (
        "name",
        "help",
        "role",
        "type",
        "scope",
        "multiplicity",
    )
    __identity__ = (
        "name",
        "role",
        "type",
        "scope",
        "multiplicity",
    )

    def __init__(
            self,
            name,
            /,
            help="",
            role=Role.PASSED,
            type=None,
            scope=Scope.REQUIRED,
            multiplicity=Multiplicity.ONCE,
    ):
        typename = builtins.type(self).__typename__

        if not isinstance(name, str):
            raise TypeError(f"{typename} 'name' must be a string")
        elif not name.strip():
            raise ValueError(f"{typename} 'name' cannot be blank")
        if not isinstance(help, str | Text):
            raise TypeError(f"{typename} 'help' must be a string")
        if not isinstance(role, Role):
            raise TypeError(f"{typename} 'role' must be a role")
        if not isinstance(type, ParamType | None):
            raise TypeError(f"{typename} 'type' must be a param-type or None")
        if not isinstance(scope, Scope):
            raise TypeError(f"{typename} 'scope' must be a scope")
        if not isinstance(multiplicity, Multiplicity):
            raise TypeError(f"{typename} 'multiplicity' must be a multiplicity")

        self._name = name
        self._help = help
        self._role = role
        self._type = type
        self._scope = scope
        self._multiplicity = multiplicity

    @property
    def key(self):
        """
        The case-insensitive lookup key of this description.
        """
        return casefold(self.name)

    @property
    def named(self):
        return self.role is Role.NAMED

    @property
    def passed(self):
        return self.role is Role.PASSED

    @property
    def required(self):
        return self.scope is Scope.REQUIRED

    @property
    def optional(self):
        return self.scope is Scope.OPTIONAL

    @property
    def multiple(self):
        return self.multiplicity is Multiplicity.MULTIPLE

    @property
    def flag(self):
        """
        True for a named parameter without a type (presence only).
        """
        return self.named and self.type is None

    def pattern(self, options, /):
        """
        Render this description back into a pattern token for `options`.

        parse(options, provider, d.pattern(options)) yields a description
        equal to d, help aside.
        """
        if not isinstance(options, CliOptions):
            raise TypeError("pattern() argument must be cli-options")
        token = self.name
        if self.type is not None:
            token += options.equal_char + self.type.name
        if self.multiple:
            # The "#" goes before the separator: it is stripped before the split.
            head, separator, tail = token.partition(options.equal_char)
            token = head + "#" + separator + tail
        if self.named:
            token = options.prefix + token
        if self.optional:
            token = "[" + token + "]"
        return token


def parse(options, provider, token, /, *, types=registry):
    """
    Compile a single pattern token into a Description.

    Parameters
    - options: CliOptions, supplies the prefix and the separator.
    - provider: help provider, any object with get(name).
    - token: str, one pattern token, e.g. "[--count#=int]".
    - types: the type registry resolving type tags.

    Returns
    - Description

    Raises
    - EmptyPatternError: the token is empty or whitespace-only.
    - UnknownTypeError: the type tag is not registered.
    - MissingNameError: the name is blank once the grammar is stripped.
    - TypeError: on arguments of the wrong type.
    """
    if not isinstance(options, CliOptions):
        raise TypeError("parse() first argument must be cli-options")
    if not hasattr(provider, "get") or not callable(provider.get):
        raise TypeError("parse() second argument must have a get method")
    if not isinstance(token, str):
        raise TypeError("parse() third argument must be a string")

    if not (pattern := token.strip()):
        raise EmptyPatternError(
            "empty parameter pattern",
            title="empty pattern",
            code=FaultCode.EMPTY_PATTERN,
            hint="describe the parameter, for example: %sname%sstring" % (options.prefix, options.equal_char),
            pattern=token,
            docs=getdoc(FaultCode.EMPTY_PATTERN)
        )

    if pattern.startswith("[") and pattern.endswith("]"):
        scope = Scope.OPTIONAL
        pattern = pattern[1:-1]
    else:
        scope = Scope.REQUIRED

    if pattern.startswith(options.prefix):
        role = Role.NAMED
        pattern = pattern[len(options.prefix):]
    else:
        role = Role.PASSED

    if pattern.endswith("#"):
        multiplicity = Multiplicity.MULTIPLE
        pattern = pattern[:-1]
    else:
        multiplicity = Multiplicity.ONCE

    name, separator, tag = pattern.partition(options.equal_char)

    # "count#=int": the marker may also close the name ahead of the type tag.
    if multiplicity is Multiplicity.ONCE and separator and name.endswith("#"):
        multiplicity = Multiplicity.MULTIPLE
        name = name[:-1]

    try:
        type = types.resolve(tag.lower()) if separator else None
    except UnknownTypeError as exception:
        raise exception.__replace__(pattern=token) from None

    if type is None and role is Role.PASSED:
        type = STRING

    if not name.strip():
        raise MissingNameError(
            "parameter pattern %r has no name" % token,
            title="missing name",
            code=FaultCode.MISSING_NAME,
            hint="put a name before %r, for example: %sname%s%s" % (
                options.equal_char,
                options.prefix if role is Role.NAMED else "",
                options.equal_char,
                tag.lower() or "string",
            ),
            pattern=token,
            docs=getdoc(FaultCode.MISSING_NAME)
        )

    return Description(
        name,
        help=provider.get(name),
        role=role,
        type=type,
        scope=scope,
        multiplicity=multiplicity,
    )


def parse_all(options, provider, pattern, /, *, types=registry):
    """
    Compile a whole pattern string into descriptions, left to right.

    The string is split on single spaces and blank pieces are skipped, so an
    empty or all-blank pattern yields an empty list (unlike parse(), which
    rejects a blank token). Repeated names are kept; each repetition emits a
    DuplicateDescriptionWarning.

    Raises
    - PatternSyntaxError: from the first malformed token.
    """
    if not isinstance(pattern, str):
        raise TypeError("parse_all() third argument must be a string")

    descriptions = []
    seen = set()
    for token in pattern.split(" "):
        if not token.strip():
            continue
        description = parse(options, provider, token, types=types)
        if description.key in seen:
            warnings.warn(DuplicateDescriptionWarning(
                "parameter %r is described more than once" % description.name,
                title="duplicated description",
                code=FaultCode.DUPLICATED_DESCRIPTION,
                hint="rename one of the parameters",
                pattern=token,
                docs=getdoc(FaultCode.DUPLICATED_DESCRIPTION)
            ), stacklevel=2)
        seen.add(description.key)
        descriptions.append(description)
    return descriptions


__all__ = (
    "Scope",
    "Role",
    "Multiplicity",
    "Description",
    "parse",
    "parse_all",
)
