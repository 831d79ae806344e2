"""
Argpattern requests: arguments matched against descriptions.

A Request pairs the tokenized invocation with the descriptions it is checked
against:

- named arguments are grouped under the description of the same name
  (case-insensitive); named arguments nobody describes land in `unknown`.
- positional arguments are dealt to the positional descriptions in order: a
  single one takes one argument, a repeatable one takes all the rest.
  Whatever is left lands in `unexpected`. Each description keeps its own
  slot, so two positionals sharing a name are still served separately.

Lookups by name (`all`, `first`, `values`) see every argument matched under
that name; `slot(index)` sees what the index-th description received.

Matching never fails; deciding whether the result is acceptable is the
validator's job, which stores its verdict in `request.valid`.

create_request() runs the whole chain: tokenize, match, validate.
"""
from collections import defaultdict, deque
from collections.abc import Iterable

from .arguments import Argument, tokenize_with
from .descriptions import Description
from .options import WINDOWS_STYLE, CliOptions
from .utils import Unset, casefold
from .validators import Validator


class Request:
    """
    Matched invocation.

    Parameters
    - arguments: Iterable[Argument]
    - descriptions: Iterable[Description]

    Attributes
    - valid: bool, False until a validator says otherwise.
    """

    def __init__(self, arguments, descriptions, /):
        if isinstance(arguments, str) or not isinstance(arguments, Iterable):
            raise TypeError("Request() first argument must be an iterable of arguments")
        if isinstance(descriptions, str) or not isinstance(descriptions, Iterable):
            raise TypeError("Request() second argument must be an iterable of descriptions")

        self._arguments = tuple(arguments)
        self._descriptions = tuple(descriptions)

        if not all(isinstance(argument, Argument) for argument in self._arguments):
            raise TypeError("Request() first argument must be an iterable of arguments")
        if not all(isinstance(description, Description) for description in self._descriptions):
            raise TypeError("Request() second argument must be an iterable of descriptions")

        matches = defaultdict(list)
        slots = [[] for _ in self._descriptions]
        unknown = []
        positionals = deque()

        named = {description.key for description in self._descriptions if description.named}
        for argument in self._arguments:
            if argument.positional:
                positionals.append(argument)
            elif (key := casefold(argument.name)) in named:
                matches[key].append(argument)
            else:
                unknown.append(argument)

        for slot, description in zip(slots, self._descriptions):
            if description.named:
                slot.extend(matches.get(description.key, ()))
            elif not positionals:
                continue
            elif description.multiple:
                slot.extend(positionals)
                positionals.clear()
            else:
                slot.append(positionals.popleft())

        for slot, description in zip(slots, self._descriptions):
            if description.passed:
                matches[description.key].extend(slot)

        self._matches = {key: tuple(arguments) for key, arguments in matches.items()}
        self._slots = tuple(map(tuple, slots))
        self._unknown = tuple(unknown)
        self._unexpected = tuple(positionals)
        self.valid = False

    @property
    def arguments(self):
        return self._arguments

    @property
    def descriptions(self):
        return self._descriptions

    @property
    def unknown(self):
        """
        Named arguments without a matching named description.
        """
        return self._unknown

    @property
    def unexpected(self):
        """
        Positional arguments left over once every positional description is served.
        """
        return self._unexpected

    def contains(self, name, /):
        return casefold(name) in self._matches

    __contains__ = contains

    def all(self, name, /):
        """
        Every argument matched under `name`, in invocation order (possibly empty).
        """
        return self._matches.get(casefold(name), ())

    def first(self, name, /, default=Unset):
        """
        The first argument matched under `name`.

        Raises
        - KeyError: nothing matched and no default was given.
        """
        try:
            return self._matches[casefold(name)][0]
        except KeyError:
            if default is Unset:
                raise KeyError(name) from None
            return default

    def values(self, name, /):
        """
        The values of every argument matched under `name`.
        """
        return tuple(argument.value for argument in self.all(name))

    def slot(self, index, /):
        """
        The arguments the index-th description received, in invocation order.

        Named descriptions receive every argument given under their name.
        """
        return self._slots[index]

    def __repr__(self):
        return "request(valid=%r, matches=%r, unknown=%r, unexpected=%r)" % (
            self.valid,
            {key: [argument.raw for argument in arguments] for key, arguments in self._matches.items()},
            [argument.raw for argument in self._unknown],
            [argument.raw for argument in self._unexpected],
        )


def create_request(arguments, descriptions, /, options=WINDOWS_STYLE, *, validator=Unset):
    """
    Tokenize raw invocation strings, match them and validate the result.

    Parameters
    - arguments: Iterable[str], raw tokens such as sys.argv[1:].
    - descriptions: Iterable[Description]
    - options: CliOptions used to tokenize (WINDOWS_STYLE by default).
    - validator: anything with validate(descriptions, request) -> bool.
      Unset uses a default Validator(); None skips validation, leaving
      `request.valid` False.

    Returns
    - Request
    """
    if not isinstance(options, CliOptions):
        raise TypeError("create_request() 'options' must be cli-options")

    descriptions = list(descriptions)
    request = Request(tokenize_with(options, arguments), descriptions)

    if validator is Unset:
        validator = Validator()
    if validator is not None:
        request.valid = bool(validator.validate(descriptions, request))
    return request


__all__ = (
    "Request",
    "create_request",
)
