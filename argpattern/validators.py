"""
Argpattern validators: decide whether a request is acceptable.

Validation failure is the expected outcome of bad end-user input, so nothing
here raises: problems are collected as ArgumentFault records, handed to an
optional reporter, and summarized as a boolean.

Rules checked by Validator
- UNKNOWN_ARGUMENT: a named argument no named description declares.
- UNEXPECTED_POSITIONAL: a positional argument left over.
- MISSING_REQUIRED: a required description matched nothing.
- DUPLICATED_ARGUMENT: a single (non-repeatable) description matched twice.
- FLAG_ASSIGNMENT: a flag (named, untyped) was given a value.
- MISSING_VALUE: a typed named argument was given without a value.
- INVALID_VALUE: the description's type rejects the value.

Messages lead with the argument's position ("at second position") so users
can find the offending token quickly.

Usage
    >>> from rich.console import Console
    >>> validator = Validator(Console(stderr=True).print)
    >>> validator.validate(descriptions, request)
    False
"""
import difflib

from .faults import ArgumentFault, FaultCode, getdoc


def _ordinal(number):
    """
    Return a human-friendly ordinal label for a 1-based position.
    """
    try:
        return {
            1: "first",
            2: "second",
            3: "third",
            4: "fourth",
            5: "fifth",
            6: "sixth",
            7: "seventh",
            8: "eighth",
            9: "ninth",
            10: "tenth",
        }[number]
    except KeyError:
        pass

    # 11th, 12th, 13th (and 111th, 112th, ...)
    if 10 < number % 100 < 20:
        return f"{number}th"

    return f'{number}%s' % {1: "st", 2: "nd", 3: "rd"}.get(number % 10, "th")


class Validator:
    """
    Default validator.

    Parameters
    - reporter: Callable[[ArgumentFault], object] | None
      Called once per fault, in discovery order. A rich console's print
      method renders them; None keeps validation silent.
    """

    def __init__(self, reporter=None, /):
        if reporter is not None and not callable(reporter):
            raise TypeError("Validator() argument must be callable")
        self._reporter = reporter

    def inspect(self, descriptions, request, /):
        """
        Return every fault found in `request`, as a tuple.
        """
        faults = []
        descriptions = list(descriptions)

        def position(argument):
            # identity lookup: equal arguments may appear more than once
            for index, candidate in enumerate(request.arguments, 1):
                if candidate is argument:
                    return _ordinal(index)
            return "unknown"

        def fault(message, /, code, title, hint, **options):
            faults.append(ArgumentFault(
                message,
                code=code,
                title=title,
                hint=hint,
                docs=getdoc(code),
                **options
            ))

        for argument in request.unknown:
            suggestions = difflib.get_close_matches(
                argument.name,
                [description.name for description in descriptions if description.named],
                3
            )
            fault(
                "unknown argument %r at %s position" % (argument.raw, position(argument)),
                code=FaultCode.UNKNOWN_ARGUMENT,
                title="unknown argument",
                hint="did you mean %r?" % suggestions[0] if suggestions else "remove the argument",
                argument=argument,
                suggestions=suggestions,
            )

        for argument in request.unexpected:
            fault(
                "unexpected positional argument %r at %s position" % (argument.raw, position(argument)),
                code=FaultCode.UNEXPECTED_POSITIONAL,
                title="unexpected argument",
                hint="remove the extra input",
                argument=argument,
            )

        # positionals are checked per slot, named parameters once per name
        slots = {id(description): index for index, description in enumerate(request.descriptions)}
        seen = set()
        for description in descriptions:
            if description.named:
                if description.key in seen:
                    continue
                seen.add(description.key)

            index = slots.get(id(description))
            arguments = request.all(description.name) if index is None else request.slot(index)

            if not arguments:
                if description.required:
                    fault(
                        "missing required %s %r" % ("argument" if description.named else "positional argument", description.name),
                        code=FaultCode.MISSING_REQUIRED,
                        title="missing argument",
                        hint="provide a value for %r" % description.name,
                        description=description,
                    )
                continue

            if len(arguments) > 1 and not description.multiple:
                fault(
                    "argument %r given more than once, again at %s position" % (description.name, position(arguments[1])),
                    code=FaultCode.DUPLICATED_ARGUMENT,
                    title="duplicated argument",
                    hint="keep a single occurrence of %r" % description.name,
                    argument=arguments[1],
                    description=description,
                )

            for argument in arguments:
                if description.flag:
                    if argument.value is not None:
                        fault(
                            "flag %r at %s position cannot have a value" % (description.name, position(argument)),
                            code=FaultCode.FLAG_ASSIGNMENT,
                            title="flag cannot take a value",
                            hint="remove everything from the separator (for example: %s)" % argument.raw[:len(argument.raw) - len(argument.value) - 1],
                            argument=argument,
                            description=description,
                        )
                elif description.type is None:
                    continue
                elif argument.value is None:
                    fault(
                        "argument %r at %s position requires a value" % (description.name, position(argument)),
                        code=FaultCode.MISSING_VALUE,
                        title="missing value",
                        hint="add a %s value after the separator" % description.type.name,
                        argument=argument,
                        description=description,
                    )
                elif not description.type.validate(argument.value):
                    fault(
                        "invalid %s value %r for %r at %s position" % (
                            description.type.name,
                            argument.value,
                            description.name,
                            position(argument)
                        ),
                        code=FaultCode.INVALID_VALUE,
                        title="invalid value",
                        hint="give a value of type %s" % description.type.name,
                        argument=argument,
                        description=description,
                    )

        return tuple(faults)

    def validate(self, descriptions, request, /):
        """
        Return True when `request` satisfies `descriptions`; report each fault otherwise.
        """
        faults = self.inspect(descriptions, request)
        if self._reporter is not None:
            for fault in faults:
                self._reporter(fault)
        return not faults


__all__ = (
    "Validator",
)
