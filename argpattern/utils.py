"""
Small helpers shared by every module of the package.

- Unset: "not provided" marker for parameters where None already means
  something (a description without a type, an argument without a value).
- coalesce(value, default): Unset becomes `default`; None, 0 and "" stay.
- rename(name): decorator giving generated functions a readable
  __name__/__qualname__ in tracebacks.
- mirror(name): read-only property over the private "_<name>" attribute.
- casefold(name): the normalization behind every case-insensitive lookup.

    >>> coalesce(Unset, ":")
    ':'
    >>> casefold(" Count ") == casefold("COUNT")
    True
"""
import functools
from typing import final


@final
class UnsetType:
    """
    Type of the Unset singleton; falsy, not subclassable.
    """

    @functools.cache
    def __new__(cls):
        return super().__new__(cls)

    def __bool__(self):
        return False

    def __repr__(self):
        return "Unset"

    def __reduce__(self):
        return "Unset"

    def __init_subclass__(cls, **options):
        raise TypeError("type 'UnsetType' is not an acceptable base type")


def coalesce(object, default=None, /):
    return default if object is Unset else object


def rename(name, /):
    """
    Decorator setting __name__ and __qualname__ of a function to `name`.
    """
    if not isinstance(name, str):
        raise TypeError("rename() argument must be a string")

    def decorator(function):
        if not callable(function):
            raise TypeError("rename() must decorate a callable")
        function.__name__ = function.__qualname__ = name
        return function

    return decorator


def mirror(name, /):
    """
    Read-only property returning self._<name> untouched.

    Value objects only hold strings, enums, types and tuples, so nothing needs
    copying on the way out.
    """
    if not isinstance(name, str):
        raise TypeError("mirror() argument must be a string")

    @rename(name)
    def getter(self):
        return getattr(self, "_" + name)

    return property(getter)


def casefold(name, /):
    """
    Normalize a parameter name for case-insensitive comparison.

    Surrounding whitespace is not significant either; "Count", "count" and
    " COUNT " all normalize to the same key.
    """
    if not isinstance(name, str):
        raise TypeError("casefold() argument must be a string")
    return name.strip().casefold()


Unset = UnsetType()


__all__ = (
    "coalesce",
    "rename",
    "mirror",
    "casefold",
    "UnsetType",
    "Unset",
)
