"""
Value-object plumbing shared by options, descriptions, arguments and types.

ValueType is a metaclass: a class that lists its public fields in
__introspectable__ gets, for each of them, a read-only property mirroring the
private "_<field>" attribute, plus stable __repr__/__rich_repr__ and value
equality. The instances themselves only need to fill the private fields in
__new__/__init__.

Conventions
- __typename__ is derived from the class name (camel-case split with hyphens)
  and used in messages, e.g. "cli-options 'prefix' must be a string".
- __displayable__ (if set) narrows what __repr__/__rich_repr__ show.
- __identity__ (if set) narrows what __hash__ covers; equality always
  compares every introspectable field.
"""
import functools
import operator
import re

from .utils import *


class ValueType(type):
    __introspectable__ = ()
    __displayable__ = Unset
    __identity__ = Unset

    def __new__(cls, name, bases, namespace, **options):
        self = super().__new__(
            cls,
            name,
            bases,
            namespace | {
                "__typename__": re.sub(r"(?<!^)(?=[A-Z])", r"-", name).lower(),
            } | {
                field: mirror(field) for field in namespace.get("__introspectable__", ())
            },
        )

        if "__repr__" not in namespace:
            @rename("__repr__")
            def __repr__(self):
                return f"{type(self).__typename__}({
                    ", ".join(map(functools.partial(operator.mod, "%s=%r"), self.__rich_repr__()))
                })"
            self.__repr__ = __repr__

        if "__rich_repr__" not in namespace:
            @rename("__rich_repr__")
            def __rich_repr__(self):
                """
                Yield (name, value) pairs for pretty printers such as rich.
                """
                for field in coalesce(type(self).__displayable__, type(self).__introspectable__):
                    yield field, getattr(self, field)
            self.__rich_repr__ = __rich_repr__

        if "__eq__" not in namespace:
            @rename("__eq__")
            def __eq__(self, other, /):
                if type(other) is not type(self):
                    return NotImplemented
                return all(
                    getattr(self, field) == getattr(other, field)
                    for field in type(self).__introspectable__
                )
            self.__eq__ = __eq__

        if "__hash__" not in namespace:
            @rename("__hash__")
            def __hash__(self):
                return hash((type(self).__name__, *(
                    getattr(self, field)
                    for field in coalesce(type(self).__identity__, type(self).__introspectable__)
                )))
            self.__hash__ = __hash__

        return self


__all__ = (
    "ValueType",
)
