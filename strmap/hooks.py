# Copyright 2025 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Capabilities a type can implement to take over its own conversion.

They are checked by attribute lookup in a fixed order, a type doesn't have to inherit from any of the protocols below:

1. record level, `StringMapMarshaler` / `StringMapUnmarshaler`: the type converts itself to/from the whole flat map
   (or the part of it under its prefix), field traversal is skipped;
2. self-describing text, `TextMarshaler` / `TextUnmarshaler`: the type renders itself to a string and parses itself
   from a string;
3. display only: a user-defined `__str__`, it can only be used for encoding, except on enums where decoding picks
   the member whose display text matches.
"""

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from typing_extensions import Self

# modules whose `__str__` implementations are not considered a display capability
_BUILTIN_STR_MODULES = frozenset({'builtins', 'enum'})


@runtime_checkable
class StringMapMarshaler(Protocol):
    def to_string_map(self) -> Mapping[str, str]:
        ...


@runtime_checkable
class StringMapUnmarshaler(Protocol):
    def load_string_map(self, data: Mapping[str, str], /) -> None:
        """ Implementations must copy the given map if they wish to modify it.
        """
        ...


@runtime_checkable
class TextMarshaler(Protocol):
    def to_text(self) -> str:
        ...


class TextUnmarshaler(Protocol):
    @classmethod
    def from_text(cls, text: str, /) -> Self:
        ...


def _has_method(obj: Any, name: str) -> bool:
    return callable(getattr(obj, name, None))


def is_string_map_marshaler(value: Any) -> bool:
    return not isinstance(value, type) and _has_method(value, 'to_string_map')


def is_string_map_unmarshaler(value_or_type: Any) -> bool:
    return _has_method(value_or_type, 'load_string_map')


def is_text_marshaler(value: Any) -> bool:
    return not isinstance(value, type) and _has_method(value, 'to_text')


def is_text_unmarshaler(type_: Any) -> bool:
    return isinstance(type_, type) and _has_method(type_, 'from_text')


def has_display_str(value: Any) -> bool:
    """ Whether the value's class, or one of its non-builtin bases, defines its own `__str__`.

    The `__str__` that `enum` installs on enum classes doesn't count, one written on an enum class does.

    >>> import enum
    >>> has_display_str(1)
    False
    >>> has_display_str(enum.Enum('Color', 'RED').RED)
    False
    >>> class Celsius(float):
    ...     def __str__(self):
    ...         return f'{float(self)}C'
    >>> has_display_str(Celsius(1.5))
    True
    >>> class Suit(enum.Enum):
    ...     HEARTS = 'h'
    ...     def __str__(self):
    ...         return self.name.lower()
    >>> has_display_str(Suit.HEARTS)
    True
    """
    if isinstance(value, type):
        return False
    for class_ in type(value).__mro__:
        if '__str__' in vars(class_):
            method = vars(class_)['__str__']
            module = getattr(method, '__module__', None) or class_.__module__
            return module not in _BUILTIN_STR_MODULES
    return False
