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
This module implements encoding enum members through their values.

The value of a member is encoded by the given `encode_value` function. Decoding looks for the member that the given
`encode_member` function turns into exactly the given text, so members of an enum with its own `__str__` can be
matched on their display text:

>>> from enum import Enum, IntEnum
>>> from functools import partial
>>> class Color(Enum):
...     RED = 'red'
...     BLUE = 'blue'
>>> class Level(IntEnum):
...     LOW = 1
...     HIGH = 10
>>> encode_member = partial(encode_enum, encode_value=str)
>>> encode_enum(Color.RED, str), encode_enum(Level.HIGH, str)
('red', '10')
>>> decode_enum('blue', Color, encode_member)
<Color.BLUE: 'blue'>
>>> decode_enum('1', Level, encode_member)
<Level.LOW: 1>
>>> decode_enum('BLUE', Color, lambda member: member.name)
<Color.BLUE: 'blue'>
>>> try:
...     decode_enum('green', Color, encode_member)
... except ParseError as e:
...     print(*e.args)
cannot parse 'green' as Color: no member has this value
"""

from enum import Enum
from typing import Any, Callable, TypeVar

from strmap.exception import ParseError

E = TypeVar('E', bound=Enum)


def encode_enum(value: Enum, encode_value: Callable[[Any], str]) -> str:
    return encode_value(value.value)


def decode_enum(text: str, enum_class: type[E], encode_member: Callable[[E], str]) -> E:
    for member in enum_class:
        if encode_member(member) == text:
            return member
    raise ParseError(text, enum_class, 'no member has this value')
