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
This module implements encoding integers in base 10, with optional bounds for fixed size integers.

>>> encode_int(100)
'100'
>>> encode_int(-7)
'-7'
>>> decode_int('100'), decode_int('+100'), decode_int('-0100')
(100, 100, -100)
>>> from strmap.types import INT_BOUNDS, Int8, Uint8
>>> decode_int('127', bounds=INT_BOUNDS[Int8])
127
>>> try:
...     decode_int('128', bounds=INT_BOUNDS[Int8])
... except ParseError as e:
...     print(*e.args)
cannot parse '128' as int: value out of range [-128, 127]
>>> try:
...     decode_int('1_000')
... except ParseError as e:
...     print(*e.args)
cannot parse '1_000' as int
>>> try:
...     encode_int(-1, bounds=INT_BOUNDS[Uint8], target_type=Uint8)
... except OutOfRangeError as e:
...     print(*e.args)
cannot encode '-1' as Uint8: value out of range [0, 255]
"""

import re
from typing import Any, Optional

from strmap.exception import OutOfRangeError, ParseError
from strmap.types import IntBounds

# no whitespace, no underscores, no base prefix
_INT_RE = re.compile(r'[+-]?[0-9]+')


def encode_int(value: int, *, bounds: Optional[IntBounds] = None, target_type: Any = int) -> str:
    """ Encode an integer in base 10, refusing values that don't fit in `bounds` when they are given.
    """
    text = str(int(value))
    if bounds is not None and not bounds.includes(int(value)):
        raise OutOfRangeError(text, target_type, f'value out of range [{bounds.min_value}, {bounds.max_value}]')
    return text


def decode_int(text: str, *, bounds: Optional[IntBounds] = None, target_type: Any = int) -> int:
    """ Decode a base 10 integer, checking it fits in `bounds` when they are given.

    The `target_type` is only used to describe the failure.
    """
    if not _INT_RE.fullmatch(text):
        raise ParseError(text, target_type)
    value = int(text)
    if bounds is not None and not bounds.includes(value):
        raise ParseError(text, target_type, f'value out of range [{bounds.min_value}, {bounds.max_value}]')
    return value
