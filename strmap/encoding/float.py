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
This module implements encoding floating point numbers with the shortest decimal text that parses back to the exact
same value.

Numbers are always written in positional notation, never with an exponent, and without trailing zeros:

>>> encode_float(100.1)
'100.1'
>>> encode_float(100.0)
'100'
>>> encode_float(1e-07)
'0.0000001'
>>> encode_float(1e21)
'1000000000000000000000'
>>> encode_float(-0.0)
'-0'
>>> encode_float(float('nan')), encode_float(float('inf')), encode_float(float('-inf'))
('NaN', '+Inf', '-Inf')

With `single=True` the value must be an IEEE 754 single precision value and the shortest text for that precision is
used, so a single precision 100.1 is still written as `100.1` even though its double precision value isn't:

>>> encode_float(to_single(100.1), single=True)
'100.1'
>>> decode_float('100.1', single=True) == to_single(100.1) != 100.1
True

A double that single precision can't hold exactly is refused, decoding its text would give back a different value:

>>> try:
...     encode_float(100.1, single=True)
... except OutOfRangeError as e:
...     print(*e.args)
cannot encode '100.1' as float: value is not exactly representable in single precision

Decoding is strict:

>>> decode_float('100.1'), decode_float('-1e3'), decode_float('.5')
(100.1, -1000.0, 0.5)
>>> decode_float('+Inf'), decode_float('-inf')
(inf, -inf)
>>> try:
...     decode_float('1e400')
... except ParseError as e:
...     print(*e.args)
cannot parse '1e400' as float: value out of range
>>> try:
...     decode_float('1e39', single=True)
... except ParseError as e:
...     print(*e.args)
cannot parse '1e39' as float: value out of range
>>> try:
...     decode_float(' 1.5')
... except ParseError as e:
...     print(*e.args)
cannot parse ' 1.5' as float
"""

import math
import re
import struct
from decimal import Decimal
from typing import Any

from strmap.exception import OutOfRangeError, ParseError

# decimal or exponent notation, or one of the special values, no whitespace and no underscores
_FLOAT_RE = re.compile(r'[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)', re.IGNORECASE)

# maximum number of significant digits needed to round-trip a single precision float
_SINGLE_MAX_DIGITS = 9


def to_single(value: float) -> float:
    """ Round a float to the nearest IEEE 754 single precision value, overflowing to infinity.
    """
    try:
        single, = struct.unpack('<f', struct.pack('<f', value))
    except OverflowError:
        return math.copysign(math.inf, value)
    return single


def _shortest_repr(value: float, *, single: bool) -> str:
    if not single:
        return repr(value)
    for digits in range(1, _SINGLE_MAX_DIGITS + 1):
        text = f'{value:.{digits}g}'
        if to_single(float(text)) == value:
            return text
    return f'{value:.{_SINGLE_MAX_DIGITS}g}'


def is_single(value: float) -> bool:
    """ Whether a float is exactly representable in IEEE 754 single precision, NaN and infinities included.
    """
    return math.isnan(value) or to_single(value) == value


def encode_float(value: float, *, single: bool = False, target_type: Any = float) -> str:
    """ Encode a float, with `single=True` values that single precision can't hold raise `OutOfRangeError`.

    The `target_type` is only used to describe the failure.
    """
    value = float(value)
    if single and not is_single(value):
        if math.isinf(to_single(value)):
            reason = 'value out of range'
        else:
            reason = 'value is not exactly representable in single precision'
        raise OutOfRangeError(encode_float(value), target_type, reason)
    if math.isnan(value):
        return 'NaN'
    if math.isinf(value):
        return '+Inf' if value > 0 else '-Inf'
    return format(Decimal(_shortest_repr(value, single=single)).normalize(), 'f')


def decode_float(text: str, *, single: bool = False, target_type: Any = float) -> float:
    """ Decode a float, values that don't fit in the requested precision are rejected.

    The `target_type` is only used to describe the failure.
    """
    if not _FLOAT_RE.fullmatch(text):
        raise ParseError(text, target_type)
    value = float(text)
    if single:
        value = to_single(value)
    if math.isinf(value) and 'inf' not in text.lower():
        raise ParseError(text, target_type, 'value out of range')
    return value
