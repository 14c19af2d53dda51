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
This module implements encoding complex numbers as `(real+imagi)`, each part uses the float encoding and the
imaginary part always carries an explicit sign.

>>> encode_complex(100.1 + 80.1j)
'(100.1+80.1i)'
>>> encode_complex(complex(-1, -0.5))
'(-1-0.5i)'
>>> encode_complex(complex(0, float('nan')))
'(0+NaNi)'

Decoding accepts the parenthesized form and the bare forms `re+imi`, `re` and `imi`:

>>> decode_complex('(100.1+80.1i)')
(100.1+80.1j)
>>> decode_complex('1e-3-2e+3i')
(0.001-2000j)
>>> decode_complex('3'), decode_complex('2i')
((3+0j), 2j)
>>> try:
...     decode_complex('(1+2j)')
... except ParseError as e:
...     print(*e.args)
cannot parse '(1+2j)' as complex
"""

from typing import Any

from strmap.encoding.float import decode_float, encode_float
from strmap.exception import OutOfRangeError, ParseError


def encode_complex(value: complex, *, single: bool = False, target_type: Any = complex) -> str:
    """ Encode a complex number, with `single=True` both parts must be single precision values.

    The `target_type` is only used to describe the failure.
    """
    value = complex(value)
    try:
        real = encode_float(value.real, single=single)
        imag = encode_float(value.imag, single=single)
    except OutOfRangeError as e:
        raise OutOfRangeError(encode_complex(value), target_type, e.reason) from e
    if imag[0] not in '+-':
        imag = '+' + imag
    return f'({real}{imag}i)'


def _split_parts(text: str) -> tuple[str, str]:
    """ Split a complex literal without parenthesis into its real and imaginary texts.
    """
    if not text.endswith('i'):
        return text, '0'
    body = text[:-1]
    # the sign that separates both parts is the last one that isn't the first char or part of an exponent
    for pos in range(len(body) - 1, 0, -1):
        if body[pos] in '+-' and body[pos - 1] not in 'eE':
            return body[:pos], body[pos:]
    return '0', body


def decode_complex(text: str, *, single: bool = False, target_type: Any = complex) -> complex:
    """ Decode a complex number, each part is strictly decoded as a float.

    The `target_type` is only used to describe the failure.
    """
    body = text
    if body.startswith('(') and body.endswith(')'):
        body = body[1:-1]
    real_text, imag_text = _split_parts(body)
    try:
        real = decode_float(real_text, single=single)
        imag = decode_float(imag_text, single=single)
    except ParseError as e:
        raise ParseError(text, target_type, e.reason) from e
    return complex(real, imag)
