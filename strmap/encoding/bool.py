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
This module implements encoding a boolean value as a string.

Encoding always gives `"true"` or `"false"`, decoding also accepts the short and capitalized forms:

>>> encode_bool(True)
'true'
>>> encode_bool(False)
'false'
>>> decode_bool('true'), decode_bool('T'), decode_bool('1')
(True, True, True)
>>> decode_bool('FALSE'), decode_bool('f'), decode_bool('0')
(False, False, False)
>>> try:
...     decode_bool('yes')
... except ParseError as e:
...     print(*e.args)
cannot parse 'yes' as bool
"""

from strmap.exception import ParseError

_TRUE_STRINGS = frozenset({'1', 't', 'T', 'TRUE', 'true', 'True'})
_FALSE_STRINGS = frozenset({'0', 'f', 'F', 'FALSE', 'false', 'False'})


def encode_bool(value: bool) -> str:
    return 'true' if value else 'false'


def decode_bool(text: str) -> bool:
    if text in _TRUE_STRINGS:
        return True
    if text in _FALSE_STRINGS:
        return False
    raise ParseError(text, bool)
