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
strmap converts records (dataclasses) to and from flat `dict[str, str]` maps.

>>> from dataclasses import dataclass, field
>>> @dataclass
... class Address:
...     city: str = ''
...     zip_code: int = 0
>>> @dataclass
... class User:
...     name: str = ''
...     age: int = strmap_field('years', default=0)
...     address: Address = strmap_field(',inline', default_factory=Address)
...     password: str = strmap_field('-', default='')
>>> data = encode(User('alice', 30, Address('Lisbon', 1000), 'secret'))
>>> sorted(data.items())
[('address.city', 'Lisbon'), ('address.zip_code', '1000'), ('name', 'alice'), ('years', '30')]
>>> user = User()
>>> decode(data, user)
>>> user
User(name='alice', age=30, address=Address(city='Lisbon', zip_code=1000), password='')
"""

from strmap.conf import StrMapSettings, get_global_settings
from strmap.decoder import Decoder, decode
from strmap.directive import Directive, parse_directive, strmap_field
from strmap.encoder import Encoder, encode
from strmap.exception import (
    AllocationError,
    InlineCycleError,
    NilValueError,
    NotAPointerError,
    NotARecordError,
    OutOfRangeError,
    ParseError,
    StrMapError,
    UnsupportedTypeError,
)
from strmap.hooks import StringMapMarshaler, StringMapUnmarshaler, TextMarshaler, TextUnmarshaler
from strmap.types import (
    Complex64,
    Complex128,
    Float32,
    Float64,
    Int8,
    Int16,
    Int32,
    Int64,
    Uint8,
    Uint16,
    Uint32,
    Uint64,
)
from strmap.version import __version__

__all__ = [
    'encode',
    'decode',
    'Encoder',
    'Decoder',
    'Directive',
    'parse_directive',
    'strmap_field',
    'StrMapSettings',
    'get_global_settings',
    'StrMapError',
    'NilValueError',
    'NotAPointerError',
    'NotARecordError',
    'UnsupportedTypeError',
    'ParseError',
    'OutOfRangeError',
    'AllocationError',
    'InlineCycleError',
    'StringMapMarshaler',
    'StringMapUnmarshaler',
    'TextMarshaler',
    'TextUnmarshaler',
    'Int8',
    'Int16',
    'Int32',
    'Int64',
    'Uint8',
    'Uint16',
    'Uint32',
    'Uint64',
    'Float32',
    'Float64',
    'Complex64',
    'Complex128',
    '__version__',
]
