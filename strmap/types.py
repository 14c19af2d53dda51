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
Sized numeric types.

Python numbers are unbounded (`int`) or double precision (`float`, `complex`). Annotating a record field with one of
these types keeps the plain Python value at runtime, but makes the codec range-check integers on decode and use single
precision for the shortest representation of floats.
"""

from typing import NamedTuple, NewType

Int8 = NewType('Int8', int)
Int16 = NewType('Int16', int)
Int32 = NewType('Int32', int)
Int64 = NewType('Int64', int)

Uint8 = NewType('Uint8', int)
Uint16 = NewType('Uint16', int)
Uint32 = NewType('Uint32', int)
Uint64 = NewType('Uint64', int)

Float32 = NewType('Float32', float)
Float64 = NewType('Float64', float)

Complex64 = NewType('Complex64', complex)
Complex128 = NewType('Complex128', complex)


class IntBounds(NamedTuple):
    min_value: int
    max_value: int

    @classmethod
    def for_bits(cls, bits: int, *, signed: bool) -> 'IntBounds':
        if signed:
            return cls(-(1 << (bits - 1)), (1 << (bits - 1)) - 1)
        return cls(0, (1 << bits) - 1)

    def includes(self, value: int) -> bool:
        return self.min_value <= value <= self.max_value


INT_BOUNDS: dict[object, IntBounds] = {
    Int8: IntBounds.for_bits(8, signed=True),
    Int16: IntBounds.for_bits(16, signed=True),
    Int32: IntBounds.for_bits(32, signed=True),
    Int64: IntBounds.for_bits(64, signed=True),
    Uint8: IntBounds.for_bits(8, signed=False),
    Uint16: IntBounds.for_bits(16, signed=False),
    Uint32: IntBounds.for_bits(32, signed=False),
    Uint64: IntBounds.for_bits(64, signed=False),
}
