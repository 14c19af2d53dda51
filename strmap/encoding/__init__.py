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
This module was made to hold the string encoding of each primitive kind.

The general organization should be that each submodule `x` deals with a single kind and look like this:

    def encode_x(value: ValueType, ...config params...) -> str:
        ...

    def decode_x(text: str, ...config params...) -> ValueType:
        ...

The "config params" are optional and specific to each encoder. Decoders are strict, they raise `ParseError` for any
text that isn't exactly in the expected format. Submodules should not have to take into consideration how types are
mapped to encoders, that's done in `strmap.scalar`.
"""
