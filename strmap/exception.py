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

from typing import Any, Optional

from strmap.utils.typing import pretty_type


class StrMapError(Exception):
    """Base class for exceptions in strmap."""
    pass


class TypedError(StrMapError):
    """Base class for errors about a concrete type, the type is kept in `type_`.
    """

    def __init__(self, message: str, *, type_: Any = None) -> None:
        super().__init__(message)
        self.type_ = type_


class NilValueError(StrMapError):
    """Raised when a required value (the map, the target or a resolved field value) is None.
    """
    pass


class NotAPointerError(TypedError):
    """Raised when the decode target cannot be written into: a class, an immutable value or a frozen record.
    """
    pass


class NotARecordError(TypedError):
    """Raised when a value expected to be a record (top-level argument or inline field) is something else.
    """
    pass


class UnsupportedTypeError(TypedError):
    """Raised when a leaf value's type has no way to be converted to or from a string.
    """
    pass


class AllocationError(TypedError):
    """Raised when decode needs to fill an absent reference and cannot build or assign the new record.
    """
    pass


class InlineCycleError(TypedError):
    """Raised when a record type is inlined inside itself, which would never finish.
    """
    pass


class ParseError(StrMapError, ValueError):
    """Raised when a string cannot be strictly parsed into the target primitive type.
    """

    verb = 'parse'

    def __init__(self, text: str, target_type: Any, reason: Optional[str] = None) -> None:
        message = f'cannot {self.verb} {text!r} as {pretty_type(target_type)}'
        if reason:
            message = f'{message}: {reason}'
        super().__init__(message)
        self.text = text
        self.target_type = target_type
        self.reason = reason


class OutOfRangeError(ParseError):
    """Raised when encoding a value that its sized type can't hold, decoding the text would fail or change the value.

    `text` is the text the value would have been encoded as.
    """

    verb = 'encode'
