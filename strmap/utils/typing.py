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

from types import NoneType, UnionType
from typing import Any, Union, get_args, get_origin


def is_subclass(cls: Any, class_or_tuple: type | tuple[type, ...] | UnionType, /) -> bool:
    """ Like issubclass(), but resolves NewType chains on arg 1 and returns False for anything that isn't a class.

    >>> is_subclass(bool, int)
    True
    >>> is_subclass(bool, bytes | str)
    False
    >>> from typing import NewType
    >>> N = NewType('N', int)
    >>> is_subclass(N, int)
    True
    >>> M = NewType('M', N)
    >>> is_subclass(M, int | str)
    True
    >>> is_subclass(None, int)
    False
    """
    cls = resolve_newtype(cls)
    if not isinstance(cls, type):
        return False
    return issubclass(cls, class_or_tuple)


def resolve_newtype(type_: Any, /) -> Any:
    """ Follow a chain of NewType declarations down to the first type that isn't a NewType.

    >>> from typing import NewType
    >>> resolve_newtype(NewType('M', NewType('N', int)))
    <class 'int'>
    >>> resolve_newtype(str)
    <class 'str'>
    """
    while (super_type := getattr(type_, '__supertype__', None)) is not None:
        type_ = super_type
    return type_


def unwrap_optional(type_: Any, /) -> tuple[Any, bool]:
    """ Split `T | None` into `(T, True)`, any other type is returned as `(type_, False)`.

    Unions with more than one non-None member are kept whole, they are not supported by the converter anyway.

    >>> unwrap_optional(int | None)
    (<class 'int'>, True)
    >>> from typing import Optional
    >>> unwrap_optional(Optional[str])
    (<class 'str'>, True)
    >>> unwrap_optional(int)
    (<class 'int'>, False)
    >>> unwrap_optional(int | str | None)
    (int | str | None, True)
    """
    origin = get_origin(type_)
    if origin is not Union and origin is not UnionType:
        return type_, False
    args = get_args(type_)
    not_none = tuple(arg for arg in args if arg is not NoneType)
    if len(not_none) == len(args):
        return type_, False
    if len(not_none) == 1:
        return not_none[0], True
    return type_, True


def pretty_type(type_: Any, /) -> str:
    """ Shows a cleaner string representation for a type.

    >>> pretty_type(int)
    'int'
    >>> pretty_type(None)
    'None'
    >>> pretty_type(int | None)
    'int | None'
    >>> from typing import NewType
    >>> pretty_type(NewType('Int8', int))
    'Int8'
    """
    if type_ is NoneType or type_ is None:
        return 'None'
    elif hasattr(type_, '__args__'):
        return str(type_)
    elif hasattr(type_, '__qualname__'):
        return type_.__qualname__
    elif hasattr(type_, '__name__'):
        return type_.__name__
    else:
        return repr(type_)
