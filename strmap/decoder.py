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

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType
from typing import Any, Optional

from structlog import get_logger

from strmap.conf import StrMapSettings, get_global_settings
from strmap.descriptor import FieldDescriptor, get_descriptor, is_frozen_record, is_record, is_record_type
from strmap.exception import (
    AllocationError,
    NilValueError,
    NotAPointerError,
    NotARecordError,
    StrMapError,
    UnsupportedTypeError,
)
from strmap.hooks import is_string_map_unmarshaler
from strmap.inline import InlinePath, enter_inline, inline_prefix
from strmap.scalar import string_to_value
from strmap.utils.typing import pretty_type, resolve_newtype
from strmap.zero import is_zero, new_record

logger = get_logger()

# values of these types are copied around, there's no way to write into them
_VALUE_TYPES = (bool, int, float, complex, str, bytes, tuple, frozenset, Enum)


class Decoder:
    """ Decodes flat `dict[str, str]` maps into records, using the inverse of the conversions made by `Encoder`.

    Only fields with a matching key are written, other fields keep their current values and keys that don't match any
    field are ignored. Absent references of inline fields are filled with new records. Fields tagged `omitempty`
    are left untouched when the decoded value is their zero value.

    A record (top-level or inline) that implements `load_string_map()` receives the keys under its prefix, with the
    prefix removed, and no field is decoded by the Decoder.

    When decoding fails the target may have been partially written.
    """

    def __init__(self, settings: Optional[StrMapSettings] = None) -> None:
        self._settings = settings if settings is not None else get_global_settings()
        self.log = logger.new()

    def decode(self, data: Mapping[str, str], target: Any) -> None:
        """ Set the fields of `target` from `data`. Neither can be None, `target` must be a mutable record.
        """
        if data is None:
            raise NilValueError('map passed is None')
        if not isinstance(data, Mapping):
            raise UnsupportedTypeError(f'cannot decode from {pretty_type(type(data))}: not a mapping',
                                       type_=type(data))
        self._check_target(target)
        self._decode_record(MappingProxyType(data), '', target, (type(target),))

    def _check_target(self, target: Any) -> None:
        if target is None:
            raise NilValueError('argument provided is None')
        if isinstance(target, type):
            raise NotAPointerError(f'cannot decode into the class {pretty_type(target)}, an instance is needed',
                                   type_=target)
        if isinstance(target, _VALUE_TYPES):
            raise NotAPointerError(f'cannot decode into {pretty_type(type(target))}: immutable value',
                                   type_=type(target))
        # a record-level loader takes over the whole decoding, even for a frozen record
        if is_string_map_unmarshaler(target):
            return
        if is_record(target):
            if is_frozen_record(target):
                raise NotAPointerError(f'cannot decode into {pretty_type(type(target))}: frozen record',
                                       type_=type(target))
            return
        raise NotARecordError(f'cannot decode into {pretty_type(type(target))}: not a record', type_=type(target))

    def _decode_record(self, data: Mapping[str, str], prefix: str, record: Any, path: InlinePath) -> None:
        """ Decode the keys of `data` under `prefix` into `record`.

        `path` holds the record types being inlined, from the top-level record down to this one.
        """
        if is_string_map_unmarshaler(record):
            self._decode_string_map(data, prefix, record)
            return

        if is_frozen_record(record):
            raise NotAPointerError(f'cannot decode into {pretty_type(type(record))}: frozen record',
                                   type_=type(record))

        descriptor = get_descriptor(type(record), tag_keyword=self._settings.TAG_KEYWORD)
        for field in descriptor.visible_fields():
            if field.directive.inline or is_string_map_unmarshaler(field.type_):
                inner = getattr(record, field.name)
                if inner is None:
                    inner = self._allocate(record, field)
                if not (is_record(inner) or is_string_map_unmarshaler(inner)):
                    raise NotARecordError(
                        f'cannot inline field {field.name!r}: {pretty_type(type(inner))} is not a record',
                        type_=type(inner),
                    )
                inner_path = enter_inline(path, type(inner), field_name=field.name)
                inner_prefix = inline_prefix(prefix, field.key, self._settings.INLINE_SEPARATOR)
                self._decode_record(data, inner_prefix, inner, inner_path)
                continue

            key = prefix + field.key
            if key not in data:
                # missing keys keep the current value
                continue
            value = string_to_value(data[key], self._field_type(record, field))
            if field.directive.omitempty and is_zero(value):
                continue
            setattr(record, field.name, value)

    def _decode_string_map(self, data: Mapping[str, str], prefix: str, record: Any) -> None:
        self.log.debug('record-level conversion', record_type=pretty_type(type(record)), prefix=prefix)
        if prefix:
            # XXX: building the sub-map is O(n) on the size of the whole map
            data = {key[len(prefix):]: value for key, value in data.items() if key.startswith(prefix)}
        record.load_string_map(data)

    def _field_type(self, record: Any, field: FieldDescriptor) -> Any:
        """ The declared type of a leaf field, or the type of its current value when it isn't known.
        """
        if field.type_ is not Any:
            return field.type_
        current = getattr(record, field.name)
        if current is None:
            raise UnsupportedTypeError(
                f'cannot decode field {field.name!r} of {pretty_type(type(record))}: its type is unknown',
                type_=Any,
            )
        return type(current)

    def _allocate(self, record: Any, field: FieldDescriptor) -> Any:
        """ Fill an absent reference with a new record and return it.
        """
        type_ = resolve_newtype(field.type_)
        if type_ is Any:
            raise AllocationError(
                f'cannot allocate field {field.name!r} of {pretty_type(type(record))}: its type is unknown',
                type_=Any,
            )
        if not (is_record_type(type_) or is_string_map_unmarshaler(type_)):
            raise NotARecordError(
                f'cannot inline field {field.name!r}: {pretty_type(type_)} is not a record',
                type_=type_,
            )
        try:
            inner = new_record(type_) if is_record_type(type_) else type_()
            setattr(record, field.name, inner)
        except StrMapError:
            raise
        except (TypeError, ValueError, AttributeError) as e:
            raise AllocationError(
                f'cannot allocate field {field.name!r} of {pretty_type(type(record))} with a new {pretty_type(type_)}',
                type_=type_,
            ) from e
        self.log.debug('allocated absent reference', field=field.name, record_type=pretty_type(type(record)),
                       field_type=pretty_type(type_))
        return inner


def decode(data: Mapping[str, str], target: Any, *, settings: Optional[StrMapSettings] = None) -> None:
    """ Set the fields of `target` from `data`, see `Decoder`.
    """
    Decoder(settings).decode(data, target)
