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

from structlog import get_logger

from strmap.conf import StrMapSettings, get_global_settings
from strmap.descriptor import FieldDescriptor, get_descriptor, is_record
from strmap.exception import NilValueError, NotARecordError, UnsupportedTypeError
from strmap.hooks import is_string_map_marshaler
from strmap.inline import InlinePath, enter_inline, inline_prefix
from strmap.scalar import value_to_string
from strmap.utils.typing import pretty_type
from strmap.zero import is_zero, zero_value

logger = get_logger()


class Encoder:
    """ Encodes records into flat `dict[str, str]` maps.

    Every exported field of the record is translated into a (key, value) pair. Fields tagged `inline` must hold a
    record, whose fields are added with keys in the `field.innerField` format. Fields tagged `-` are skipped, fields
    tagged `omitempty` are skipped when they hold their zero value.

    A record (top-level or inline) that implements `to_string_map()` is converted by that method alone.
    """

    def __init__(self, settings: Optional[StrMapSettings] = None) -> None:
        self._settings = settings if settings is not None else get_global_settings()
        self.log = logger.new()

    def encode(self, record: Any) -> dict[str, str]:
        """ Return the flat map representation of `record`, which must be a dataclass instance or implement
        `to_string_map()`.
        """
        if record is None:
            raise NilValueError('provided a nil value')
        if not (is_record(record) or is_string_map_marshaler(record)):
            raise NotARecordError(f'cannot encode {pretty_type(type(record))}: not a record', type_=type(record))
        result: dict[str, str] = {}
        self._encode_record(result, '', record, (type(record),))
        return result

    def _encode_record(self, result: dict[str, str], prefix: str, record: Any, path: InlinePath) -> None:
        """ Encode a record into `result`, prefixing every key with `prefix`.

        `path` holds the record types being inlined, from the top-level record down to this one.
        """
        if is_string_map_marshaler(record):
            self._encode_string_map(result, prefix, record)
            return

        descriptor = get_descriptor(type(record), tag_keyword=self._settings.TAG_KEYWORD)
        for field in descriptor.visible_fields():
            value = getattr(record, field.name)
            if field.directive.omitempty and is_zero(value):
                continue
            if value is None:
                value = self._zero_for_absent(record, field)

            key = prefix + field.key
            if field.directive.inline or is_string_map_marshaler(value):
                if not (is_record(value) or is_string_map_marshaler(value)):
                    raise NotARecordError(
                        f'cannot inline field {field.name!r}: {pretty_type(type(value))} is not a record',
                        type_=type(value),
                    )
                inner_path = enter_inline(path, type(value), field_name=field.name)
                inner_prefix = inline_prefix(prefix, field.key, self._settings.INLINE_SEPARATOR)
                self._encode_record(result, inner_prefix, value, inner_path)
            else:
                result[key] = value_to_string(value, field.type_)

    def _encode_string_map(self, result: dict[str, str], prefix: str, record: Any) -> None:
        self.log.debug('record-level conversion', record_type=pretty_type(type(record)), prefix=prefix)
        for key, value in record.to_string_map().items():
            if not isinstance(key, str) or not isinstance(value, str):
                raise UnsupportedTypeError(
                    f'{pretty_type(type(record))}.to_string_map() must return str keys and values, '
                    f'got {pretty_type(type(key))}: {pretty_type(type(value))}',
                    type_=type(record),
                )
            result[prefix + key] = value

    def _zero_for_absent(self, record: Any, field: FieldDescriptor) -> Any:
        """ An absent reference is encoded as the zero value of the type it refers to.
        """
        if field.type_ is Any:
            raise NilValueError(
                f'field {field.name!r} of {pretty_type(type(record))} is None and its type is unknown'
            )
        return zero_value(field.type_)


def encode(record: Any, *, settings: Optional[StrMapSettings] = None) -> dict[str, str]:
    """ Return the flat map representation of `record`, see `Encoder`.
    """
    return Encoder(settings).encode(record)
