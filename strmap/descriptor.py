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
Record descriptors: the shape of a record type as seen by the codec.

Inspecting a dataclass (its fields, their tags and resolved type hints) is done once per record type and tag keyword,
the result is kept in a process-wide cache. The cache is only ever added to, reading it doesn't need a lock, the lock
only guards the first write for each key.
"""

import dataclasses
from threading import Lock
from typing import Any, NamedTuple, get_type_hints

from structlog import get_logger

from strmap.directive import Directive, parse_directive
from strmap.utils.typing import pretty_type, unwrap_optional

logger = get_logger()

UNEXPORTED_PREFIX = '_'


class FieldDescriptor(NamedTuple):
    # attribute name of the field
    name: str
    # key used in the flat map, without any inline prefix
    key: str
    directive: Directive
    # declared type with the optional wrapper removed, `Any` when the annotation can't be resolved
    type_: Any
    # whether the declared type is `T | None`
    optional: bool
    exported: bool


class RecordDescriptor(NamedTuple):
    record_type: type
    fields: tuple[FieldDescriptor, ...]

    def visible_fields(self) -> list[FieldDescriptor]:
        """ Exported fields that are not ignored, in declaration order.
        """
        return [field for field in self.fields if field.exported and not field.directive.ignored]


_descriptor_cache: dict[tuple[type, str], RecordDescriptor] = {}
_descriptor_cache_lock = Lock()


def is_record_type(type_: Any) -> bool:
    return isinstance(type_, type) and dataclasses.is_dataclass(type_)


def is_record(value: Any) -> bool:
    return not isinstance(value, type) and dataclasses.is_dataclass(value)


def is_frozen_record(value: Any) -> bool:
    params = getattr(type(value), '__dataclass_params__', None)
    return params is not None and params.frozen


def get_record_hints(record_type: type) -> dict[str, Any]:
    """ Resolve the type hints of a record, unresolvable annotations are replaced by `Any`.
    """
    try:
        return get_type_hints(record_type)
    except (NameError, TypeError) as e:
        logger.warning('cannot resolve type hints, unresolved annotations will be treated as Any',
                    record_type=pretty_type(record_type), error=str(e))
    hints: dict[str, Any] = {}
    for field in dataclasses.fields(record_type):
        hints[field.name] = Any if isinstance(field.type, str) else field.type
    return hints


def _build_descriptor(record_type: type, tag_keyword: str) -> RecordDescriptor:
    hints = get_record_hints(record_type)
    fields: list[FieldDescriptor] = []
    for field in dataclasses.fields(record_type):
        directive = parse_directive(field.metadata.get(tag_keyword))
        type_, optional = unwrap_optional(hints.get(field.name, Any))
        fields.append(FieldDescriptor(
            name=field.name,
            key=directive.name or field.name,
            directive=directive,
            type_=type_,
            optional=optional,
            exported=not field.name.startswith(UNEXPORTED_PREFIX),
        ))
    return RecordDescriptor(record_type, tuple(fields))


def get_descriptor(record_type: type, *, tag_keyword: str) -> RecordDescriptor:
    """ Get the descriptor of a record type, building and caching it on first use.
    """
    key = (record_type, tag_keyword)
    descriptor = _descriptor_cache.get(key)
    if descriptor is not None:
        return descriptor
    if not is_record_type(record_type):
        raise TypeError(f'{pretty_type(record_type)} is not a dataclass')
    descriptor = _build_descriptor(record_type, tag_keyword)
    with _descriptor_cache_lock:
        descriptor = _descriptor_cache.setdefault(key, descriptor)
    logger.debug('record descriptor cached', record_type=pretty_type(record_type), fields=len(descriptor.fields))
    return descriptor


def clear_descriptor_cache() -> None:
    """ Drop every cached descriptor, records redefined at runtime (tests, reloads) will be described again.
    """
    with _descriptor_cache_lock:
        _descriptor_cache.clear()
