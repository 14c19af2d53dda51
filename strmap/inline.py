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

from strmap.exception import InlineCycleError
from strmap.utils.typing import pretty_type

InlinePath = tuple[type, ...]


def enter_inline(path: InlinePath, record_type: type, *, field_name: str) -> InlinePath:
    """ Extend the path of record types being flattened, refusing a type that is already on it.

    A record type inlined inside itself would never finish: absent references are filled with new records, which
    have absent references of their own.

    >>> class A: pass
    >>> class B: pass
    >>> path = enter_inline((A,), B, field_name='b')
    >>> try:
    ...     enter_inline(path, A, field_name='a')
    ... except InlineCycleError as e:
    ...     print(*e.args)
    cannot inline field 'a': A is already being inlined (A -> B -> A)
    """
    if record_type in path:
        cycle = ' -> '.join(pretty_type(t) for t in (*path, record_type))
        raise InlineCycleError(
            f'cannot inline field {field_name!r}: {pretty_type(record_type)} is already being inlined ({cycle})',
            type_=record_type,
        )
    return path + (record_type,)


def inline_prefix(prefix: str, key: str, separator: str) -> str:
    return prefix + key + separator
