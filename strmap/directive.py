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
Field directives are read from the tag stored in a dataclass field's metadata, under the tag keyword (`strmap` unless
configured otherwise). The tag gives the key name of the field, possibly followed by a comma-separated list of
options. The name may be empty in order to specify options without overriding the default field name.

Examples of tags and their meanings:

    # Field appears in the map as key "customName".
    field: int = strmap_field('customName')

    # Field appears in the map as key "customName" and is omitted from the map if its value is empty.
    field: int = strmap_field('customName,omitempty')

    # Field appears in the map as key "field" (the default), but is skipped if empty. Note the leading comma.
    field: int = strmap_field(',omitempty')

    # Field is ignored by this package.
    field: int = strmap_field('-')

    # Field appears in the map as key "-".
    field: int = strmap_field('-,')

    # Field must be a record. Field is flattened and its fields are added to the map as (key, value) pairs, where the
    # keys are constructed in the "customName.subFieldName" format.
    field: Inner = strmap_field('customName,inline', default_factory=Inner)

>>> parse_directive('customName,omitempty')
Directive(name='customName', ignored=False, inline=False, omitempty=True)
>>> parse_directive('-')
Directive(name='', ignored=True, inline=False, omitempty=False)
>>> parse_directive('-,')
Directive(name='-', ignored=False, inline=False, omitempty=False)
>>> parse_directive(',inline,whatever')
Directive(name='', ignored=False, inline=True, omitempty=False)
"""

import dataclasses
from typing import Any, NamedTuple, Optional

TAG_SEPARATOR = ','

TAG_IGNORE = '-'
TAG_INLINE = 'inline'
TAG_OMITEMPTY = 'omitempty'


class Directive(NamedTuple):
    name: str = ''
    ignored: bool = False
    inline: bool = False
    omitempty: bool = False


def parse_directive(tag: Optional[str]) -> Directive:
    """ Parse a field tag into a Directive, an absent or empty tag gives the default directive.
    """
    if not tag:
        return Directive()

    if tag == TAG_IGNORE:
        return Directive(ignored=True)

    name, *options = tag.split(TAG_SEPARATOR)
    # unknown options are skipped so tags written for newer versions still parse
    return Directive(
        name=name,
        inline=TAG_INLINE in options,
        omitempty=TAG_OMITEMPTY in options,
    )


def strmap_field(tag: str, *, tag_keyword: Optional[str] = None, **kwargs: Any) -> Any:
    """ Shortcut for `dataclasses.field` that stores `tag` in the field's metadata.

    All other keyword arguments are forwarded to `dataclasses.field`, any metadata given is kept.
    """
    if tag_keyword is None:
        from strmap.conf.get_settings import get_global_settings
        tag_keyword = get_global_settings().TAG_KEYWORD
    metadata = dict(kwargs.pop('metadata', None) or {})
    metadata[tag_keyword] = tag
    return dataclasses.field(metadata=metadata, **kwargs)
