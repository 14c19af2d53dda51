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

from pathlib import Path
from typing import Union

from pydantic import field_validator

from strmap.utils import pydantic


class StrMapSettings(pydantic.BaseModel):
    # Key of the dataclass field metadata that holds the field's tag.
    TAG_KEYWORD: str = 'strmap'

    # Separator between the name of an inline field and the names of its inner fields, in the flat map keys.
    INLINE_SEPARATOR: str = '.'

    @field_validator('TAG_KEYWORD')
    @classmethod
    def _validate_tag_keyword(cls, tag_keyword: str) -> str:
        if not tag_keyword.isidentifier():
            raise ValueError(f'TAG_KEYWORD must be a valid identifier, got {tag_keyword!r}')
        return tag_keyword

    @field_validator('INLINE_SEPARATOR')
    @classmethod
    def _validate_inline_separator(cls, separator: str) -> str:
        if not separator:
            raise ValueError('INLINE_SEPARATOR cannot be empty')
        return separator

    @classmethod
    def from_yaml(cls, *, filepath: Union[Path, str]) -> 'StrMapSettings':
        """Takes a filepath to a yaml file and returns a validated StrMapSettings instance."""
        from strmap.utils.yaml import dict_from_yaml
        return cls.model_validate(dict_from_yaml(filepath=filepath))
