from dataclasses import dataclass, fields

import pytest

from strmap import Directive, parse_directive, strmap_field


@pytest.mark.parametrize('tag, expected', [
    (None, Directive('', False, False, False)),
    ('', Directive('', False, False, False)),
    ('-', Directive('', True, False, False)),
    ('-,', Directive('-', False, False, False)),
    ('customname', Directive('customname', False, False, False)),
    ('customname,omitempty', Directive('customname', False, False, True)),
    (',omitempty', Directive('', False, False, True)),
    (',inline', Directive('', False, True, False)),
    ('name,inline,omitempty', Directive('name', False, True, True)),
    ('name,omitempty,inline', Directive('name', False, True, True)),
    ('name,unknown,inline', Directive('name', False, True, False)),
    (',', Directive('', False, False, False)),
    ('-,inline', Directive('-', False, True, False)),
])
def test_parse_directive(tag, expected):
    assert parse_directive(tag) == expected


def test_strmap_field_metadata():
    @dataclass
    class Tagged:
        a: int = strmap_field('x,omitempty', default=0)
        b: int = strmap_field('y', tag_keyword='other', default=0, metadata={'doc': 'kept'})

    a, b = fields(Tagged)
    assert a.metadata['strmap'] == 'x,omitempty'
    assert b.metadata['other'] == 'y'
    assert b.metadata['doc'] == 'kept'
    assert 'strmap' not in b.metadata
    assert Tagged() == Tagged(0, 0)


def test_strmap_field_forwards_field_arguments():
    @dataclass
    class WithFactory:
        values: list = strmap_field('-', default_factory=list)
        hidden: int = strmap_field('h', default=1, repr=False)

    first, second = WithFactory(), WithFactory()
    assert first.values is not second.values
    assert 'hidden' not in repr(first)
