from dataclasses import dataclass, field
from typing import Any, Optional

import pytest

from strmap import (
    AllocationError,
    Complex64,
    Encoder,
    Float32,
    InlineCycleError,
    Int8,
    NilValueError,
    NotARecordError,
    OutOfRangeError,
    ParseError,
    StrMapSettings,
    Uint8,
    UnsupportedTypeError,
    encode,
    strmap_field,
)
from strmap.encoding.float import to_single
from tests.records import (
    STRINGER_OUT,
    TEXT_MARSHALER_OUT,
    Color,
    Inner1Level,
    Inner2Level,
    Level,
    Node,
    Root1Level,
    Root2Level,
    RootWithOptional,
    Scalars,
    Shade,
    StubIntStringer,
    StubIntText,
    StubMapRecord,
    StubStringer,
    StubText,
    StubTextMarshaler,
    Tagged,
    WithUnexported,
)


@dataclass
class AnyValue:
    V: Any = None


@dataclass
class StringerValue:
    V: StubStringer = field(default_factory=StubStringer)


@dataclass
class IntStringerValue:
    V: StubIntStringer = StubIntStringer(100)


@dataclass
class TextMarshalerValue:
    V: StubTextMarshaler = field(default_factory=StubTextMarshaler)


@dataclass
class Unsupported:
    V: bytes = b''


def test_encode_valid_records():
    assert encode(Inner1Level('x')) == {'String': 'x'}
    assert encode(StringerValue()) == {'V': STRINGER_OUT}


def test_encode_none():
    with pytest.raises(NilValueError):
        encode(None)


@pytest.mark.parametrize('value', [45, 'str', 4.5, [1, 2], {'a': 'b'}, Inner1Level])
def test_encode_not_a_record(value):
    with pytest.raises(NotARecordError) as exc_info:
        encode(value)
    assert exc_info.value.type_ is type(value)


def test_encode_default_scalars():
    assert encode(Scalars()) == {
        'Bool': 'false',
        'Int': '0',
        'Int8': '0',
        'Uint8': '0',
        'Float': '0',
        'Float32': '0',
        'Complex': '(0+0i)',
        'Complex64': '(0+0i)',
        'String': '',
        'Level': '1',
    }


def test_encode_scalars():
    record = Scalars(
        bool_=True,
        int_=-42,
        int8=-128,
        uint8=255,
        float_=100.1,
        float32=to_single(100.1),
        complex_=100.1 + 80.1j,
        complex64=1.5 - 2j,
        string='str',
        color=Color.BLUE,
        level=Level.HIGH,
    )
    assert encode(record) == {
        'Bool': 'true',
        'Int': '-42',
        'Int8': '-128',
        'Uint8': '255',
        'Float': '100.1',
        'Float32': '100.1',
        'Complex': '(100.1+80.1i)',
        'Complex64': '(1.5-2i)',
        'String': 'str',
        'Color': 'blue',
        'Level': '10',
    }


@pytest.mark.parametrize('value, expected', [
    (1e-07, '0.0000001'),
    (100.0, '100'),
    (-0.5, '-0.5'),
    (float('nan'), 'NaN'),
    (float('inf'), '+Inf'),
    (float('-inf'), '-Inf'),
])
def test_encode_float_format(value, expected):
    @dataclass
    class FloatValue:
        V: float = 0.0

    assert encode(FloatValue(value)) == {'V': expected}


def test_encode_int_in_float_field():
    @dataclass
    class FloatValue:
        V: float = 0.0

    assert encode(FloatValue(3)) == {'V': '3'}


@pytest.mark.parametrize('record, text, target_type', [
    (Scalars(int8=1000), '1000', Int8),
    (Scalars(int8=-129), '-129', Int8),
    (Scalars(uint8=-1), '-1', Uint8),
    (Scalars(uint8=256), '256', Uint8),
])
def test_encode_sized_int_out_of_range(record, text, target_type):
    with pytest.raises(OutOfRangeError, match='value out of range') as exc_info:
        encode(record)
    assert exc_info.value.text == text
    assert exc_info.value.target_type is target_type


@pytest.mark.parametrize('record, target_type', [
    (Scalars(float32=Float32(100.1)), Float32),
    (Scalars(float32=Float32(1e39)), Float32),
    (Scalars(complex64=Complex64(100.1 + 80.1j)), Complex64),
])
def test_encode_single_precision_unrepresentable(record, target_type):
    # the text of such a value would decode to a different value
    with pytest.raises(ParseError) as exc_info:
        encode(record)
    assert isinstance(exc_info.value, OutOfRangeError)
    assert isinstance(exc_info.value, ValueError)
    assert exc_info.value.target_type is target_type


@pytest.mark.parametrize('record, expected', [
    (StringerValue(), STRINGER_OUT),
    (IntStringerValue(), STRINGER_OUT),
    (TextMarshalerValue(), TEXT_MARSHALER_OUT),
    (AnyValue(StubStringer()), STRINGER_OUT),
    (AnyValue(StubIntStringer(100)), STRINGER_OUT),
    (AnyValue(StubTextMarshaler()), TEXT_MARSHALER_OUT),
    (AnyValue(StubText('hello')), 'hello'),
    (AnyValue(StubIntText(7)), '#7'),
    (AnyValue(12), '12'),
    (AnyValue(Color.RED), 'red'),
    (AnyValue(Shade.DARK), 'dark'),
])
def test_encode_hooks(record, expected):
    assert encode(record) == {'V': expected}


def test_encode_text_takes_precedence_over_display():
    class Both:
        def to_text(self):
            return 'text'

        def __str__(self):
            return 'display'

    assert encode(AnyValue(Both())) == {'V': 'text'}


def test_encode_text_must_return_str():
    class BadText:
        def to_text(self):
            return b'bytes'

    with pytest.raises(UnsupportedTypeError):
        encode(AnyValue(BadText()))


def test_encode_text_errors_propagate():
    class FailingText:
        def to_text(self):
            raise RuntimeError('boom')

    with pytest.raises(RuntimeError, match='boom'):
        encode(AnyValue(FailingText()))


def test_encode_unsupported_type():
    with pytest.raises(UnsupportedTypeError) as exc_info:
        encode(Unsupported(b'abc'))
    assert exc_info.value.type_ is bytes


def test_encode_inner_records():
    assert encode(Root1Level(Inner1Level('oneLevel'))) == {'Inner.String': 'oneLevel'}
    assert encode(Root2Level(Inner2Level(Inner1Level('twoLevel')))) == {'Inner.Inner.String': 'twoLevel'}
    assert encode(RootWithOptional(Inner1Level('oneLevel'))) == {'Inner.String': 'oneLevel'}


def test_encode_absent_reference_as_zero_value():
    assert encode(RootWithOptional()) == {'Inner.String': ''}

    @dataclass
    class OptionalLeaf:
        V: Optional[int] = None

    assert encode(OptionalLeaf()) == {'V': '0'}
    assert encode(OptionalLeaf(5)) == {'V': '5'}


def test_encode_absent_value_of_unknown_type():
    with pytest.raises(NilValueError):
        encode(AnyValue())


def test_encode_absent_enum_reference():
    @dataclass
    class OptionalColor:
        V: Optional[Color] = None

    with pytest.raises(AllocationError):
        encode(OptionalColor())


def test_encode_inline_not_a_record():
    @dataclass
    class InlineInt:
        V: int = strmap_field(',inline', default=3)

    with pytest.raises(NotARecordError, match='cannot inline'):
        encode(InlineInt())


def test_encode_inline_cycle():
    with pytest.raises(InlineCycleError) as exc_info:
        encode(Node(1))
    assert exc_info.value.type_ is Node


def test_encode_same_type_in_sibling_fields():
    @dataclass
    class Siblings:
        a: Inner1Level = strmap_field(',inline', default_factory=Inner1Level)
        b: Inner1Level = strmap_field(',inline', default_factory=Inner1Level)

    assert encode(Siblings(Inner1Level('x'), Inner1Level('y'))) == {'a.String': 'x', 'b.String': 'y'}


def test_encode_unexported():
    assert encode(WithUnexported('exported', 'should be invisible')) == {'Exported': 'exported'}


def test_encode_with_tags():
    record = Tagged(DefaultName='defaultname', Renamed='renamed', Ignored='ignored', Dash='dash')
    assert encode(record) == {
        'DefaultName': 'defaultname',
        'customname': 'renamed',
        '-': 'dash',
    }


def test_encode_omitempty_not_empty():
    record = Tagged(OmittedString='here', OmittedInterface=5)
    out = encode(record)
    assert out['OmittedString'] == 'here'
    assert out['OmittedInterface'] == '5'


def test_encode_omitempty_keeps_negative_zero():
    @dataclass
    class OmitFloat:
        V: float = strmap_field(',omitempty', default=0.0)

    assert encode(OmitFloat()) == {}
    assert encode(OmitFloat(-0.0)) == {'V': '-0'}


def test_encode_omitempty_inline_zero_record():
    @dataclass
    class OmitInline:
        Inner: Inner1Level = strmap_field(',inline,omitempty', default_factory=Inner1Level)

    assert encode(OmitInline()) == {}
    assert encode(OmitInline(Inner1Level('x'))) == {'Inner.String': 'x'}


def test_encode_record_level_conversion():
    assert encode(StubMapRecord('x', 2)) == {'a': 'x', 'b': '2'}

    @dataclass
    class Outer:
        inner: StubMapRecord = strmap_field('in,inline', default_factory=StubMapRecord)
        plain: StubMapRecord = field(default_factory=StubMapRecord)

    assert encode(Outer(StubMapRecord('x', 1), StubMapRecord('y', 2))) == {
        'in.a': 'x',
        'in.b': '1',
        'plain.a': 'y',
        'plain.b': '2',
    }


def test_encode_record_level_bad_output():
    class BadMap:
        def to_string_map(self):
            return {'a': 1}

    with pytest.raises(UnsupportedTypeError):
        encode(BadMap())


def test_encode_custom_separator():
    settings = StrMapSettings(INLINE_SEPARATOR='__')
    assert Encoder(settings).encode(Root2Level(Inner2Level(Inner1Level('x')))) == {'Inner__Inner__String': 'x'}
    assert encode(Root1Level(Inner1Level('x')), settings=settings) == {'Inner__String': 'x'}


def test_encode_custom_tag_keyword():
    @dataclass
    class OtherTags:
        V: str = field(default='v', metadata={'kv': 'renamed'})
        W: str = strmap_field('w', tag_keyword='kv', default='w')
        X: str = strmap_field('x', default='x')

    assert encode(OtherTags(), settings=StrMapSettings(TAG_KEYWORD='kv')) == {'renamed': 'v', 'w': 'w', 'X': 'x'}
    assert encode(OtherTags()) == {'V': 'v', 'W': 'w', 'x': 'x'}
