import dataclasses
import sys
from collections import OrderedDict

import pytest
from pydantic import BaseModel

from xmlrpc_codec import (
    Base64,
    DateTime,
    EncodeError,
    Fault,
    FormattedFloat,
    MethodCall,
    MethodResponse,
    decode,
    encode,
    encode_result,
    encode_to_iodata,
)

PROLOG = b'<?xml version="1.0" encoding="UTF-8"?>'


def test_method_call():
    assert encode(MethodCall('examples.getStateName', [41])) == PROLOG + (
        b'<methodCall><methodName>examples.getStateName</methodName>'
        b'<params><param><value><int>41</int></value></param></params>'
        b'</methodCall>'
    )


def test_method_call_without_params():
    assert encode(MethodCall('sample.ping')) == PROLOG + (
        b'<methodCall><methodName>sample.ping</methodName><params></params></methodCall>'
    )


def test_method_response():
    assert encode(MethodResponse('South Dakota')) == PROLOG + (
        b'<methodResponse><params><param><value><string>South Dakota</string></value></param></params>'
        b'</methodResponse>'
    )


def test_fault():
    assert encode(Fault(4, 'Too many parameters.')) == PROLOG + (
        b'<methodResponse><fault><value><struct>'
        b'<member><name>faultCode</name><value><int>4</int></value></member>'
        b'<member><name>faultString</name><value><string>Too many parameters.</string></value></member>'
        b'</struct></value></fault></methodResponse>'
    )


@pytest.mark.parametrize(
    ['fault', 'offending'],
    [
        (Fault(True, 'oops'), True),
        (Fault('4', 'oops'), '4'),
        (Fault(4, None), None),
    ]
)
def test_invalid_fault(fault, offending):
    with pytest.raises(EncodeError) as e:
        encode(fault)
    assert e.value.value is offending or e.value.value == offending


@pytest.mark.parametrize(
    ['value', 'expected'],
    [
        (None, b'<value><nil/></value>'),
        (True, b'<value><boolean>1</boolean></value>'),
        (False, b'<value><boolean>0</boolean></value>'),
        (0, b'<value><int>0</int></value>'),
        (-2 ** 63, b'<value><int>-9223372036854775808</int></value>'),
        (0.1, b'<value><double>0.1</double></value>'),
        (-0.0, b'<value><double>-0.0</double></value>'),
        (1e16, b'<value><double>1e+16</double></value>'),
        (FormattedFloat(3.14159, '.3f'), b'<value><double>3.142</double></value>'),
        (FormattedFloat(1234.5, '.2e'), b'<value><double>1.23e+03</double></value>'),
        ('', b'<value><string></string></value>'),
        ('ünïcödé', '<value><string>ünïcödé</string></value>'.encode()),
        (DateTime('19980717T14:08:55'), b'<value><dateTime.iso8601>19980717T14:08:55</dateTime.iso8601></value>'),
        (Base64.from_bytes(b'hathor'), b'<value><base64>aGF0aG9y</base64></value>'),
        ([], b'<value><array><data></data></array></value>'),
        ((), b'<value><array><data></data></array></value>'),
        ({}, b'<value><struct></struct></value>'),
        (
            [1, 'a', [None]],
            b'<value><array><data>'
            b'<value><int>1</int></value>'
            b'<value><string>a</string></value>'
            b'<value><array><data><value><nil/></value></data></array></value>'
            b'</data></array></value>',
        ),
        (
            OrderedDict([('b', 1), ('a', {'c': False})]),
            b'<value><struct>'
            b'<member><name>b</name><value><int>1</int></value></member>'
            b'<member><name>a</name><value><struct>'
            b'<member><name>c</name><value><boolean>0</boolean></value></member>'
            b'</struct></value></member>'
            b'</struct></value>',
        ),
    ]
)
def test_bare_values(value, expected):
    assert encode(value) == expected


def test_text_escaping():
    assert encode('a<b>&"\'\r\n') == b'<value><string>a&lt;b&gt;&amp;&quot;&apos;&#xd;\n</string></value>'


def test_struct_member_names_are_escaped():
    assert encode({'<&>': 1}) == b'<value><struct><member><name>&lt;&amp;&gt;</name><value><int>1</int></value></member></struct></value>'  # noqa: E501


@pytest.mark.parametrize('method_name', ['sample/all_types:v1_0', 'examples.getStateName', 'A.b_2'])
def test_valid_method_names_round_trip(method_name):
    assert decode(encode(MethodCall(method_name))) == MethodCall(method_name)


@pytest.mark.parametrize('method_name', ['a&b', 'has space', 'dash-ed', '<tag>'])
def test_method_names_outside_the_grammar(method_name):
    result = encode_result(MethodCall(method_name))
    assert result.is_err()
    assert result.err().value == method_name
    assert result.err().message == f'invalid method name: {method_name!r}'
    with pytest.raises(EncodeError):
        encode(MethodCall(method_name))


@pytest.mark.parametrize('method_name', [123, None, b'sample.add'])
def test_non_str_method_name(method_name):
    result = encode_result(MethodCall(method_name))
    assert result.is_err()
    assert result.err().value == method_name
    assert result.err().message == 'method name must be a str'


@pytest.mark.parametrize('params', [5, 'abc', {'a': 1}, None])
def test_method_params_must_be_a_list(params):
    result = encode_result(MethodCall('x', params))
    assert result.is_err()
    assert isinstance(result.err(), EncodeError)
    assert result.err().message == 'method params must be a list'


@pytest.mark.parametrize('text', ['null\x00', 'bell\x07', 'surrogate\ud800', 'nonchar\ufffe'])
def test_text_not_representable_in_xml(text):
    with pytest.raises(EncodeError) as e:
        encode([text])
    assert e.value.value == text


def test_struct_member_name_not_representable_in_xml():
    with pytest.raises(EncodeError):
        encode({'a\x00': 1})


def test_method_name_not_representable_in_xml():
    with pytest.raises(EncodeError) as e:
        encode(MethodCall('a\x00'))
    assert e.value.value == 'a\x00'


@pytest.mark.parametrize('value', [float('nan'), float('inf'), float('-inf')])
def test_non_finite_doubles(value):
    with pytest.raises(EncodeError) as e:
        encode(MethodResponse([value]))
    assert e.value.message == f'cannot encode a non-finite double: {value!r}'


def test_formatted_float_with_invalid_pattern():
    with pytest.raises(EncodeError):
        encode(FormattedFloat(1.0, 'not a pattern'))


def test_nil_with_exclude_nil():
    with pytest.raises(EncodeError) as e:
        encode(MethodCall('x', [1, {'a': None}]), exclude_nil=True)
    assert e.value.value is None
    assert e.value.message == 'nil is not allowed (exclude_nil is set)'


class _Opaque:
    pass


@pytest.mark.parametrize('value', [_Opaque(), b'raw', {1, 2}, 1j, _Opaque])
def test_unencodable_values(value):
    with pytest.raises(EncodeError) as e:
        encode(MethodCall('x', [[value]]))
    assert e.value.value is value
    assert e.value.message == f'unsupported value type: {type(value).__name__}'


def test_non_str_struct_key():
    with pytest.raises(EncodeError) as e:
        encode({1: 'one'})
    assert e.value.value == 1


def test_envelope_nested_in_value():
    with pytest.raises(EncodeError):
        encode(MethodCall('x', [MethodResponse(1)]))


def test_self_referencing_value():
    value: list = []
    value.append(value)
    with pytest.raises(EncodeError) as e:
        encode(value)
    assert e.value.message == 'maximum nesting depth exceeded'


@dataclasses.dataclass
class Point:
    x: int
    y: int


class Account(BaseModel):
    name: str
    balance: float


class Tagged:
    def __init__(self, tag: str) -> None:
        self.tag = tag

    def __xmlrpc_struct__(self):
        return {'tag': self.tag}


@dataclasses.dataclass
class TaggedPoint:
    x: int

    def __xmlrpc_struct__(self):
        return {'custom': True}


@pytest.mark.parametrize(
    ['value', 'expected'],
    [
        (
            Point(1, 2),
            b'<value><struct>'
            b'<member><name>x</name><value><int>1</int></value></member>'
            b'<member><name>y</name><value><int>2</int></value></member>'
            b'</struct></value>',
        ),
        (
            Account(name='alice', balance=1.5),
            b'<value><struct>'
            b'<member><name>name</name><value><string>alice</string></value></member>'
            b'<member><name>balance</name><value><double>1.5</double></value></member>'
            b'</struct></value>',
        ),
        (
            Tagged('t'),
            b'<value><struct><member><name>tag</name><value><string>t</string></value></member></struct></value>',
        ),
        # the protocol takes precedence over the dataclass fields
        (
            TaggedPoint(1),
            b'<value><struct><member><name>custom</name><value><boolean>1</boolean></value></member></struct></value>',
        ),
    ]
)
def test_struct_like_values(value, expected):
    assert encode(value) == expected


def test_struct_like_values_are_nested():
    assert encode([Point(Point(0, 0), 1)]) == (
        b'<value><array><data><value><struct>'
        b'<member><name>x</name><value><struct>'
        b'<member><name>x</name><value><int>0</int></value></member>'
        b'<member><name>y</name><value><int>0</int></value></member>'
        b'</struct></value></member>'
        b'<member><name>y</name><value><int>1</int></value></member>'
        b'</struct></value></data></array></value>'
    )


class ListView:
    def __xmlrpc_struct__(self):
        return [('a', 1)]


def test_struct_view_must_be_a_mapping():
    value = ListView()
    result = encode_result(MethodResponse([value]))
    assert result.is_err()
    assert result.err().value is value
    assert result.err().message == 'struct view must be a mapping, got list'
    with pytest.raises(EncodeError):
        encode(value)


def test_dataclass_type_is_not_a_struct():
    with pytest.raises(EncodeError):
        encode(Point)


def test_iodata():
    call = MethodCall('sample.add', [1, {'a': [True, 'x']}])
    chunks = encode(call, iodata=True)
    assert isinstance(chunks, list)
    assert all(isinstance(chunk, bytes) for chunk in chunks)
    assert len(chunks) > 1
    assert b''.join(chunks) == encode(call, iodata=False)


def test_encode_to_iodata():
    assert encode_to_iodata(MethodResponse(1)) == encode(MethodResponse(1), iodata=True)


@pytest.mark.skipif(sys.get_int_max_str_digits() == 0, reason='int/str conversion is unlimited')
def test_int_over_the_digit_limit():
    limit = sys.get_int_max_str_digits()
    result = encode_result(MethodResponse(10**limit))
    assert result.is_err()
    assert result.err().message == f'integer has more than {limit} digits'
    # neither the error nor the result blow up when printed
    assert repr(result.err()).startswith('EncodeError(<int>, ')
    assert 'integer has more than' in repr(result)
    with pytest.raises(EncodeError):
        encode(10**limit)


def test_int_at_the_digit_limit():
    limit = sys.get_int_max_str_digits() or 4300
    assert encode(10**(limit - 1)) == b'<value><int>1' + b'0' * (limit - 1) + b'</int></value>'


def test_encode_error_repr_does_not_raise():
    class BrokenRepr:
        def __repr__(self):
            raise RuntimeError('no repr')

    assert repr(EncodeError(BrokenRepr(), 'bad')) == "EncodeError(<BrokenRepr>, 'bad')"
    assert repr(EncodeError(1, 'bad')) == "EncodeError(1, 'bad')"
