import math
import struct
import unittest

import pytest

from xmlrpc_codec import (
    Base64,
    DateTime,
    DecodeError,
    EncodeError,
    Fault,
    FormattedFloat,
    MethodCall,
    MethodResponse,
    decode,
    decode_result,
    encode,
    encode_result,
    encode_to_iodata_result,
)
from xmlrpc_codec.utils.result import Err, Ok

ROUND_TRIP_VALUES = [
    None,
    True,
    False,
    0,
    -1,
    2 ** 100,
    0.5,
    '',
    'plain',
    ' leading and trailing spaces ',
    'line\nbreaks\r\nand\ttabs',
    '<markup & "quotes" \'apostrophes\'>',
    'ünïcödé \U0001F600',
    DateTime('2015-06-09T09:07:02Z'),
    Base64('aGF0aG9y'),
    [],
    {},
    [1, [2, [3, []]], {'a': {}}],
    {'name': 'alice', 'tags': ['x', 'y'], 'nested': {'deep': [None, True]}},
]


@pytest.mark.parametrize('value', ROUND_TRIP_VALUES)
def test_method_call_round_trip(value):
    call = MethodCall('round.trip', [value, value])
    assert decode(encode(call)) == call


@pytest.mark.parametrize('value', ROUND_TRIP_VALUES)
def test_method_response_round_trip(value):
    response = MethodResponse(value)
    assert decode(encode(response)) == response


@pytest.mark.parametrize('fault', [Fault(0, ''), Fault(-32700, 'parse error'), Fault(4, 'a <b> & c')])
def test_fault_round_trip(fault):
    assert decode(encode(fault)) == fault


def test_params_order_is_preserved():
    params = list(range(50))
    assert decode(encode(MethodCall('ordered', params))).params == params


def test_tuples_decode_as_lists():
    assert decode(encode(MethodResponse((1, (2, 3))))) == MethodResponse([1, [2, 3]])


def test_formatted_float_decodes_as_float():
    assert decode(encode(MethodResponse(FormattedFloat(2.0 / 3.0, '.4f')))) == MethodResponse(0.6667)


def _float_bits(value: float) -> bytes:
    return struct.pack('<d', value)


@pytest.mark.parametrize(
    'value',
    [
        0.1,
        0.1 + 0.2,
        1 / 3,
        -0.0,
        5e-324,
        2.2250738585072014e-308,
        1.7976931348623157e308,
        -1.5e-10,
        123456789.123456789,
        math.pi,
        float(2 ** 53 + 1),
    ]
)
def test_double_round_trip_is_bit_identical(value):
    decoded = decode(encode(MethodResponse(value))).param
    assert _float_bits(decoded) == _float_bits(value)


class ResultApiTestCase(unittest.TestCase):
    def test_decode_result_ok(self) -> None:
        result = decode_result(b'<methodCall><methodName>x</methodName></methodCall>')
        self.assertEqual(result, Ok(MethodCall('x', [])))

    def test_decode_result_err(self) -> None:
        result = decode_result(b'<methodCall>')
        self.assertTrue(result.is_err())
        self.assertIsInstance(result.err(), DecodeError)

    def test_decode_raises_the_same_error(self) -> None:
        data = b'<methodResponse><params><param><value><boolean>yes</boolean></value></param></params></methodResponse>'
        error = decode_result(data).unwrap_err()
        with self.assertRaises(DecodeError) as cm:
            decode(data)
        self.assertEqual(cm.exception.message, error.message)
        self.assertEqual(error.message, "'yes' is not a valid boolean")

    def test_encode_result_ok(self) -> None:
        self.assertEqual(encode_result(1), Ok(b'<value><int>1</int></value>'))

    def test_encode_result_err(self) -> None:
        value = object()
        result = encode_result([value])
        match result:
            case Err(EncodeError() as error):
                self.assertIs(error.value, value)
                self.assertEqual(error.message, 'unsupported value type: object')
            case _:
                self.fail(f'unexpected result: {result!r}')

    def test_encode_raises_the_same_error(self) -> None:
        with self.assertRaises(EncodeError) as cm:
            encode(float('nan'))
        self.assertEqual(cm.exception.message, encode_result(float('nan')).unwrap_err().message)

    def test_encode_to_iodata_result(self) -> None:
        result = encode_to_iodata_result(None, exclude_nil=True)
        self.assertTrue(result.is_err())
        result = encode_to_iodata_result(None, exclude_nil=False)
        self.assertEqual(b''.join(result.unwrap()), b'<value><nil/></value>')

    def test_errors_are_codec_errors(self) -> None:
        from xmlrpc_codec import XmlRpcError
        self.assertIsInstance(decode_result(b'').unwrap_err(), XmlRpcError)
        self.assertIsInstance(encode_result(b'').unwrap_err(), XmlRpcError)


class _FailingTreeParser:
    def __init__(self, diagnostic: str) -> None:
        self.diagnostic = diagnostic
        self.calls = 0

    def parse(self, grammar, data, /):
        self.calls += 1
        return Err(self.diagnostic)


class TreeParserTestCase(unittest.TestCase):
    def test_parser_diagnostic_is_reported_verbatim(self) -> None:
        parser = _FailingTreeParser('mismatched tag: line 1, column 42')
        with self.assertRaises(DecodeError) as cm:
            decode(b'<methodCall>', parser=parser)
        self.assertEqual(cm.exception.message, 'mismatched tag: line 1, column 42')
        self.assertEqual(parser.calls, 1)

    def test_decode_result_with_failing_parser(self) -> None:
        result = decode_result(b'', parser=_FailingTreeParser('no element found'))
        self.assertEqual(result.unwrap_err().message, 'no element found')
