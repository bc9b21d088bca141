#  Copyright 2025 Hathor Labs
#
#  Licensed under the Apache License, Version 2.0 (the "License");
#  you may not use this file except in compliance with the License.
#  You may obtain a copy of the License at
#
#  http://www.apache.org/licenses/LICENSE-2.0
#
#  Unless required by applicable law or agreed to in writing, software
#  distributed under the License is distributed on an "AS IS" BASIS,
#  WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#  See the License for the specific language governing permissions and
#  limitations under the License.

"""
Decoder: a parse tree that conforms to the grammar (see `xmlrpc_codec.schema`) to an envelope.

The structure was already validated by the parser, what is left for the decoder is interpreting leaf literals and the
few rules the grammar can't express (nil exclusion, fault members).

>>> from xml.etree.ElementTree import fromstring
>>> decode_envelope(fromstring(
...     '<methodCall><methodName>sample.add</methodName>'
...     '<params><param><value><i4>1</i4></value></param><param><value>two</value></param></params>'
...     '</methodCall>'
... ), exclude_nil=False)
MethodCall(method_name='sample.add', params=[1, 'two'])
"""

from xml.etree.ElementTree import Element

from xmlrpc_codec.exception import DecodeError
from xmlrpc_codec.serialization.compound_encoding.array import decode_array
from xmlrpc_codec.serialization.compound_encoding.struct import decode_struct
from xmlrpc_codec.serialization.encoding.base64 import decode_base64
from xmlrpc_codec.serialization.encoding.bool import decode_bool
from xmlrpc_codec.serialization.encoding.datetime import decode_datetime
from xmlrpc_codec.serialization.encoding.double import decode_double
from xmlrpc_codec.serialization.encoding.int import INT_TAGS, decode_int
from xmlrpc_codec.serialization.encoding.nil import decode_nil
from xmlrpc_codec.serialization.encoding.string import decode_string
from xmlrpc_codec.types import Envelope, Fault, MethodCall, MethodResponse, Value


def decode_value(value_element: Element, *, exclude_nil: bool) -> Value:
    """Decode a `<value>` element.

    A `<value>` without a type element is a string and its text is taken verbatim, whitespace included. Otherwise any
    text around the type element is ignored.
    """
    children = list(value_element)
    if not children:
        return value_element.text or ''

    element = children[0]

    def decode_nested(nested: Element, /) -> Value:
        return decode_value(nested, exclude_nil=exclude_nil)

    match element.tag:
        case 'nil':
            return decode_nil(element, exclude_nil=exclude_nil)
        case 'boolean':
            return decode_bool(element)
        case tag if tag in INT_TAGS:
            return decode_int(element)
        case 'double':
            return decode_double(element)
        case 'string':
            return decode_string(element)
        case 'dateTime.iso8601':
            return decode_datetime(element)
        case 'base64':
            return decode_base64(element)
        case 'array':
            return decode_array(element, decode_nested)
        case 'struct':
            return decode_struct(element, decode_nested)
        case tag:
            raise DecodeError(f'unsupported value type: <{tag}>')


def decode_envelope(root: Element, *, exclude_nil: bool) -> Envelope:
    """Decode the root element of a document into a `MethodCall`, `MethodResponse` or `Fault`."""
    match root.tag:
        case 'methodCall':
            return _decode_method_call(root, exclude_nil=exclude_nil)
        case 'methodResponse':
            return _decode_method_response(root, exclude_nil=exclude_nil)
        case tag:
            raise DecodeError(f'unexpected root element: <{tag}>')


def _decode_method_call(root: Element, *, exclude_nil: bool) -> MethodCall:
    method_name = root.find('methodName')
    if method_name is None:
        raise DecodeError('methodCall is missing its methodName')
    params = [
        decode_value(value_element, exclude_nil=exclude_nil)
        for value_element in root.iterfind('params/param/value')
    ]
    return MethodCall(method_name.text or '', params)


def _decode_method_response(root: Element, *, exclude_nil: bool) -> MethodResponse | Fault:
    fault_value = root.find('fault/value')
    if fault_value is not None:
        return _decode_fault(fault_value, exclude_nil=exclude_nil)

    value_element = root.find('params/param/value')
    if value_element is None:
        raise DecodeError('methodResponse must have either a param or a fault')
    return MethodResponse(decode_value(value_element, exclude_nil=exclude_nil))


def _decode_fault(fault_value: Element, *, exclude_nil: bool) -> Fault:
    fault = decode_value(fault_value, exclude_nil=exclude_nil)
    if not isinstance(fault, dict):
        raise DecodeError('fault must be a struct')

    fault_code = fault.get('faultCode')
    fault_string = fault.get('faultString')
    if not isinstance(fault_code, int) or isinstance(fault_code, bool):
        raise DecodeError('fault is missing an integer faultCode')
    if not isinstance(fault_string, str):
        raise DecodeError('fault is missing a string faultString')
    return Fault(fault_code, fault_string)
