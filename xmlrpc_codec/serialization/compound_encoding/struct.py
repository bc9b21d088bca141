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
A struct is a mapping of names to values of any kind, names are always strings.

Layout: <struct><member><name>...</name><value>...</value></member>...</struct>

>>> from xmlrpc_codec.serialization.encoding.bool import encode_bool, decode_bool
>>> def encode_value(serializer, value):
...     with serializer.element('value'):
...         encode_bool(serializer, value)
>>> se = Serializer.build_chunk_serializer()
>>> encode_struct(se, {'ok': True, 'a&b': False}, encode_value)
>>> se.finalize()
b'<struct><member><name>ok</name><value><boolean>1</boolean></value></member><member><name>a&amp;b</name><value><boolean>0</boolean></value></member></struct>'

Names must be strings, there is no wire form for anything else:

>>> encode_struct(Serializer.build_chunk_serializer(), {1: True}, encode_value)
Traceback (most recent call last):
...
xmlrpc_codec.exception.EncodeError: struct member names must be strings, got int

When decoding, members are folded in document order so a repeated name keeps the last value:

>>> decode_value = lambda element: decode_bool(element[0])
>>> decode_struct(fromstring(
...     '<struct>'
...     '<member><name>x</name><value><boolean>1</boolean></value></member>'
...     '<member><name>x</name><value><boolean>0</boolean></value></member>'
...     '</struct>'
... ), decode_value)
{'x': False}
>>> decode_struct(fromstring('<struct/>'), decode_value)
{}
"""

from collections.abc import Mapping
from xml.etree.ElementTree import Element, fromstring  # noqa: F401

from xmlrpc_codec.exception import DecodeError, EncodeError
from xmlrpc_codec.serialization import Serializer
from xmlrpc_codec.types import Value

from . import ValueDecoder, ValueEncoder


def encode_struct(serializer: Serializer, values: Mapping[str, Value], value_encoder: ValueEncoder) -> None:
    with serializer.element('struct'):
        for name, value in values.items():
            if not isinstance(name, str):
                raise EncodeError(name, f'struct member names must be strings, got {type(name).__name__}')
            with serializer.element('member'):
                serializer.write_element('name', name)
                value_encoder(serializer, value)


def decode_struct(element: Element, value_decoder: ValueDecoder) -> dict[str, Value]:
    result: dict[str, Value] = {}
    for member in element.findall('member'):
        name = member.find('name')
        value_element = member.find('value')
        if name is None or value_element is None:
            raise DecodeError('struct member must have a name and a value')
        result[name.text or ''] = value_decoder(value_element)
    return result
