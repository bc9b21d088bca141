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
An array is a sequence of values of any kind, possibly mixed.

Layout: <array><data><value>...</value>...</data></array>

>>> from xmlrpc_codec.serialization.encoding.int import encode_int, decode_int
>>> def encode_value(serializer, value):
...     with serializer.element('value'):
...         encode_int(serializer, value)
>>> se = Serializer.build_chunk_serializer()
>>> encode_array(se, [1, 2], encode_value)
>>> se.finalize()
b'<array><data><value><int>1</int></value><value><int>2</int></value></data></array>'

An empty array still has its `<data>` element:

>>> se = Serializer.build_chunk_serializer()
>>> encode_array(se, [], encode_value)
>>> se.finalize()
b'<array><data></data></array>'

When decoding, a missing `<data>` element is the same as an empty one:

>>> decode_value = lambda element: decode_int(element[0])
>>> decode_array(fromstring('<array><data><value><i4>1</i4></value><value><int>2</int></value></data></array>'),
...              decode_value)
[1, 2]
>>> decode_array(fromstring('<array/>'), decode_value)
[]
"""

from collections.abc import Sequence
from xml.etree.ElementTree import Element, fromstring  # noqa: F401

from xmlrpc_codec.serialization import Serializer
from xmlrpc_codec.types import Value

from . import ValueDecoder, ValueEncoder


def encode_array(serializer: Serializer, values: Sequence[Value], value_encoder: ValueEncoder) -> None:
    with serializer.element('array'), serializer.element('data'):
        for value in values:
            value_encoder(serializer, value)


def decode_array(element: Element, value_decoder: ValueDecoder) -> list[Value]:
    data = element.find('data')
    if data is None:
        return []
    return [value_decoder(value_element) for value_element in data.findall('value')]
