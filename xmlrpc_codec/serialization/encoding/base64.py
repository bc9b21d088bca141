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
This module implements the `base64` wrapper, the encoded text is carried verbatim in both directions.

Whitespace inside the element (line-wrapped payloads are common) is kept in the wrapper, it's dropped only when the
wrapper is converted to bytes with `Base64.to_bytes`.

>>> se = Serializer.build_chunk_serializer()
>>> encode_base64(se, Base64.from_bytes(b'hathor'))
>>> se.finalize()
b'<base64>aGF0aG9y</base64>'

>>> wrapped = decode_base64(fromstring('<base64>\\n  aGF0\\n  aG9y\\n</base64>'))
>>> wrapped.to_bytes()
b'hathor'
"""

from xml.etree.ElementTree import Element, fromstring  # noqa: F401

from xmlrpc_codec.serialization import Serializer
from xmlrpc_codec.types import Base64


def encode_base64(serializer: Serializer, value: Base64) -> None:
    assert isinstance(value, Base64)
    serializer.write_element('base64', value.raw)


def decode_base64(element: Element) -> Base64:
    return Base64(element.text or '')
