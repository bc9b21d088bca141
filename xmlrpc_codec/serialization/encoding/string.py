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
This module implements string encoding.

Text is escaped on the way out and taken verbatim on the way in. The `<string>` tag itself is optional on the wire, a
`<value>` with only text in it is also a string, that case is handled by the value decoder.

>>> se = Serializer.build_chunk_serializer()
>>> encode_string(se, 'Tom & Jerry <3')
>>> encode_string(se, '')
>>> se.finalize()
b'<string>Tom &amp; Jerry &lt;3</string><string></string>'

>>> decode_string(fromstring('<string>Tom &amp; Jerry</string>'))
'Tom & Jerry'
>>> decode_string(fromstring('<string/>'))
''
"""

from xml.etree.ElementTree import Element, fromstring  # noqa: F401

from xmlrpc_codec.serialization import Serializer


def encode_string(serializer: Serializer, value: str) -> None:
    assert isinstance(value, str)
    serializer.write_element('string', value)


def decode_string(element: Element) -> str:
    return element.text or ''
