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
This module implements the `dateTime.iso8601` wrapper, the text is carried verbatim in both directions.

>>> se = Serializer.build_chunk_serializer()
>>> encode_datetime(se, DateTime('19980717T14:08:55'))
>>> se.finalize()
b'<dateTime.iso8601>19980717T14:08:55</dateTime.iso8601>'

>>> decode_datetime(fromstring('<dateTime.iso8601>19980717T14:08:55</dateTime.iso8601>'))
DateTime(raw='19980717T14:08:55')
"""

from xml.etree.ElementTree import Element, fromstring  # noqa: F401

from xmlrpc_codec.serialization import Serializer
from xmlrpc_codec.types import DateTime


def encode_datetime(serializer: Serializer, value: DateTime) -> None:
    assert isinstance(value, DateTime)
    serializer.write_element('dateTime.iso8601', value.raw)


def decode_datetime(element: Element) -> DateTime:
    return DateTime(element.text or '')
