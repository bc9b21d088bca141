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
This module implements encoding a boolean value.

The format is trivial and extremely simple:

- `False` maps to `<boolean>0</boolean>`
- `True` maps to `<boolean>1</boolean>`
- any other literal is invalid (including `true`/`false`)

>>> se = Serializer.build_chunk_serializer()
>>> encode_bool(se, True)
>>> encode_bool(se, False)
>>> se.finalize()
b'<boolean>1</boolean><boolean>0</boolean>'

>>> decode_bool(fromstring('<boolean>1</boolean>'))
True
>>> decode_bool(fromstring('<boolean>0</boolean>'))
False
>>> decode_bool(fromstring('<boolean>true</boolean>'))
Traceback (most recent call last):
...
xmlrpc_codec.exception.DecodeError: 'true' is not a valid boolean
"""

from xml.etree.ElementTree import Element, fromstring  # noqa: F401

from xmlrpc_codec.exception import DecodeError
from xmlrpc_codec.serialization import Serializer


def encode_bool(serializer: Serializer, value: bool) -> None:
    """ Encodes a boolean value as `1` or `0`.
    """
    assert isinstance(value, bool)
    serializer.write_element('boolean', '1' if value else '0')


def decode_bool(element: Element) -> bool:
    """ Decodes a boolean value, only `1` and `0` are accepted.
    """
    text = element.text or ''
    if text == '1':
        return True
    elif text == '0':
        return False
    else:
        raise DecodeError(f'{text!r} is not a valid boolean')
