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
This module implements the `<nil/>` extension.

Nil is an extension to XML-RPC, so both directions can be told to reject it with `exclude_nil`.

>>> se = Serializer.build_chunk_serializer()
>>> encode_nil(se, exclude_nil=False)
>>> se.finalize()
b'<nil/>'

>>> se = Serializer.build_chunk_serializer()
>>> encode_nil(se, exclude_nil=True)
Traceback (most recent call last):
...
xmlrpc_codec.exception.EncodeError: nil is not allowed (exclude_nil is set)

>>> decode_nil(fromstring('<nil/>'), exclude_nil=False) is None
True
"""

from xml.etree.ElementTree import Element, fromstring  # noqa: F401

from xmlrpc_codec.exception import DecodeError, EncodeError
from xmlrpc_codec.serialization import Serializer


def encode_nil(serializer: Serializer, *, exclude_nil: bool) -> None:
    if exclude_nil:
        raise EncodeError(None, 'nil is not allowed (exclude_nil is set)')
    serializer.write_empty_tag('nil')


def decode_nil(element: Element, *, exclude_nil: bool) -> None:
    if exclude_nil:
        raise DecodeError('<nil/> is not allowed (exclude_nil is set)')
    return None
