# Copyright 2025 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Encode and decode XML-RPC documents to and from plain Python values.

All XML-RPC parameter types are supported, including arrays, structs and the `<nil/>` extension:

| XML-RPC              | Python                         |
| ---------------------|--------------------------------|
| `<boolean>`          | `bool`                         |
| `<string>`           | `str`                          |
| `<int>`/`<i4>`/`<i8>`| `int`                          |
| `<double>`           | `float` (or `FormattedFloat`)  |
| `<array>`            | `list`                         |
| `<struct>`           | `dict[str, ...]`               |
| `<dateTime.iso8601>` | `DateTime` (opaque)            |
| `<base64>`           | `Base64` (opaque)              |
| `<nil/>`             | `None`                         |

Untrusted input is validated against an XML Schema before being interpreted, see `xmlrpc_codec.schema`.
"""

import os

from xmlrpc_codec.codec import (
    decode,
    decode_result,
    encode,
    encode_result,
    encode_to_iodata,
    encode_to_iodata_result,
)
from xmlrpc_codec.exception import DecodeError, EncodeError, XmlRpcError
from xmlrpc_codec.types import Base64, DateTime, Envelope, Fault, FormattedFloat, MethodCall, MethodResponse, Value
from xmlrpc_codec.version import __version__

XMLRPC_CODEC_DIR = os.path.dirname(__file__)

__all__ = [
    'decode',
    'decode_result',
    'encode',
    'encode_result',
    'encode_to_iodata',
    'encode_to_iodata_result',
    'DecodeError',
    'EncodeError',
    'XmlRpcError',
    'Base64',
    'DateTime',
    'Envelope',
    'Fault',
    'FormattedFloat',
    'MethodCall',
    'MethodResponse',
    'Value',
    'XMLRPC_CODEC_DIR',
    '__version__',
]
