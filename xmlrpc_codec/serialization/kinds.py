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
Every encodable value belongs to exactly one kind, the encoder dispatches on the kind and never on the Python type.

>>> classify(True), classify(1), classify(1.5)
(<ValueKind.BOOLEAN: 'boolean'>, <ValueKind.INT: 'int'>, <ValueKind.DOUBLE: 'double'>)
>>> classify({'a': [None]})
<ValueKind.STRUCT: 'struct'>
>>> classify(b'raw bytes')
Traceback (most recent call last):
...
xmlrpc_codec.exception.EncodeError: unsupported value type: bytes
"""

from collections.abc import Mapping
from enum import Enum, unique

from xmlrpc_codec.exception import EncodeError
from xmlrpc_codec.extension import has_struct_view
from xmlrpc_codec.types import ENVELOPE_TYPES, Base64, DateTime, FormattedFloat, Value


@unique
class ValueKind(Enum):
    NIL = 'nil'
    BOOLEAN = 'boolean'
    INT = 'int'
    DOUBLE = 'double'
    FORMATTED_DOUBLE = 'formatted_double'
    STRING = 'string'
    DATETIME = 'dateTime.iso8601'
    BASE64 = 'base64'
    ARRAY = 'array'
    STRUCT = 'struct'
    # a caller-defined value that presents itself as a struct, see `xmlrpc_codec.extension`
    FOREIGN_STRUCT = 'foreign_struct'


def classify(value: Value) -> ValueKind:
    """Return the kind of a value, raise `EncodeError` if it has none."""
    match value:
        case None:
            return ValueKind.NIL
        # bool must come before int, it's a subclass
        case bool():
            return ValueKind.BOOLEAN
        case int():
            return ValueKind.INT
        case float():
            return ValueKind.DOUBLE
        case FormattedFloat():
            return ValueKind.FORMATTED_DOUBLE
        case str():
            return ValueKind.STRING
        case DateTime():
            return ValueKind.DATETIME
        case Base64():
            return ValueKind.BASE64
        case list() | tuple():
            return ValueKind.ARRAY
        case Mapping():
            return ValueKind.STRUCT
        case _ if isinstance(value, ENVELOPE_TYPES):
            raise EncodeError(value, f'an envelope cannot be used as a value: {type(value).__name__}')
        case _ if has_struct_view(value):
            return ValueKind.FOREIGN_STRUCT
        case _:
            raise EncodeError(value, f'unsupported value type: {type(value).__name__}')
