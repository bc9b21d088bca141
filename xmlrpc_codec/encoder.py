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
Encoder: values and envelopes to XML-RPC markup.

Every value is written inside its own `<value>` element with the type tag of its kind, which is decided by
`xmlrpc_codec.serialization.classify`. Envelopes add the document prolog and the root element:

>>> from xmlrpc_codec.serialization import Serializer
>>> se = Serializer.build_chunk_serializer()
>>> encode_document(se, MethodCall('sample.add', [1, 'two']), exclude_nil=False)
>>> se.finalize()
b'<?xml version="1.0" encoding="UTF-8"?><methodCall><methodName>sample.add</methodName><params><param><value><int>1</int></value></param><param><value><string>two</string></value></param></params></methodCall>'

A bare value is written as a `<value>` fragment, without a prolog:

>>> se = Serializer.build_chunk_serializer()
>>> encode_document(se, [True, None], exclude_nil=False)
>>> se.finalize()
b'<value><array><data><value><boolean>1</boolean></value><value><nil/></value></data></array></value>'
"""

from collections.abc import Mapping
from typing import Union

from typing_extensions import assert_never

from xmlrpc_codec.exception import EncodeError
from xmlrpc_codec.extension import struct_view
from xmlrpc_codec.schema import METHOD_NAME_RE
from xmlrpc_codec.serialization import Serializer, ValueKind, classify
from xmlrpc_codec.serialization.compound_encoding.array import encode_array
from xmlrpc_codec.serialization.compound_encoding.struct import encode_struct
from xmlrpc_codec.serialization.encoding.base64 import encode_base64
from xmlrpc_codec.serialization.encoding.bool import encode_bool
from xmlrpc_codec.serialization.encoding.datetime import encode_datetime
from xmlrpc_codec.serialization.encoding.double import encode_double, encode_formatted_double
from xmlrpc_codec.serialization.encoding.int import encode_int
from xmlrpc_codec.serialization.encoding.nil import encode_nil
from xmlrpc_codec.serialization.encoding.string import encode_string
from xmlrpc_codec.types import ENVELOPE_TYPES, Envelope, Fault, MethodCall, MethodResponse, Value

XML_PROLOG = '<?xml version="1.0" encoding="UTF-8"?>'


def encode_value(serializer: Serializer, value: Value, *, exclude_nil: bool) -> None:
    """Write `<value>...</value>` for any encodable value, raises `EncodeError` for anything else."""
    kind = classify(value)

    def encode_nested(serializer: Serializer, nested: Value, /) -> None:
        encode_value(serializer, nested, exclude_nil=exclude_nil)

    with serializer.element('value'):
        try:
            match kind:
                case ValueKind.NIL:
                    encode_nil(serializer, exclude_nil=exclude_nil)
                case ValueKind.BOOLEAN:
                    encode_bool(serializer, value)
                case ValueKind.INT:
                    encode_int(serializer, value)
                case ValueKind.DOUBLE:
                    encode_double(serializer, value)
                case ValueKind.FORMATTED_DOUBLE:
                    encode_formatted_double(serializer, value)
                case ValueKind.STRING:
                    encode_string(serializer, value)
                case ValueKind.DATETIME:
                    encode_datetime(serializer, value)
                case ValueKind.BASE64:
                    encode_base64(serializer, value)
                case ValueKind.ARRAY:
                    encode_array(serializer, value, encode_nested)
                case ValueKind.STRUCT:
                    encode_struct(serializer, value, encode_nested)
                case ValueKind.FOREIGN_STRUCT:
                    view = struct_view(value)
                    if not isinstance(view, Mapping):
                        raise EncodeError(value, f'struct view must be a mapping, got {type(view).__name__}')
                    encode_struct(serializer, view, encode_nested)
                case _:
                    assert_never(kind)
        except ValueError as e:
            # text that XML cannot represent, raised while escaping
            raise EncodeError(value, str(e)) from e


def encode_envelope(serializer: Serializer, envelope: Envelope, *, exclude_nil: bool) -> None:
    """Write a complete document for an envelope, including the prolog."""
    serializer.write_markup(XML_PROLOG)
    match envelope:
        case MethodCall(method_name=method_name, params=params):
            if not isinstance(method_name, str):
                raise EncodeError(method_name, 'method name must be a str')
            if METHOD_NAME_RE.fullmatch(method_name) is None:
                raise EncodeError(method_name, f'invalid method name: {method_name!r}')
            if not isinstance(params, (list, tuple)):
                raise EncodeError(params, 'method params must be a list')
            with serializer.element('methodCall'):
                serializer.write_element('methodName', method_name)
                with serializer.element('params'):
                    for param in params:
                        with serializer.element('param'):
                            encode_value(serializer, param, exclude_nil=exclude_nil)
        case MethodResponse(param=param):
            with serializer.element('methodResponse'), serializer.element('params'), serializer.element('param'):
                encode_value(serializer, param, exclude_nil=exclude_nil)
        case Fault(fault_code=fault_code, fault_string=fault_string):
            if not isinstance(fault_code, int) or isinstance(fault_code, bool):
                raise EncodeError(fault_code, 'fault code must be an int')
            if not isinstance(fault_string, str):
                raise EncodeError(fault_string, 'fault string must be a str')
            with serializer.element('methodResponse'), serializer.element('fault'):
                encode_value(
                    serializer,
                    {'faultCode': fault_code, 'faultString': fault_string},
                    exclude_nil=exclude_nil,
                )
        case _:
            assert_never(envelope)


def encode_document(serializer: Serializer, value: Union[Envelope, Value], *, exclude_nil: bool) -> None:
    """Write an envelope as a full document or any other value as a `<value>` fragment."""
    if isinstance(value, ENVELOPE_TYPES):
        encode_envelope(serializer, value, exclude_nil=exclude_nil)
    else:
        encode_value(serializer, value, exclude_nil=exclude_nil)
