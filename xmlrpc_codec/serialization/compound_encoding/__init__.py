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
This module was made to hold compound encoding implementations.

Compound kinds (arrays and structs) hold other values, their encoders write the container markup and delegate each
nested value to a value encoder, which is generic over every kind and writes the whole `<value>` element. The same goes
for decoders, each nested `<value>` element is handed to a value decoder.

The general organization should be that each submodule `x` deals with a single kind and look like this:

    def encode_x(serializer: Serializer, value: ValueType, value_encoder: ValueEncoder) -> None:
        ...

    def decode_x(element: Element, value_decoder: ValueDecoder) -> ValueType:
        ...

Submodules should not have to take into consideration how values are mapped to kinds.
"""

from typing import Protocol
from xml.etree.ElementTree import Element

from xmlrpc_codec.serialization import Serializer
from xmlrpc_codec.types import Value


class ValueDecoder(Protocol):
    def __call__(self, value_element: Element, /) -> Value:
        ...


class ValueEncoder(Protocol):
    def __call__(self, serializer: Serializer, value: Value, /) -> None:
        ...
