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
This module was made to hold the encoding implementations of leaf kinds.

Leaf in this context means "not compound": the value doesn't hold other values. For compound kinds (arrays and
structs) the encoder should be in the `compound_encoding` module.

The general organization should be that each submodule `x` deals with a single kind and look like this:

    def encode_x(serializer: Serializer, value: ValueType, ...config params...) -> None:
        ...

    def decode_x(element: Element, ...config params...) -> ValueType:
        ...

The encoder writes the type tag (for example `<int>17</int>`) and the decoder receives that same type element, the
surrounding `<value>` is handled by the caller. The "config params" are optional and specific to each kind.
"""
