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

from typing import Any


class XmlRpcError(Exception):
    """Base class for exceptions in xmlrpc_codec."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class DecodeError(XmlRpcError):
    """Raised when a document cannot be decoded into an envelope.

    The message is either the diagnostic reported by the grammar-validating parser (verbatim) or a description of the
    offending node (unknown type tag, bad scalar literal, forbidden nil, incomplete fault).
    """
    pass


class EncodeError(XmlRpcError):
    """Raised when a value cannot be encoded, `value` holds the offending value."""

    def __init__(self, value: Any, message: str) -> None:
        super().__init__(message)
        self.value = value

    def __repr__(self) -> str:
        try:
            value = repr(self.value)
        except Exception:
            # repr of an int over the int/str conversion limit raises ValueError
            value = f'<{type(self.value).__name__}>'
        return f'EncodeError({value}, {self.message!r})'
