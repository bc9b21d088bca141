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
The value model: plain Python values for the scalar and compound kinds, wrappers for the opaque kinds, and the three
envelope shapes.

Plain values map as: `None` (nil), `bool`, `int`, `float`, `str`, `list` (array) and `dict[str, ...]` (struct).
"""

import base64
import binascii
import re
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, TypeAlias, Union

Value: TypeAlias = Any
"""Any of the representable kinds, nested arbitrarily inside lists and dicts."""

# XML-RPC has no hyphens and no timezone here, servers in the field return both variants anyway.
_DATETIME_RE = re.compile(r'(\d{4})-?(\d{2})-?(\d{2})T(\d{2}):(\d{2}):(\d{2})')

_WHITESPACE_RE = re.compile(rb'\s+')


@dataclass(frozen=True, slots=True)
class DateTime:
    """A `dateTime.iso8601` value, holding the wire text verbatim.

    There is significant ambiguity in the formatting of date-time in XML-RPC, so the decoder never interprets it. Use
    `to_datetime` for a best-effort parse, or parse `raw` directly when the peer's format is known.

    >>> DateTime.from_datetime(datetime(2015, 6, 9, 9, 7, 2))
    DateTime(raw='20150609T09:07:02')
    >>> DateTime('2015-06-09T09:07:02Z').to_datetime()
    datetime.datetime(2015, 6, 9, 9, 7, 2)
    """

    raw: str

    @classmethod
    def from_datetime(cls, value: datetime) -> 'DateTime':
        """Build the wire text in the (odd) format that XML-RPC calls ISO 8601, tzinfo is ignored."""
        return cls(
            f'{value.year:04d}{value.month:02d}{value.day:02d}T{value.hour:02d}:{value.minute:02d}:{value.second:02d}'
        )

    def to_datetime(self) -> datetime:
        """Parse the wire text into a naive datetime, raises `ValueError` when it can't.

        Hyphens between date parts are optional and anything after the seconds (fractions, timezone) is ignored.
        """
        match = _DATETIME_RE.search(self.raw)
        if match is None:
            raise ValueError(f'unable to parse date: {self.raw!r}')
        year, month, day, hour, minute, second = map(int, match.groups())
        return datetime(year, month, day, hour, minute, second)


@dataclass(frozen=True, slots=True)
class Base64:
    """A `base64` value, holding the encoded wire text verbatim (including any whitespace).

    >>> Base64.from_bytes(b'hathor')
    Base64(raw='aGF0aG9y')
    >>> Base64('aGF0\\n aG9y').to_bytes()
    b'hathor'
    """

    raw: str

    @classmethod
    def from_bytes(cls, data: bytes) -> 'Base64':
        return cls(base64.b64encode(data).decode('ascii'))

    def to_bytes(self) -> bytes:
        """Decode the wire text, whitespace is insignificant. Raises `ValueError` on invalid data."""
        compact = _WHITESPACE_RE.sub(b'', self.raw.encode('ascii', errors='strict'))
        try:
            return base64.b64decode(compact, validate=True)
        except binascii.Error as e:
            raise binascii.Error(f'invalid base64 data: {e}') from e


@dataclass(frozen=True, slots=True)
class FormattedFloat:
    """A `double` that is encoded with a caller supplied format-spec instead of the shortest round-trip text.

    >>> format(FormattedFloat(-13.53456, '.2f'))
    '-13.53'
    """

    value: float
    pattern: str

    def __format__(self, format_spec: str) -> str:
        return format(self.value, format_spec or self.pattern)


@dataclass(frozen=True, slots=True)
class MethodCall:
    """An XML-RPC call, note the list of params."""
    method_name: str
    params: list[Value] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class MethodResponse:
    """An XML-RPC response, note the single param (use a struct/array to pass back multiple values)."""
    param: Value


@dataclass(frozen=True, slots=True)
class Fault:
    """An XML-RPC fault response."""
    fault_code: int
    fault_string: str


Envelope: TypeAlias = Union[MethodCall, MethodResponse, Fault]

ENVELOPE_TYPES = (MethodCall, MethodResponse, Fault)
