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
This module implements encoding of floating point numbers.

XML-RPC has no canonical float grammar, what peers rely on is that the text parses back to the same binary value. So
a `float` is encoded with the shortest text that round-trips (which is what `repr` gives), not with a fixed precision:

>>> se = Serializer.build_chunk_serializer()
>>> encode_double(se, -12.53)
>>> encode_double(se, 0.1 + 0.2)
>>> encode_double(se, 1e300)
>>> se.finalize()
b'<double>-12.53</double><double>0.30000000000000004</double><double>1e+300</double>'

When a specific precision is wanted, a `FormattedFloat` is encoded with exactly what its pattern produces:

>>> se = Serializer.build_chunk_serializer()
>>> encode_formatted_double(se, FormattedFloat(-13.53456, '.2f'))
>>> se.finalize()
b'<double>-13.53</double>'

There is no spelling for non-finite values:

>>> encode_double(Serializer.build_chunk_serializer(), float('nan'))
Traceback (most recent call last):
...
xmlrpc_codec.exception.EncodeError: cannot encode a non-finite double: nan

The decoder accepts decimal literals with an optional sign, fraction and exponent:

>>> decode_double(fromstring('<double>-12.53</double>'))
-12.53
>>> decode_double(fromstring('<double>1E3</double>'))
1000.0
>>> decode_double(fromstring('<double>Infinity</double>'))
Traceback (most recent call last):
...
xmlrpc_codec.exception.DecodeError: 'Infinity' is not a valid double
>>> decode_double(fromstring('<double>1e400</double>'))
Traceback (most recent call last):
...
xmlrpc_codec.exception.DecodeError: '1e400' is out of range for a double
"""

import math
import re
from xml.etree.ElementTree import Element, fromstring  # noqa: F401

from xmlrpc_codec.exception import DecodeError, EncodeError
from xmlrpc_codec.serialization import Serializer
from xmlrpc_codec.types import FormattedFloat

_DOUBLE_RE = re.compile(r'[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?')


def encode_double(serializer: Serializer, value: float) -> None:
    """ Encode a float with the shortest text that parses back to the same value.

    This modules's docstring has more details and examples.
    """
    assert isinstance(value, float)
    if not math.isfinite(value):
        raise EncodeError(value, f'cannot encode a non-finite double: {value!r}')
    serializer.write_element('double', repr(value))


def encode_formatted_double(serializer: Serializer, value: FormattedFloat) -> None:
    """ Encode a float using its own format-spec.
    """
    assert isinstance(value, FormattedFloat)
    try:
        text = format(value)
    except (TypeError, ValueError) as e:
        raise EncodeError(value, f'invalid float pattern {value.pattern!r}: {e}') from e
    serializer.write_element('double', text)


def decode_double(element: Element) -> float:
    """ Decode a float, surrounding whitespace is ignored.

    This modules's docstring has more details and examples.
    """
    text = (element.text or '').strip()
    if _DOUBLE_RE.fullmatch(text) is None:
        raise DecodeError(f'{text!r} is not a valid double')
    value = float(text)
    if not math.isfinite(value):
        raise DecodeError(f'{text!r} is out of range for a double')
    return value
