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
This module implements encoding of integers.

The wire format has three tags for integers (`int`, `i4` and `i8`), they are synonyms and the 32/64 bit ranges their
names suggest are not enforced in either direction. Values are always encoded with `int`.

The only bound is the interpreter's int/str conversion limit, `sys.get_int_max_str_digits()` (4300 digits by
default), larger integers are rejected when encoding and when decoding.

>>> se = Serializer.build_chunk_serializer()
>>> encode_int(se, 17)
>>> encode_int(se, -2 ** 70)
>>> se.finalize()
b'<int>17</int><int>-1180591620717411303424</int>'

>>> decode_int(fromstring('<i4>17</i4>'))
17
>>> decode_int(fromstring('<i8>1125899906842624</i8>'))
1125899906842624
>>> decode_int(fromstring('<int> -5 </int>'))
-5
"""

import sys
from xml.etree.ElementTree import Element, fromstring  # noqa: F401

from xmlrpc_codec.exception import DecodeError, EncodeError
from xmlrpc_codec.serialization import Serializer

INT_TAGS = ('int', 'i4', 'i8')


def encode_int(serializer: Serializer, number: int) -> None:
    """ Encode an int, the `i4`/`i8` ranges are not enforced.

    This modules's docstring has more details and examples.
    """
    assert isinstance(number, int) and not isinstance(number, bool)
    try:
        text = str(int(number))
    except ValueError:
        raise EncodeError(number, f'integer has more than {sys.get_int_max_str_digits()} digits')
    serializer.write_element('int', text)


def decode_int(element: Element) -> int:
    """ Decode an int from any of the integer tags.

    This modules's docstring has more details and examples.
    """
    text = element.text or ''
    try:
        return int(text.strip(), 10)
    except ValueError:
        raise DecodeError(f'{text!r} is not a valid integer')
