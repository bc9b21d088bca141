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
Public API.

Each operation comes in two flavors built from the same code: `x_result` returns an `Ok`/`Err` and `x` returns the
value or raises the error.

>>> encode(MethodResponse(17))
b'<?xml version="1.0" encoding="UTF-8"?><methodResponse><params><param><value><int>17</int></value></param></params></methodResponse>'
>>> decode(b'<methodResponse><params><param><value><int>17</int></value></param></params></methodResponse>')
MethodResponse(param=17)
>>> decode_result(b'<methodResponse></methodResponse>').is_err()
True

Keyword options left as `None` take their value from the global settings, see `xmlrpc_codec.conf`.
"""

from typing import Optional, Union

from structlog import get_logger

from xmlrpc_codec.conf.get_settings import get_global_settings
from xmlrpc_codec.decoder import decode_envelope
from xmlrpc_codec.encoder import encode_document
from xmlrpc_codec.exception import DecodeError, EncodeError
from xmlrpc_codec.parser import RawDocument, TreeParser, XmlSchemaTreeParser
from xmlrpc_codec.schema import get_schema
from xmlrpc_codec.serialization import Serializer
from xmlrpc_codec.types import Envelope, MethodResponse, Value  # noqa: F401
from xmlrpc_codec.utils.result import Err, Ok, Result, as_result

logger = get_logger()


@as_result(DecodeError)
def decode_result(
    data: RawDocument,
    *,
    exclude_nil: Optional[bool] = None,
    parser: Optional[TreeParser] = None,
) -> Envelope:
    """Decode a document into a `MethodCall`, `MethodResponse` or `Fault`.

    Structural problems are reported with the parser's diagnostic as the message, problems found while interpreting
    the tree (bad literals, forbidden nil, incomplete fault) are described by the decoder.
    """
    settings = get_global_settings()
    if exclude_nil is None:
        exclude_nil = settings.EXCLUDE_NIL
    if parser is None:
        parser = XmlSchemaTreeParser(defuse=settings.DEFUSE_XML)

    match parser.parse(get_schema(), data):
        case Err(reason):
            logger.debug('document rejected by the parser', reason=reason)
            raise DecodeError(reason)
        case Ok(root):
            pass

    try:
        return decode_envelope(root, exclude_nil=exclude_nil)
    except DecodeError as e:
        logger.debug('failed to decode document', reason=e.message, root=root.tag)
        raise
    except RecursionError as e:
        raise DecodeError('maximum nesting depth exceeded') from e


def decode(
    data: RawDocument,
    *,
    exclude_nil: Optional[bool] = None,
    parser: Optional[TreeParser] = None,
) -> Envelope:
    """Same as `decode_result` but raises `DecodeError` on failure."""
    return decode_result(data, exclude_nil=exclude_nil, parser=parser).unwrap_or_raise()


@as_result(EncodeError)
def encode_result(
    value: Union[Envelope, Value],
    *,
    exclude_nil: Optional[bool] = None,
    iodata: Optional[bool] = None,
) -> Union[bytes, list[bytes]]:
    """Encode an envelope as a full document, or any other value as a `<value>` fragment.

    With `iodata` the result is a list of chunks instead of a single `bytes`, joining them gives the same document.
    """
    settings = get_global_settings()
    if exclude_nil is None:
        exclude_nil = settings.EXCLUDE_NIL
    if iodata is None:
        iodata = settings.IODATA

    serializer = Serializer.build_chunk_serializer()
    try:
        encode_document(serializer, value, exclude_nil=exclude_nil)
    except EncodeError as e:
        logger.debug('failed to encode value', reason=e.message, value_type=type(e.value).__name__)
        raise
    except RecursionError as e:
        raise EncodeError(value, 'maximum nesting depth exceeded') from e

    if iodata:
        return serializer.finalize_chunks()
    return serializer.finalize()


def encode(
    value: Union[Envelope, Value],
    *,
    exclude_nil: Optional[bool] = None,
    iodata: Optional[bool] = None,
) -> Union[bytes, list[bytes]]:
    """Same as `encode_result` but raises `EncodeError` on failure."""
    return encode_result(value, exclude_nil=exclude_nil, iodata=iodata).unwrap_or_raise()


def encode_to_iodata_result(
    value: Union[Envelope, Value],
    *,
    exclude_nil: Optional[bool] = None,
) -> Result[list[bytes], EncodeError]:
    """Shorthand for `encode_result(value, iodata=True)`."""
    return encode_result(value, exclude_nil=exclude_nil, iodata=True)


def encode_to_iodata(value: Union[Envelope, Value], *, exclude_nil: Optional[bool] = None) -> list[bytes]:
    """Shorthand for `encode(value, iodata=True)`."""
    return encode_to_iodata_result(value, exclude_nil=exclude_nil).unwrap_or_raise()
