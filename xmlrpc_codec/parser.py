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

import io
from typing import Literal, Protocol, Union
from xml.etree.ElementTree import Element

import xmlschema
from structlog import get_logger

from xmlrpc_codec.utils.result import Err, Ok, Result

logger = get_logger()

RawDocument = Union[bytes, bytearray, memoryview, str]


class TreeParser(Protocol):
    """Turns raw bytes into a tree that is known to conform to the grammar.

    On failure the error is the diagnostic text of the parser, the decoder reports it verbatim.
    """

    def parse(self, grammar: xmlschema.XMLSchema, data: RawDocument, /) -> Result[Element, str]:
        ...


class XmlSchemaTreeParser:
    """Default `TreeParser`, uses xmlschema for both parsing and validation."""

    def __init__(self, *, defuse: Literal['always', 'remote', 'never'] = 'always') -> None:
        self.defuse = defuse
        self.log = logger.new()

    def parse(self, grammar: xmlschema.XMLSchema, data: RawDocument, /) -> Result[Element, str]:
        source: io.StringIO | io.BytesIO
        if isinstance(data, str):
            source = io.StringIO(data)
        else:
            source = io.BytesIO(bytes(data))

        try:
            resource = xmlschema.XMLResource(source, defuse=self.defuse)
            error = next(grammar.iter_errors(resource), None)
        except (SyntaxError, ValueError, xmlschema.XMLSchemaException) as e:
            self.log.debug('malformed document', error=str(e))
            return Err(str(e))
        except RecursionError:
            return Err('maximum nesting depth exceeded')

        if error is not None:
            reason = error.reason or error.message
            self.log.debug('document does not conform to the grammar', reason=reason, path=error.path)
            return Err(reason)

        return Ok(resource.root)
