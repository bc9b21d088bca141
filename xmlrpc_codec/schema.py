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
The grammar every XML-RPC document must satisfy before the decoder looks at it, expressed as an XML Schema.

Notes on the shapes that are allowed:

- the root is either `methodCall` or `methodResponse`;
- `methodCall/params` may be absent or empty, both mean "no params";
- `methodResponse` holds either `params` with exactly one `param` or a `fault` with a two-member struct;
- `value` has mixed content with an optional type tag, a bare (or empty) text is a string;
- `array/data` may be absent and both `data` and `struct` may be empty;
- `int`, `i4` and `i8` are synonyms and are not range limited;
- the remaining scalars are kept as text here and their literals are checked by the decoder, `dateTime.iso8601` and
  `base64` are never interpreted at all.
"""

import re
from functools import cache

import xmlschema
from structlog import get_logger

logger = get_logger()

# XSD patterns always match the whole value, use `METHOD_NAME_RE.fullmatch`
METHOD_NAME_PATTERN = r'([A-Za-z0-9]|/|\.|:|_)*'
METHOD_NAME_RE = re.compile(METHOD_NAME_PATTERN)

XMLRPC_XSD = rf"""<?xml version="1.0"?>
<xsd:schema xmlns:xsd="http://www.w3.org/2001/XMLSchema">

  <xsd:element name="methodCall">
    <xsd:complexType>
      <xsd:all>
        <xsd:element name="methodName">
          <xsd:simpleType>
            <xsd:restriction base="xsd:string">
              <xsd:pattern value="{METHOD_NAME_PATTERN}" />
            </xsd:restriction>
          </xsd:simpleType>
        </xsd:element>
        <xsd:element name="params" minOccurs="0" maxOccurs="1">
          <xsd:complexType>
            <xsd:sequence>
              <xsd:element name="param" type="ParamType" minOccurs="0" maxOccurs="unbounded" />
            </xsd:sequence>
          </xsd:complexType>
        </xsd:element>
      </xsd:all>
    </xsd:complexType>
  </xsd:element>

  <xsd:element name="methodResponse">
    <xsd:complexType>
      <xsd:choice>
        <xsd:element name="params">
          <xsd:complexType>
            <xsd:sequence>
              <xsd:element name="param" type="ParamType" />
            </xsd:sequence>
          </xsd:complexType>
        </xsd:element>
        <xsd:element name="fault">
          <xsd:complexType>
            <xsd:sequence>
              <xsd:element name="value">
                <xsd:complexType>
                  <xsd:sequence>
                    <xsd:element name="struct">
                      <xsd:complexType>
                        <xsd:sequence>
                          <xsd:element name="member" type="MemberType" minOccurs="2" maxOccurs="2" />
                        </xsd:sequence>
                      </xsd:complexType>
                    </xsd:element>
                  </xsd:sequence>
                </xsd:complexType>
              </xsd:element>
            </xsd:sequence>
          </xsd:complexType>
        </xsd:element>
      </xsd:choice>
    </xsd:complexType>
  </xsd:element>

  <xsd:complexType name="ParamType">
    <xsd:sequence>
      <xsd:element name="value" type="ValueType" />
    </xsd:sequence>
  </xsd:complexType>

  <xsd:complexType name="ValueType" mixed="true">
    <xsd:choice minOccurs="0">
      <xsd:element name="i4" type="xsd:integer" />
      <xsd:element name="i8" type="xsd:integer" />
      <xsd:element name="int" type="xsd:integer" />
      <xsd:element name="string" type="xsd:string" />
      <xsd:element name="double" type="xsd:string" />
      <xsd:element name="base64" type="xsd:string" />
      <xsd:element name="boolean" type="xsd:string" />
      <xsd:element name="dateTime.iso8601" type="xsd:string" />
      <xsd:element name="array" type="ArrayType" />
      <xsd:element name="struct" type="StructType" />
      <xsd:element name="nil" type="NilType" />
    </xsd:choice>
  </xsd:complexType>

  <xsd:complexType name="StructType">
    <xsd:sequence>
      <xsd:element name="member" type="MemberType" minOccurs="0" maxOccurs="unbounded" />
    </xsd:sequence>
  </xsd:complexType>

  <xsd:complexType name="MemberType">
    <xsd:sequence>
      <xsd:element name="name" type="xsd:string" />
      <xsd:element name="value" type="ValueType" />
    </xsd:sequence>
  </xsd:complexType>

  <xsd:complexType name="ArrayType">
    <xsd:sequence>
      <xsd:element name="data" minOccurs="0">
        <xsd:complexType>
          <xsd:sequence>
            <xsd:element name="value" type="ValueType" minOccurs="0" maxOccurs="unbounded" />
          </xsd:sequence>
        </xsd:complexType>
      </xsd:element>
    </xsd:sequence>
  </xsd:complexType>

  <xsd:complexType name="NilType">
  </xsd:complexType>

</xsd:schema>
"""


@cache
def get_schema() -> xmlschema.XMLSchema:
    """Compile the XML-RPC grammar, the compiled schema is shared read-only by every decode call.

    Concurrent first calls may compile it more than once, any of the results is equivalent.
    """
    logger.debug('compiling xml-rpc schema')
    return xmlschema.XMLSchema(XMLRPC_XSD)
