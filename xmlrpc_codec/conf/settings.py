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

from typing import Literal

from xmlrpc_codec.utils import pydantic


class CodecSettings(pydantic.BaseModel):
    # When enabled `<nil/>` is rejected by the decoder and `None` is rejected by the encoder. Nil is a widely
    # implemented extension to XML-RPC, some peers don't accept it.
    EXCLUDE_NIL: bool = False

    # When enabled the encoder returns a list of byte chunks instead of a single byte sequence.
    IODATA: bool = False

    # Passed as `defuse` to xmlschema's XMLResource, "always" forbids entity declarations even on local data.
    DEFUSE_XML: Literal['always', 'remote', 'never'] = 'always'
