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

from typing_extensions import override

from .serializer import Serializer


class ChunkSerializer(Serializer):
    """Simple implementation of Serializer to write to memory.

    This implementation defers joining everything until finalize is called, before that every write is stored as a
    str in a list.

    >>> se = Serializer.build_chunk_serializer()
    >>> with se.element('string'):
    ...     se.write_text('fish & chips')
    >>> se.finalize()
    b'<string>fish &amp; chips</string>'
    """

    def __init__(self) -> None:
        self._parts: list[str] = []

    @override
    def finalize(self) -> bytes:
        result = ''.join(self._parts).encode('utf-8')
        del self._parts
        return result

    @override
    def finalize_chunks(self) -> list[bytes]:
        result = [part.encode('utf-8') for part in self._parts]
        del self._parts
        return result

    @override
    def write_markup(self, markup: str) -> None:
        self._parts.append(markup)
