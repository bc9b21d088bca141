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

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .chunk_serializer import ChunkSerializer

_ESCAPES = {
    '&': '&amp;',
    '<': '&lt;',
    '>': '&gt;',
    '"': '&quot;',
    "'": '&apos;',
    '\r': '&#xd;',
}
_ESCAPE_RE = re.compile('[&<>"\'\r]')

# characters outside of the XML 1.0 `Char` production, they can't appear in a document even as references
_INVALID_XML_CHAR_RE = re.compile('[^\t\n\r\x20-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]')


def escape_text(text: str) -> str:
    """Escape text for use inside an element.

    >>> escape_text('a < b & "c"')
    'a &lt; b &amp; &quot;c&quot;'
    >>> escape_text('null\\x00')
    Traceback (most recent call last):
    ...
    ValueError: character '\\x00' cannot be represented in XML
    """
    invalid = _INVALID_XML_CHAR_RE.search(text)
    if invalid is not None:
        raise ValueError(f'character {invalid.group()!r} cannot be represented in XML')
    return _ESCAPE_RE.sub(lambda m: _ESCAPES[m.group()], text)


class Serializer(ABC):
    """Sink for the encoder, it receives markup and text in document order."""

    def finalize(self) -> bytes:
        """Get the resulting byte sequence, the serializer cannot be reused after this."""
        raise TypeError('this serializer does not support finalization')

    def finalize_chunks(self) -> list[bytes]:
        """Get the resulting document as a sequence of chunks, the serializer cannot be reused after this."""
        raise TypeError('this serializer does not support finalization')

    @abstractmethod
    def write_markup(self, markup: str) -> None:
        """Write text as is, it must already be well-formed markup."""
        raise NotImplementedError

    def write_text(self, text: str) -> None:
        """Write text content, escaping it."""
        self.write_markup(escape_text(text))

    def write_empty_tag(self, tag: str) -> None:
        self.write_markup(f'<{tag}/>')

    @contextmanager
    def element(self, tag: str) -> Iterator[None]:
        """Write the start tag, and the end tag when the block exits normally."""
        self.write_markup(f'<{tag}>')
        yield
        self.write_markup(f'</{tag}>')

    def write_element(self, tag: str, text: str) -> None:
        with self.element(tag):
            self.write_text(text)

    @staticmethod
    def build_chunk_serializer() -> ChunkSerializer:
        from .chunk_serializer import ChunkSerializer
        return ChunkSerializer()
