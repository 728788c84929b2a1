"""
Boundary-aware text chunker.

Splits text into bounded segments along paragraph boundaries first and
sentence boundaries second. Accumulation is greedy: segments are packed
until the next one would overflow the limit.

Dependencies: re (stdlib)
System role: Storage unit preparation for conversation memory
"""

import re

DEFAULT_MAX_CHUNK_SIZE = 512

PARAGRAPH_SEPARATOR = "\n\n"
SENTENCE_SEPARATOR = " "

_PARAGRAPH_BOUNDARY = re.compile(r"\n\n+")
_SENTENCE_BOUNDARY = re.compile(r"(?<=[.!?])\s+")


class TextChunker:
    """Greedy paragraph/sentence chunker."""

    def __init__(self, max_chunk_size: int = DEFAULT_MAX_CHUNK_SIZE) -> None:
        if max_chunk_size < 1:
            raise ValueError("max_chunk_size must be positive")
        self.max_chunk_size = max_chunk_size

    def chunk(self, text: str) -> list[str]:
        """
        Split text into ordered chunks of at most max_chunk_size characters.

        A single sentence longer than the limit is emitted whole.

        Args:
            text: Raw text

        Returns:
            list[str]: Ordered chunks (empty for empty input)
        """
        chunks: list[str] = []
        current = ""

        for section in _PARAGRAPH_BOUNDARY.split(text):
            if self._fits(current, section, PARAGRAPH_SEPARATOR):
                current = self._join(current, section, PARAGRAPH_SEPARATOR)
                continue

            if current:
                chunks.append(current)
                current = ""

            if len(section) > self.max_chunk_size:
                chunks.extend(self._chunk_sentences(section))
            else:
                current = section

        if current:
            chunks.append(current)
        return chunks

    def _chunk_sentences(self, section: str) -> list[str]:
        """Greedy accumulation at sentence granularity for an oversized section."""
        chunks: list[str] = []
        current = ""

        for sentence in _SENTENCE_BOUNDARY.split(section):
            if self._fits(current, sentence, SENTENCE_SEPARATOR):
                current = self._join(current, sentence, SENTENCE_SEPARATOR)
            else:
                if current:
                    chunks.append(current)
                current = sentence

        if current:
            chunks.append(current)
        return chunks

    def _fits(self, current: str, piece: str, separator: str) -> bool:
        joiner = len(separator) if current else 0
        return len(current) + joiner + len(piece) <= self.max_chunk_size

    @staticmethod
    def _join(current: str, piece: str, separator: str) -> str:
        return f"{current}{separator}{piece}" if current else piece


def chunk_text(text: str, max_chunk_size: int = DEFAULT_MAX_CHUNK_SIZE) -> list[str]:
    """Chunk text with a one-off TextChunker."""
    return TextChunker(max_chunk_size).chunk(text)
