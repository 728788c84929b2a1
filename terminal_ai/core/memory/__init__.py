"""
Conversation memory primitives.

Text chunking and deterministic pseudo-embedding used by the conversation store.
"""

from terminal_ai.core.memory.chunker import TextChunker, chunk_text
from terminal_ai.core.memory.embedder import EMBEDDING_DIMENSION, PseudoEmbedder, embed_text

__all__ = [
    "EMBEDDING_DIMENSION",
    "PseudoEmbedder",
    "TextChunker",
    "chunk_text",
    "embed_text",
]
