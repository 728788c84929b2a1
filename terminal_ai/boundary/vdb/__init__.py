"""
Vector database boundary layer.

Provides the Pinecone client and the record schemas it exchanges.

Dependencies: httpx
System role: Vector store adapter for conversation memory
"""

from terminal_ai.boundary.vdb.pinecone_client import PineconeClient
from terminal_ai.boundary.vdb.vector_schemas import VectorMatch, VectorMetadata, VectorRecord

__all__ = [
    "PineconeClient",
    "VectorMatch",
    "VectorMetadata",
    "VectorRecord",
]
