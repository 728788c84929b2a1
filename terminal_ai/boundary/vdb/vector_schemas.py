"""
Vector database schemas.

Pydantic models for records written to and matches read from the index.
Metadata keys use the camelCase names stored in the index.

Dependencies: pydantic
System role: Type definitions for vector operations
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from terminal_ai.models.chat import MessageRole


class VectorMetadata(BaseModel):
    """
    Metadata attached to each conversation chunk vector.

    All chunks of one turn share (conversationId, role, timestamp) and are
    distinguished by chunkIndex in [0, totalChunks).
    """

    model_config = ConfigDict(populate_by_name=True)

    conversation_id: str = Field(alias="conversationId", description="Conversation isolation key")
    role: MessageRole = Field(description="Turn author")
    content: str = Field(min_length=1, description="Chunk text")
    timestamp: int = Field(description="Turn timestamp in epoch milliseconds")
    chunk_index: int = Field(default=0, alias="chunkIndex", ge=0)
    total_chunks: int = Field(default=1, alias="totalChunks", ge=1)
    source: str | None = Field(default=None, description="user-message or assistant-message")

    def to_wire(self) -> dict[str, Any]:
        """Serialize with the index's camelCase keys."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class VectorRecord(BaseModel):
    """Vector upserted into the index."""

    id: str = Field(description="Unique record id")
    values: list[float] = Field(description="Embedding values")
    metadata: VectorMetadata

    def to_wire(self) -> dict[str, Any]:
        return {"id": self.id, "values": self.values, "metadata": self.metadata.to_wire()}


class VectorMatch(BaseModel):
    """Single match returned by a query; metadata is validated by the caller."""

    id: str
    score: float = 0.0
    metadata: dict[str, Any] | None = None
