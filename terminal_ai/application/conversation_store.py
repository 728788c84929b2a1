"""
Conversation store.

Persists conversation turns as chunked pseudo-embedded vectors and rebuilds
ordered history from the unordered chunk matches of a metadata query.

Flow:
    save:     text -> chunks -> vectors -> batched upsert
    retrieve: filter query -> group by (role, timestamp) -> order chunks -> join

Re-joining uses single spaces, so paragraph and sentence whitespace removed
by chunking is not restored.

Dependencies: terminal_ai.boundary.vdb, terminal_ai.core.memory
System role: Conversation memory adapter
"""

import logging
import time
from collections import defaultdict
from typing import Callable

from pydantic import ValidationError

from terminal_ai.boundary.vdb.pinecone_client import PineconeClient
from terminal_ai.boundary.vdb.vector_schemas import VectorMetadata, VectorRecord
from terminal_ai.configs.vector_store import VectorStoreSettings
from terminal_ai.core.memory.chunker import TextChunker
from terminal_ai.core.memory.embedder import PseudoEmbedder
from terminal_ai.models.chat import ChatMessage, MessageRole
from terminal_ai.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)

CHUNK_JOINER = " "

_ROLE_ORDER = {MessageRole.USER: 0, MessageRole.ASSISTANT: 1}


def _now_ms() -> int:
    return int(time.time() * 1000)


class ConversationStore:
    """
    Conversation memory backed by a vector index.

    All collaborators are injected; nothing is shared between instances.
    """

    def __init__(
        self,
        vector_client: PineconeClient,
        config: VectorStoreSettings,
        chunker: TextChunker | None = None,
        embedder: PseudoEmbedder | None = None,
        clock: Callable[[], int] = _now_ms,
    ) -> None:
        """
        Initialize conversation store.

        Args:
            vector_client: Pinecone client
            config: Vector store settings (index, namespace, top_k)
            chunker: Text chunker (default 512-character chunks)
            embedder: Pseudo-embedder (default uses config.dimension)
            clock: Epoch-milliseconds source
        """
        self.vector_client = vector_client
        self.config = config
        self.chunker = chunker or TextChunker()
        self.embedder = embedder or PseudoEmbedder(config.dimension)
        self.clock = clock

    async def is_available(self) -> bool:
        """Check whether the backing index can be used for this request."""
        return await self.vector_client.initialize(self.config.index_name)

    def build_records(
        self,
        conversation_id: str,
        role: MessageRole,
        text: str,
        timestamp: int,
    ) -> list[VectorRecord]:
        """
        Build one VectorRecord per chunk of a single turn.

        Args:
            conversation_id: Conversation key
            role: Turn author
            text: Full turn text
            timestamp: Turn timestamp shared by every chunk

        Returns:
            list[VectorRecord]: Records ordered by chunk index
        """
        chunks = self.chunker.chunk(text)
        source = f"{role.value}-message"
        return [
            VectorRecord(
                id=f"{conversation_id}-{role.value}-{timestamp}-{index}",
                values=self.embedder.embed(chunk),
                metadata=VectorMetadata(
                    conversation_id=conversation_id,
                    role=role,
                    content=chunk,
                    timestamp=timestamp,
                    chunk_index=index,
                    total_chunks=len(chunks),
                    source=source,
                ),
            )
            for index, chunk in enumerate(chunks)
        ]

    async def save(self, conversation_id: str, user_text: str, ai_text: str) -> bool:
        """
        Save a user turn and its assistant reply.

        The reply is stamped one millisecond after the user turn so the pair
        keeps its order even when both land in the same millisecond.

        Returns:
            bool: True when every batch was written; partial writes are not rolled back
        """
        try:
            timestamp = self.clock()
            records = self.build_records(conversation_id, MessageRole.USER, user_text, timestamp)
            records += self.build_records(
                conversation_id, MessageRole.ASSISTANT, ai_text, timestamp + 1
            )
            if not records:
                return True

            saved = await self.vector_client.upsert(
                self.config.index_name,
                records,
                self.config.namespace,
            )
            if saved:
                logger.info(
                    f"Saved {len(records)} conversation vectors",
                    extra={"conversation_id": conversation_id},
                )
            return saved
        except Exception as e:  # pylint: disable=broad-except
            log_exception_with_context(logger, "Error saving conversation", e, conversation_id=conversation_id)
            return False

    async def retrieve(self, conversation_id: str) -> list[ChatMessage]:
        """
        Rebuild the ordered history of a conversation.

        Matches without a role or content are skipped. Any failure yields an
        empty history.

        Returns:
            list[ChatMessage]: Messages sorted by timestamp ascending
        """
        try:
            matches = await self.vector_client.query(
                self.config.index_name,
                {"conversationId": conversation_id},
                self.config.top_k,
                self.config.namespace,
            )
        except Exception as e:  # pylint: disable=broad-except
            log_exception_with_context(logger, "Error retrieving conversation", e, conversation_id=conversation_id)
            return []

        turns: dict[tuple[MessageRole, int], list[VectorMetadata]] = defaultdict(list)
        for match in matches:
            try:
                metadata = VectorMetadata.model_validate(match.metadata or {})
            except ValidationError:
                logger.debug("Skipping malformed match", extra={"match_id": match.id})
                continue
            turns[(metadata.role, metadata.timestamp)].append(metadata)

        messages = [
            ChatMessage(
                role=role,
                content=CHUNK_JOINER.join(
                    chunk.content for chunk in sorted(chunks, key=lambda c: c.chunk_index)
                ),
                timestamp=timestamp,
            )
            for (role, timestamp), chunks in turns.items()
        ]
        messages.sort(key=lambda m: (m.timestamp, _ROLE_ORDER[m.role]))
        return messages
