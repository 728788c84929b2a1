"""
Pinecone REST client.

Thin httpx wrapper over the Pinecone data plane (upsert, query) plus
control-plane host resolution. Every operation is best-effort: failures are
logged and reported as False or an empty match list, never raised.

Dependencies: httpx, terminal_ai.configs, terminal_ai.core.exceptions
System role: Vector store client for conversation memory
"""

import asyncio
import logging
from typing import Any

import httpx

from terminal_ai.boundary.vdb.vector_schemas import VectorMatch, VectorRecord
from terminal_ai.configs.vector_store import VectorStoreSettings
from terminal_ai.core.exceptions import VectorStoreError

logger = logging.getLogger(__name__)


class PineconeClient:
    """
    Pinecone client for vector operations.

    Provides upsert with batching and metadata-filtered query. Data-plane
    hosts are resolved once per index and cached on the instance.
    """

    def __init__(
        self,
        config: VectorStoreSettings,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Initialize Pinecone client with configuration.

        Args:
            config: Vector store settings
            http_client: Optional shared AsyncClient (injected in tests)
        """
        self.config = config
        self.http = http_client or httpx.AsyncClient(timeout=config.request_timeout_seconds)
        self._hosts: dict[str, str] = {}
        if config.index_host:
            self._hosts[config.index_name] = _with_scheme(config.index_host)

    @property
    def enabled(self) -> bool:
        """True when an API key is configured."""
        return bool(self.config.api_key)

    def _headers(self) -> dict[str, str]:
        return {
            "Api-Key": self.config.api_key,
            "Content-Type": "application/json",
            "X-Pinecone-API-Version": self.config.api_version,
        }

    async def initialize(self, index_name: str | None = None) -> bool:
        """
        Make sure the index host is known.

        Resolves the host through the control plane with a bounded retry loop
        and linearly increasing backoff.

        Args:
            index_name: Index to resolve (defaults to configured index)

        Returns:
            bool: True when the index is usable
        """
        index_name = index_name or self.config.index_name
        if not self.enabled:
            logger.info("Pinecone API key not set, conversation memory disabled")
            return False
        if index_name in self._hosts:
            return True

        attempts = self.config.init_max_attempts
        for attempt in range(1, attempts + 1):
            try:
                self._hosts[index_name] = await self._describe_index(index_name)
                logger.info(
                    "Using existing Pinecone index",
                    extra={"index_name": index_name, "attempt": attempt},
                )
                return True
            except VectorStoreError as e:
                logger.warning(
                    f"Pinecone index resolution failed (attempt {attempt}/{attempts})",
                    extra={"index_name": index_name, "error": str(e)},
                )
                if attempt < attempts:
                    await asyncio.sleep(self.config.init_backoff_seconds * attempt)

        logger.error("Pinecone unavailable after retries", extra={"index_name": index_name})
        return False

    async def _describe_index(self, index_name: str) -> str:
        url = f"{self.config.controller_url.rstrip('/')}/indexes/{index_name}"
        try:
            response = await self.http.get(url, headers=self._headers())
            response.raise_for_status()
            host = response.json().get("host")
        except (httpx.HTTPError, ValueError) as e:
            raise VectorStoreError(
                message=f"Failed to describe index: {e}",
                operation="describe",
                details={"index_name": index_name},
            ) from e
        if not host:
            raise VectorStoreError(
                message="Index description has no host",
                operation="describe",
                details={"index_name": index_name},
            )
        return _with_scheme(host)

    async def upsert(
        self,
        index_name: str,
        vectors: list[VectorRecord],
        namespace: str,
    ) -> bool:
        """
        Upsert vectors in batches of at most `batch_size`.

        Stops at the first failed batch; earlier batches stay written.

        Args:
            index_name: Target index
            vectors: Records to write
            namespace: Target namespace

        Returns:
            bool: True when every batch was accepted
        """
        if not vectors:
            return True
        host = await self._host_for(index_name)
        if host is None:
            return False

        batch_size = self.config.batch_size
        for start in range(0, len(vectors), batch_size):
            batch = vectors[start:start + batch_size]
            try:
                await self._post(
                    f"{host}/vectors/upsert",
                    {"vectors": [record.to_wire() for record in batch], "namespace": namespace},
                    operation="upsert",
                )
            except VectorStoreError as e:
                logger.error(
                    "Error upserting vectors to Pinecone",
                    extra={"batch_start": start, "batch_size": len(batch), "error": str(e)},
                )
                return False
        return True

    async def query(
        self,
        index_name: str,
        filter: dict[str, Any],
        top_k: int,
        namespace: str,
    ) -> list[VectorMatch]:
        """
        Fetch records matching a metadata filter.

        The query vector is all zeros, so selection is driven by the filter
        alone and top_k bounds the number of records.

        Returns:
            list[VectorMatch]: Matches (empty on any failure)
        """
        host = await self._host_for(index_name)
        if host is None:
            return []

        body = {
            "vector": [0.0] * self.config.dimension,
            "filter": filter,
            "topK": top_k,
            "includeMetadata": True,
            "namespace": namespace,
        }
        try:
            data = await self._post(f"{host}/query", body, operation="query")
            return [VectorMatch.model_validate(match) for match in data.get("matches") or []]
        except (VectorStoreError, ValueError) as e:
            logger.error("Error querying Pinecone", extra={"error": str(e)})
            return []

    async def _host_for(self, index_name: str) -> str | None:
        if index_name not in self._hosts and not await self.initialize(index_name):
            return None
        return self._hosts[index_name]

    async def _post(self, url: str, body: dict[str, Any], operation: str) -> dict[str, Any]:
        try:
            response = await self.http.post(url, headers=self._headers(), json=body)
        except httpx.HTTPError as e:
            raise VectorStoreError(f"Pinecone {operation} request failed: {e}", operation) from e
        if response.is_error:
            raise VectorStoreError(
                f"Pinecone {operation} error: {response.status_code}",
                operation,
                {"status_code": response.status_code},
            )
        try:
            return response.json()
        except ValueError as e:
            raise VectorStoreError(f"Pinecone {operation} returned invalid JSON", operation) from e

    async def aclose(self) -> None:
        await self.http.aclose()


def _with_scheme(host: str) -> str:
    host = host.rstrip("/")
    return host if host.startswith(("http://", "https://")) else f"https://{host}"
