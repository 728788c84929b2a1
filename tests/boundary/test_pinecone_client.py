"""
Test suite for PineconeClient.

Uses httpx.MockTransport to verify request shapes, batching, host
resolution retries and the best-effort failure contract.

System role: Verification of the vector store adapter
"""

import json
from unittest.mock import AsyncMock, patch

import httpx
import pytest

from terminal_ai.boundary.vdb.pinecone_client import PineconeClient
from terminal_ai.boundary.vdb.vector_schemas import VectorMetadata, VectorRecord
from terminal_ai.configs.vector_store import VectorStoreSettings
from tests.helpers import mock_http_client


def _record(i: int) -> VectorRecord:
    return VectorRecord(
        id=f"conv-user-1000-{i}",
        values=[0.0, 1.0],
        metadata=VectorMetadata(
            conversation_id="conv",
            role="user",
            content=f"chunk {i}",
            timestamp=1000,
            chunk_index=i,
            total_chunks=250,
        ),
    )


@pytest.fixture
def requests() -> list[httpx.Request]:
    return []


class TestPineconeUpsert:
    """Test suite for batched upsert."""

    @pytest.mark.asyncio
    async def test_upsert_should_split_into_batches_of_100(
        self, vector_settings: VectorStoreSettings, requests: list[httpx.Request]
    ) -> None:
        # Arrange
        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, json={"upsertedCount": 1})

        client = PineconeClient(vector_settings, http_client=mock_http_client(handler))

        # Act
        ok = await client.upsert("test-index", [_record(i) for i in range(250)], "conversations")

        # Assert
        assert ok is True
        sizes = [len(json.loads(r.content)["vectors"]) for r in requests]
        assert sizes == [100, 100, 50]
        assert all(str(r.url) == "https://test-index.svc.pinecone.io/vectors/upsert" for r in requests)

    @pytest.mark.asyncio
    async def test_upsert_should_send_auth_headers_and_camel_case_metadata(
        self, vector_settings: VectorStoreSettings, requests: list[httpx.Request]
    ) -> None:
        # Arrange
        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, json={})

        client = PineconeClient(vector_settings, http_client=mock_http_client(handler))

        # Act
        await client.upsert("test-index", [_record(0)], "conversations")

        # Assert
        request = requests[0]
        assert request.headers["Api-Key"] == "test-pinecone-key"
        assert request.headers["X-Pinecone-API-Version"] == "2024-07"
        body = json.loads(request.content)
        assert body["namespace"] == "conversations"
        assert body["vectors"][0]["metadata"] == {
            "conversationId": "conv",
            "role": "user",
            "content": "chunk 0",
            "timestamp": 1000,
            "chunkIndex": 0,
            "totalChunks": 250,
        }

    @pytest.mark.asyncio
    async def test_upsert_should_stop_at_first_failed_batch(
        self, vector_settings: VectorStoreSettings, requests: list[httpx.Request]
    ) -> None:
        # Arrange
        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(500 if len(requests) == 2 else 200, json={})

        client = PineconeClient(vector_settings, http_client=mock_http_client(handler))

        # Act
        ok = await client.upsert("test-index", [_record(i) for i in range(250)], "conversations")

        # Assert
        assert ok is False
        assert len(requests) == 2

    @pytest.mark.asyncio
    async def test_upsert_should_return_false_on_transport_error(
        self, vector_settings: VectorStoreSettings
    ) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client = PineconeClient(vector_settings, http_client=mock_http_client(handler))

        assert await client.upsert("test-index", [_record(0)], "conversations") is False

    @pytest.mark.asyncio
    async def test_upsert_should_skip_empty_input(self, vector_settings: VectorStoreSettings) -> None:
        handler = AsyncMock()
        client = PineconeClient(vector_settings, http_client=mock_http_client(handler))

        assert await client.upsert("test-index", [], "conversations") is True
        handler.assert_not_called()


class TestPineconeQuery:
    """Test suite for metadata-filtered query."""

    @pytest.mark.asyncio
    async def test_query_should_send_zero_vector_and_filter(
        self, vector_settings: VectorStoreSettings, requests: list[httpx.Request]
    ) -> None:
        # Arrange
        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(
                200,
                json={"matches": [{"id": "a", "score": 0.0, "metadata": {"content": "hi"}}]},
            )

        client = PineconeClient(vector_settings, http_client=mock_http_client(handler))

        # Act
        matches = await client.query("test-index", {"conversationId": "conv"}, 100, "conversations")

        # Assert
        body = json.loads(requests[0].content)
        assert str(requests[0].url) == "https://test-index.svc.pinecone.io/query"
        assert body["vector"] == [0.0] * 1024
        assert body["filter"] == {"conversationId": "conv"}
        assert body["topK"] == 100
        assert body["includeMetadata"] is True
        assert body["namespace"] == "conversations"
        assert [m.id for m in matches] == ["a"]
        assert matches[0].metadata == {"content": "hi"}

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "response",
        [
            httpx.Response(503, text="unavailable"),
            httpx.Response(200, text="not json"),
        ],
    )
    async def test_query_should_return_empty_list_on_failure(
        self, vector_settings: VectorStoreSettings, response: httpx.Response
    ) -> None:
        client = PineconeClient(vector_settings, http_client=mock_http_client(lambda request: response))

        assert await client.query("test-index", {"conversationId": "c"}, 10, "conversations") == []

    @pytest.mark.asyncio
    async def test_query_should_tolerate_missing_matches(self, vector_settings: VectorStoreSettings) -> None:
        client = PineconeClient(
            vector_settings,
            http_client=mock_http_client(lambda request: httpx.Response(200, json={})),
        )

        assert await client.query("test-index", {}, 10, "conversations") == []


class TestPineconeInitialize:
    """Test suite for host resolution."""

    @pytest.fixture
    def unresolved_settings(self) -> VectorStoreSettings:
        return VectorStoreSettings(
            api_key="test-pinecone-key",
            index_name="test-index",
            index_host=None,
            controller_url="https://api.pinecone.io",
        )

    @pytest.mark.asyncio
    async def test_initialize_should_be_disabled_without_api_key(self) -> None:
        handler = AsyncMock()
        client = PineconeClient(
            VectorStoreSettings(api_key="", index_host=None),
            http_client=mock_http_client(handler),
        )

        assert client.enabled is False
        assert await client.initialize() is False
        handler.assert_not_called()

    @pytest.mark.asyncio
    async def test_initialize_should_use_configured_host(self, vector_settings: VectorStoreSettings) -> None:
        handler = AsyncMock()
        client = PineconeClient(vector_settings, http_client=mock_http_client(handler))

        assert await client.initialize("test-index") is True
        handler.assert_not_called()

    @pytest.mark.asyncio
    async def test_initialize_should_resolve_host_from_control_plane(
        self, unresolved_settings: VectorStoreSettings, requests: list[httpx.Request]
    ) -> None:
        # Arrange
        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            if request.url.host == "api.pinecone.io":
                return httpx.Response(200, json={"name": "test-index", "host": "resolved.pinecone.io"})
            return httpx.Response(200, json={"matches": []})

        client = PineconeClient(unresolved_settings, http_client=mock_http_client(handler))

        # Act
        await client.query("test-index", {"conversationId": "c"}, 10, "conversations")
        await client.query("test-index", {"conversationId": "c"}, 10, "conversations")

        # Assert
        assert [str(r.url) for r in requests] == [
            "https://api.pinecone.io/indexes/test-index",
            "https://resolved.pinecone.io/query",
            "https://resolved.pinecone.io/query",
        ]

    @pytest.mark.asyncio
    async def test_initialize_should_retry_with_linear_backoff(
        self, unresolved_settings: VectorStoreSettings, requests: list[httpx.Request]
    ) -> None:
        # Arrange
        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(500, text="boom")

        client = PineconeClient(unresolved_settings, http_client=mock_http_client(handler))

        # Act
        with patch(
            "terminal_ai.boundary.vdb.pinecone_client.asyncio.sleep",
            new_callable=AsyncMock,
        ) as sleep:
            ok = await client.initialize()

        # Assert
        assert ok is False
        assert len(requests) == 3
        assert [call.args[0] for call in sleep.await_args_list] == [0.5, 1.0]

    @pytest.mark.asyncio
    async def test_initialize_should_succeed_after_transient_failure(
        self, unresolved_settings: VectorStoreSettings, requests: list[httpx.Request]
    ) -> None:
        # Arrange
        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            if len(requests) == 1:
                return httpx.Response(503, text="unavailable")
            return httpx.Response(200, json={"host": "https://resolved.pinecone.io"})

        client = PineconeClient(unresolved_settings, http_client=mock_http_client(handler))

        # Act
        with patch(
            "terminal_ai.boundary.vdb.pinecone_client.asyncio.sleep",
            new_callable=AsyncMock,
        ) as sleep:
            ok = await client.initialize()

        # Assert
        assert ok is True
        sleep.assert_awaited_once_with(0.5)

    @pytest.mark.asyncio
    async def test_operations_should_degrade_when_host_unresolvable(
        self, unresolved_settings: VectorStoreSettings
    ) -> None:
        client = PineconeClient(
            unresolved_settings,
            http_client=mock_http_client(lambda request: httpx.Response(200, json={})),
        )

        with patch(
            "terminal_ai.boundary.vdb.pinecone_client.asyncio.sleep",
            new_callable=AsyncMock,
        ):
            assert await client.upsert("test-index", [_record(0)], "conversations") is False
            assert await client.query("test-index", {}, 10, "conversations") == []
