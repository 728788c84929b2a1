"""
Test doubles shared across the suite.

Dependencies: httpx
System role: In-memory collaborators for service and API tests
"""

from typing import Any, Callable

import httpx

from terminal_ai.boundary.vdb.vector_schemas import VectorMatch, VectorRecord


class InMemoryVectorIndex:
    """Stand-in for PineconeClient keeping records in a dict."""

    def __init__(self, available: bool = True) -> None:
        self.available = available
        self.records: dict[str, VectorRecord] = {}
        self.upsert_calls: list[tuple[str, list[VectorRecord], str]] = []
        self.query_calls: list[tuple[str, dict, int, str]] = []

    async def initialize(self, index_name: str | None = None) -> bool:
        return self.available

    async def upsert(self, index_name: str, vectors: list[VectorRecord], namespace: str) -> bool:
        self.upsert_calls.append((index_name, vectors, namespace))
        for record in vectors:
            self.records[record.id] = record
        return True

    async def query(self, index_name: str, filter: dict, top_k: int, namespace: str) -> list[VectorMatch]:
        self.query_calls.append((index_name, filter, top_k, namespace))
        matches = [
            VectorMatch(id=record.id, score=0.0, metadata=record.metadata.to_wire())
            for record in self.records.values()
            if all(record.metadata.to_wire().get(key) == value for key, value in filter.items())
        ]
        # The index gives no ordering guarantee
        return list(reversed(matches))[:top_k]


class RecordingTasks:
    """Collects background tasks instead of running them."""

    def __init__(self) -> None:
        self.tasks: list[tuple[Callable[..., Any], tuple, dict]] = []

    def add_task(self, func: Callable[..., Any], *args: Any, **kwargs: Any) -> None:
        self.tasks.append((func, args, kwargs))

    async def run_all(self) -> None:
        for func, args, kwargs in self.tasks:
            await func(*args, **kwargs)


def mock_http_client(handler) -> httpx.AsyncClient:
    """AsyncClient whose requests are answered by `handler`."""
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))
