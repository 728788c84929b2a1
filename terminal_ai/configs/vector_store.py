"""
Vector store configuration settings.

Manages Pinecone configuration for conversation memory storage.
Includes index addressing, batching limits and initialization retry policy.

Dependencies: pydantic, pydantic_settings
System role: Vector database configuration for conversation memory
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class VectorStoreSettings(BaseSettings):
    """Pinecone vector index configuration."""

    model_config = SettingsConfigDict(
        env_prefix="PINECONE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    api_key: str = Field(default="", description="Pinecone API key (memory disabled when empty)")
    index_name: str = Field(
        default="terminal-ai-conversations",
        description="Pinecone index holding conversation vectors",
    )
    index_host: str | None = Field(
        default=None,
        description="Data-plane host of the index; resolved from the control plane when unset",
    )
    controller_url: str = Field(
        default="https://api.pinecone.io",
        description="Pinecone control-plane base URL",
    )
    api_version: str = Field(default="2024-07", description="X-Pinecone-API-Version header value")
    namespace: str = Field(default="conversations", description="Namespace for conversation turns")

    dimension: int = Field(default=1024, description="Vector dimension of the index")
    top_k: int = Field(
        default=100,
        description="Maximum chunk records fetched per conversation",
        ge=1,
        le=10000,
    )
    batch_size: int = Field(default=100, description="Vectors per upsert call", ge=1, le=1000)

    init_max_attempts: int = Field(default=3, description="Host resolution attempts", ge=1)
    init_backoff_seconds: float = Field(
        default=0.5,
        description="Base delay between host resolution attempts (multiplied by attempt number)",
        ge=0.0,
    )
    request_timeout_seconds: float = Field(default=10.0, description="Per-call HTTP timeout")
