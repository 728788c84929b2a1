"""
GitHub device-flow response schemas.

Dependencies: pydantic
System role: CLI login API contracts
"""

from pydantic import BaseModel


class DeviceCodeResponse(BaseModel):
    """Values the CLI needs to show the user code and poll for the token."""

    user_code: str | None = None
    verification_uri: str | None = None
    interval: int | None = None
    device_code: str | None = None
    expires_in: int | None = None


class TokenResponse(BaseModel):
    """Issued access token."""

    token: str


class PendingResponse(BaseModel):
    """Authorization not yet granted by the user."""

    status: str = "pending"
