"""GitHub OAuth device-flow client."""

from terminal_ai.boundary.github.device_flow_client import GitHubDeviceFlowClient

__all__ = ["GitHubDeviceFlowClient"]
