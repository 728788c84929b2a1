"""GitHub device-flow endpoints for CLI login.

Routes:
- POST /github/start-auth - Issue a device/user code pair
- GET /github/check-auth?code=... - Poll for the access token

Dependencies: terminal_ai.application.services.github_auth_service
System role: CLI login HTTP API
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from terminal_ai.api.deps import get_github_auth_service
from terminal_ai.application.services.github_auth_service import GitHubAuthService
from terminal_ai.models.github import DeviceCodeResponse, PendingResponse, TokenResponse

router = APIRouter(prefix="/github", tags=["github"])


@router.post("/start-auth", response_model=DeviceCodeResponse)
async def start_auth(
    auth_service: GitHubAuthService = Depends(get_github_auth_service),
) -> DeviceCodeResponse:
    """Start the device flow and hand the codes to the CLI."""
    return await auth_service.start()


@router.get(
    "/check-auth",
    response_model=TokenResponse,
    responses={202: {"model": PendingResponse}},
)
async def check_auth(
    code: str | None = None,
    auth_service: GitHubAuthService = Depends(get_github_auth_service),
):
    """Poll GitHub; 202 while the user has not approved, 200 with the token after."""
    result = await auth_service.check(code)
    if result.pending:
        return JSONResponse(
            status_code=status.HTTP_202_ACCEPTED,
            content=PendingResponse().model_dump(),
        )
    return TokenResponse(token=result.token)
