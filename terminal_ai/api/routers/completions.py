"""Completion API endpoints.

Routes:
- POST /completions - Memory-backed completion for the terminal client
- OPTIONS /completions - Permissive CORS answer
- POST /completions/edge - Stateless low-latency completion

Dependencies: terminal_ai.application.services
System role: Completion HTTP API
"""

import logging
from typing import Any

from fastapi import APIRouter, BackgroundTasks, Depends, Response, status
from fastapi.responses import JSONResponse

from terminal_ai.api.deps import get_completion_service, get_edge_completion_service
from terminal_ai.api.error_handling import CORS_HEADERS, error_response
from terminal_ai.application.services.completion_service import CompletionService
from terminal_ai.application.services.edge_service import EdgeCompletionService
from terminal_ai.core.exceptions import CompletionError, CompletionTimeoutError, ValidationError
from terminal_ai.models.chat import CompletionRequest, EdgeCompletionRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/completions", tags=["completions"])


@router.options("")
async def completions_preflight() -> Response:
    """Answer bare OPTIONS requests with the permissive CORS headers."""
    return Response(status_code=status.HTTP_200_OK, headers=CORS_HEADERS)


@router.post("")
async def create_completion(
    background_tasks: BackgroundTasks,
    completion_service: CompletionService = Depends(get_completion_service),
    request: CompletionRequest | None = None,
) -> JSONResponse:
    """Run a memory-backed completion.

    Flow:
    1. Resolve prompt (prompt or messages[0].content) and conversation id
    2. Load prior turns, build the mode-specific prompt, call the provider
    3. Schedule persistence of the turn after the response is sent
    4. Return the provider body with conversationId

    A missing body is treated as a request without a prompt.

    Error responses are returned rather than raised so that background work
    queued during the failure (operator e-mail) still runs.

    Returns:
        JSONResponse: 200 provider payload, 400 missing prompt,
        500 provider failure, 504 timeout
    """
    try:
        result = await completion_service.complete(request or CompletionRequest(), background_tasks)
    except ValidationError as e:
        return error_response(status.HTTP_400_BAD_REQUEST, e.message)
    except CompletionTimeoutError:
        return error_response(status.HTTP_504_GATEWAY_TIMEOUT, "Request timeout")
    except CompletionError as e:
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Internal server error",
            details=e.message,
        )

    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content=result.response,
        headers={"Access-Control-Allow-Origin": "*"},
    )


@router.options("/edge")
async def edge_preflight() -> Response:
    """Answer bare OPTIONS requests with the permissive CORS headers."""
    return Response(status_code=status.HTTP_200_OK, headers=CORS_HEADERS)


@router.post("/edge")
async def create_edge_completion(
    edge_service: EdgeCompletionService = Depends(get_edge_completion_service),
    request: EdgeCompletionRequest | None = None,
) -> dict[str, Any]:
    """Run a stateless completion against the edge provider.

    Errors propagate to the application exception handlers
    (400 missing prompt, 504 timeout, 500 provider failure).
    """
    return await edge_service.complete(request or EdgeCompletionRequest())
