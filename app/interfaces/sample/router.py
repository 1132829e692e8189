"""
FastAPI router for the sample bounded context.

Routes delegate to use cases. No business logic here.
Input validation is handled by Pydantic schemas.
Error mapping is handled by centralized error handlers.
"""

from fastapi import APIRouter, Depends, Request

from app.application.sample.dtos import PostMessageCommand
from app.application.sample.post_message import PostMessageUseCase
from app.interfaces.sample.dependencies import get_post_message_use_case
from app.interfaces.sample.schemas import ErrorResponse, SampleRequest, SampleResponse
from app.shared.security.rate_limiting import default_limit, limiter

router = APIRouter(tags=["sample"])


@router.post(
    "/post",
    response_model=SampleResponse,
    responses={400: {"model": ErrorResponse}, 429: {"description": "Rate limited"}},
    summary="Post a message",
    description="Accept a message body and return it.",
)
@limiter.limit(default_limit)
def post(
    request: Request,
    payload: SampleRequest,
    use_case: PostMessageUseCase = Depends(get_post_message_use_case),
) -> SampleResponse:
    """Accept a validated message."""
    result = use_case.execute(PostMessageCommand(body=payload.body))
    return SampleResponse(body=result.body)
