"""
Pydantic schemas for sample API request/response validation.

These schemas enforce input validation and define the API contract.
No business logic belongs here.
"""

from pydantic import BaseModel, Field

BODY_MIN_LEN = 1
BODY_MAX_LEN = 1000


class SampleRequest(BaseModel):
    """Request schema for the post endpoint.

    Attributes:
        body: Message text (1-1000 chars).
    """

    body: str = Field(
        ...,
        min_length=BODY_MIN_LEN,
        max_length=BODY_MAX_LEN,
        description="Message text",
    )


class SampleResponse(BaseModel):
    """Response schema for the post endpoint."""

    body: str


class ErrorResponse(BaseModel):
    """Error body returned by the centralized error handlers."""

    code: str = Field(..., examples=["400-001"])
    message: str = Field(..., examples=["wrong url"])


class HealthResponse(BaseModel):
    """Response schema for health check endpoint."""

    status: str
    version: str
