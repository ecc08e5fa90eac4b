"""Request schemas for the Newscheck API."""

from __future__ import annotations

from pydantic import BaseModel, Field

from config import settings


class CheckRequest(BaseModel):
    """Payload for the JSON check endpoint."""

    text: str = Field(
        ...,
        min_length=1,
        max_length=settings.max_text_length,
        description="News text to check. Surrounding whitespace is ignored.",
    )
    request_id: str | None = Field(
        default=None,
        alias="requestId",
        description="Caller's request ID for tracing.",
    )

    model_config = {"populate_by_name": True}
