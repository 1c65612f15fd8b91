"""API request/response models."""

from pydantic import BaseModel, ConfigDict, Field

from ..clean.platform_classifier import Platform


class UnaffiliateRequest(BaseModel):
    """Request model for /api/unaffiliate endpoint."""

    url: str = Field(..., description="Link to clean")


class UnaffiliateResponse(BaseModel):
    """Response model for /api/unaffiliate endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    url: str = Field(..., description="Cleaned URL")
    was_youtube_redirect: bool = Field(
        ...,
        alias="wasYoutubeRedirect",
        description="Whether the link was wrapped in a YouTube redirect",
    )
    platform: Platform = Field(..., description="Detected platform of the cleaned link")


class ErrorResponse(BaseModel):
    """Error body returned for every non-200 response."""

    error: str


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = "ok"
