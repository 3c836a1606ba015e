"""
Campus Data Backend — Shared Pydantic Schemas
==============================================

What:  Base model and response envelopes shared by every resource.
Why:   The frontend speaks camelCase JSON (`localDateTime`, `hasSackMeal`)
       while Python attributes and ORM columns are snake_case. One base class
       with an alias generator bridges the two for every schema.
How:   FastAPI serializes `response_model`s by alias, so responses come out in
       camelCase. `populate_by_name=True` lets request bodies use either form.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Upper bound of the BIGINT identity columns every surrogate key lives in
MAX_BIGINT = 2**63 - 1


class CamelModel(BaseModel):
    """Base for every API schema: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# ══════════════════════════════════════════════════════════════════════════
# Generic Responses
# ══════════════════════════════════════════════════════════════════════════


class MessageResponse(BaseModel):
    """
    What:  Plain confirmation message.
    Who:   Returned by every DELETE endpoint, e.g.
           {"message": "UCSBDate with id 15 deleted"}.
    """
    message: str = Field(description="Human-readable confirmation")


class ErrorResponse(BaseModel):
    """
    What:  Standardized error response format for all API errors.
    Why:   Clients need a consistent structure to parse errors programmatically.

    Fields:
        error: Machine-readable error code (e.g. "validation_error", "not_found")
        type: Name of the exception that produced the error
        message: Human-readable description for display to users
        details: Optional extra context (e.g. which field failed validation)
        request_id: Correlation ID for tracing this error in server logs

    Example:
        {
            "error": "not_found",
            "type": "EntityNotFoundError",
            "message": "UCSBDate with id 7 not found",
            "request_id": "1f3a9c2e"
        }
    """
    error: str = Field(description="Machine-readable error code")
    type: str = Field(description="Exception type that produced the error")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


# ══════════════════════════════════════════════════════════════════════════
# System Responses
# ══════════════════════════════════════════════════════════════════════════


class SystemInfoResponse(CamelModel):
    """Public, non-sensitive facts about the running service for the frontend."""
    show_swagger_ui_link: bool = Field(
        alias="showSwaggerUILink",
        description="Whether the frontend should link to the Swagger UI",
    )
    version: str = Field(description="Application version")
    source_repo: str = Field(description="URL of the source repository")


class HealthResponse(BaseModel):
    """
    What:  Health check response showing service and dependency status.
    Who:   Returned by GET /health for monitoring and load balancer health checks.
    """
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")


def responses_for(*status_codes: int) -> dict:
    """OpenAPI `responses=` entries documenting the shared error body."""
    descriptions = {
        400: "Missing or malformed field",
        401: "Not logged in",
        403: "Missing required role",
        404: "Record not found",
        409: "Record with this key already exists",
    }
    return {
        code: {"description": descriptions[code], "model": ErrorResponse}
        for code in status_codes
    }
