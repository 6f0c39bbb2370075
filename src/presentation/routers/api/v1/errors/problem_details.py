"""RFC 9457 Problem Details for HTTP APIs.

Pydantic models for the error body every member endpoint returns on failure.

RFC 9457: https://www.rfc-editor.org/rfc/rfc9457

Exports:
    ErrorDetail: Individual field-specific error
    ProblemDetails: RFC 9457 compliant error response schema
"""

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """Field-specific error (validation failures, duplicate emails).

    Examples:
        >>> ErrorDetail(
        ...     field="email",
        ...     code="member_already_exists",
        ...     message="Member already exists",
        ... )
    """

    field: str = Field(..., description="Field name")
    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")


class ProblemDetails(BaseModel):
    """RFC 9457 Problem Details body.

    Attributes:
        type: URI reference identifying the problem type
        title: Short, human-readable summary of the problem type
        status: HTTP status code for this occurrence
        detail: Human-readable explanation specific to this occurrence
        instance: Request path of this occurrence
        errors: Optional field-specific errors
        trace_id: Request trace ID (X-Trace-Id)

    Examples:
        >>> ProblemDetails(
        ...     type="http://localhost:8000/errors/conflict",
        ...     title="Resource Conflict",
        ...     status=409,
        ...     detail="Member already exists",
        ...     instance="/api/v1/members",
        ...     trace_id="550e8400-e29b-41d4-a716-446655440000",
        ... )
    """

    type: str = Field(
        ...,
        description="URI reference identifying the problem type",
        examples=["http://localhost:8000/errors/conflict"],
    )
    title: str = Field(
        ...,
        description="Short, human-readable summary",
        examples=["Resource Conflict"],
    )
    status: int = Field(..., description="HTTP status code", examples=[409])
    detail: str = Field(
        ...,
        description="Human-readable explanation",
        examples=["Member already exists"],
    )
    instance: str = Field(
        ...,
        description="Request path of this occurrence",
        examples=["/api/v1/members"],
    )
    errors: list[ErrorDetail] | None = Field(
        None,
        description="List of field-specific errors",
    )
    trace_id: str | None = Field(
        None,
        description="Request trace ID for debugging",
    )
