"""RFC 9457 Problem Details for HTTP APIs.

Exports:
    ErrorDetail: Individual field-specific error
    ProblemDetails: RFC 9457 compliant error response schema
"""

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """Individual field-specific error.

    Used for validation errors where multiple fields may have errors.
    """

    field: str = Field(..., description="Field name")
    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")


class ProblemDetails(BaseModel):
    """RFC 9457 Problem Details for HTTP APIs.

    Examples:
        >>> problem = ProblemDetails(
        ...     type="http://localhost:8585/errors/not-found",
        ...     title="Resource Not Found",
        ...     status=404,
        ...     detail="No collection registered at /v1/charts",
        ...     instance="/api/v1/charts",
        ... )
    """

    type: str = Field(
        ...,
        description="URI reference identifying the problem type",
        examples=["http://localhost:8585/errors/not-found"],
    )
    title: str = Field(..., description="Short, human-readable summary")
    status: int = Field(..., description="HTTP status code", examples=[404])
    detail: str = Field(..., description="Human-readable explanation")
    instance: str = Field(
        ...,
        description="URI reference identifying this occurrence",
        examples=["/api/v1/tables/3f2a"],
    )
    code: str | None = Field(None, description="Machine-readable error code")
    errors: list[ErrorDetail] | None = Field(
        None,
        description="List of field-specific errors",
    )
