"""
Pydantic schemas for API request/response validation.

Shared by the HTTP service and the CLI's --json output.
"""

from pydantic import BaseModel, Field


# =============================================================================
# Request Schemas
# =============================================================================

class ValidateBatchRequest(BaseModel):
    """Request to validate several identifiers at once."""
    values: list[str] = Field(
        ...,
        description="CNPJ values, formatted or raw",
    )


class CheckDigitsRequest(BaseModel):
    """Request to compute the check digits of a body."""
    body: str = Field(
        ...,
        description="The 12 leading alphanumeric characters of a CNPJ",
        examples=["12.ABC.345/01DE"],
    )


# =============================================================================
# Response Schemas
# =============================================================================

class CnpjReport(BaseModel):
    """Validation outcome for a single identifier."""
    input: str
    normalized: str
    formatted: str
    valid: bool
    alphanumeric: bool = Field(
        description="True if the body contains at least one letter",
    )
    check_digits: str | None = Field(
        default=None,
        description="Expected check digits, null when the body cannot be computed",
    )


class ValidateBatchResponse(BaseModel):
    """Results of a batch validation."""
    results: list[CnpjReport]
    valid_count: int
    invalid_count: int


class CheckDigitsResponse(BaseModel):
    """Check digits computed for a body."""
    body: str
    check_digits: str
    cnpj: str
    formatted: str


class FormatResponse(BaseModel):
    """Display form of an identifier."""
    value: str
    formatted: str


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    version: str


class ErrorResponse(BaseModel):
    """Error response."""
    error: str
    detail: str | None = None
