"""
CNPJ endpoints.

Validation, formatting and check-digit computation. All endpoints are
stateless wrappers over the domain functions.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, HTTPException, Query, status

from cnpj_alfa.api.schemas import (
    CheckDigitsRequest,
    CheckDigitsResponse,
    CnpjReport,
    ErrorResponse,
    FormatResponse,
    ValidateBatchRequest,
    ValidateBatchResponse,
)
from cnpj_alfa.config import get_settings
from cnpj_alfa.domain import compute_dv, format_cnpj, normalize
from cnpj_alfa.services.report import describe, describe_batch

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/cnpj", tags=["cnpj"])


@router.get("/validate", response_model=CnpjReport)
async def validate_one(
    value: Annotated[str, Query(description="CNPJ, formatted or raw")],
) -> CnpjReport:
    """
    Validate a single CNPJ.

    Always returns 200; check the `valid` field for the outcome.
    """
    return describe(value)


@router.post(
    "/validate",
    response_model=ValidateBatchResponse,
    responses={
        422: {"description": "Too many values in one request"},
    },
)
async def validate_batch(request: ValidateBatchRequest) -> ValidateBatchResponse:
    """Validate a list of CNPJ values."""
    settings = get_settings()
    if len(request.values) > settings.batch_limit:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"At most {settings.batch_limit} values per request",
        )

    return describe_batch(request.values)


@router.get("/format", response_model=FormatResponse)
async def format_one(
    value: Annotated[str, Query(description="CNPJ, formatted or raw")],
) -> FormatResponse:
    """
    Format a CNPJ as AA.AAA.AAA/AAAA-DD.

    Values that do not normalize to 14 characters come back normalized only.
    """
    return FormatResponse(value=value, formatted=format_cnpj(value))


@router.post(
    "/check-digits",
    response_model=CheckDigitsResponse,
    responses={
        422: {
            "model": ErrorResponse,
            "description": "Body is not 12 alphanumeric characters",
        },
    },
)
async def check_digits(request: CheckDigitsRequest) -> CheckDigitsResponse:
    """
    Compute the two check digits for a 12-character body.

    CnpjError is left to the application's error handler, which answers 422.
    """
    digits = compute_dv(request.body)

    body = normalize(request.body)
    cnpj = f"{body}{digits}"

    return CheckDigitsResponse(
        body=body,
        check_digits=str(digits),
        cnpj=cnpj,
        formatted=format_cnpj(cnpj),
    )
