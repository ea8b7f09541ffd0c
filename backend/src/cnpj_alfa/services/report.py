"""
Report building for the CLI and HTTP surfaces.

Turns a raw input string into a CnpjReport, reusing the domain functions so
both entry points describe an identifier in exactly the same way.

CnpjReport and ValidateBatchResponse live in cnpj_alfa.api.schemas because
they are shared: the HTTP routes return them and the CLI dumps them as JSON.
"""

import logging

from cnpj_alfa.api.schemas import CnpjReport, ValidateBatchResponse
from cnpj_alfa.domain import CnpjError, compute_dv, format_cnpj, normalize, validate
from cnpj_alfa.domain.checksum import BODY_LENGTH

logger = logging.getLogger(__name__)


def describe(value: str) -> CnpjReport:
    """
    Describe a single identifier.

    The expected check digits are reported whenever the first 12
    normalized characters form a computable body, even if the suffix is
    missing or wrong. This helps spot transcription errors.
    """
    normalized = normalize(value)
    body = normalized[:BODY_LENGTH]

    check_digits: str | None = None
    try:
        check_digits = str(compute_dv(body))
    except CnpjError as e:
        logger.debug(f"No check digits for {value!r}: {e}")

    return CnpjReport(
        input=value,
        normalized=normalized,
        formatted=format_cnpj(normalized),
        valid=validate(normalized),
        alphanumeric=any(ch.isalpha() for ch in body),
        check_digits=check_digits,
    )


def describe_batch(values: list[str]) -> ValidateBatchResponse:
    """Describe several identifiers and count the outcomes."""
    results = [describe(value) for value in values]
    valid_count = sum(1 for r in results if r.valid)

    logger.info(f"Validated {len(results)} CNPJ values ({valid_count} valid)")

    return ValidateBatchResponse(
        results=results,
        valid_count=valid_count,
        invalid_count=len(results) - valid_count,
    )
