"""
Validation of complete CNPJ identifiers.

Pure function, no side effects. A malformed document and a well-formed one
with wrong check digits are indistinguishable here: both are just invalid.
"""

import logging

from .checksum import BODY_LENGTH, CNPJ_LENGTH, compute_dv
from .errors import CnpjError
from .normalize import normalize

logger = logging.getLogger(__name__)


def split(normalized: str) -> tuple[str, str]:
    """Split a normalized 14-character CNPJ into body and check-digit suffix."""
    return normalized[:BODY_LENGTH], normalized[BODY_LENGTH:]


def validate(value: str) -> bool:
    """
    Check whether a CNPJ (alphanumeric or legacy numeric) is valid.

    Accepts formatted or raw input in any case. Never raises.

    Rule: suffix == str(DV1) + str(DV2) computed from the 12-character body
    """
    normalized = normalize(value)
    if len(normalized) != CNPJ_LENGTH:
        logger.debug(f"Rejected {value!r}: length {len(normalized)}")
        return False

    body, suffix = split(normalized)

    # Check digits are always numeric, even for alphanumeric bodies
    if not (suffix.isascii() and suffix.isdigit()):
        logger.debug(f"Rejected {value!r}: non-numeric suffix {suffix!r}")
        return False

    try:
        expected = compute_dv(body)
    except CnpjError as e:
        logger.debug(f"Rejected {value!r}: {e}")
        return False

    return suffix == str(expected)
