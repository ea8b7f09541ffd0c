"""
Domain package - CNPJ check digits, validation and formatting.

Pure Python with no external dependencies and no I/O.
"""

from .checksum import (
    CheckDigits,
    char_value,
    complete,
    compute_dv,
    compute_single_dv,
    right_weights,
)
from .errors import (
    CnpjError,
    InvalidCharacterError,
    InvalidCheckDigitsError,
    InvalidLengthError,
)
from .models import Cnpj, generate
from .normalize import format_cnpj, normalize
from .validation import validate

__all__ = [
    "CheckDigits",
    "Cnpj",
    "CnpjError",
    "InvalidCharacterError",
    "InvalidCheckDigitsError",
    "InvalidLengthError",
    "char_value",
    "complete",
    "compute_dv",
    "compute_single_dv",
    "format_cnpj",
    "generate",
    "normalize",
    "right_weights",
    "validate",
]
