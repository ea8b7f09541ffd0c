"""
cnpj_alfa - validation and formatting of alphanumeric Brazilian CNPJ.
"""

from .domain import (
    CheckDigits,
    Cnpj,
    CnpjError,
    InvalidCharacterError,
    InvalidCheckDigitsError,
    InvalidLengthError,
    complete,
    compute_dv,
    format_cnpj,
    generate,
    normalize,
    validate,
)

__version__ = "0.1.0"

# Short alias matching the other verbs
format = format_cnpj

__all__ = [
    "CheckDigits",
    "Cnpj",
    "CnpjError",
    "InvalidCharacterError",
    "InvalidCheckDigitsError",
    "InvalidLengthError",
    "complete",
    "compute_dv",
    "format",
    "format_cnpj",
    "generate",
    "normalize",
    "validate",
    "__version__",
]
