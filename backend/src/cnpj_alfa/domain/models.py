"""
CNPJ value object.

Design Decisions:
- Frozen dataclass so instances are hashable and compare by value
- Always stores the normalized form; formatting is derived on demand
- Construction fails loudly, unlike validate() which only answers yes/no
"""

import random
import string
from dataclasses import dataclass, field

from .checksum import BODY_LENGTH, CNPJ_LENGTH, CheckDigits, compute_dv, complete
from .errors import InvalidCheckDigitsError, InvalidLengthError
from .normalize import format_cnpj, normalize
from .validation import split

# Body alphabet for alphanumeric CNPJ (letters only in the body)
ALPHANUMERIC_CHARS = string.digits + string.ascii_uppercase

# Branch order assigned to a headquarters in the legacy numeric form
HEADQUARTERS_ORDER = "0001"


@dataclass(frozen=True)
class Cnpj:
    """
    A validated CNPJ.

    Example:
        cnpj = Cnpj("12.abc.345/01de-35")
        cnpj.value        # "12ABC34501DE35"
        str(cnpj)         # "12.ABC.345/01DE-35"
    """
    value: str
    check_digits: CheckDigits = field(init=False, compare=False, repr=False)

    def __post_init__(self) -> None:
        normalized = normalize(self.value)
        if len(normalized) != CNPJ_LENGTH:
            raise InvalidLengthError(CNPJ_LENGTH, len(normalized))

        body, suffix = split(normalized)
        expected = compute_dv(body)
        if suffix != str(expected):
            raise InvalidCheckDigitsError(str(expected), suffix)

        # Frozen dataclass: bypass __setattr__ to store derived fields
        object.__setattr__(self, "value", normalized)
        object.__setattr__(self, "check_digits", expected)

    @classmethod
    def from_body(cls, body: str) -> "Cnpj":
        """Build a CNPJ from its 12-character body by computing the digits."""
        return cls(complete(body))

    @property
    def body(self) -> str:
        return self.value[:BODY_LENGTH]

    @property
    def formatted(self) -> str:
        return format_cnpj(self.value)

    @property
    def is_alphanumeric(self) -> bool:
        """True if the body carries at least one letter."""
        return not self.body.isdigit()

    def __str__(self) -> str:
        return self.formatted


def generate(alphanumeric: bool = True, rng: random.Random | None = None) -> str:
    """
    Generate a random valid CNPJ.

    Args:
        alphanumeric: Draw body characters from [0-9A-Z]. When False, an
            8-digit root followed by the headquarters order "0001".
        rng: Random source, pass a seeded instance for reproducible output

    Returns:
        The normalized 14-character CNPJ
    """
    rng = rng or random.Random()

    if alphanumeric:
        body = "".join(rng.choice(ALPHANUMERIC_CHARS) for _ in range(BODY_LENGTH))
    else:
        root = "".join(rng.choice(string.digits) for _ in range(8))
        body = root + HEADQUARTERS_ORDER

    return complete(body)
