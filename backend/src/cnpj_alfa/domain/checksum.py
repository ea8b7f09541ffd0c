"""
Modulo-11 check digits for alphanumeric CNPJ.

The alphanumeric CNPJ keeps the legacy check-digit scheme and only widens
the alphabet of the 12-character body:

- Character value is ord(ch) - 48, so '0'..'9' map to 0..9 and 'A'..'Z'
  map to 17..42. The gap between 9 and 17 is part of the scheme; it is not
  a base-36 encoding.
- Weights 2..9 are applied from the rightmost character leftwards and
  cycle back to 2 after 9.
- The first digit is computed over the 12-character body, the second over
  the body followed by the first digit (13 characters).

For an all-numeric body this reduces to the classic CNPJ weights
5,4,3,2,9,8,7,6,5,4,3,2 and 6,5,4,3,2,9,8,7,6,5,4,3,2.
"""

import logging
from dataclasses import dataclass

from .errors import InvalidCharacterError, InvalidLengthError
from .normalize import normalize

logger = logging.getLogger(__name__)


BODY_LENGTH = 12
CHECK_DIGITS_LENGTH = 2
CNPJ_LENGTH = BODY_LENGTH + CHECK_DIGITS_LENGTH

MIN_WEIGHT = 2
MAX_WEIGHT = 9

# Offset subtracted from the character code ('0' is 48)
CHAR_OFFSET = ord("0")


@dataclass(frozen=True)
class CheckDigits:
    """
    The two verification digits of a CNPJ.

    Unpacks like a tuple (``first, second = compute_dv(body)``) and renders
    as the two-character suffix.
    """
    first: int
    second: int

    def __post_init__(self) -> None:
        for digit in (self.first, self.second):
            if not 0 <= digit <= 9:
                raise ValueError(f"Check digit must be 0-9, got {digit}")

    def __iter__(self):
        yield self.first
        yield self.second

    def __str__(self) -> str:
        return f"{self.first}{self.second}"


def char_value(ch: str) -> int | None:
    """
    Value of a single character in the weighted sum.

    Returns None for anything outside '0'..'9' and 'A'..'Z' (lowercase
    letters included; callers normalize first).
    """
    if len(ch) != 1:
        return None
    if "0" <= ch <= "9" or "A" <= ch <= "Z":
        return ord(ch) - CHAR_OFFSET
    return None


def right_weights(length: int) -> list[int]:
    """
    Weights aligned left-to-right for a string of ``length`` characters.

    The rightmost position always gets 2, the next one 3, and so on up to
    9 before wrapping back to 2.

    Example:
        >>> right_weights(12)
        [5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2]
    """
    if length < 0:
        raise ValueError(f"Length must be non-negative, got {length}")

    cycle = MAX_WEIGHT - MIN_WEIGHT + 1
    return [
        MIN_WEIGHT + (length - 1 - i) % cycle
        for i in range(length)
    ]


def compute_single_dv(body: str) -> int:
    """
    Compute one modulo-11 check digit over an already normalized string.

    Args:
        body: 12 characters for the first digit, 13 for the second

    Returns:
        The check digit (0-9). Remainders 0 and 1 both collapse to 0.

    Raises:
        InvalidCharacterError: If any character has no value
    """
    weights = right_weights(len(body))

    total = 0
    for position, (ch, weight) in enumerate(zip(body, weights)):
        value = char_value(ch)
        if value is None:
            raise InvalidCharacterError(position, ch)
        total += value * weight

    remainder = total % 11
    return 0 if remainder < 2 else 11 - remainder


def compute_dv(body: str) -> CheckDigits:
    """
    Compute both check digits for a CNPJ body.

    The input is normalized first, so punctuation and lowercase letters
    are accepted.

    Args:
        body: The 12 leading characters of a CNPJ, formatted or not

    Returns:
        CheckDigits with the first and second verification digits

    Raises:
        InvalidLengthError: If the normalized body is not 12 characters
        InvalidCharacterError: If a character has no value
    """
    normalized = normalize(body)
    if len(normalized) != BODY_LENGTH:
        raise InvalidLengthError(BODY_LENGTH, len(normalized))

    first = compute_single_dv(normalized)
    second = compute_single_dv(normalized + str(first))

    logger.debug(f"Check digits for {normalized}: {first}{second}")
    return CheckDigits(first=first, second=second)


def complete(body: str) -> str:
    """
    Append the computed check digits to a body.

    Returns:
        The normalized 14-character CNPJ
    """
    digits = compute_dv(body)
    return f"{normalize(body)}{digits}"
