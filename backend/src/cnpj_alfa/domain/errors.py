"""
Exceptions raised by the CNPJ domain.

Every failure derives from CnpjError, itself a ValueError, so callers can
catch the whole family at once (validate() does exactly that).
"""


class CnpjError(ValueError):
    """Base class for all CNPJ errors."""


class InvalidCharacterError(CnpjError):
    """A character outside [0-9A-Z] reached the weighted sum."""

    def __init__(self, position: int, character: str) -> None:
        self.position = position
        self.character = character
        super().__init__(f"Invalid character {character!r} at position {position}")


class InvalidLengthError(CnpjError):
    """The normalized input does not have the expected number of characters."""

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"CNPJ must have {expected} alphanumeric characters, got {actual}"
        )


class InvalidCheckDigitsError(CnpjError):
    """The verification suffix does not match the digits computed from the body."""

    def __init__(self, expected: str, actual: str) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"Check digits mismatch: expected {expected}, got {actual}")
