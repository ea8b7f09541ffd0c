"""
Input normalization and display formatting for CNPJ values.
"""

import re

# Anything that is not an ASCII digit or letter
_NON_ALPHANUMERIC = re.compile(r"[^0-9A-Za-z]")

# Group sizes of the display mask AA.AAA.AAA/AAAA-DD
FORMAT_GROUPS = (2, 3, 3, 4, 2)
FORMAT_SEPARATORS = (".", ".", "/", "-")


def normalize(value: str) -> str:
    """
    Drop every character outside [0-9A-Za-z], then uppercase.

    Non-ASCII letters are dropped, never case-mapped ("ß" does not
    become "SS").

    Example:
        >>> normalize("12a.bc-345/01de-35")
        '12ABC34501DE35'
    """
    return _NON_ALPHANUMERIC.sub("", value).upper()


def format_cnpj(value: str) -> str:
    """
    Format a CNPJ as AA.AAA.AAA/AAAA-DD, keeping letters in the body.

    Check digits are not verified here. Input that does not normalize to
    14 characters is returned normalized but unformatted.
    """
    normalized = normalize(value)
    if len(normalized) != sum(FORMAT_GROUPS):
        return normalized

    parts: list[str] = []
    start = 0
    for size in FORMAT_GROUPS:
        parts.append(normalized[start:start + size])
        start += size

    formatted = parts[0]
    for separator, part in zip(FORMAT_SEPARATORS, parts[1:]):
        formatted += separator + part
    return formatted
