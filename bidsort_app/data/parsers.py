"""
Currency amount parsing.

Amounts in the eBid export look like "$1,234.50". Parsing deletes the
currency symbol, then reads the longest leading numeric prefix the way
C atof does: anything after the prefix is ignored and text with no numeric
prefix at all becomes 0.0. Nothing here raises on bad input.
"""

import re
from dataclasses import dataclass

# Optional whitespace, sign, mantissa, optional exponent
_LEADING_NUMBER = re.compile(
    r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?"
)


@dataclass(frozen=True)
class ParsedAmount:
    """Result of a best-effort amount parse."""
    value: float
    exact: bool     # True only if the whole text was numeric


def parse_amount(text: str, strip_char: str = "$", extra_strip: str = "") -> ParsedAmount:
    """
    Parse a currency string after deleting unwanted characters.

    Args:
        text: Raw amount text, e.g. "$91.00"
        strip_char: Character deleted everywhere before conversion
        extra_strip: Further characters to delete (e.g. "," for thousands)

    Returns:
        ParsedAmount with the leading numeric value (0.0 if none) and
        whether the entire stripped text was consumed
    """
    for ch in strip_char + extra_strip:
        text = text.replace(ch, "")

    match = _LEADING_NUMBER.match(text)
    if match is None:
        return ParsedAmount(value=0.0, exact=False)

    value = float(match.group(0))
    exact = text[match.end():].strip() == ""
    return ParsedAmount(value=value, exact=exact)


def str_to_double(text: str, ch: str = "$") -> float:
    """Convert a string to a float after stripping out `ch`."""
    return parse_amount(text, ch).value
