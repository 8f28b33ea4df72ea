"""
Quality value ("q=") parsing.

Quality values are kept as integers on a 0-1000 scale so that ordering and
equality never depend on float rounding.
"""

import re

MAX_QUALITY = 1000
MIN_QUALITY = 0

# qvalue = ( "0" [ "." 0*3DIGIT ] ) / ( "1" [ "." 0*3("0") ] )
_STRICT_PATTERN = re.compile(r"0(?:\.[0-9]{0,3})?|1(?:\.0{0,3})?")
_LEADING_DOT_PATTERN = re.compile(r"\.[0-9]{1,3}")


def parse_quality(token: str, *, allow_leading_dot: bool = False) -> int | None:
    """
    Convert a quality literal (without the "q=" prefix) to the 0-1000 scale.

    The decimal point is dropped and the remaining digits are right-padded
    to four characters: "0.8" -> "08" -> "0800" -> 800, "1" -> "1000".

    Args:
        token: Quality literal, e.g. "0.8"
        allow_leading_dot: Also accept the ".8" shorthand

    Returns:
        Integer quality, or None if the literal is invalid

    Examples:
        >>> parse_quality("0.75")
        750
        >>> parse_quality("1.001") is None
        True
    """
    if _STRICT_PATTERN.fullmatch(token) is None:
        if not (allow_leading_dot and _LEADING_DOT_PATTERN.fullmatch(token)):
            return None
        token = "0" + token

    return int(token.replace(".", "").ljust(4, "0"))
