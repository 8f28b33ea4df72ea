"""
Language-range grammar and Basic Filtering comparison.

Ranges follow the RFC 4647 / RFC 7231 syntax:
- "*" (wildcard)
- 1-8 ASCII letters, then zero or more "-" + 1-8 ASCII alphanumerics
"""

import re

WILDCARD = "*"

# Fixed pattern, never built from caller input
_RANGE_PATTERN = re.compile(r"[A-Za-z]{1,8}(?:-[A-Za-z0-9]{1,8})*")


def is_valid_range(token: object) -> bool:
    """
    Check a candidate language-range token against the range grammar.

    Validation is case-insensitive; lowercasing is left to the importer.

    Args:
        token: Candidate range, e.g. "en-GB" or "*"

    Returns:
        True if the token is the wildcard or a well-formed range

    Examples:
        >>> is_valid_range("zh-Hant-TW")
        True
        >>> is_valid_range("en--us")
        False
        >>> is_valid_range("e1")
        False
    """
    if not isinstance(token, str) or not token:
        return False
    if token == WILDCARD:
        return True
    return _RANGE_PATTERN.fullmatch(token) is not None


def prefix_match(language_range: str, tag: str) -> bool:
    """
    RFC 4647 section 3.3.1 Basic Filtering.

    A range matches a tag if it equals the tag, or equals a prefix of the tag
    such that the first character following the prefix is "-".

    Args:
        language_range: Lowercased range (never the wildcard)
        tag: Available language tag, any case

    Returns:
        True if the range matches the tag
    """
    lowered = tag.lower()
    size = len(language_range)
    if lowered == language_range:
        return True
    return (
        len(lowered) > size
        and lowered[size] == "-"
        and lowered[:size] == language_range
    )


def primary_subtag(language_range: str) -> str:
    """Return the primary subtag of a range ("zh-hant-tw" -> "zh")."""
    return language_range.split("-", 1)[0]
