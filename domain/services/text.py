"""
String helpers shared by the validator and the registry.
"""

from typing import Optional


def is_blank(value: Optional[str]) -> bool:
    """True for None, the empty string, or whitespace only."""
    return value is None or not value.strip()


def capitalize(value: Optional[str]) -> Optional[str]:
    """
    Upper-case the first character and leave the rest untouched.

    Unlike str.capitalize(), the remaining characters keep their case:
    "mcDonald" becomes "McDonald", not "Mcdonald".

    Examples:
        >>> capitalize("johndoe")
        'Johndoe'
        >>> capitalize("")
        ''
    """
    if not value:
        return value
    return value[0].upper() + value[1:]
