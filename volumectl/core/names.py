"""
Volume name validation.

Names start with a lowercase ASCII letter followed by at least one
lowercase letter, digit or hyphen.
"""

import re

from .exceptions import InvalidName

NAME_PATTERN = re.compile(r'^[a-z][a-z0-9-]+\Z')


def is_valid_name(name) -> bool:
    """
    Check if a string is a valid volume name.

    Args:
        name: Value to check

    Returns:
        True if valid, False otherwise
    """
    if not isinstance(name, str):
        return False
    return NAME_PATTERN.match(name) is not None


def ensure_valid_name(name) -> str:
    """Return ``name`` unchanged or raise InvalidName."""
    if not is_valid_name(name):
        raise InvalidName(name)
    return name
