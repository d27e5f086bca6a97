"""
Placeholder derivation and fragment joining shared by the clause builders.
"""

from typing import Iterable, Optional

from core.config import config
from sql.exceptions import InvalidInputError


def is_blank(value) -> bool:
    """True for None, non-strings and strings with no visible characters."""
    return not isinstance(value, str) or not value.strip()


def placeholder(value: str, prefix: Optional[str] = None) -> str:
    """
    Turn a parameter name into a named bind-parameter reference.

    Args:
        value: Parameter name (e.g. 'name')
        prefix: Placeholder prefix; defaults to config.placeholder_prefix

    Returns:
        Bind reference such as ':name'

    Raises:
        InvalidInputError: If value is None or empty
    """
    if is_blank(value):
        raise InvalidInputError("placeholder name must be a non-empty string")
    if prefix is None:
        prefix = config.placeholder_prefix
    return f"{prefix}{value}"


def join(fragments: Iterable[str], separator: str = ", ") -> str:
    """
    Join non-empty SQL fragments with a separator.

    Empty fragments are skipped so the result never holds two separators
    in a row nor starts or ends with one.
    """
    return separator.join(fragment for fragment in fragments if fragment)
