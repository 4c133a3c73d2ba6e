"""Time-ordered identifier helpers.

Identifiers are UUIDv7 values: a millisecond timestamp prefix followed
by random bits, so every task can mint ids without coordination.
"""

from __future__ import annotations

from uuid import UUID

from uuid6 import uuid7

from core.errors import AtelierInputError


def new_identifier() -> UUID:
    """Return a fresh time-ordered unique identifier."""
    return uuid7()


def parse_identifier(raw_value: str) -> UUID:
    """Parse canonical identifier text.

    Args:
        raw_value: Hyphenated hexadecimal identifier text.

    Returns:
        Parsed identifier.

    Raises:
        AtelierInputError: If text is not a valid UUID.
    """
    try:
        return UUID(raw_value.strip())
    except ValueError as error:
        raise AtelierInputError(
            f"Invalid artist identifier '{raw_value}'. "
            "Pass the hyphenated id printed by the `all` command."
        ) from error
