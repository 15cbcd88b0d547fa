"""Identifier generators."""

from ulid import ULID


def generate_ulid() -> str:
    """Generate a ULID string.

    26 characters of Crockford base32: a 48-bit millisecond timestamp followed
    by 80 random bits. Values sort lexicographically in creation order across
    milliseconds.
    """
    return str(ULID())
