"""Identifier generation: CUID2 for primary keys and minted request ids."""

from cuid2 import cuid_wrapper

_next_cuid = cuid_wrapper()


def generate_cuid() -> str:
    """Return a new CUID2 (lowercase letters and digits, starts with a letter)."""
    return str(_next_cuid())
