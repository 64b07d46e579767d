"""Identifier generation for workout entities."""

import uuid


def new_id(prefix: str) -> str:
    """Generate a unique, prefixed identifier (e.g. "set_3f2a9c1b0d4e")."""
    return f"{prefix}_{uuid.uuid4().hex[:12]}"
