"""Core type definitions for touchfield."""

from typing import TypeAlias

ContactId: TypeAlias = int | str
"""Identifier of one pointer contact, stable for as long as the contact is held."""

ThingId: TypeAlias = int
"""Identifier of a Thing, assigned 0..N-1 when the pool is created."""
