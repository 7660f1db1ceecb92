"""Configuration settings using Pydantic Settings.

Settings are fixed at startup: the model is frozen and every component reads
the values it needs when it is constructed.

Usage:
    from touchfield.config import GestureSettings

    # Load from environment variables (TOUCHFIELD_*)
    settings = GestureSettings()

    # Or override with explicit values
    settings = GestureSettings(pool_size=10, min_contacts=2)
"""

from __future__ import annotations

from enum import Enum

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AnchorPolicy(str, Enum):
    """How the gesture anchor moves while a gesture is active."""

    ROLL_FORWARD = "roll_forward"
    """Anchor becomes the current region corner every frame (frame-differential drag)."""

    FIXED = "fixed"
    """Anchor stays where the gesture began (fixed-origin drag)."""


class GestureSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for gesture tracking and the Thing pool.

    Attributes:
        pool_size: Number of Things created at setup.
        min_contacts: Minimum simultaneous contacts for a gesture region.
        offset_decay: Fraction of the offset vector leaked per selected Thing.
        thing_radius: Radius of every Thing in normalized units.
        anchor_policy: Anchor update policy while a gesture is active.
        reselect_on_move: Recompute selection on contact moves, not only on
            contact start and end.
        seed: Seed for pool creation (None for nondeterministic).
        history_frames: Frames kept by a RecordingRenderer built from settings.

    Environment Variables:
        TOUCHFIELD_POOL_SIZE
        TOUCHFIELD_MIN_CONTACTS
        TOUCHFIELD_OFFSET_DECAY
        TOUCHFIELD_THING_RADIUS
        TOUCHFIELD_ANCHOR_POLICY
        TOUCHFIELD_RESELECT_ON_MOVE
        TOUCHFIELD_SEED
        TOUCHFIELD_HISTORY_FRAMES
    """

    model_config = SettingsConfigDict(
        env_prefix="TOUCHFIELD_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    pool_size: int = Field(default=50, ge=0)
    min_contacts: int = Field(default=1, ge=1)
    offset_decay: float = Field(default=0.01, ge=0.0, lt=1.0)
    thing_radius: float = Field(default=0.05, gt=0.0)
    anchor_policy: AnchorPolicy = AnchorPolicy.ROLL_FORWARD
    reselect_on_move: bool = True
    seed: int | None = None
    history_frames: int = Field(default=120, ge=1)
