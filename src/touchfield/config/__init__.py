"""Configuration module using Pydantic Settings.

Provides typed, startup-only configuration with environment variable support.

Usage:
    from touchfield.config import GestureSettings

    settings = GestureSettings(pool_size=20)
"""

from touchfield.config.settings import AnchorPolicy, GestureSettings

__all__ = [
    "AnchorPolicy",
    "GestureSettings",
]
