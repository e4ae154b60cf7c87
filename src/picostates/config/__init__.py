"""Configuration module using Pydantic Settings.

Usage:
    from picostates.config import PicostateSettings

    settings = PicostateSettings(strict_sequences=True)
    runtime = Runtime(settings)
"""

from picostates.config.settings import PicostateSettings

__all__ = [
    "PicostateSettings",
]
