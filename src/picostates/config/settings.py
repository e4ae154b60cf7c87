"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support for runtimes.

Usage:
    from picostates.config import PicostateSettings

    # Load from environment variables (PICOSTATES_*)
    settings = PicostateSettings()

    # Or override with explicit values
    settings = PicostateSettings(implicit_transitions=True)
"""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class PicostateSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for a picostates runtime.

    Attributes:
        implicit_transitions: Lift every public method of a type definition,
            not only the ones marked with ``@transition``.
        strict_sequences: Make sequence types reject non-list values instead
            of wrapping them in a one-element list.

    Environment Variables:
        PICOSTATES_IMPLICIT_TRANSITIONS
        PICOSTATES_STRICT_SEQUENCES
    """

    model_config = SettingsConfigDict(
        env_prefix="PICOSTATES_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    implicit_transitions: bool = False
    strict_sequences: bool = False
