"""Tests for runtime settings loaded from the environment."""

import pytest
from pydantic import ValidationError

from picostates import PicostateSettings


def test_defaults(monkeypatch):
    monkeypatch.delenv("PICOSTATES_IMPLICIT_TRANSITIONS", raising=False)
    monkeypatch.delenv("PICOSTATES_STRICT_SEQUENCES", raising=False)

    settings = PicostateSettings(_env_file=None)

    assert settings.implicit_transitions is False
    assert settings.strict_sequences is False


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("PICOSTATES_STRICT_SEQUENCES", "true")
    monkeypatch.setenv("PICOSTATES_IMPLICIT_TRANSITIONS", "1")

    settings = PicostateSettings(_env_file=None)

    assert settings.strict_sequences is True
    assert settings.implicit_transitions is True


def test_explicit_values_win_over_environment(monkeypatch):
    monkeypatch.setenv("PICOSTATES_STRICT_SEQUENCES", "true")

    assert PicostateSettings(strict_sequences=False).strict_sequences is False


def test_settings_are_frozen():
    settings = PicostateSettings(strict_sequences=False)

    with pytest.raises(ValidationError):
        settings.strict_sequences = True
