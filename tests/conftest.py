"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from picostates import ArrayType, PicostateSettings, Runtime, create, transition


class FixtureString:
    @transition
    def concat(self, value):
        return f"{self.state}{value}"


class FixtureRecord:
    content = create(FixtureString)


class FixtureDataset:
    records = create(ArrayType.of(FixtureRecord), [])


@pytest.fixture
def runtime():
    """Fresh Runtime with default settings, isolated from the environment."""
    return Runtime(PicostateSettings(implicit_transitions=False, strict_sequences=False))


@pytest.fixture
def string_cls():
    return FixtureString


@pytest.fixture
def record_cls():
    return FixtureRecord


@pytest.fixture
def dataset_cls():
    return FixtureDataset


@pytest.fixture
def dataset():
    """Dataset preloaded with three records."""
    return create(
        FixtureDataset,
        {"records": [{"content": "Herro"}, {"content": "Sweet"}, {"content": "Woooo"}]},
    )
