"""Pytest fixtures for group-naming tests."""

import pytest

from group_naming import (
    GroupNameCodec,
    NamingConventionFactory,
    NamingOptions,
    SequenceSuffixSource,
)
from group_naming.naming import DELIMITER_ENV_VAR, PREFIX_ENV_VAR
from tests.fixtures.names import foreign_name, random_group, valid_group  # noqa: F401


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep naming env vars from leaking into tests."""
    monkeypatch.delenv(PREFIX_ENV_VAR, raising=False)
    monkeypatch.delenv(DELIMITER_ENV_VAR, raising=False)


@pytest.fixture
def options() -> NamingOptions:
    """Default options: prefix 'jclouds', delimiter '-', 3 hex characters."""
    return NamingOptions()


@pytest.fixture
def fixed_suffixes() -> SequenceSuffixSource:
    """Deterministic suffix source."""
    return SequenceSuffixSource(["f3e", "e64", "000"])


@pytest.fixture
def codec(options, fixed_suffixes) -> GroupNameCodec:
    """Codec with default options and deterministic suffixes."""
    return GroupNameCodec(options, fixed_suffixes)


@pytest.fixture
def factory(options) -> NamingConventionFactory:
    """Factory with default options and random suffixes."""
    return NamingConventionFactory(options)


@pytest.fixture
def naming(factory):
    """Prefixed convention with random suffixes."""
    return factory.create()


@pytest.fixture
def naming_without_prefix(factory):
    """Prefix-less convention with random suffixes."""
    return factory.create_without_prefix()


@pytest.fixture
def deterministic_naming(options, fixed_suffixes):
    """Prefixed convention replaying 'f3e', 'e64', '000'."""
    return NamingConventionFactory(options, fixed_suffixes).create()
