"""Pytest fixtures and configuration."""

from datetime import date

import pytest

from idforge.config.locale_loader import load_locale_corpus
from idforge.config.settings import IdForgeSettings
from idforge.core.fairy import Fairy, build_services
from idforge.core.locale_data import LocaleData
from idforge.core.random_primitives import RandomPrimitives
from idforge.core.time_provider import FixedTimeProvider


TODAY = date(2024, 6, 15)


@pytest.fixture
def today():
    """Fixed current date used by every time-dependent test."""
    return TODAY


@pytest.fixture
def time_provider(today):
    return FixedTimeProvider(today)


@pytest.fixture
def random_primitives():
    return RandomPrimitives(seed=1234)


@pytest.fixture(scope="session")
def en_corpus():
    """Bundled English corpus."""
    return load_locale_corpus("en")


@pytest.fixture(scope="session")
def pl_corpus():
    """Bundled Polish corpus."""
    return load_locale_corpus("pl")


@pytest.fixture
def en_locale_data(en_corpus, random_primitives):
    return LocaleData("en", en_corpus, random_primitives)


@pytest.fixture
def pl_locale_data(pl_corpus, random_primitives):
    return LocaleData("pl", pl_corpus, random_primitives)


@pytest.fixture
def en_services(time_provider):
    """Seeded English services with a fixed clock."""
    return build_services(IdForgeSettings(locale="en", seed=1234), time_provider=time_provider)


@pytest.fixture
def pl_services(time_provider):
    """Seeded Polish services with a fixed clock."""
    return build_services(IdForgeSettings(locale="pl", seed=1234), time_provider=time_provider)


@pytest.fixture
def fairy(time_provider):
    return Fairy.create(locale="en", seed=42, time_provider=time_provider)
