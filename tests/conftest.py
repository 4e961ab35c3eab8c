from datetime import date

import pytest

from tests.fixtures.fakes import FixedClock
from token_resolver.common.random_source import RandomSource
from token_resolver.config.config import FakerLocale, RandomSeed
from token_resolver.services.generators import get_registry
from token_resolver.services.token_resolver import TokenResolver

pytest_plugins = ["pytester"]


@pytest.fixture
def random_source() -> RandomSource:
    return RandomSource(faker_locale=FakerLocale("en_US"), random_seed=RandomSeed(1234))


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(date(2024, 12, 30))


@pytest.fixture
def resolver(clock: FixedClock, random_source: RandomSource) -> TokenResolver:
    return TokenResolver(clock, random_source, get_registry())
