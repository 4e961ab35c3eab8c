from functools import cache

from wireup import service

from token_resolver.config.constants import DEFAULT_UNIQUE_ID_LENGTH
from token_resolver.services.generators.base import TokenContext, TokenGenerator
from token_resolver.services.generators.date_offset_generator import (
    DateOffsetGenerator,
    DateOfBirthGenerator,
    TodayGenerator,
)
from token_resolver.services.generators.name_generator import FirstNameGenerator, LastNameGenerator
from token_resolver.services.generators.registry import TokenGeneratorRegistry
from token_resolver.services.generators.unique_id_generator import UniqueIdGenerator

__all__ = [
    "DateOfBirthGenerator",
    "DateOffsetGenerator",
    "FirstNameGenerator",
    "LastNameGenerator",
    "TodayGenerator",
    "TokenContext",
    "TokenGenerator",
    "TokenGeneratorRegistry",
    "UniqueIdGenerator",
    "default_generators",
    "get_registry",
]


def default_generators() -> tuple[TokenGenerator, ...]:
    return (
        TodayGenerator(),
        DateOfBirthGenerator(),
        UniqueIdGenerator(default_length=DEFAULT_UNIQUE_ID_LENGTH),
        FirstNameGenerator(),
        LastNameGenerator(),
    )


@cache
def get_registry() -> TokenGeneratorRegistry:
    """Registry of the default generators, built once per process."""
    return TokenGeneratorRegistry(default_generators())


@service
def token_generator_registry() -> TokenGeneratorRegistry:
    return get_registry()
