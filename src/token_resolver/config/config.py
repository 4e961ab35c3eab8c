import logging
import os
from functools import cache
from typing import Any, NewType

from token_resolver.config.constants import DEFAULT_FAKER_LOCALE

LOG_LEVEL = logging.getLevelNamesMapping().get(os.getenv("LOG_LEVEL", ""), logging.WARNING)

FakerLocale = NewType("FakerLocale", str)
RandomSeed = NewType("RandomSeed", int)


@cache
def config() -> dict[str, Any]:
    faker_locale = FakerLocale(os.getenv("FAKER_LOCALE", DEFAULT_FAKER_LOCALE))
    random_seed = os.getenv("TOKEN_RANDOM_SEED")
    log_level = LOG_LEVEL

    return {
        "faker_locale": faker_locale,
        "random_seed": RandomSeed(int(random_seed)) if random_seed else None,
        "log_level": log_level,
    }
