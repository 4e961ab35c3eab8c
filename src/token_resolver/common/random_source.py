import logging
import random
from collections.abc import Sequence
from typing import Annotated

from faker import Faker
from wireup import Inject, service

from token_resolver.config.config import FakerLocale, RandomSeed

logger = logging.getLogger(__name__)


@service
class RandomSource:
    """Randomness for generated identifiers and names.

    Identifiers come from a ``random.Random`` instance and names from a
    ``Faker`` instance for the configured locale. When a seed is given both
    are seeded with it, so a run can be reproduced.
    """

    def __init__(
        self,
        faker_locale: Annotated[FakerLocale, Inject(param="faker_locale")],
        random_seed: Annotated[RandomSeed | None, Inject(param="random_seed")],
    ) -> None:
        self._random = random.Random(random_seed)  # noqa: S311
        self._faker = Faker(faker_locale)
        if random_seed is not None:
            self._faker.seed_instance(random_seed)
            logger.info("random source seeded", extra={"random_seed": random_seed, "faker_locale": faker_locale})

    def choices(self, alphabet: Sequence[str], k: int) -> str:
        return "".join(self._random.choices(alphabet, k=k))

    def first_name(self) -> str:
        return self._faker.first_name()

    def last_name(self) -> str:
        return self._faker.last_name()
