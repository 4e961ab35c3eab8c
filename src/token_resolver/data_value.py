from functools import cache

from token_resolver.container import create_container
from token_resolver.services.token_resolver import TokenResolver


@cache
def default_resolver() -> TokenResolver:
    return create_container().get(TokenResolver)


def data_value_handler(value: str | None) -> str | None:
    """Resolve a test data placeholder, e.g. ``data_value_handler("<TODAY+2>")``.

    Returns the value unchanged when it is not a recognised token.
    """
    return default_resolver().resolve(value)
