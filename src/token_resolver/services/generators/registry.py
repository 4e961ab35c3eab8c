from collections.abc import Iterable

from token_resolver.model.token import TokenKeyword
from token_resolver.services.generators.base import TokenContext, TokenGenerator


class TokenGeneratorRegistry:
    """Keyword lookup over a fixed set of token generators.

    The set is given at construction and not changed afterwards, so one
    registry can be shared by every resolver in the process. A later
    generator replaces an earlier one with the same keyword.

        registry = TokenGeneratorRegistry([TodayGenerator(), UniqueIdGenerator(default_length=8)])
        registry.generate(context)
    """

    def __init__(self, generators: Iterable[TokenGenerator] = ()) -> None:
        self._generators: dict[str, TokenGenerator] = {generator.keyword: generator for generator in generators}

    def get_generator(self, keyword: str) -> TokenGenerator | None:
        return self._generators.get(keyword.upper())

    def has_generator(self, keyword: str) -> bool:
        return keyword.upper() in self._generators

    def generate(self, context: TokenContext) -> str:
        """Generate the value for the token in the context.

        Raises:
            ValueError: If none of the generators handles the token keyword
        """
        keyword: TokenKeyword = context.token.keyword
        generator = self.get_generator(keyword)
        if not generator:
            message = f"No generator registered for keyword: {keyword}"
            raise ValueError(message)

        return generator.generate(context)
