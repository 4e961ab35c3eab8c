from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date

from token_resolver.common.random_source import RandomSource
from token_resolver.model.token import ParsedToken, TokenKeyword


@dataclass
class TokenContext:
    """Context object containing all data needed to generate a token value.

    Attributes:
        token: The parsed token being resolved (e.g., '<TODAY+2>')
        today: The reference date for this call, taken from the clock
        random_source: Randomness for identifiers and names
    """

    token: ParsedToken
    today: date
    random_source: RandomSource


class TokenGenerator(ABC):
    """Abstract base class for token generators.

    Token generators compute the concrete value a placeholder stands for.
    Each generator is responsible for a single keyword (e.g., TODAY).

    To create a new token generator:
    1. Subclass TokenGenerator
    2. Set the `keyword` class attribute to the token keyword (e.g., TokenKeyword.TODAY)
    3. Implement the `generate` method
    4. Add an instance to `default_generators()`, or pass one to a TokenGeneratorRegistry
    """

    keyword: TokenKeyword

    @abstractmethod
    def generate(self, context: TokenContext) -> str:
        """Generate the value for a token.

        Args:
            context: TokenContext containing all necessary data

        Returns:
            The generated value as a string

        Raises:
            ValueError: If the value cannot be generated
        """
