from token_resolver.config.constants import DEFAULT_UNIQUE_ID_LENGTH, UNIQUE_ID_ALPHABET
from token_resolver.model.token import TokenKeyword
from token_resolver.services.generators.base import TokenContext, TokenGenerator


class UniqueIdGenerator(TokenGenerator):
    """Generator for random alphanumeric identifiers.

    Example tokens: <UNIQUEID> gives 12 characters, <UNIQUEID7> gives exactly 7.
    Characters are drawn from [A-Za-z0-9].
    """

    keyword = TokenKeyword.UNIQUEID

    def __init__(self, default_length: int = DEFAULT_UNIQUE_ID_LENGTH, alphabet: str = UNIQUE_ID_ALPHABET) -> None:
        self.default_length = default_length
        self.alphabet = alphabet

    def generate(self, context: TokenContext) -> str:
        length = context.token.length or self.default_length
        return context.random_source.choices(self.alphabet, length)
