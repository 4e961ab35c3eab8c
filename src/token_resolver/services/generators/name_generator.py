from token_resolver.model.token import TokenKeyword
from token_resolver.services.generators.base import TokenContext, TokenGenerator


class FirstNameGenerator(TokenGenerator):
    keyword = TokenKeyword.FIRSTNAME

    def generate(self, context: TokenContext) -> str:
        return context.random_source.first_name()


class LastNameGenerator(TokenGenerator):
    keyword = TokenKeyword.LASTNAME

    def generate(self, context: TokenContext) -> str:
        return context.random_source.last_name()
