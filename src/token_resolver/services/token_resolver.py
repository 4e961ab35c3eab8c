import logging
from dataclasses import Field, fields, is_dataclass
from typing import Any

from wireup import service

from token_resolver.common.clock import Clock
from token_resolver.common.random_source import RandomSource
from token_resolver.model.resolution import Literal, Resolution, Resolved
from token_resolver.services.generators import TokenContext, TokenGeneratorRegistry
from token_resolver.services.token_parser import TokenParser

logger = logging.getLogger(__name__)


@service
class TokenResolver:
    """Turns test data placeholders such as ``<TODAY+2>`` or ``<UNIQUEID6>`` into values.

    Anything that is not a whole-string token is passed through unchanged,
    as are tokens with a keyword or argument that cannot be handled. A
    misspelt placeholder therefore shows up verbatim in the test data
    rather than failing the test run.
    """

    def __init__(self, clock: Clock, random_source: RandomSource, registry: TokenGeneratorRegistry) -> None:
        self.clock = clock
        self.random_source = random_source
        self.registry = registry

    def resolve(self, value: str | None) -> str | None:
        if not isinstance(value, str) or not value:
            return value
        return self.resolve_token(value).value

    def resolve_token(self, value: str) -> Resolution:
        try:
            parsed_token = TokenParser.parse(value)
        except ValueError:
            logger.debug("passing through value that is not a token", extra={"value": value})
            return Literal(value)

        context = TokenContext(token=parsed_token, today=self.clock.today(), random_source=self.random_source)
        try:
            generated = self.registry.generate(context)
        except (ValueError, OverflowError):
            logger.debug("passing through token that could not be generated", extra={"value": value}, exc_info=True)
            return Literal(value)

        logger.debug("resolved token", extra={"value": value, "keyword": parsed_token.keyword})
        return Resolved(generated)

    def find_and_replace_tokens[T](self, data_class: T) -> T:
        if not is_dataclass(data_class) or isinstance(data_class, type):
            return data_class
        for class_field in fields(data_class):
            value = getattr(data_class, class_field.name)
            if isinstance(value, str):
                setattr(data_class, class_field.name, self.resolve(value))
            elif isinstance(value, list):
                self.process_list(class_field, data_class, value)
            elif isinstance(value, dict):
                self.process_dict(class_field, data_class, value)
            elif is_dataclass(value):
                setattr(data_class, class_field.name, self.find_and_replace_tokens(value))
        return data_class

    def process_dict(self, class_field: Field, data_class: object, value: dict[Any, Any]) -> None:
        for key, dict_value in value.items():
            if isinstance(dict_value, str):
                value[key] = self.resolve(dict_value)
            elif is_dataclass(dict_value):
                value[key] = self.find_and_replace_tokens(dict_value)
        setattr(data_class, class_field.name, value)

    def process_list(self, class_field: Field, data_class: object, value: list[Any]) -> None:
        for i, item in enumerate(value):
            if is_dataclass(item):
                value[i] = self.find_and_replace_tokens(item)
            elif isinstance(item, str):
                value[i] = self.resolve(item)
        setattr(data_class, class_field.name, value)
