import re
from typing import ClassVar

from token_resolver.config.constants import MAX_UNIQUE_ID_LENGTH
from token_resolver.model.token import OffsetUnit, ParsedToken, TokenKeyword

TOKEN_PATTERN = re.compile(r"<(?P<keyword>[A-Z]+)(?P<argument>.*)>", re.IGNORECASE | re.ASCII | re.DOTALL)
LENGTH_PATTERN = re.compile(r"[0-9]+", re.ASCII)


class TokenParser:
    OFFSET_PATTERNS: ClassVar[dict[TokenKeyword, tuple[re.Pattern[str], OffsetUnit]]] = {
        TokenKeyword.TODAY: (re.compile(r"\s*(?P<sign>[+-])(?P<amount>[0-9]+)", re.ASCII), OffsetUnit.DAYS),
        TokenKeyword.DOB: (
            re.compile(r"\s*(?P<sign>[+-])(?P<amount>[0-9]+)Y", re.IGNORECASE | re.ASCII),
            OffsetUnit.YEARS,
        ),
    }

    @staticmethod
    def parse(token: str) -> ParsedToken:
        """Parses a token into its parts.
        Steps:
        Check the whole string is wrapped in < >, partial matches are not tokens
        Split the body into the alphabetic keyword and the trailing argument
        Check the keyword is one we know, ignoring case
        Parse the argument: a signed offset for dates, a length for unique ids
        Return a ParsedToken object
        """

        token_match = TOKEN_PATTERN.fullmatch(token)
        if not token_match:
            message = "Invalid token."
            raise ValueError(message)

        try:
            keyword = TokenKeyword(token_match.group("keyword").upper())
        except ValueError as error:
            message = "Invalid token."
            raise ValueError(message) from error

        argument = token_match.group("argument")
        if not argument:
            return ParsedToken(keyword=keyword)

        if keyword in TokenParser.OFFSET_PATTERNS:
            return TokenParser._parse_offset(keyword, argument)

        if keyword == TokenKeyword.UNIQUEID:
            return TokenParser._parse_length(keyword, argument)

        message = "Invalid token format."
        raise ValueError(message)

    @staticmethod
    def _parse_offset(keyword: TokenKeyword, argument: str) -> ParsedToken:
        pattern, unit = TokenParser.OFFSET_PATTERNS[keyword]
        offset_match = pattern.fullmatch(argument)
        if not offset_match:
            message = "Invalid token format."
            raise ValueError(message)

        amount = int(offset_match.group("amount"))
        offset = -amount if offset_match.group("sign") == "-" else amount
        return ParsedToken(keyword=keyword, offset=offset, unit=unit)

    @staticmethod
    def _parse_length(keyword: TokenKeyword, argument: str) -> ParsedToken:
        if not LENGTH_PATTERN.fullmatch(argument) or not 1 <= int(argument) <= MAX_UNIQUE_ID_LENGTH:
            message = "Invalid token format."
            raise ValueError(message)

        return ParsedToken(keyword=keyword, length=int(argument))
