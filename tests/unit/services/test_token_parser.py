import pytest
from hamcrest import assert_that, calling, equal_to, is_, raises

from token_resolver.model.token import OffsetUnit, ParsedToken, TokenKeyword
from token_resolver.services.token_parser import TokenParser


class TestTokenParser:
    @pytest.mark.parametrize(
        ("token", "expected"),
        [
            ("<TODAY>", ParsedToken(keyword=TokenKeyword.TODAY)),
            ("<today>", ParsedToken(keyword=TokenKeyword.TODAY)),
            ("<TODAY+2>", ParsedToken(keyword=TokenKeyword.TODAY, offset=2, unit=OffsetUnit.DAYS)),
            ("<TODAY-2>", ParsedToken(keyword=TokenKeyword.TODAY, offset=-2, unit=OffsetUnit.DAYS)),
            ("<TODAY +3>", ParsedToken(keyword=TokenKeyword.TODAY, offset=3, unit=OffsetUnit.DAYS)),
            ("<TODAY+0>", ParsedToken(keyword=TokenKeyword.TODAY, offset=0, unit=OffsetUnit.DAYS)),
            ("<DOB>", ParsedToken(keyword=TokenKeyword.DOB)),
            ("<DOB-20Y>", ParsedToken(keyword=TokenKeyword.DOB, offset=-20, unit=OffsetUnit.YEARS)),
            ("<DOB -20Y>", ParsedToken(keyword=TokenKeyword.DOB, offset=-20, unit=OffsetUnit.YEARS)),
            ("<dob+5y>", ParsedToken(keyword=TokenKeyword.DOB, offset=5, unit=OffsetUnit.YEARS)),
            ("<UNIQUEID>", ParsedToken(keyword=TokenKeyword.UNIQUEID)),
            ("<UNIQUEID7>", ParsedToken(keyword=TokenKeyword.UNIQUEID, length=7)),
            ("<uniqueId6>", ParsedToken(keyword=TokenKeyword.UNIQUEID, length=6)),
            ("<UNIQUEID256>", ParsedToken(keyword=TokenKeyword.UNIQUEID, length=256)),
            ("<FIRSTNAME>", ParsedToken(keyword=TokenKeyword.FIRSTNAME)),
            ("<LastName>", ParsedToken(keyword=TokenKeyword.LASTNAME)),
        ],
    )
    def test_parse_valid_tokens(self, token, expected):
        parsed_token = TokenParser.parse(token)
        assert_that(parsed_token, is_(equal_to(expected)))

    @pytest.mark.parametrize(
        "token",
        [
            "04/03/2003",
            "Hello World",
            "",
            "<>",
            "<+2>",
            "<UNKNOWN>",
            "<TODAYS>",
            "< TODAY>",
            "<<TODAY>>",
            "prefix <TODAY>",
            "<TODAY> suffix",
            "<TODAY",
            "TODAY>",
        ],
    )
    def test_parse_invalid_tokens_raises_error(self, token):
        assert_that(
            calling(TokenParser.parse).with_args(token),
            raises(ValueError, pattern=r"Invalid token\."),
        )

    @pytest.mark.parametrize(
        "token",
        [
            "<TODAY+>",
            "<TODAY+2Y>",
            "<TODAY+2.5>",
            "<TODAY >",
            "<TODAY+٣>",
            "<DOB-20>",
            "<DOB-Y>",
            "<DOB-20D>",
            "<UNIQUEID0>",
            "<UNIQUEID257>",
            "<UNIQUEID5000000000>",
            "<UNIQUEID-5>",
            "<UNIQUEID 7>",
            "<FIRSTNAME1>",
            "<LASTNAME+2>",
        ],
    )
    def test_parse_invalid_token_format_raises_error(self, token):
        assert_that(
            calling(TokenParser.parse).with_args(token),
            raises(ValueError, pattern=r"Invalid token format\."),
        )
