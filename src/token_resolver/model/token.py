from dataclasses import dataclass
from enum import StrEnum


class TokenKeyword(StrEnum):
    TODAY = "TODAY"
    DOB = "DOB"
    UNIQUEID = "UNIQUEID"
    FIRSTNAME = "FIRSTNAME"
    LASTNAME = "LASTNAME"


class OffsetUnit(StrEnum):
    DAYS = "DAYS"
    YEARS = "YEARS"


@dataclass(frozen=True)
class ParsedToken:
    """
    A class to represent a parsed token.
    ...
    Attributes
    ----------
    keyword : TokenKeyword
        Example: TokenKeyword.TODAY for "<TODAY+2>"
    offset : int | None
        Signed offset, example: -20 for "<DOB-20Y>"
    unit : OffsetUnit | None
        Example: OffsetUnit.YEARS for "<DOB-20Y>", OffsetUnit.DAYS for "<TODAY+2>"
    length : int | None
        Example: 7 for "<UNIQUEID7>"
    """

    keyword: TokenKeyword
    offset: int | None = None
    unit: OffsetUnit | None = None
    length: int | None = None
