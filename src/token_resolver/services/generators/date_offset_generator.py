from datetime import date

from dateutil.relativedelta import relativedelta

from token_resolver.config.constants import DATE_FORMAT
from token_resolver.model.token import OffsetUnit, TokenKeyword
from token_resolver.services.generators.base import TokenContext, TokenGenerator


class DateOffsetGenerator(TokenGenerator):
    """Generator for dates relative to the reference date.

    The token may carry a signed offset in days or years:
    - <TODAY> is the reference date itself
    - <TODAY+2> is two calendar days later, rolling over month and year ends
    - <DOB-20Y> is twenty years earlier; 29 February becomes 28 February
      when the target year is not a leap year

    The result is always formatted as MM/DD/YYYY.
    """

    def __init__(self, date_format: str = DATE_FORMAT) -> None:
        self.date_format = date_format

    def generate(self, context: TokenContext) -> str:
        """Calculate the offset date.

        Raises:
            ValueError: If the offset takes the date outside the supported range
            OverflowError: If the offset is too large to represent
        """
        shifted = self._apply_offset(context.today, context.token.offset, context.token.unit)
        return shifted.strftime(self.date_format)

    @staticmethod
    def _apply_offset(reference: date, offset: int | None, unit: OffsetUnit | None) -> date:
        if not offset:
            return reference
        if unit == OffsetUnit.YEARS:
            return reference + relativedelta(years=offset)
        return reference + relativedelta(days=offset)


class TodayGenerator(DateOffsetGenerator):
    keyword = TokenKeyword.TODAY


class DateOfBirthGenerator(DateOffsetGenerator):
    keyword = TokenKeyword.DOB
