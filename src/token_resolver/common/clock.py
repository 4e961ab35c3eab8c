from datetime import UTC, date, datetime

from wireup import service


@service
class Clock:
    """Source of the reference date that date tokens are calculated from."""

    def today(self) -> date:
        # Local calendar date, the date a browser under test would show.
        return datetime.now(tz=UTC).astimezone().date()
