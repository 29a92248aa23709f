import datetime as dt
from typing import NamedTuple, Optional, Tuple


class YearMonth(NamedTuple):
    year: int
    month: int  # 1-12

    @classmethod
    def parse(cls, value: str) -> "YearMonth":
        """Decode a `YYYY-MM` string. Raises ValueError when malformed."""
        parts = value.split("-")
        if len(parts) != 2 or len(parts[0]) != 4 or len(parts[1]) != 2 or not (parts[0] + parts[1]).isdigit():
            raise ValueError(f"Month must look like YYYY-MM, got {value!r}")
        year, month = int(parts[0]), int(parts[1])
        if not 1 <= month <= 12:
            raise ValueError(f"Month must be between 01 and 12, got {value!r}")
        return cls(year, month)

    @classmethod
    def of(cls, day: dt.date) -> "YearMonth":
        return cls(day.year, day.month)

    def previous(self) -> "YearMonth":
        if self.month == 1:
            return YearMonth(self.year - 1, 12)
        return YearMonth(self.year, self.month - 1)

    def next(self) -> "YearMonth":
        if self.month == 12:
            return YearMonth(self.year + 1, 1)
        return YearMonth(self.year, self.month + 1)

    def bounds(self) -> Tuple[dt.date, dt.date]:
        """Half-open range [first day, first day of next month)."""
        following = self.next()
        return dt.date(self.year, self.month, 1), dt.date(following.year, following.month, 1)

    @property
    def label(self) -> str:
        return dt.date(self.year, self.month, 1).strftime("%B %Y")

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"


def resolve_month(value: Optional[str], today: dt.date) -> YearMonth:
    """Month from a query string, falling back to the month containing `today`."""
    if not value:
        return YearMonth.of(today)
    return YearMonth.parse(value)
