"""Reporting period selector."""

from dataclasses import dataclass
from datetime import date

from src.domain.constants import (
    PERIOD_MODE_ALL,
    PERIOD_MODE_MONTH,
    PERIOD_MODE_YEAR,
    PERIOD_MODES,
)
from src.domain.errors import InvalidInputError


@dataclass(frozen=True)
class PeriodSelector:
    """Reporting window: a month, a full year, or all history.

    Attributes:
        mode: One of "month", "year" or "all".
        year: Calendar year for month and year modes.
        month: Calendar month (1-12) for month mode.
    """

    mode: str
    year: int | None = None
    month: int | None = None

    def __post_init__(self) -> None:
        if self.mode not in PERIOD_MODES:
            raise InvalidInputError(f"Unsupported period mode: {self.mode}")
        if self.mode in (PERIOD_MODE_MONTH, PERIOD_MODE_YEAR):
            if not isinstance(self.year, int) or isinstance(self.year, bool):
                raise InvalidInputError(
                    f"Period mode {self.mode} requires an integer year"
                )
        if self.mode == PERIOD_MODE_MONTH:
            if (
                not isinstance(self.month, int)
                or isinstance(self.month, bool)
                or not 1 <= self.month <= 12
            ):
                raise InvalidInputError(
                    f"Month must be between 1 and 12, got {self.month!r}"
                )

    @classmethod
    def for_month(cls, year: int, month: int) -> "PeriodSelector":
        return cls(mode=PERIOD_MODE_MONTH, year=year, month=month)

    @classmethod
    def for_year(cls, year: int) -> "PeriodSelector":
        return cls(mode=PERIOD_MODE_YEAR, year=year)

    @classmethod
    def all_time(cls) -> "PeriodSelector":
        return cls(mode=PERIOD_MODE_ALL)

    def matches(self, day: date) -> bool:
        """Return True when the date falls inside the period."""
        if self.mode == PERIOD_MODE_ALL:
            return True
        if self.mode == PERIOD_MODE_YEAR:
            return day.year == self.year
        return day.year == self.year and day.month == self.month


__all__ = ["PeriodSelector"]
