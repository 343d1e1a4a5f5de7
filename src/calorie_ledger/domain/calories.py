"""
Calorie domain models.

This module defines the fixed seven-day week and the calorie log that maps
each day to the calorie entries recorded for it during a session.
"""

import re
from enum import Enum

from pydantic import BaseModel, Field

from calorie_ledger.utils.exceptions import InvalidAmountError, InvalidDayError

INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


class Day(str, Enum):
    """Enumeration of the seven day labels, in week order."""

    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"
    SUNDAY = "Sunday"

    @property
    def number(self) -> int:
        """One-based position of the day in the week (Monday is 1)."""
        return list(Day).index(self) + 1

    @classmethod
    def from_index(cls, index: int) -> "Day":
        """
        Look up a day by its one-based menu index.

        Args:
            index: Position in the week, 1 (Monday) to 7 (Sunday).

        Returns:
            Matching day.

        Raises:
            InvalidDayError: If the index is outside 1-7.
        """
        days = list(cls)
        if isinstance(index, bool) or not isinstance(index, int) or not 1 <= index <= len(days):
            raise InvalidDayError(f"Day index must be between 1 and {len(days)}, got {index!r}")
        return days[index - 1]

    @classmethod
    def from_label(cls, label: str) -> "Day":
        """
        Look up a day by its label, ignoring case and surrounding whitespace.

        Raises:
            InvalidDayError: If the label is not a day name.
        """
        wanted = label.strip().lower()
        for day in cls:
            if day.value.lower() == wanted:
                return day
        raise InvalidDayError(f"Unknown day: {label!r}")

    @classmethod
    def coerce(cls, value: "Day | int | str") -> "Day":
        """
        Resolve a day given as a Day, a menu index, or a label.

        Digit strings such as "3" are treated as menu indexes.
        """
        if isinstance(value, Day):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            return cls.from_index(value)
        if isinstance(value, str):
            stripped = value.strip()
            if stripped.isdigit():
                return cls.from_index(int(stripped))
            return cls.from_label(stripped)
        raise InvalidDayError(f"Unsupported day value: {value!r}")


def parse_amount(value: int | str) -> int:
    """
    Convert a calorie amount to an integer.

    Only an optional sign followed by ASCII digits is accepted, so forms such
    as "1_000" or "12.5" are rejected. No range check is applied: zero and
    negative amounts are accepted.

    Args:
        value: Integer, or string holding an integer.

    Returns:
        The amount as an int.

    Raises:
        InvalidAmountError: If the value is not an integer.
    """
    if isinstance(value, bool):
        raise InvalidAmountError(f"Calorie amount must be an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        stripped = value.strip()
        if INTEGER_PATTERN.fullmatch(stripped):
            return int(stripped)
    raise InvalidAmountError(f"Calorie amount must be an integer, got {value!r}")


class DayBreakdown(BaseModel):
    """Entries recorded for one day together with their sum."""

    day: Day = Field(description="Day of the week")
    entries: list[int] = Field(default_factory=list, description="Calorie entries in insertion order")
    total: int = Field(0, description="Sum of the entries")

    @property
    def has_data(self) -> bool:
        """False when no entries were recorded for the day."""
        return bool(self.entries)


class CalorieLog(BaseModel):
    """
    Calorie entries per day of the week.

    A day missing from ``days`` is equivalent to a day with no entries.
    Entries are append-only: there is no edit or delete operation.
    """

    days: dict[Day, list[int]] = Field(
        default_factory=dict, description="Mapping of day to its calorie entries"
    )

    def entries_for(self, day: Day | int | str, create: bool = False) -> list[int]:
        """
        Get the entries recorded for a day.

        Args:
            day: Day, menu index, or label.
            create: If True, return the stored list, creating it when absent.
                Otherwise return a copy, leaving the log untouched.

        Returns:
            Calorie entries for the day.
        """
        resolved = Day.coerce(day)
        if create:
            return self.days.setdefault(resolved, [])
        return list(self.days.get(resolved, []))

    def add_entry(self, day: Day | int | str, amount: int | str) -> int:
        """
        Append a calorie amount to a day.

        Both arguments are validated before the log is touched.

        Args:
            day: Day, menu index (1-7), or label.
            amount: Integer amount, or a string holding one.

        Returns:
            The amount that was recorded.

        Raises:
            InvalidDayError: If the day is not valid.
            InvalidAmountError: If the amount is not an integer.
        """
        resolved = Day.coerce(day)
        calories = parse_amount(amount)
        self.entries_for(resolved, create=True).append(calories)
        return calories

    def set_entries(self, day: Day | int | str, entries: list[int]) -> None:
        """Replace all entries for a day."""
        self.days[Day.coerce(day)] = list(entries)

    def populated_days(self) -> list[Day]:
        """Days holding at least one entry, in week order."""
        return [day for day in Day if self.days.get(day)]

    def is_empty(self) -> bool:
        """True when no day holds an entry."""
        return not self.populated_days()

    def entry_count(self) -> int:
        """Number of entries across the week."""
        return sum(len(entries) for entries in self.days.values())

    def all_entries(self) -> dict[Day, list[int]]:
        """All seven days in week order with copies of their entries."""
        return {day: list(self.days.get(day, [])) for day in Day}

    def weekly_breakdown(self) -> list[DayBreakdown]:
        """Per-day entries and sums for all seven days, in week order."""
        return [
            DayBreakdown(day=day, entries=entries, total=sum(entries))
            for day, entries in self.all_entries().items()
        ]

    def weekly_total(self) -> int:
        """Sum of every entry in the week."""
        return sum(sum(entries) for entries in self.days.values())

    def monthly_estimate(self, days_per_week: int = 7, days_per_month: int = 30) -> int:
        """
        Extrapolate the weekly total to a month.

        The weekly total is always divided by the full week length, even when
        only some days have entries. The result is truncated toward zero.
        """
        return int((self.weekly_total() / float(days_per_week)) * days_per_month)
