"""
Reporting service.

Read-only views over a calorie log: weekly breakdown, weekly total, monthly
estimate and the raw entry listing, plus their text rendering.
"""

from calorie_ledger.domain.calories import CalorieLog, Day, DayBreakdown
from calorie_ledger.utils.parameters import ReportingConfig

NO_DATA = "No data"


class ReportingService:
    """
    Service for reporting on a calorie log.

    Never mutates the log it reports on.
    """

    def __init__(self, log: CalorieLog, config: ReportingConfig) -> None:
        """
        Initialize reporting service.

        Args:
            log: Calorie log to report on.
            config: Reporting configuration.
        """
        self.log = log
        self.config = config

    def weekly_breakdown(self) -> list[DayBreakdown]:
        """Per-day entries and sums, in week order."""
        return self.log.weekly_breakdown()

    def weekly_total(self) -> int:
        """Sum of all entries in the week."""
        return self.log.weekly_total()

    def monthly_estimate(self) -> int:
        """Weekly total scaled to a month, truncated toward zero."""
        return self.log.monthly_estimate(
            days_per_week=self.config.days_per_week,
            days_per_month=self.config.days_per_month,
        )

    def all_entries(self) -> dict[Day, list[int]]:
        """Raw entries per day, in week order."""
        return self.log.all_entries()

    @staticmethod
    def _format_entries(entries: list[int]) -> str:
        return "[" + ", ".join(str(value) for value in entries) + "]"

    def format_breakdown(self) -> list[str]:
        """
        Render the weekly breakdown.

        Returns:
            One line per day, e.g. ``Monday: [500, 300] (Total: 800 cal)``.
        """
        lines = []
        for row in self.weekly_breakdown():
            if row.has_data:
                detail = f"{self._format_entries(row.entries)} (Total: {row.total} {self.config.unit})"
            else:
                detail = NO_DATA
            lines.append(f"{row.day.value}: {detail}")
        return lines

    def format_all_entries(self) -> list[str]:
        """Render the raw entries, one line per day."""
        return [
            f"{day.value}: {self._format_entries(entries) if entries else NO_DATA}"
            for day, entries in self.all_entries().items()
        ]

    def format_weekly_total(self) -> str:
        return f"Total Weekly Calories: {self.weekly_total()} {self.config.unit}"

    def format_monthly_estimate(self) -> str:
        return f"Estimated Monthly Calories: {self.monthly_estimate()} {self.config.unit}"
