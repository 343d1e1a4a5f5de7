"""Unit tests for the calorie log domain model."""

import pytest

from calorie_ledger.domain.calories import CalorieLog, Day, parse_amount
from calorie_ledger.utils.exceptions import InvalidAmountError, InvalidDayError


def test_day_order_and_number() -> None:
    """Test that days keep week order and one-based indexes."""
    labels = [day.value for day in Day]
    expected = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]
    if labels != expected:
        raise AssertionError(f"Expected {expected}, got {labels}")

    if Day.from_index(1) is not Day.MONDAY:
        raise AssertionError("Expected index 1 to be Monday")
    if Day.from_index(7) is not Day.SUNDAY:
        raise AssertionError("Expected index 7 to be Sunday")
    if Day.WEDNESDAY.number != 3:
        raise AssertionError(f"Expected Wednesday index 3, got {Day.WEDNESDAY.number}")


@pytest.mark.parametrize("index", [0, 8, -1])
def test_day_from_index_out_of_range(index: int) -> None:
    """Test that indexes outside 1-7 are rejected."""
    with pytest.raises(InvalidDayError):
        Day.from_index(index)


def test_day_coerce_accepts_labels_and_digit_strings() -> None:
    """Test day resolution from labels, digit strings and enum members."""
    if Day.coerce(" friday ") is not Day.FRIDAY:
        raise AssertionError("Expected case-insensitive label lookup")
    if Day.coerce("2") is not Day.TUESDAY:
        raise AssertionError("Expected digit string to be a menu index")
    if Day.coerce(Day.SATURDAY) is not Day.SATURDAY:
        raise AssertionError("Expected Day to resolve to itself")

    with pytest.raises(InvalidDayError):
        Day.coerce("Someday")


def test_parse_amount() -> None:
    """Test integer parsing of calorie amounts."""
    if parse_amount(" 450 ") != 450:
        raise AssertionError("Expected surrounding whitespace to be ignored")
    if parse_amount(-20) != -20:
        raise AssertionError("Expected negative amounts to be accepted")

    if parse_amount("+15") != 15:
        raise AssertionError("Expected an explicit plus sign to be accepted")

    for bad in ["abc", "12.5", "", "1_000", "1e3", "--5", True, 3.0]:
        with pytest.raises(InvalidAmountError):
            parse_amount(bad)


def test_add_entry_appends_in_order() -> None:
    """Test that entries are appended per day, duplicates kept."""
    log = CalorieLog()
    log.add_entry(Day.MONDAY, 500)
    log.add_entry("Monday", "300")
    log.add_entry(1, 300)

    entries = log.entries_for(Day.MONDAY)
    if entries != [500, 300, 300]:
        raise AssertionError(f"Expected [500, 300, 300], got {entries}")


def test_add_entry_invalid_input_does_not_mutate() -> None:
    """Test that a rejected day or amount leaves the log unchanged."""
    log = CalorieLog()
    log.add_entry(Day.TUESDAY, 200)

    with pytest.raises(InvalidDayError):
        log.add_entry(9, 100)
    with pytest.raises(InvalidAmountError):
        log.add_entry(Day.TUESDAY, "lots")
    with pytest.raises(InvalidAmountError):
        log.add_entry(Day.WEDNESDAY, "lots")

    if log.all_entries() != {**{day: [] for day in Day}, Day.TUESDAY: [200]}:
        raise AssertionError(f"Unexpected log contents: {log.all_entries()}")
    if Day.WEDNESDAY in log.days:
        raise AssertionError("Rejected amount must not create an empty day")


def test_entries_for_returns_copy() -> None:
    """Test that reading entries cannot mutate the log."""
    log = CalorieLog()
    log.add_entry(Day.MONDAY, 100)

    entries = log.entries_for(Day.MONDAY)
    entries.append(999)

    if log.entries_for(Day.MONDAY) != [100]:
        raise AssertionError("Expected entries_for to return a copy")
    if log.entries_for(Day.SUNDAY) != []:
        raise AssertionError("Expected absent day to read as empty")
    if Day.SUNDAY in log.days:
        raise AssertionError("Reading an absent day must not create it")


def test_weekly_breakdown_and_total() -> None:
    """Test breakdown rows and that the weekly total matches their sums."""
    log = CalorieLog()
    log.add_entry(Day.MONDAY, 500)
    log.add_entry(Day.MONDAY, 300)
    log.add_entry(Day.TUESDAY, 400)

    rows = log.weekly_breakdown()

    if [row.day for row in rows] != list(Day):
        raise AssertionError("Expected one breakdown row per day in week order")
    if rows[0].entries != [500, 300] or rows[0].total != 800:
        raise AssertionError(f"Unexpected Monday row: {rows[0]}")
    if rows[1].entries != [400] or rows[1].total != 400:
        raise AssertionError(f"Unexpected Tuesday row: {rows[1]}")
    if any(row.has_data for row in rows[2:]):
        raise AssertionError("Expected no data for Wednesday to Sunday")

    if log.weekly_total() != 1200:
        raise AssertionError(f"Expected total 1200, got {log.weekly_total()}")
    if log.weekly_total() != sum(row.total for row in rows):
        raise AssertionError("Weekly total must equal the sum of daily totals")


def test_monthly_estimate() -> None:
    """Test monthly extrapolation and truncation."""
    log = CalorieLog()
    if log.weekly_total() != 0 or log.monthly_estimate() != 0:
        raise AssertionError("Expected empty log to total and estimate 0")

    log.add_entry(Day.FRIDAY, 700)
    if log.monthly_estimate() != 3000:
        raise AssertionError(f"Expected 3000, got {log.monthly_estimate()}")

    log.add_entry(Day.SATURDAY, 500)
    # 1200 / 7 * 30 = 5142.857...
    if log.monthly_estimate() != 5142:
        raise AssertionError(f"Expected 5142, got {log.monthly_estimate()}")


def test_monthly_estimate_truncates_toward_zero() -> None:
    """Test that negative totals truncate toward zero rather than flooring."""
    log = CalorieLog()
    log.add_entry(Day.MONDAY, -100)

    # -100 / 7 * 30 = -428.57...
    if log.monthly_estimate() != -428:
        raise AssertionError(f"Expected -428, got {log.monthly_estimate()}")


def test_populated_days_and_counts() -> None:
    """Test helpers describing which days hold data."""
    log = CalorieLog()
    if not log.is_empty():
        raise AssertionError("Expected new log to be empty")

    log.add_entry(Day.SUNDAY, 10)
    log.add_entry(Day.MONDAY, 20)
    log.add_entry(Day.MONDAY, 30)
    log.set_entries(Day.THURSDAY, [])

    if log.populated_days() != [Day.MONDAY, Day.SUNDAY]:
        raise AssertionError(f"Unexpected populated days: {log.populated_days()}")
    if log.entry_count() != 3:
        raise AssertionError(f"Expected 3 entries, got {log.entry_count()}")
