from datetime import date

import pytest

from taarana.cycle import CycleDataError, calculate_cycle, parse_cycle_data, phase_for_day

START = date(2024, 1, 1)


def test_day_eight_is_follicular():
    status = calculate_cycle(START, 28, today=date(2024, 1, 9))
    assert status.cycle_day == 9
    assert status.phase.id == "follicular"
    assert status.next_period_date == date(2024, 1, 29)
    assert status.days_until_next == 20
    assert not status.is_overdue


def test_start_day_is_day_one():
    status = calculate_cycle(START, 28, today=START)
    assert status.cycle_day == 1
    assert status.phase.id == "menstrual"
    assert status.days_until_next == 28


@pytest.mark.parametrize("day, phase", [
    (1, "menstrual"), (5, "menstrual"),
    (6, "follicular"), (13, "follicular"),
    (14, "ovulation"), (16, "ovulation"),
    (17, "luteal"), (28, "luteal"),
])
def test_phase_boundaries(day, phase):
    assert phase_for_day(day).id == phase


def test_days_past_the_last_range_fall_back_to_luteal():
    assert phase_for_day(33).id == "luteal"
    status = calculate_cycle(START, 35, today=date(2024, 2, 2))
    assert status.cycle_day == 33
    assert status.phase.id == "luteal"


def test_late_period_is_overdue():
    status = calculate_cycle(START, 28, today=date(2024, 2, 5))
    assert status.cycle_day == 8
    assert status.days_until_next == -7
    assert status.is_overdue


@pytest.mark.parametrize("length", [20, 36, "abc", "28.5", None, True, 28.9])
def test_bad_cycle_lengths(length):
    with pytest.raises(CycleDataError):
        calculate_cycle(START, length, today=date(2024, 1, 9))


def test_numeric_string_length_is_accepted():
    assert calculate_cycle(START, "30", today=START).cycle_length == 30


def test_future_start_is_rejected():
    with pytest.raises(CycleDataError, match="future"):
        calculate_cycle(date(2024, 2, 1), 28, today=START)


def test_to_dict():
    data = calculate_cycle(START, 28, today=date(2024, 1, 9)).to_dict("hi")
    assert data["day_of_cycle"] == 9
    assert data["progress"] == 32.1
    assert data["next_period"] == "2024-01-29"
    assert data["days_until_period"] == 20
    assert data["is_overdue"] is False
    assert data["phase"]["name"] == "फॉलिक्युलर चरण"
    assert data["phase"]["day_range"] == [6, 13]


def test_parse_cycle_data():
    assert parse_cycle_data({"last_period_date": "2024-01-01"}) == (START, 28)
    assert parse_cycle_data({"last_period_date": "2024-01-01", "cycle_length": 30}) == (START, 30)


@pytest.mark.parametrize("payload", [
    {},
    None,
    {"last_period_date": "01/01/2024"},
    {"last_period_date": "2024-01-01", "cycle_length": 40},
])
def test_parse_cycle_data_rejects_bad_payloads(payload):
    with pytest.raises(CycleDataError):
        parse_cycle_data(payload)


def test_whole_float_length_is_accepted():
    assert calculate_cycle(START, 30.0, today=START).cycle_length == 30
