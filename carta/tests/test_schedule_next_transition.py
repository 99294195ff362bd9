import pathlib
import sys
from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

sys.path.append(str(pathlib.Path(__file__).resolve().parents[2]))

from carta.app.pricing import schedule  # noqa: E402
from carta.app.pricing.schedule import NO_SCHEDULE  # noqa: E402

TZ = "America/Santiago"
SANTIAGO = ZoneInfo(TZ)
HOUR_MS = 60 * 60 * 1000


def _discount(**overrides):
    data = {
        "id": "d1",
        "category_id": "drinks",
        "name": "Happy hour",
        "discount_percentage": 25,
        "days_of_week": [5],
        "start_time": "17:00",
        "end_time": "19:00",
        "is_active": True,
    }
    data.update(overrides)
    return data


def _at(day, hour, minute, second=0):
    return datetime(2024, 1, day, hour, minute, second, tzinfo=SANTIAGO)


def test_active_window_counts_down_to_its_end():
    result = schedule.next_transition(_discount(), TZ, _at(5, 18, 0))
    assert result.is_active_now is True
    assert result.millis_until == HOUR_MS
    assert result.next_transition_at == _at(5, 19, 0)
    assert result.day_label == "Active now"


def test_inactive_window_later_today():
    result = schedule.next_transition(_discount(), TZ, _at(5, 10, 0))
    assert result.is_active_now is False
    assert result.next_transition_at == _at(5, 17, 0)
    assert result.millis_until == 7 * HOUR_MS
    assert result.day_label == "Today"


def test_scans_forward_to_next_scheduled_day():
    discount = _discount(days_of_week=[0])
    result = schedule.next_transition(discount, TZ, _at(8, 12, 0))  # Monday
    assert result.is_active_now is False
    assert result.next_transition_at == _at(14, 17, 0)  # following Sunday
    assert result.millis_until == 6 * 24 * HOUR_MS + 5 * HOUR_MS
    assert result.day_label == "Sunday"


def test_window_already_over_today_wraps_to_next_week():
    result = schedule.next_transition(_discount(), TZ, _at(5, 20, 0))
    assert result.next_transition_at == _at(12, 17, 0)
    assert result.day_label == "Friday"


def test_tomorrow_is_labelled_by_weekday():
    discount = _discount(days_of_week=[5, 6])
    result = schedule.next_transition(discount, TZ, _at(5, 20, 0))
    assert result.next_transition_at == _at(6, 17, 0)
    assert result.day_label == "Saturday"


@pytest.mark.parametrize(
    "now,end,millis",
    [
        (_at(5, 22, 0), _at(6, 2, 0), 4 * HOUR_MS),
        (_at(5, 23, 30), _at(6, 2, 0), 2 * HOUR_MS + HOUR_MS // 2),
        (_at(6, 1, 30), _at(6, 2, 0), HOUR_MS // 2),
    ],
)
def test_midnight_crossing_window_ends_next_day(now, end, millis):
    discount = _discount(start_time="22:00", end_time="02:00")
    result = schedule.next_transition(discount, TZ, now)
    assert result.is_active_now is True
    assert result.next_transition_at == end
    assert result.millis_until == millis


def test_midnight_crossing_window_opens_later_today():
    discount = _discount(start_time="22:00", end_time="02:00")
    # Friday 01:00 belongs to Thursday's window, which is not scheduled
    result = schedule.next_transition(discount, TZ, _at(5, 1, 0))
    assert result.is_active_now is False
    assert result.next_transition_at == _at(5, 22, 0)
    assert result.day_label == "Today"


def test_countdown_is_never_negative():
    result = schedule.next_transition(_discount(), TZ, _at(5, 19, 0, 30))
    assert result.is_active_now is True
    assert result.millis_until == 0


def test_dst_countdown_uses_elapsed_time():
    # New York springs forward at 02:00 on Sunday 2024-03-10.
    tz = "America/New_York"
    discount = _discount(days_of_week=[0], start_time="01:00", end_time="05:00")
    now = datetime(2024, 3, 10, 1, 30, tzinfo=ZoneInfo(tz))
    result = schedule.next_transition(discount, tz, now)
    assert result.is_active_now is True
    assert result.next_transition_at == datetime(2024, 3, 10, 9, 0, tzinfo=timezone.utc)
    assert result.millis_until == 2 * HOUR_MS + HOUR_MS // 2


def test_result_is_expressed_in_restaurant_timezone():
    instant = datetime(2024, 1, 5, 13, 0, tzinfo=timezone.utc)  # 10:00 in Santiago
    result = schedule.next_transition(_discount(), TZ, instant)
    assert result.next_transition_at.utcoffset() == timedelta(hours=-3)
    assert result.next_transition_at.hour == 17


@pytest.mark.parametrize(
    "overrides,tz",
    [
        ({"is_active": False}, TZ),
        ({"days_of_week": []}, TZ),
        ({"days_of_week": [9]}, TZ),
        ({"start_time": "noon"}, TZ),
        ({"end_time": "24:00"}, TZ),
        ({}, "Not/AZone"),
        ({}, "America"),
        ({}, "a" * 300),
    ],
)
def test_no_schedule_instead_of_errors(overrides, tz):
    result = schedule.next_transition(_discount(**overrides), tz, _at(5, 18, 0))
    assert result == NO_SCHEDULE
    assert result.next_transition_at is None
    assert result.millis_until is None


def test_spanish_labels():
    assert schedule.next_transition(_discount(), TZ, _at(5, 18, 0), lang="es").day_label == "Activo ahora"
    assert schedule.next_transition(_discount(), TZ, _at(5, 10, 0), lang="es").day_label == "Hoy"
    sunday_only = _discount(days_of_week=[0])
    assert schedule.next_transition(sunday_only, TZ, _at(8, 12, 0), lang="es").day_label == "Domingo"


def test_is_deterministic_for_fixed_inputs():
    discount = _discount(days_of_week=[0, 3])
    now = _at(9, 8, 15, 42)
    results = {schedule.next_transition(discount, TZ, now) for _ in range(10)}
    assert len(results) == 1
