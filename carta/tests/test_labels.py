import pathlib
import sys

import pytest

sys.path.append(str(pathlib.Path(__file__).resolve().parents[2]))

from carta.app.i18n import get_catalog, select_language  # noqa: E402
from carta.app.pricing.labels import (  # noqa: E402
    days_label,
    format_time_remaining,
    time_range_label,
)

MINUTE = 60_000
HOUR = 60 * MINUTE
DAY = 24 * HOUR


def test_time_range_label():
    assert time_range_label({"start_time": "17:00", "end_time": "19:00"}) == "17:00 - 19:00"


@pytest.mark.parametrize(
    "days,lang,expected",
    [
        ([5, 1, 3, 3], "en", "Mon, Wed, Fri"),
        ([0, 6], "es", "Dom, Sáb"),
        (list(range(7)), "en", "Every day"),
        ([6, 5, 4, 3, 2, 1, 0, 0], "es", "Todos los días"),
        ([], "en", "No days"),
        ([9, -1], "es", "Ningún día"),
    ],
)
def test_days_label(days, lang, expected):
    assert days_label({"days_of_week": days}, lang) == expected


@pytest.mark.parametrize(
    "millis,expected",
    [
        (None, None),
        (0, "Now"),
        (-5, "Now"),
        (30_000, "Less than 1m"),
        (45 * MINUTE, "45m"),
        (2 * HOUR, "2h"),
        (2 * HOUR + 30 * MINUTE, "2h 30m"),
        (DAY, "1 day"),
        (3 * DAY, "3 days"),
        (2 * DAY + 3 * HOUR + 59 * MINUTE, "2d 3h"),
    ],
)
def test_format_time_remaining(millis, expected):
    assert format_time_remaining(millis) == expected


def test_format_time_remaining_in_spanish():
    assert format_time_remaining(0, "es") == "Ahora"
    assert format_time_remaining(2 * DAY, "es") == "2 días"
    assert format_time_remaining(DAY, "es") == "1 día"
    assert format_time_remaining(10_000, "es") == "Menos de 1m"


@pytest.mark.parametrize(
    "header,expected",
    [
        (None, "en"),
        ("", "en"),
        ("es-CL,es;q=0.9,en;q=0.8", "es"),
        ("ES", "es"),
        ("fr-FR,fr;q=0.9", "en"),
        ("en-US", "en"),
    ],
)
def test_select_language(header, expected):
    assert select_language(header) == expected


def test_unknown_language_falls_back_to_english():
    assert get_catalog("de") is get_catalog("en")
    assert get_catalog("es")["days"][0] == "Domingo"


@pytest.mark.parametrize("days", [5, None, "135", [True, 2.0]])
def test_days_label_ignores_malformed_days(days):
    assert days_label({"days_of_week": days}) == "No days"
