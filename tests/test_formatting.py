"""Tests for display formatting helpers."""

import datetime

from app.schemas.dashboard import Revenue
from app.utils.formatting import (
    format_currency,
    format_date_to_local,
    generate_pagination,
    generate_y_axis,
)
from app.utils.money import from_cents, to_cents


class TestFormatCurrency:
    def test_one_dollar(self):
        assert format_currency(100) == "$1.00"

    def test_zero(self):
        assert format_currency(0) == "$0.00"

    def test_thousands_separator(self):
        assert format_currency(123456) == "$1,234.56"

    def test_negative(self):
        assert format_currency(-100) == "-$1.00"

    def test_none_is_zero(self):
        assert format_currency(None) == "$0.00"


class TestMoney:
    def test_to_cents(self):
        assert to_cents(12.34) == 1234
        assert to_cents("19.99") == 1999
        assert to_cents(250.5) == 25050

    def test_from_cents(self):
        assert from_cents(12345) == 123.45


class TestFormatDate:
    def test_date(self):
        assert format_date_to_local(datetime.date(2024, 1, 5)) == "Jan 5, 2024"

    def test_iso_string(self):
        assert format_date_to_local("2023-12-31") == "Dec 31, 2023"

    def test_datetime(self):
        assert format_date_to_local(datetime.datetime(2022, 6, 9, 14, 30)) == "Jun 9, 2022"


class TestGeneratePagination:
    def test_few_pages_lists_all(self):
        assert generate_pagination(1, 5) == [1, 2, 3, 4, 5]

    def test_no_pages(self):
        assert generate_pagination(1, 0) == []

    def test_near_start(self):
        assert generate_pagination(2, 10) == [1, 2, 3, "...", 9, 10]

    def test_near_end(self):
        assert generate_pagination(9, 10) == [1, 2, "...", 8, 9, 10]

    def test_middle(self):
        assert generate_pagination(5, 10) == [1, "...", 4, 5, 6, "...", 10]


class TestGenerateYAxis:
    def test_rounds_top_label_up_to_thousand(self):
        y_axis = generate_y_axis([Revenue(month="Jan", revenue=2000), Revenue(month="Feb", revenue=4800)])
        assert y_axis.top_label == 5000
        assert y_axis.labels == ["$5K", "$4K", "$3K", "$2K", "$1K", "$0K"]

    def test_empty(self):
        y_axis = generate_y_axis([])
        assert y_axis.top_label == 0
        assert y_axis.labels == ["$0K"]
