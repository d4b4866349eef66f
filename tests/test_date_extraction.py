"""Tests for the shared date helpers."""

import re
from datetime import date

import pytest
from app.core.date_extraction import (
    current_month,
    extract_date_at_end,
    extract_date_range,
    is_date_string,
)


class TestExtractDateAtEnd:

    @pytest.mark.parametrize("line,expected", [
        ("AWS Certified Developer, Amazon, June 2022", ("AWS Certified Developer, Amazon", "June 2022")),
        ("B.S. Biology 2015-2019", ("B.S. Biology", "2015-2019")),
        ("Volunteer, Present", ("Volunteer", "Present")),
        ("Graduated spring 2020", ("Graduated", "spring 2020")),
    ])
    def test_trailing_date_split_off(self, line, expected):
        assert extract_date_at_end(line) == expected

    def test_date_alone_is_not_split(self):
        assert extract_date_at_end("2021") == ("2021", None)

    def test_no_date(self):
        assert extract_date_at_end("Team Lead") == ("Team Lead", None)


class TestExtractDateRange:

    @pytest.mark.parametrize("line,expected", [
        ("(9/2023 current)", ("2023-09", "Present")),
        ("(9/2023 5/2024)", ("2023-09", "2024-05")),
        ("(09-2021 12-2022)", ("2021-09", "2022-12")),
        ("(current)", (None, "Present")),
        ("(5/2024)", (None, "2024-05")),
        ("June 2021 -- Present", ("June 2021", "Present")),
        ("Jan 2019—Dec 2020", ("Jan 2019", "Dec 2020")),
    ])
    def test_recognised_ranges(self, line, expected):
        assert extract_date_range(line) == expected

    def test_no_range(self):
        assert extract_date_range("Built dashboards in 2020") == (None, None)


class TestIsDateString:

    @pytest.mark.parametrize("line", ["June 2021", "2020", "Fall 2019", "Sept 2018", "  2020  "])
    def test_dates(self, line):
        assert is_date_string(line)

    @pytest.mark.parametrize("line", ["Present", "june 2021", "June 2021 - Present", "Analyst 2020"])
    def test_not_dates(self, line):
        assert not is_date_string(line)


def test_current_month_uses_injected_clock():
    assert current_month(lambda: date(2024, 3, 15)) == "2024-03"


def test_current_month_default_clock():
    assert re.match(r"^\d{4}-\d{2}$", current_month())
