"""
Date helpers shared by the section parsers.

Resume dates arrive in many shapes ("June 2021", "2019-2023", "(9/2023 current)",
"Spring 2015", "Present"). These helpers recognise the handful of shapes the
section parsers rely on; anything else is left for the caller to treat as text.
"""

import re
from datetime import date, datetime
from typing import Callable, Optional, Tuple


# A (start, end) pair; either side may be missing.
DateRange = Tuple[Optional[str], Optional[str]]

# Returns "today"; injected so callers that stamp the current month stay testable.
Clock = Callable[[], date]

MONTH_OR_SEASON = (
    r"Jan(?:uary)?|Feb(?:ruary)?|Mar(?:ch)?|Apr(?:il)?|May|Jun(?:e)?|Jul(?:y)?|"
    r"Aug(?:ust)?|Sep(?:t)?(?:ember)?|Oct(?:ober)?|Nov(?:ember)?|Dec(?:ember)?|"
    r"Spring|Fall|Summer|Winter"
)

DATE_AT_END_RE = re.compile(
    rf"(,?\s*({MONTH_OR_SEASON})?\s?\d{{4}}(?:[\-–]\s?(?:Present|\d{{4}}))?|Present)$",
    re.IGNORECASE,
)
DATE_ONLY_RE = re.compile(rf"^(Present|{MONTH_OR_SEASON})? ?\d{{4}}$")

PAREN_RANGE_RE = re.compile(
    r"\((\d{1,2})[/\-](\d{4})\s+(current|\d{1,2}[/\-]\d{4})\)", re.IGNORECASE
)
PAREN_SINGLE_RE = re.compile(r"\((current|\d{1,2}[/\-]\d{4})\)", re.IGNORECASE)
WORD_RANGE_RE = re.compile(
    r"([A-Za-z]+ \d{4})\s*[\-–—]+\s*(Present|[A-Za-z]+ \d{4})", re.IGNORECASE
)
CURRENT_RE = re.compile(r"current", re.IGNORECASE)
MONTH_YEAR_SPLIT_RE = re.compile(r"[/\-]")


def _month_year_to_iso(value: str) -> str:
    """'9/2023' → '2023-09'"""
    month, year = MONTH_YEAR_SPLIT_RE.split(value, maxsplit=1)
    return f"{year}-{month.zfill(2)}"


def extract_date_at_end(line: str) -> Tuple[str, Optional[str]]:
    """
    Split a trailing date off a line.

    Examples:
    - "AWS Certified Developer, Amazon, June 2022" → ("AWS Certified Developer, Amazon", "June 2022")
    - "B.S. Biology 2015-2019" → ("B.S. Biology", "2015-2019")
    - "Volunteer, Present" → ("Volunteer", "Present")
    - "2021" → ("2021", None)   (a date with nothing before it is not split)
    """
    m = DATE_AT_END_RE.search(line)
    if m and m.start() > 0:
        main = re.sub(r"[,\s]+$", "", line[:m.start()])
        found = re.sub(r"^,?\s*", "", m.group(0))
        return main, found
    return line, None


def extract_date_range(line: str) -> DateRange:
    """
    Extract (start, end) from a line.

    Recognised, first match wins:
    - "(9/2023 current)" → ("2023-09", "Present")
    - "(9/2023 5/2024)" → ("2023-09", "2024-05")
    - "(current)" → (None, "Present"); "(5/2024)" → (None, "2024-05")
    - "June 2021 – Present" → ("June 2021", "Present")
    """
    m = PAREN_RANGE_RE.search(line)
    if m:
        start = f"{m.group(2)}-{m.group(1).zfill(2)}"
        end_raw = m.group(3)
        end = "Present" if CURRENT_RE.search(end_raw) else _month_year_to_iso(end_raw)
        return start, end

    m = PAREN_SINGLE_RE.search(line)
    if m:
        value = m.group(1)
        if CURRENT_RE.search(value):
            return None, "Present"
        return None, _month_year_to_iso(value)

    m = WORD_RANGE_RE.search(line)
    if m:
        return m.group(1), m.group(2)
    return None, None


def is_date_string(line: str) -> bool:
    """True for a line that is only a year, optionally led by a month, season or 'Present'."""
    return bool(DATE_ONLY_RE.match(line.strip()))


def current_month(clock: Optional[Clock] = None) -> str:
    """Current year-month as 'YYYY-MM'."""
    today = clock() if clock is not None else datetime.now()
    return f"{today.year}-{today.month:02d}"
