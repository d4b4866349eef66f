"""
Education parsing module.

Single forward pass over the lines of an EDUCATION section with one accumulating
entry. Lines are classified by keyword (degree, institution, GPA, coursework,
location) and by date shape. Entries are only closed at the end of the section,
so several degrees listed back to back end up merged into one record; the
experience parser is the one that separates entries.
"""

import re
from typing import Any, Dict, List

from app.core.date_extraction import (
    extract_date_at_end,
    extract_date_range,
    is_date_string,
)


# ===== LINE CLASSIFICATION KEYWORDS =====

DEGREE_RE = re.compile(r"bachelor|master|phd|associate|degree", re.IGNORECASE)
INSTITUTION_RE = re.compile(r"university|college|school|institution", re.IGNORECASE)
GPA_RE = re.compile(r"gpa", re.IGNORECASE)
COURSEWORK_RE = re.compile(r"coursework", re.IGNORECASE)
LOCATION_RE = re.compile(r"location", re.IGNORECASE)
GPA_VALUE_RE = re.compile(r"\d+\.\d+")

DATE_JOINER = " – "


def _classify_line(entry: Dict[str, Any], line: str, main: str) -> None:
    """Assign the line's text (date removed) to the first keyword bucket it hits."""
    if DEGREE_RE.search(line):
        entry["degree"] = main
    elif INSTITUTION_RE.search(line):
        entry["institution"] = main
    elif GPA_RE.search(line):
        m = GPA_VALUE_RE.search(main)
        entry["gpa"] = m.group(0) if m else None
    elif COURSEWORK_RE.search(line):
        entry["field"] = main
    elif LOCATION_RE.search(line):
        entry["location"] = main


def parse_education_section(lines: List[str]) -> List[Dict[str, Any]]:
    """
    Parse education lines into entry dicts.

    Keys (all optional): degree, institution, gpa, field, location,
    start_date, end_date, Graduation.

    Example:
        ["Harvard University", "Bachelor of Arts in Economics, May 2019", "GPA: 3.8"]
        → [{"institution": "Harvard University",
            "degree": "Bachelor of Arts in Economics", "end_date": "May 2019",
            "gpa": "3.8"}]
    """
    entries: List[Dict[str, Any]] = []
    entry: Dict[str, Any] = {}
    last_line_was_date = False

    for i, line in enumerate(lines):
        start, end = extract_date_range(line)
        if start and end:
            entry["start_date"] = start
            entry["end_date"] = end
            entry["Graduation"] = f"{start}{DATE_JOINER}{end}"
            last_line_was_date = True
            continue

        if is_date_string(line):
            date_text = line.strip()
            if entry.get("Graduation") and not entry.get("end_date") and last_line_was_date:
                # Second half of a range that was broken across two lines
                entry["end_date"] = date_text
                entry["Graduation"] = f"{entry['Graduation']}{DATE_JOINER}{date_text}"
            else:
                entry["end_date"] = date_text
                entry["Graduation"] = date_text
            last_line_was_date = True
            continue

        main, trailing_date = extract_date_at_end(line)
        _classify_line(entry, line, main)
        if trailing_date:
            entry["end_date"] = trailing_date
        if entry and i == len(lines) - 1:
            entries.append(entry)
            entry = {}
        last_line_was_date = False

    if entry:
        entries.append(entry)
    return entries
