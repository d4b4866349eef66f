"""
Experience and activities parsing.

Both sections share the entry-boundary scan in entry_scanner; they differ in
field names and in which lines open a new entry:

- Experience: a lone date opens a job, and a comma line only opens one when it
  also carries a 4-digit year or "Present" ("Analyst, Deloitte, 2019").
- Activities: any line with two or more comma-separated parts opens a role,
  and an open-ended role is stamped with the current month.
"""

import re
from typing import List, Optional

from app.core.date_extraction import Clock, DateRange, current_month
from app.core.entry_scanner import Entry, EntryRules, scan_entries


PRESENT_RE = re.compile(r"present", re.IGNORECASE)
JOB_ENTRY_DATE_RE = re.compile(r"(\d{4}|Present)")
DATE_JOINER = " – "


def is_job_entry_line(line: str) -> bool:
    """A job line has a comma and a date: 'Engineer, Acme, 2020 - Present'."""
    return "," in line and bool(JOB_ENTRY_DATE_RE.search(line))


# ============================================================================
# Experience
# ============================================================================

def _job_from_titled_range(title: str, company: str, date_range: DateRange) -> Entry:
    start, end = date_range
    entry: Entry = {"job_title": title, "company": company}
    if start:
        entry["start_date"] = start
    if end and not PRESENT_RE.search(end):
        entry["end_date"] = end
    return entry


def _job_from_date_range(start: str, end: str) -> Entry:
    return {"start_date": start, "end_date": end}


def _job_from_line(line: str, parts: List[str], trailing_date: Optional[str]) -> Optional[Entry]:
    if not is_job_entry_line(line):
        return None
    entry: Entry = {
        "job_title": parts[0] if parts else "",
        "company": parts[1] if len(parts) > 1 else "",
    }
    if len(parts) > 2:
        entry["location"] = ", ".join(parts[2:])
    if trailing_date and not PRESENT_RE.search(trailing_date):
        entry["end_date"] = trailing_date
    return entry


def _job_extend_end(entry: Entry, text: str) -> None:
    if not PRESENT_RE.search(text):
        entry["end_date"] = text


EXPERIENCE_RULES = EntryRules(
    start_key="start_date",
    end_key="end_date",
    bullets_key="bullets",
    description_key="description",
    from_titled_range=_job_from_titled_range,
    from_date_range=_job_from_date_range,
    from_line=_job_from_line,
    mark_present=lambda entry: None,  # open-ended jobs simply have no end_date
    extend_end=_job_extend_end,
    bare_date_starts_entry=True,
)


def parse_experience_section(lines: List[str]) -> List[Entry]:
    """
    Parse experience lines into job dicts.

    Keys (all optional): job_title, company, location, start_date, end_date,
    description, bullets.

    Example:
        ["Software Engineer, Acme Corp (9/2023 current)", "- Built the billing API"]
        → [{"job_title": "Software Engineer", "company": "Acme Corp",
            "start_date": "2023-09", "bullets": ["Built the billing API"]}]
    """
    return scan_entries(lines, EXPERIENCE_RULES)


# ============================================================================
# Activities
# ============================================================================

def _activity_rules(clock: Optional[Clock]) -> EntryRules:
    def mark_present(entry: Entry) -> None:
        entry["current"] = True
        entry["endDate"] = current_month(clock)

    def from_titled_range(role: str, organization: str, date_range: DateRange) -> Entry:
        start, end = date_range
        entry: Entry = {"Role": role, "Organization": organization}
        if start:
            entry["Dates"] = start
        if end:
            entry["EndDate"] = end
            if PRESENT_RE.search(end):
                mark_present(entry)
        return entry

    def from_date_range(start: str, end: str) -> Entry:
        entry: Entry = {"Dates": f"{start}{DATE_JOINER}{end}"}
        if end.lower() == "present":
            mark_present(entry)
        return entry

    def from_line(line: str, parts: List[str], trailing_date: Optional[str]) -> Optional[Entry]:
        if len(parts) < 2:
            return None
        entry: Entry = {"Role": parts[0], "Organization": parts[1]}
        if len(parts) > 2:
            entry["Location"] = ", ".join(parts[2:])
        if trailing_date:
            entry["Dates"] = trailing_date
        return entry

    def extend_end(entry: Entry, text: str) -> None:
        entry["EndDate"] = text
        entry["Dates"] = f"{entry['Dates']}{DATE_JOINER}{text}" if entry.get("Dates") else text

    return EntryRules(
        start_key="Dates",
        end_key="EndDate",
        bullets_key="Bullets",
        description_key="Description",
        from_titled_range=from_titled_range,
        from_date_range=from_date_range,
        from_line=from_line,
        mark_present=mark_present,
        extend_end=extend_end,
    )


def parse_activities_section(lines: List[str], now: Optional[Clock] = None) -> List[Entry]:
    """
    Parse activities/extracurricular lines into role dicts.

    Keys (all optional): Role, Organization, Location, Dates, EndDate,
    current, endDate, Bullets, Description.

    `now` returns today's date; it is only read when a role is still ongoing.
    """
    return scan_entries(lines, _activity_rules(now))
