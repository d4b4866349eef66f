"""
Entry-boundary scanning shared by the experience and activities parsers.

Both sections are a stream of lines where some lines open a new entry (a job, a
role) and the rest attach to the entry currently open: bullets, free-text
description, or a date that finishes a range broken across two lines. The scan
itself is shared; what opens an entry and which field names it writes are
supplied by an EntryRules instance.
"""

import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from app.core.date_extraction import DateRange, extract_date_at_end, extract_date_range, is_date_string
from app.core.section_detection import is_bullet_line, strip_bullet


Entry = Dict[str, Any]

TITLED_RANGE_RE = re.compile(r"^(.+?),\s*(.+?)\s*\(([^)]+)\)$")
PRESENT_ONLY_RE = re.compile(r"^present$", re.IGNORECASE)


@dataclass(frozen=True)
class EntryRules:
    """Field names and entry constructors for one section type."""
    start_key: str
    end_key: str
    bullets_key: str
    description_key: str
    # "Title, Org (9/2023 current)" → entry
    from_titled_range: Callable[[str, str, DateRange], Entry]
    # "June 2021 - Present" → entry
    from_date_range: Callable[[str, str], Entry]
    # (line, comma parts without trailing date, trailing date) → entry, or None if the line does not open one
    from_line: Callable[[str, List[str], Optional[str]], Optional[Entry]]
    # "Present" seen as the end of the open entry
    mark_present: Callable[[Entry], None]
    # date line that completes the open entry's range
    extend_end: Callable[[Entry, str], None]
    # a lone date line ("June 2021") opens an entry with that start date
    bare_date_starts_entry: bool = False


def split_parts(text: str) -> List[str]:
    """'Engineer, Acme, Boston' → ['Engineer', 'Acme', 'Boston']"""
    return [p.strip() for p in text.split(",") if p.strip()]


def scan_entries(lines: List[str], rules: EntryRules) -> List[Entry]:
    """
    Group section lines into entries.

    Per line, first match wins:
    1. "<title>, <org> (<range>)" opens an entry
    2. a two-sided date range opens an entry
    3. bullets attach to the open entry ("present" and date bullets close its range instead)
    4. a bare "Present" closes the open entry's range
    5. a date right after a date line completes the open entry's range
    6. a lone date opens an entry (when the rules allow it)
    7. rules.from_line may open an entry
    8. anything else is appended to the open entry's description
    Lines seen before any entry is open are dropped.
    """
    entries: List[Entry] = []
    entry: Optional[Entry] = None
    last_line_was_date = False

    for line in lines:
        m = TITLED_RANGE_RE.match(line)
        if m:
            if entry is not None:
                entries.append(entry)
            date_range = extract_date_range(f"({m.group(3).strip()})")
            entry = rules.from_titled_range(m.group(1).strip(), m.group(2).strip(), date_range)
            last_line_was_date = True
            continue

        start, end = extract_date_range(line)
        if start and end:
            if entry is not None:
                entries.append(entry)
            entry = rules.from_date_range(start, end)
            last_line_was_date = True
            continue

        if is_bullet_line(line):
            bullet = strip_bullet(line)
            if PRESENT_ONLY_RE.match(bullet) and entry is not None:
                rules.mark_present(entry)
                last_line_was_date = True
                continue
            if (
                is_date_string(bullet)
                and entry is not None
                and entry.get(rules.start_key)
                and not entry.get(rules.end_key)
            ):
                rules.extend_end(entry, bullet)
                last_line_was_date = True
                continue
            if entry is not None:
                entry.setdefault(rules.bullets_key, []).append(bullet)
            last_line_was_date = False
            continue

        if PRESENT_ONLY_RE.match(line) and entry is not None:
            rules.mark_present(entry)
            last_line_was_date = True
            continue

        if is_date_string(line) and entry is not None and not entry.get(rules.end_key) and last_line_was_date:
            rules.extend_end(entry, line.strip())
            last_line_was_date = True
            continue

        if rules.bare_date_starts_entry and is_date_string(line):
            if entry is not None:
                entries.append(entry)
            entry = {rules.start_key: line.strip()}
            last_line_was_date = True
            continue

        main, trailing_date = extract_date_at_end(line)
        opened = rules.from_line(line, split_parts(main), trailing_date)
        if opened is not None:
            if entry is not None:
                entries.append(entry)
            entry = opened
        elif entry is not None:
            if entry.get(rules.description_key):
                entry[rules.description_key] += " " + line
            else:
                entry[rules.description_key] = line
        last_line_was_date = False

    if entry is not None:
        entries.append(entry)
    return entries
