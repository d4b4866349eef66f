"""
Parsers for the simpler resume sections: summary, skills, projects,
certifications and anything unrecognised ("other").
"""

import re
from typing import Any, Dict, List

from app.core.date_extraction import extract_date_at_end
from app.core.entry_scanner import split_parts


SKILL_CATEGORY_RE = re.compile(r"software|programming|languages|tools", re.IGNORECASE)
SKILL_SPLIT_RE = re.compile(r"[,;•]")
DEFAULT_SKILL_BUCKET = "Skills"


def parse_summary_section(lines: List[str]) -> Dict[str, str]:
    return {"Summary": " ".join(lines)}


def parse_skills_section(lines: List[str]) -> Dict[str, List[str]]:
    """
    Group skills by category.

    A line mentioning software/programming/languages/tools names a new category;
    every other line is split on , ; • into the active category. Skills listed
    before any category go to the "Skills" bucket, which is always present.

    Example:
        ["Excel, Tableau", "Programming Languages", "Python; SQL"]
        → {"Skills": ["Excel", "Tableau"], "Programming Languages": ["Python", "SQL"]}
    """
    skills: Dict[str, List[str]] = {DEFAULT_SKILL_BUCKET: []}
    category = None
    for line in lines:
        if SKILL_CATEGORY_RE.search(line):
            category = line.strip()
            skills[category] = []
            continue
        items = [s.strip() for s in SKILL_SPLIT_RE.split(line) if s.strip()]
        skills[category or DEFAULT_SKILL_BUCKET].extend(items)
    return skills


def parse_projects_section(lines: List[str]) -> List[Dict[str, str]]:
    """
    Pair lines into projects: first line is the title, the next the description.

    A trailing date on either line becomes "Date". An entry is closed as soon as
    it holds two fields, so a title line that carries its own date stands alone.
    """
    entries: List[Dict[str, str]] = []
    entry: Dict[str, str] = {}
    for line in lines:
        main, date = extract_date_at_end(line)
        if not entry.get("Project Title"):
            entry["Project Title"] = main
        elif not entry.get("Description"):
            entry["Description"] = main
        else:
            entry["Description"] += " " + main
        if date:
            entry["Date"] = date
        if len(entry) > 1:
            entries.append(entry)
            entry = {}
    if entry:
        entries.append(entry)
    return entries


def parse_certifications_section(lines: List[str]) -> List[Dict[str, str]]:
    """
    One certification per line: "<name>, <issuer>, <date>".

    Example:
        ["AWS Certified Developer, Amazon, June 2022"]
        → [{"Certification": "AWS Certified Developer", "Issuer": "Amazon", "Date": "June 2022"}]
    """
    entries: List[Dict[str, str]] = []
    for line in lines:
        main, date = extract_date_at_end(line)
        parts = split_parts(main)
        entry: Dict[str, str] = {}
        if len(parts) >= 2:
            entry["Certification"] = parts[0]
            entry["Issuer"] = parts[1]
        else:
            entry["Certification"] = main
        if date:
            entry["Date"] = date
        entries.append(entry)
    return entries


def parse_other_section(lines: List[str]) -> Dict[str, Any]:
    return {"Details": lines}
