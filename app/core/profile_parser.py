"""
Contact/profile extraction for the lines that precede the first section header.

Two variants:
- parse_profile_section(): implicit preamble; splits each line on commas and
  pipes and classifies every part on its own (first match wins per part)
- parse_header_section(): explicit "CONTACT"/"HEADER" section; classifies whole
  lines and uses slightly different field names
"""

import re
from typing import Dict, List


FULL_NAME_RE = re.compile(r"^[A-Z][a-z]+( [A-Z][a-z]+)+$")
EMAIL_RE = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b")
PHONE_RE = re.compile(r"((\(\d{3}\)\s*)|(\d{3}[\-.\s]))?\d{3}[\-.\s]?\d{3,4}")
LINKEDIN_RE = re.compile(r"linkedin\.com/", re.IGNORECASE)
ADDRESS_RE = re.compile(r"[A-Za-z]+,? [A-Z]{2}")
URL_RE = re.compile(r"https?://")
PART_SPLIT_RE = re.compile(r"[,|]")

HEADER_NAME_RE = re.compile(r"^([A-Z][a-z]+\s){1,3}[A-Z][a-z]+$")
HEADER_PHONE_RE = re.compile(r"\b\d{3}[\-.\s]?\d{3}[\-.\s]?\d{4}\b")
HEADER_CITY_STATE_RE = re.compile(r"\b[A-Z][a-z]+,? [A-Z]{2}\b")


def parse_profile_section(lines: List[str]) -> Dict[str, str]:
    """
    Extract contact fields from the resume preamble.

    Fields: Full Name, Email, Phone, LinkedIn, Address, Website.
    Full Name, Address and Website keep their first value; the others keep the last.

    Example:
        ["Jane Doe", "jane@x.com | (555) 123-4567", "Boston MA"]
        → {"Full Name": "Jane Doe", "Email": "jane@x.com",
           "Phone": "(555) 123-4567", "Address": "Boston MA"}
    """
    result: Dict[str, str] = {}
    for line in lines:
        parts = [p.strip() for p in PART_SPLIT_RE.split(line)]
        for part in parts:
            if not part:
                continue
            if "Full Name" not in result and FULL_NAME_RE.match(part):
                result["Full Name"] = part
                continue
            m = EMAIL_RE.search(part)
            if m:
                result["Email"] = m.group(0)
                continue
            m = PHONE_RE.search(part)
            if m:
                result["Phone"] = m.group(0)
                continue
            if LINKEDIN_RE.search(part):
                result["LinkedIn"] = part
                continue
            if "Address" not in result and ADDRESS_RE.search(part):
                result["Address"] = part
                continue
            if "Website" not in result and URL_RE.search(part) and not LINKEDIN_RE.search(part):
                result["Website"] = part
                continue
    return result


def parse_header_section(lines: List[str]) -> Dict[str, str]:
    """Whole-line variant used for an explicit contact section."""
    result: Dict[str, str] = {}
    for line in lines:
        text = line.strip()
        if HEADER_NAME_RE.match(text):
            result["Full Name"] = text
        elif HEADER_PHONE_RE.search(line):
            result["Phone Number"] = text
        elif EMAIL_RE.search(line):
            result["Email"] = text
        elif LINKEDIN_RE.search(line):
            result["LinkedIn"] = text
        elif HEADER_CITY_STATE_RE.search(line):
            result["City, State"] = text
    return result
