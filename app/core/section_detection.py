"""
Section header detection.

A line is a header when it matches one of the known header patterns, or when it
is a short ALL CAPS line (the way most resumes mark their sections). Unknown
ALL CAPS headers get their own lowercased text as the section key so their
content is never dropped.
"""

import re
from typing import List, Optional, Pattern, Tuple


SECTION_HEADER_PATTERNS: List[Tuple[str, List[Pattern[str]]]] = [
    ("header", [re.compile(r"^(header|contact( information)?|personal details?)$", re.IGNORECASE)]),
    ("summary", [re.compile(r"^(professional )?(summary|objective|profile)$", re.IGNORECASE)]),
    ("education", [re.compile(r"^education( history)?$", re.IGNORECASE)]),
    ("experience", [
        re.compile(r"^(work|professional)? ?experience$", re.IGNORECASE),
        re.compile(r"^relevant experience$", re.IGNORECASE),
    ]),
    ("skills", [
        re.compile(r"^skills?$", re.IGNORECASE),
        re.compile(r"^(technical|soft) skills$", re.IGNORECASE),
    ]),
    ("projects", [re.compile(r"^projects?$", re.IGNORECASE)]),
    ("certifications", [re.compile(r"^certifications?$", re.IGNORECASE)]),
    ("activities", [
        re.compile(r"^activities$", re.IGNORECASE),
        re.compile(r"^extracurricular", re.IGNORECASE),
    ]),
    ("other", [re.compile(r"^other$", re.IGNORECASE)]),
]

KNOWN_SECTION_KEYS = [key for key, _ in SECTION_HEADER_PATTERNS]

ALL_CAPS_HEADER_RE = re.compile(r"^[A-Z0-9 .,&\-]+$")
BULLET_PREFIX_RE = re.compile(r"^([•\-*])\s?")


def is_bullet_line(line: str) -> bool:
    return bool(BULLET_PREFIX_RE.match(line))


def strip_bullet(line: str) -> str:
    """'- Led a team' → 'Led a team'"""
    return BULLET_PREFIX_RE.sub("", line, count=1)


def _is_all_caps_header(text: str) -> bool:
    return (
        len(text) > 2
        and text == text.upper()
        and bool(ALL_CAPS_HEADER_RE.match(text))
        and not is_bullet_line(text)
    )


def detect_section_key(line: str) -> Optional[str]:
    """
    Classify a line as a section header.

    Returns the canonical key for known headers, the lowercased header text for
    other ALL CAPS headers, or None for content lines.

    Examples:
    - "Work Experience" → "experience"
    - "TECHNICAL SKILLS" → "skills"
    - "LEADERSHIP EXPERIENCE" → "experience"
    - "LANGUAGES" → "languages"
    - "Led a team of 5" → None
    """
    trimmed = line.strip()
    for key, patterns in SECTION_HEADER_PATTERNS:
        for pattern in patterns:
            if pattern.search(trimmed):
                return key

    if _is_all_caps_header(trimmed):
        # Repeated experience headers all feed the one Experience section
        if "EXPERIENCE" in trimmed and "EDUCATION" not in trimmed:
            return "experience"
        return trimmed.lower()
    return None
