"""
Section segmentation: cleaned resume text → list of ResumeSection.

The segmenter walks the lines once, carrying a SegmenterState:

- before the first header, lines collect into the profile preamble
- a header line closes the open section (parsing its buffered lines) and opens the next
- every other line is buffered for the open section
- experience lines are never closed per header; all of them, from however many
  experience headers the resume has, are parsed once at the end into a single
  Experience section appended after all other sections
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from app.core.date_extraction import Clock
from app.core.education_parser import parse_education_section
from app.core.experience_parser import parse_activities_section, parse_experience_section
from app.core.profile_parser import parse_header_section, parse_profile_section
from app.core.schemas import ResumeField, ResumeSection
from app.core.section_detection import detect_section_key
from app.core.section_parsers import (
    parse_certifications_section,
    parse_other_section,
    parse_projects_section,
    parse_skills_section,
    parse_summary_section,
)

logger = logging.getLogger(__name__)

LINE_SPLIT_RE = re.compile(r"\r?\n")

PROFILE_KEY = "profile"
EXPERIENCE_KEY = "experience"
ACTIVITIES_KEY = "activities"

SECTION_PARSERS = {
    PROFILE_KEY: parse_profile_section,
    "header": parse_header_section,
    "summary": parse_summary_section,
    "education": parse_education_section,
    "skills": parse_skills_section,
    "projects": parse_projects_section,
    "certifications": parse_certifications_section,
    "other": parse_other_section,
}


# ============================================================================
# Flattening parsed sections into label/value fields
# ============================================================================

def _stringify(value: Any) -> str:
    """Render a parsed value the way consumers read it: lists comma-joined, booleans lowercase."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(_stringify(v) for v in value)
    return str(value)


def to_fields(parsed: Any) -> List[ResumeField]:
    """Flatten one dict, or a list of entry dicts, keeping key order."""
    records: List[Dict[str, Any]] = parsed if isinstance(parsed, list) else [parsed]
    return [
        ResumeField(label=label, value=_stringify(value))
        for record in records
        for label, value in record.items()
    ]


def section_title(key: str) -> str:
    """'experience' → 'Experience', 'volunteer work' → 'Volunteer work'"""
    return key[:1].upper() + key[1:]


def build_section(key: str, lines: List[str], now: Optional[Clock] = None) -> ResumeSection:
    """Parse one section's lines with the parser for its key (unknown keys keep their lines as Details)."""
    if key == ACTIVITIES_KEY:
        parsed = parse_activities_section(lines, now)
    elif key == EXPERIENCE_KEY:
        parsed = parse_experience_section(lines)
    else:
        parsed = SECTION_PARSERS.get(key, parse_other_section)(lines)
    return ResumeSection(title=section_title(key), fields=to_fields(parsed))


# ============================================================================
# Segmenter state machine
# ============================================================================

@dataclass
class SegmenterState:
    # None until the first header is seen
    key: Optional[str] = None
    buffer: List[str] = field(default_factory=list)
    profile_lines: List[str] = field(default_factory=list)
    experience_lines: List[str] = field(default_factory=list)
    sections: List[ResumeSection] = field(default_factory=list)

    @property
    def before_first_section(self) -> bool:
        return self.key is None


def _close_section(state: SegmenterState, now: Optional[Clock]) -> None:
    if state.key is None:
        return
    if state.key == EXPERIENCE_KEY:
        state.experience_lines.extend(state.buffer)
        return
    state.sections.append(build_section(state.key, state.buffer, now))


def consume_line(state: SegmenterState, line: str, now: Optional[Clock] = None) -> SegmenterState:
    """Advance the segmenter by one (trimmed) line."""
    detected = detect_section_key(line)

    if state.before_first_section:
        if detected is None:
            state.profile_lines.append(line)
            return state
        if any(l.strip() for l in state.profile_lines):
            state.sections.append(build_section(PROFILE_KEY, state.profile_lines, now))

    if detected is None:
        state.buffer.append(line)
        return state

    logger.debug(f"SECTION HEADER DETECTED: '{line}' -> section_key='{detected}'")
    _close_section(state, now)
    state.key = detected
    state.buffer = []
    return state


def finish_sections(state: SegmenterState, now: Optional[Clock] = None) -> List[ResumeSection]:
    """Close the open section and append the merged Experience section, if any."""
    _close_section(state, now)
    if state.experience_lines:
        logger.debug(f"Merging {len(state.experience_lines)} experience lines into one section")
        state.sections.append(build_section(EXPERIENCE_KEY, state.experience_lines))
    return state.sections


def parse_resume_sections(text: str, now: Optional[Clock] = None) -> List[ResumeSection]:
    """
    Split cleaned resume text into parsed sections.

    Sections come out in the order their headers appear (the implicit Profile
    preamble first), except Experience, which is always last.

    Note: text with no header at all yields no sections.
    """
    lines = [l.strip() for l in LINE_SPLIT_RE.split(text)]
    state = SegmenterState()
    for line in lines:
        consume_line(state, line, now)
    return finish_sections(state, now)
