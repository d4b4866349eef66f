"""
Regroup flattened section fields into per-entry records.

Consumers of ResumeSection (review screens, persistence) rebuild jobs and
degrees from the flat label/value list by watching for the label that opens an
entry. Labels are matched case-insensitively with underscores read as spaces,
so both "job_title" and "Job Title" open an experience record.
"""

import re
from typing import Dict, Iterable, List, Optional, Tuple

from app.core.schemas import EducationRecord, ExperienceRecord, GroupedResume, ParsedResume, ResumeField


JOB_TITLE_LABEL_RE = re.compile(r"job title", re.IGNORECASE)
COMPANY_LABEL_RE = re.compile(r"company", re.IGNORECASE)
LOCATION_LABEL_RE = re.compile(r"location", re.IGNORECASE)
START_DATE_LABEL_RE = re.compile(r"start ?date", re.IGNORECASE)
DATES_LABEL_RE = re.compile(r"^dates?$", re.IGNORECASE)
END_DATE_LABEL_RE = re.compile(r"end ?date", re.IGNORECASE)
CURRENT_LABEL_RE = re.compile(r"current", re.IGNORECASE)
DESCRIPTION_LABEL_RE = re.compile(r"description", re.IGNORECASE)

INSTITUTION_LABEL_RE = re.compile(r"school|institution|university|college", re.IGNORECASE)
DEGREE_LABEL_RE = re.compile(r"degree", re.IGNORECASE)
FIELD_LABEL_RE = re.compile(r"field", re.IGNORECASE)
GPA_LABEL_RE = re.compile(r"gpa", re.IGNORECASE)

SKILL_LABEL_RE = re.compile(r"skills?", re.IGNORECASE)
SKILL_SPLIT_RE = re.compile(r"[,;•\n]")

MONTHS = {
    "january": "01", "february": "02", "march": "03", "april": "04",
    "may": "05", "june": "06", "july": "07", "august": "08",
    "september": "09", "october": "10", "november": "11", "december": "12",
}
MONTH_YEAR_RE = re.compile(r"([A-Za-z]+)\s*(\d{4})")
YEAR_RE = re.compile(r"^\d{4}$")
YEAR_MONTH_RE = re.compile(r"^\d{4}-\d{2}$")


def _label(field: ResumeField) -> str:
    return field.label.replace("_", " ")


def _has_experience_content(record: ExperienceRecord) -> bool:
    return bool(record.title or record.company or record.location or record.description)


def _has_education_content(record: EducationRecord) -> bool:
    return bool(record.institution or record.degree or record.field)


def group_experience_fields(fields: Iterable[ResumeField]) -> List[ExperienceRecord]:
    """
    Rebuild jobs from an Experience section.

    A job-title label opens a new record once the current one has content.
    """
    grouped: List[ExperienceRecord] = []
    current = ExperienceRecord()
    for f in fields:
        label = _label(f)
        if JOB_TITLE_LABEL_RE.search(label):
            if _has_experience_content(current):
                grouped.append(current)
                current = ExperienceRecord()
            current.title = f.value
        elif COMPANY_LABEL_RE.search(label):
            current.company = f.value
        elif LOCATION_LABEL_RE.search(label):
            current.location = f.value
        elif START_DATE_LABEL_RE.search(label) or DATES_LABEL_RE.search(label):
            current.start_date = f.value
        elif END_DATE_LABEL_RE.search(label):
            current.end_date = f.value
        elif CURRENT_LABEL_RE.search(label):
            current.current = f.value == "true"
        elif DESCRIPTION_LABEL_RE.search(label):
            current.description = f.value
    if _has_experience_content(current):
        grouped.append(current)
    return grouped


def group_education_fields(fields: Iterable[ResumeField]) -> List[EducationRecord]:
    """
    Rebuild degrees from an Education section.

    An institution label opens a new record once the current one has content.
    """
    grouped: List[EducationRecord] = []
    current = EducationRecord()
    for f in fields:
        label = _label(f)
        if INSTITUTION_LABEL_RE.search(label):
            if _has_education_content(current):
                grouped.append(current)
                current = EducationRecord()
            current.institution = f.value
        elif DEGREE_LABEL_RE.search(label):
            current.degree = f.value
        elif FIELD_LABEL_RE.search(label):
            current.field = f.value
        elif START_DATE_LABEL_RE.search(label) or DATES_LABEL_RE.search(label):
            current.start_date = f.value
        elif END_DATE_LABEL_RE.search(label):
            current.end_date = f.value
        elif GPA_LABEL_RE.search(label):
            current.gpa = f.value
    if _has_education_content(current):
        grouped.append(current)
    return grouped


def skills_from_fields(fields: Iterable[ResumeField]) -> List[str]:
    """Every skill listed under a label mentioning 'skill'."""
    out: List[str] = []
    for f in fields:
        if SKILL_LABEL_RE.search(f.label):
            out.extend(s.strip() for s in SKILL_SPLIT_RE.split(f.value) if s.strip())
    return out


def profile_from_fields(fields: Iterable[ResumeField]) -> Dict[str, str]:
    return {f.label: f.value for f in fields}


def format_date_for_input(value: Optional[str]) -> str:
    """
    Normalise a parsed date to 'YYYY-MM' for date inputs.

    Examples:
    - "2019" → "2019-01"
    - "June 2021" → "2021-06"
    - "2023-09" → "2023-09"
    - "Present" → ""
    """
    if not value:
        return ""
    if "present" in value.lower():
        return ""
    if YEAR_RE.match(value):
        return f"{value}-01"
    m = MONTH_YEAR_RE.search(value)
    if m:
        month = MONTHS.get(m.group(1).lower())
        if month:
            return f"{m.group(2)}-{month}"
    if YEAR_MONTH_RE.match(value):
        return value
    return ""


def split_display_range(value: Optional[str]) -> Tuple[str, str]:
    """'June 2021 – Present' → ('2021-06', '')"""
    if not value:
        return "", ""
    if "–" in value:
        start, end = [s.strip() for s in value.split("–", 1)]
        return format_date_for_input(start), format_date_for_input(end)
    return format_date_for_input(value), ""


def group_resume(resume: ParsedResume) -> GroupedResume:
    """
    Regroup every section a review screen edits.

    Profile and Header both feed the profile; sections with other titles are
    not regrouped.
    """
    grouped = GroupedResume()
    for section in resume.parsed:
        if section.title in ("Profile", "Header"):
            grouped.profile.update(profile_from_fields(section.fields))
        elif section.title == "Experience":
            grouped.experience.extend(group_experience_fields(section.fields))
        elif section.title == "Education":
            grouped.education.extend(group_education_fields(section.fields))
        elif section.title == "Skills":
            grouped.skills.extend(skills_from_fields(section.fields))
    return grouped
