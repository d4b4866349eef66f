"""Tests for regrouping flattened section fields into records."""

import pytest
from app.core.entry_grouping import (
    format_date_for_input,
    group_education_fields,
    group_experience_fields,
    group_resume,
    profile_from_fields,
    skills_from_fields,
    split_display_range,
)
from app.core.line_parser import parse_resume_sections
from app.core.schemas import EducationRecord, ExperienceRecord, GroupedResume, ParsedResume, ResumeField


def make_fields(*pairs):
    return [ResumeField(label=label, value=value) for label, value in pairs]


def test_experience_regrouped_from_parser_output():
    text = (
        "EXPERIENCE\n"
        "Analyst, Deloitte, 2019\n"
        "- Built models\n"
        "Engineer, Acme, Boston, 2021-Present\n"
        "Led migrations"
    )
    experience = parse_resume_sections(text)[-1]
    assert group_experience_fields(experience.fields) == [
        ExperienceRecord(title="Analyst", company="Deloitte", end_date="2019"),
        ExperienceRecord(title="Engineer", company="Acme", location="Boston", description="Led migrations"),
    ]


def test_experience_display_labels():
    fields = make_fields(
        ("Job Title", "Developer"),
        ("Company", "Initech"),
        ("Start Date", "2020-01"),
        ("Current", "true"),
        ("Job Title", "QA Engineer"),
        ("Company", "Globex"),
        ("End Date", "2019-12"),
    )
    records = group_experience_fields(fields)
    assert len(records) == 2
    assert records[0].title == "Developer"
    assert records[0].start_date == "2020-01"
    assert records[0].current is True
    assert records[1].company == "Globex"
    assert records[1].end_date == "2019-12"
    assert records[1].current is False


def test_empty_experience_fields():
    assert group_experience_fields([]) == []


def test_education_split_on_institution():
    fields = make_fields(
        ("institution", "Harvard University"),
        ("degree", "Bachelor of Arts"),
        ("end_date", "2015"),
        ("gpa", "3.8"),
        ("Institution", "Yale University"),
        ("Degree", "Master of Science"),
        ("Field", "Statistics"),
    )
    assert group_education_fields(fields) == [
        EducationRecord(institution="Harvard University", degree="Bachelor of Arts", end_date="2015", gpa="3.8"),
        EducationRecord(institution="Yale University", degree="Master of Science", field="Statistics"),
    ]


def test_education_without_content_is_dropped():
    assert group_education_fields(make_fields(("gpa", "3.5"))) == []


def test_skills_from_fields():
    fields = make_fields(
        ("Skills", "Python,SQL"),
        ("Soft Skills", "Teamwork; Communication"),
        ("Tools", "Git"),
    )
    assert skills_from_fields(fields) == ["Python", "SQL", "Teamwork", "Communication"]


def test_profile_from_fields():
    fields = make_fields(("Full Name", "Jane Doe"), ("Email", "jane@x.com"))
    assert profile_from_fields(fields) == {"Full Name": "Jane Doe", "Email": "jane@x.com"}


@pytest.mark.parametrize("value,expected", [
    ("2019", "2019-01"),
    ("June 2021", "2021-06"),
    ("september 2018", "2018-09"),
    ("2023-09", "2023-09"),
    ("Present", ""),
    ("Jun 2021", ""),
    ("Fall 2019", ""),
    ("", ""),
    (None, ""),
])
def test_format_date_for_input(value, expected):
    assert format_date_for_input(value) == expected


def test_split_display_range():
    assert split_display_range("January 2016 – May 2020") == ("2016-01", "2020-05")
    assert split_display_range("June 2021 – Present") == ("2021-06", "")
    assert split_display_range("2019") == ("2019-01", "")
    assert split_display_range(None) == ("", "")


def test_date_led_job_with_description_stays_separate():
    text = "EXPERIENCE\nJune 2021\n- August 2022\nLed roadmap planning\nAnalyst, Deloitte, 2019"
    experience = parse_resume_sections(text)[-1]
    assert group_experience_fields(experience.fields) == [
        ExperienceRecord(start_date="June 2021", end_date="August 2022", description="Led roadmap planning"),
        ExperienceRecord(title="Analyst", company="Deloitte", end_date="2019"),
    ]


def test_date_led_job_without_content_merges_into_next_job():
    text = "EXPERIENCE\nJune 2021\n- August 2022\nAnalyst, Deloitte, 2019"
    experience = parse_resume_sections(text)[-1]
    # the parser sees two jobs; regrouping only splits on a job title
    assert [f.label for f in experience.fields] == ["start_date", "end_date", "job_title", "company", "end_date"]
    assert group_experience_fields(experience.fields) == [
        ExperienceRecord(title="Analyst", company="Deloitte", start_date="June 2021", end_date="2019"),
    ]


def test_date_only_jobs_are_dropped():
    text = "EXPERIENCE\nJune 2021\n- August 2022\n- Shipped v2\nJan 2019 -- Dec 2020\n- Built models"
    experience = parse_resume_sections(text)[-1]
    assert len(experience.fields) == 6
    assert group_experience_fields(experience.fields) == []


def test_group_resume_collects_reviewed_sections():
    text = (
        "Jane Doe\n"
        "CONTACT\n"
        "Cell 555-123-4567\n"
        "EDUCATION\n"
        "Harvard University\n"
        "SKILLS\n"
        "Python, SQL\n"
        "LANGUAGES\n"
        "Spanish"
    )
    grouped = group_resume(ParsedResume(raw=text, parsed=parse_resume_sections(text)))
    assert grouped == GroupedResume(
        profile={"Full Name": "Jane Doe", "Phone Number": "Cell 555-123-4567"},
        education=[EducationRecord(institution="Harvard University")],
        skills=["Python", "SQL"],
    )
