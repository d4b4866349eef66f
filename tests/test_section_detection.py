"""Tests for section header detection."""

import pytest
from app.core.section_detection import detect_section_key, is_bullet_line, strip_bullet


@pytest.mark.parametrize("line,key", [
    ("EDUCATION", "education"),
    ("Education History", "education"),
    ("Work Experience", "experience"),
    ("PROFESSIONAL EXPERIENCE", "experience"),
    ("Relevant Experience", "experience"),
    ("Technical Skills", "skills"),
    ("Skill", "skills"),
    ("Summary", "summary"),
    ("PROFILE", "summary"),
    ("Professional Objective", "summary"),
    ("Contact Information", "header"),
    ("Personal Details", "header"),
    ("Projects", "projects"),
    ("CERTIFICATIONS", "certifications"),
    ("Extracurricular Involvement", "activities"),
    ("Other", "other"),
    ("  EDUCATION  ", "education"),
])
def test_known_headers(line, key):
    assert detect_section_key(line) == key


def test_all_caps_experience_headers_merge():
    assert detect_section_key("LEADERSHIP EXPERIENCE") == "experience"
    assert detect_section_key("MILITARY EXPERIENCE & TRAINING") == "experience"


def test_experience_and_education_header_keeps_own_key():
    assert detect_section_key("EXPERIENCE AND EDUCATION") == "experience and education"


def test_unknown_all_caps_header_uses_own_text():
    assert detect_section_key("LANGUAGES") == "languages"
    assert detect_section_key("VOLUNTEER WORK") == "volunteer work"


def test_year_line_counts_as_all_caps_header():
    assert detect_section_key("2020") == "2020"


@pytest.mark.parametrize("line", [
    "Jane Doe",
    "Led a team of 5 engineers",
    "AB",
    "- ITEM",
    "(555) 123-4567",
    "",
])
def test_content_lines(line):
    assert detect_section_key(line) is None


def test_bullet_helpers():
    assert is_bullet_line("- Built APIs")
    assert is_bullet_line("*Shipped")
    assert not is_bullet_line("Built APIs")
    assert strip_bullet("- Built APIs") == "Built APIs"
    assert strip_bullet("• Led team") == "Led team"
