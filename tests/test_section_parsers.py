"""Tests for the summary, skills, projects, certifications and fallback parsers."""

from app.core.section_parsers import (
    parse_certifications_section,
    parse_other_section,
    parse_projects_section,
    parse_skills_section,
    parse_summary_section,
)


class TestSkills:

    def test_categories(self):
        lines = ["Excel, Tableau", "Programming Languages", "Python; SQL"]
        assert parse_skills_section(lines) == {
            "Skills": ["Excel", "Tableau"],
            "Programming Languages": ["Python", "SQL"],
        }

    def test_default_bucket_always_present(self):
        assert parse_skills_section([]) == {"Skills": []}
        assert parse_skills_section(["Tools", "Git, Docker"]) == {"Skills": [], "Tools": ["Git", "Docker"]}

    def test_mixed_separators(self):
        assert parse_skills_section(["Python • SQL; Excel"]) == {"Skills": ["Python", "SQL", "Excel"]}

    def test_blank_lines_add_nothing(self):
        assert parse_skills_section(["Python", "", "SQL"]) == {"Skills": ["Python", "SQL"]}


class TestProjects:

    def test_title_with_date_stands_alone(self):
        lines = ["Chatbot, 2023", "Portfolio Site", "Personal website in React"]
        assert parse_projects_section(lines) == [
            {"Project Title": "Chatbot", "Date": "2023"},
            {"Project Title": "Portfolio Site", "Description": "Personal website in React"},
        ]

    def test_lines_pair_up(self):
        lines = ["Chatbot, 2023", "Built a support bot", "Portfolio Site", "Personal website", "Extra notes"]
        result = parse_projects_section(lines)
        assert len(result) == 3
        assert result[1] == {"Project Title": "Built a support bot", "Description": "Portfolio Site"}
        assert result[2] == {"Project Title": "Personal website", "Description": "Extra notes"}

    def test_unpaired_last_line_kept(self):
        assert parse_projects_section(["Solo"]) == [{"Project Title": "Solo"}]


class TestCertifications:

    def test_name_issuer_date(self):
        result = parse_certifications_section(["AWS Certified Developer, Amazon, June 2022"])
        assert result == [{"Certification": "AWS Certified Developer", "Issuer": "Amazon", "Date": "June 2022"}]

    def test_name_only(self):
        assert parse_certifications_section(["CPR Certified"]) == [{"Certification": "CPR Certified"}]

    def test_name_with_trailing_year(self):
        result = parse_certifications_section(["Six Sigma Green Belt 2020", "PMP, PMI, 2021"])
        assert result == [
            {"Certification": "Six Sigma Green Belt", "Date": "2020"},
            {"Certification": "PMP", "Issuer": "PMI", "Date": "2021"},
        ]


def test_summary_joins_lines():
    lines = ["Analyst with 5 years of experience.", "Skilled in SQL."]
    assert parse_summary_section(lines) == {"Summary": "Analyst with 5 years of experience. Skilled in SQL."}


def test_other_keeps_lines():
    assert parse_other_section(["Spanish", "French"]) == {"Details": ["Spanish", "French"]}
