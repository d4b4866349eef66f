from pydantic import BaseModel, Field
from typing import Dict, List


class ResumeField(BaseModel):
    label: str = Field(..., description="Field name, e.g. 'job_title', 'Email', 'Skills'")
    value: str = Field(default="", description="Field value; may be empty")


class ResumeSection(BaseModel):
    """One resume section. Field order encodes entry boundaries (a repeated label starts a new entry)."""
    title: str = Field(..., description="Section name: Profile, Experience, Education, Skills, ... or a capitalised custom header")
    fields: List[ResumeField] = Field(default_factory=list)


class ParsedResume(BaseModel):
    raw: str = Field(..., description="Fully cleaned text the sections were parsed from")
    parsed: List[ResumeSection] = Field(default_factory=list)


class ParseTextRequest(BaseModel):
    text: str = Field(..., description="Raw text already extracted from a PDF/DOCX resume")


class ExperienceRecord(BaseModel):
    """Experience entry regrouped from a flattened Experience section."""
    title: str = ""
    company: str = ""
    location: str = ""
    start_date: str = ""
    end_date: str = ""
    current: bool = False
    description: str = ""


class EducationRecord(BaseModel):
    """Education entry regrouped from a flattened Education section."""
    institution: str = ""
    degree: str = ""
    field: str = ""
    start_date: str = ""
    end_date: str = ""
    gpa: str = ""


class GroupedResume(BaseModel):
    """Parsed resume regrouped into the records a review screen edits."""
    profile: Dict[str, str] = Field(default_factory=dict)
    experience: List[ExperienceRecord] = Field(default_factory=list)
    education: List[EducationRecord] = Field(default_factory=list)
    skills: List[str] = Field(default_factory=list)
