"""Pydantic models for synthesized and manually drafted resumes."""

from __future__ import annotations

from pydantic import BaseModel, Field


class Identity(BaseModel):
    name: str
    email: str
    phone: str
    location: str | None = None
    linkedin: str | None = None
    website: str | None = None


class ExperienceEntry(BaseModel):
    title: str
    organization: str
    duration: str
    achievements: list[str] = []


class EducationEntry(BaseModel):
    credential: str
    institution: str
    year: str


class ResumeDocument(BaseModel):
    identity: Identity
    summary: str
    experience: list[ExperienceEntry] = []
    education: list[EducationEntry] = []
    skills: list[str] = []
    certifications: list[str] = []
    score: int = Field(default=0, ge=0, le=100)


# Draft shape edited field-by-field by the builder UI and scored on every edit.


class DraftPersonalInfo(BaseModel):
    full_name: str = ""
    email: str = ""
    phone: str = ""
    address: str = ""
    linkedin: str = ""
    website: str = ""

    def filled_count(self) -> int:
        values = (self.full_name, self.email, self.phone, self.address, self.linkedin, self.website)
        return sum(1 for v in values if v.strip())


class DraftExperience(BaseModel):
    job_title: str = ""
    company: str = ""
    start_date: str = ""
    end_date: str = ""
    current: bool = False
    location: str = ""
    description: list[str] = []


class DraftEducation(BaseModel):
    degree: str = ""
    school: str = ""
    graduation_year: str = ""
    gpa: str = ""
    location: str = ""


class DraftDocument(BaseModel):
    personal_info: DraftPersonalInfo = Field(default_factory=DraftPersonalInfo)
    summary: str = ""
    experience: list[DraftExperience] = []
    education: list[DraftEducation] = []
    skills: list[str] = []
    certifications: list[str] = []
