"""Pydantic models for the facts accumulated during an interview."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class CareerLevel(str, Enum):
    ENTRY = "entry"
    MID = "mid"
    SENIOR = "senior"
    EXECUTIVE = "executive"


class PersonalInfo(BaseModel):
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    location: str | None = None
    linkedin: str | None = None  # professional-network URL
    website: str | None = None

    model_config = {"frozen": True}


class InterviewDetails(BaseModel):
    """Open-ended answers from the experience, education and skills phases."""

    job_title: str | None = None
    employer: str | None = None  # employer and dates, as answered
    responsibilities: str | None = None
    achievements: str | None = None
    tools: str | None = None
    leadership: str | None = None
    education_level: str | None = None
    degree: str | None = None
    school: str | None = None  # school and graduation date, as answered
    gpa: str | None = None
    honors: str | None = None
    technical_skills: list[str] = []
    soft_skills: list[str] = []
    certifications: list[str] = []
    extracurricular: str | None = None
    projects: str | None = None
    awards: str | None = None

    model_config = {"frozen": True}


class Profile(BaseModel):
    personal_info: PersonalInfo = Field(default_factory=PersonalInfo)
    career_level: CareerLevel | None = None
    target_role: str | None = None
    industry: str | None = None
    years_experience: int | None = Field(default=None, ge=0)
    details: InterviewDetails = Field(default_factory=InterviewDetails)

    model_config = {"frozen": True}
