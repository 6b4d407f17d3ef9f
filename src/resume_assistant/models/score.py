"""Pydantic models for the analytical breakdown of an uploaded resume."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, computed_field

# Category weights in percent; overall = sum(score * weight) / 100
CATEGORY_WEIGHTS: dict[str, int] = {
    "formatting": 20,
    "ats_compatibility": 25,
    "keywords": 20,
    "experience": 15,
    "education": 10,
    "skills": 10,
}


class Severity(str, Enum):
    BLOCKING = "blocking"
    ADVISORY = "advisory"
    POSITIVE = "positive"


class ScoreBreakdown(BaseModel):
    formatting: int = Field(ge=0, le=100)
    ats_compatibility: int = Field(ge=0, le=100)
    keywords: int = Field(ge=0, le=100)
    experience: int = Field(ge=0, le=100)
    education: int = Field(ge=0, le=100)
    skills: int = Field(ge=0, le=100)

    model_config = {"frozen": True}

    @computed_field  # type: ignore[prop-decorator]
    @property
    def overall(self) -> int:
        weighted = sum(getattr(self, name) * weight for name, weight in CATEGORY_WEIGHTS.items())
        # Round half up, as the weighted sum is exact in hundredths
        return (weighted + 50) // 100


class Suggestion(BaseModel):
    severity: Severity
    category: str
    message: str


class AnalysisResult(BaseModel):
    breakdown: ScoreBreakdown
    suggestions: list[Suggestion]
    label: str
