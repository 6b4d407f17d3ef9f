"""Data models for the resume assistant."""

from resume_assistant.models.document import (
    DraftDocument,
    DraftEducation,
    DraftExperience,
    DraftPersonalInfo,
    EducationEntry,
    ExperienceEntry,
    Identity,
    ResumeDocument,
)
from resume_assistant.models.profile import (
    CareerLevel,
    InterviewDetails,
    PersonalInfo,
    Profile,
)
from resume_assistant.models.score import (
    CATEGORY_WEIGHTS,
    AnalysisResult,
    ScoreBreakdown,
    Severity,
    Suggestion,
)
from resume_assistant.models.session import (
    ConversationState,
    Exchange,
    Question,
    QuestionSequence,
    SessionState,
)

__all__ = [
    "AnalysisResult",
    "CATEGORY_WEIGHTS",
    "CareerLevel",
    "ConversationState",
    "DraftDocument",
    "DraftEducation",
    "DraftExperience",
    "DraftPersonalInfo",
    "EducationEntry",
    "Exchange",
    "ExperienceEntry",
    "Identity",
    "InterviewDetails",
    "PersonalInfo",
    "Profile",
    "Question",
    "QuestionSequence",
    "ResumeDocument",
    "ScoreBreakdown",
    "SessionState",
    "Severity",
    "Suggestion",
]
