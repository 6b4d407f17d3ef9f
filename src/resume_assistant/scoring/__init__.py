"""Completeness and analytical scoring of resumes."""

from resume_assistant.scoring.analysis import (
    analyze_document,
    derive_suggestions,
    score_label,
)
from resume_assistant.scoring.completeness import score_draft

__all__ = ["analyze_document", "derive_suggestions", "score_draft", "score_label"]
