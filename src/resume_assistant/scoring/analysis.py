"""Category breakdown and improvement suggestions for an existing resume."""

from __future__ import annotations

import logging
from typing import Sequence

from resume_assistant.config import AnalysisConfig
from resume_assistant.models.score import AnalysisResult, ScoreBreakdown, Severity, Suggestion
from resume_assistant.scoring.heuristics import (
    CATEGORIES,
    DocumentQualityHeuristic,
    ExtractedDocument,
    random_heuristics,
    text_heuristics,
)

logger = logging.getLogger(__name__)

# (category field, threshold, severity, suggestion category, message), checked in order
SUGGESTION_RULES: list[tuple[str, int, Severity, str, str]] = [
    (
        "formatting", 80, Severity.ADVISORY, "Formatting",
        "Consider using a cleaner, more professional template with consistent spacing and fonts.",
    ),
    (
        "ats_compatibility", 75, Severity.BLOCKING, "ATS Compatibility",
        "Your resume may not pass ATS systems. Use standard section headers and avoid complex formatting.",
    ),
    (
        "keywords", 70, Severity.ADVISORY, "Keywords",
        "Include more industry-specific keywords and skills relevant to your target role.",
    ),
    (
        "experience", 80, Severity.ADVISORY, "Experience",
        "Add more quantifiable achievements and specific results to your work experience.",
    ),
    (
        "skills", 75, Severity.ADVISORY, "Skills",
        "Expand your skills section with more relevant technical and soft skills.",
    ),
]

EXCELLENT_THRESHOLD = 85
EXCELLENT_MESSAGE = "Excellent resume! You're well-positioned for your job search."

SCORE_LABELS: list[tuple[int, str]] = [
    (90, "Excellent"),
    (80, "Very Good"),
    (70, "Good"),
    (60, "Fair"),
]


def score_label(score: int) -> str:
    for threshold, label in SCORE_LABELS:
        if score >= threshold:
            return label
    return "Needs Improvement"


def derive_suggestions(breakdown: ScoreBreakdown) -> list[Suggestion]:
    """Map low category scores to suggestions; each rule fires independently."""
    suggestions = [
        Suggestion(severity=severity, category=category, message=message)
        for name, threshold, severity, category, message in SUGGESTION_RULES
        if getattr(breakdown, name) < threshold
    ]
    if breakdown.overall >= EXCELLENT_THRESHOLD:
        suggestions.append(
            Suggestion(severity=Severity.POSITIVE, category="Overall", message=EXCELLENT_MESSAGE)
        )
    return suggestions


def build_heuristics(config: AnalysisConfig) -> list[DocumentQualityHeuristic]:
    if config.heuristics == "random":
        logger.warning("Using random placeholder heuristics; scores do not reflect the document")
        return random_heuristics(config.seed)
    return text_heuristics()


def analyze_document(
    text: str,
    heuristics: Sequence[DocumentQualityHeuristic] | None = None,
) -> AnalysisResult:
    """Score extracted resume text in every category and derive suggestions."""
    if heuristics is None:
        heuristics = text_heuristics()

    by_category = {h.category: h for h in heuristics}
    missing = [c for c in CATEGORIES if c not in by_category]
    if missing:
        raise ValueError(f"No heuristic for categories: {', '.join(missing)}")

    document = ExtractedDocument(text)
    breakdown = ScoreBreakdown(**{c: by_category[c].score(document) for c in CATEGORIES})
    suggestions = derive_suggestions(breakdown)
    logger.info(
        "Analyzed document (%d words): overall %d, %d suggestions",
        len(document.words), breakdown.overall, len(suggestions),
    )
    return AnalysisResult(
        breakdown=breakdown,
        suggestions=suggestions,
        label=score_label(breakdown.overall),
    )
