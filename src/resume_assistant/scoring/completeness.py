"""Completeness score for a resume being assembled section by section."""

from __future__ import annotations

import math

from resume_assistant.models.document import DraftDocument

PERSONAL_FIELD_COUNT = 6
PERSONAL_POINTS = 20
EXPERIENCE_POINTS_PER_ENTRY = 8
EXPERIENCE_POINTS_MAX = 25
EDUCATION_POINTS = 15
CERTIFICATION_POINTS = 10

# (minimum length exclusive, points)
SUMMARY_TIERS = [(50, 15), (20, 10)]
# (minimum non-empty skills, points)
SKILL_TIERS = [(5, 15), (3, 10)]


def _tier_points(value: int, tiers: list[tuple[int, int]], *, strict: bool) -> int:
    for threshold, points in tiers:
        if value > threshold if strict else value >= threshold:
            return points
    return 0


def score_draft(draft: DraftDocument) -> int:
    """Score a draft from 0 to 100 by how many sections are filled in.

    Personal info 20, summary 15, experience 25, education 15, skills 15,
    certifications 10.
    """
    score = draft.personal_info.filled_count() / PERSONAL_FIELD_COUNT * PERSONAL_POINTS
    score += _tier_points(len(draft.summary), SUMMARY_TIERS, strict=True)
    score += min(len(draft.experience) * EXPERIENCE_POINTS_PER_ENTRY, EXPERIENCE_POINTS_MAX)
    if draft.education:
        score += EDUCATION_POINTS

    skills = [s for s in draft.skills if s.strip()]
    score += _tier_points(len(skills), SKILL_TIERS, strict=False)

    if any(c.strip() for c in draft.certifications):
        score += CERTIFICATION_POINTS

    return max(0, min(math.floor(score + 0.5), 100))
