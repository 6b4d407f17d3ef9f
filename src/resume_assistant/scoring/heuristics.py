"""Per-category document quality heuristics for uploaded resumes.

Each heuristic is a pure function of the extracted text and returns an
integer score in [0, 100]. ``RandomHeuristic`` reproduces the placeholder
ranges of the upload checker and is only meant for demos and tests.
"""

from __future__ import annotations

import random
import re
from dataclasses import dataclass, field
from typing import Protocol

from resume_assistant.interview.extraction import EMAIL_PATTERN, PHONE_PATTERN

SECTION_HEADERS: dict[str, tuple[str, ...]] = {
    "summary": ("summary", "profile", "objective", "about me"),
    "experience": ("experience", "employment", "work history", "professional background"),
    "education": ("education", "academic background"),
    "skills": ("skills", "technical skills", "core competencies"),
}

BULLET_PATTERN = re.compile(r"^\s*([\-\*•●▪◦])\s")
QUANTIFIED_PATTERN = re.compile(r"\d+(?:\.\d+)?\s*(?:%|\+|x\b|k\b|m\b)|\$\s?\d|\b\d{2,}\b", re.IGNORECASE)
DATE_RANGE_PATTERN = re.compile(
    r"\b(?:19|20)\d{2}\s*(?:-|–|—|to)\s*(?:(?:19|20)\d{2}|present|current|now)\b",
    re.IGNORECASE,
)
YEAR_PATTERN = re.compile(r"\b(?:19|20)\d{2}\b")
# Table borders, box drawing and pictographs that ATS parsers tend to drop
ATS_HOSTILE_PATTERN = re.compile(r"[|─-╿▀-▟\U0001f300-\U0001faff]")

ACTION_VERBS = (
    "achieved", "analyzed", "automated", "built", "collaborated", "created",
    "delivered", "designed", "developed", "implemented", "improved", "increased",
    "launched", "led", "managed", "mentored", "negotiated", "optimized",
    "reduced", "streamlined",
)
INDUSTRY_TERMS = (
    "agile", "analytics", "budget", "cloud", "compliance", "cross-functional",
    "customer", "data", "kpi", "project management", "revenue", "roadmap",
    "scalable", "stakeholder", "strategy",
)
DEGREE_TERMS = (
    "associate", "bachelor", "b.a.", "b.s.", "b.sc", "degree", "diploma",
    "doctorate", "master", "m.a.", "m.s.", "m.sc", "mba", "ph.d", "phd",
)
INSTITUTION_TERMS = ("academy", "college", "institute", "school", "university")
KNOWN_SKILLS = (
    "AWS", "Azure", "C++", "Communication", "Docker", "Excel", "Figma", "GCP",
    "Git", "Java", "JavaScript", "Kubernetes", "Leadership", "Linux",
    "Node.js", "Problem-Solving", "Project Management", "Python", "React",
    "Salesforce", "SQL", "Tableau", "Teamwork", "TypeScript",
)

CATEGORIES = ("formatting", "ats_compatibility", "keywords", "experience", "education", "skills")


def _clamp(value: float) -> int:
    return max(0, min(100, round(value)))


def find_terms(text: str, terms: tuple[str, ...]) -> list[str]:
    """Return the terms that occur in ``text`` as whole words, case-insensitively."""
    lowered = text.lower()
    return [t for t in terms if re.search(rf"(?<![\w]){re.escape(t.lower())}(?![\w])", lowered)]


def _count_terms(text: str, terms: tuple[str, ...]) -> int:
    return len(find_terms(text, terms))


@dataclass
class ExtractedDocument:
    """Plain text of an uploaded resume plus the structure the heuristics read."""

    text: str
    lines: list[str] = field(init=False)
    lowered: str = field(init=False)
    words: list[str] = field(init=False)
    sections: set[str] = field(init=False)

    def __post_init__(self) -> None:
        self.lines = [line.strip() for line in self.text.splitlines() if line.strip()]
        self.lowered = self.text.lower()
        self.words = self.text.split()
        self.sections = set()
        for line in self.lines:
            heading = line.lower().strip("#:*- \t")
            if len(heading.split()) > 4:
                continue
            for section, names in SECTION_HEADERS.items():
                if any(heading == n or heading.startswith(n) or heading.endswith(n) for n in names):
                    self.sections.add(section)

    @property
    def empty(self) -> bool:
        return not self.words


class DocumentQualityHeuristic(Protocol):
    category: str

    def score(self, document: ExtractedDocument) -> int: ...


class FormattingHeuristic:
    category = "formatting"

    def score(self, document: ExtractedDocument) -> int:
        if document.empty:
            return 0
        score = 100.0
        if len(document.lines) < 10:
            score -= 20
        markers = {m.group(1) for line in document.lines if (m := BULLET_PATTERN.match(line))}
        if not markers:
            score -= 15
        elif len(markers) > 1:
            score -= 10
        long_lines = sum(1 for line in document.lines if len(line) > 120)
        score -= min(20, long_lines * 4)
        if len(document.words) < 150:
            score -= 15
        elif len(document.words) > 1000:
            score -= 10
        return _clamp(score)


class ATSCompatibilityHeuristic:
    category = "ats_compatibility"

    def score(self, document: ExtractedDocument) -> int:
        if document.empty:
            return 0
        score = 40.0 + 10 * len(document.sections)
        if EMAIL_PATTERN.search(document.text):
            score += 10
        if PHONE_PATTERN.search(document.text):
            score += 10
        hostile_lines = sum(1 for line in document.lines if ATS_HOSTILE_PATTERN.search(line))
        score -= min(30, hostile_lines * 5)
        return _clamp(score)


class KeywordHeuristic:
    category = "keywords"

    def __init__(self, target_keywords: tuple[str, ...] = ()):
        self.target_keywords = tuple(k.lower() for k in target_keywords)

    def score(self, document: ExtractedDocument) -> int:
        if document.empty:
            return 0
        verb_score = min(_count_terms(document.lowered, ACTION_VERBS) * 6, 60)
        term_score = min(_count_terms(document.lowered, INDUSTRY_TERMS) * 5, 40)
        if not self.target_keywords:
            return _clamp(verb_score + term_score)
        coverage = _count_terms(document.lowered, self.target_keywords) / len(self.target_keywords)
        return _clamp(0.4 * (verb_score + term_score) + 60 * coverage)


class ExperienceHeuristic:
    category = "experience"

    def score(self, document: ExtractedDocument) -> int:
        if document.empty:
            return 0
        score = 15.0 if "experience" in document.sections else 0.0
        score += min(len(DATE_RANGE_PATTERN.findall(document.text)) * 15, 45)
        quantified = sum(
            1 for line in document.lines if BULLET_PATTERN.match(line) and QUANTIFIED_PATTERN.search(line)
        )
        score += min(quantified * 8, 40)
        return _clamp(score)


class EducationHeuristic:
    category = "education"

    def score(self, document: ExtractedDocument) -> int:
        if document.empty:
            return 0
        score = 25.0 if "education" in document.sections else 0.0
        if _count_terms(document.lowered, DEGREE_TERMS):
            score += 40
        if _count_terms(document.lowered, INSTITUTION_TERMS):
            score += 25
        if YEAR_PATTERN.search(document.text):
            score += 10
        return _clamp(score)


class SkillsHeuristic:
    category = "skills"

    def score(self, document: ExtractedDocument) -> int:
        if document.empty:
            return 0
        score = 30.0 if "skills" in document.sections else 0.0
        score += min(_count_terms(document.lowered, KNOWN_SKILLS) * 7, 70)
        return _clamp(score)


def text_heuristics(target_keywords: tuple[str, ...] = ()) -> list[DocumentQualityHeuristic]:
    return [
        FormattingHeuristic(),
        ATSCompatibilityHeuristic(),
        KeywordHeuristic(target_keywords),
        ExperienceHeuristic(),
        EducationHeuristic(),
        SkillsHeuristic(),
    ]


# Inclusive score ranges of the placeholder upload checker
RANDOM_RANGES: dict[str, tuple[int, int]] = {
    "formatting": (70, 99),
    "ats_compatibility": (65, 89),
    "keywords": (55, 89),
    "experience": (75, 94),
    "education": (80, 94),
    "skills": (70, 94),
}


class RandomHeuristic:
    """Bounded random score that ignores the document."""

    def __init__(self, category: str, rng: random.Random):
        self.category = category
        self.low, self.high = RANDOM_RANGES[category]
        self.rng = rng

    def score(self, document: ExtractedDocument) -> int:
        return self.rng.randint(self.low, self.high)


def random_heuristics(seed: int | None = None) -> list[DocumentQualityHeuristic]:
    rng = random.Random(seed)
    return [RandomHeuristic(category, rng) for category in CATEGORIES]
