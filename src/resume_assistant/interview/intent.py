"""Keyword-based classification of what the user is asking for."""

from __future__ import annotations

import re
from enum import Enum


class Intent(str, Enum):
    RESUME = "resume"
    COVER_LETTER = "cover_letter"
    OPTIMIZE = "optimize"
    UNKNOWN = "unknown"


# Checked in order; the first matching intent wins.
INTENT_PATTERNS: list[tuple[Intent, re.Pattern[str]]] = [
    (Intent.RESUME, re.compile(r"resume|r[ée]sum[ée]|\bcv\b", re.IGNORECASE)),
    (Intent.COVER_LETTER, re.compile(r"cover\s+letter", re.IGNORECASE)),
    (Intent.OPTIMIZE, re.compile(r"improve|optimi[sz]e", re.IGNORECASE)),
]

ENTRY_LEVEL_MARKERS = ("graduate", "entry", "first job")
CAREER_CHANGE_MARKERS = ("career change", "transition")


def classify_intent(text: str) -> Intent:
    """Map free text onto one of the closed set of intents."""
    for intent, pattern in INTENT_PATTERNS:
        if pattern.search(text):
            return intent
    return Intent.UNKNOWN


def detect_entry_level(text: str) -> bool:
    lowered = text.lower()
    return any(marker in lowered for marker in ENTRY_LEVEL_MARKERS)


def detect_career_change(text: str) -> bool:
    lowered = text.lower()
    return any(marker in lowered for marker in CAREER_CHANGE_MARKERS)
