"""Attribute free-text interview answers to Profile fields."""

from __future__ import annotations

import logging
import re

from resume_assistant.models.profile import CareerLevel, Profile

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"[\w.+-]+@[\w-]+(?:\.[\w-]+)+")
PHONE_PATTERN = re.compile(r"\+?\(?\d[\d\s().-]{5,}\d")
URL_PATTERN = re.compile(r"(?:https?://)?(?:www\.)?[\w-]+(?:\.[\w-]+)+(?:/[^\s,;]*)?", re.IGNORECASE)
NUMBER_PATTERN = re.compile(r"\d+")
LIST_SPLIT_PATTERN = re.compile(r"[,;\n]|\band\b", re.IGNORECASE)

NEGATIVE_ANSWERS = {"no", "none", "n/a", "na", "nope", "not really", "nothing", "-", "skip"}

LIST_FIELDS = {"technical_skills", "soft_skills", "certifications"}

# Upper bounds (exclusive) on years of experience for each level
CAREER_LEVEL_BANDS: list[tuple[int, CareerLevel]] = [
    (2, CareerLevel.ENTRY),
    (6, CareerLevel.MID),
    (12, CareerLevel.SENIOR),
]


def is_negative(answer: str) -> bool:
    return answer.strip().lower().rstrip(".!") in NEGATIVE_ANSWERS


def split_list(answer: str) -> list[str]:
    """Split an enumerated answer such as "Python, SQL and Git" into items."""
    items = [item.strip(" .-*•\t") for item in LIST_SPLIT_PATTERN.split(answer)]
    return [item for item in items if item and not is_negative(item)]


def infer_career_level(years: int) -> CareerLevel:
    for upper, level in CAREER_LEVEL_BANDS:
        if years < upper:
            return level
    return CareerLevel.EXECUTIVE


def _first_match(pattern: re.Pattern[str], answer: str) -> str:
    match = pattern.search(answer)
    return match.group(0).strip() if match else answer.strip()


def _normalize_personal(name: str, answer: str) -> str | None:
    # A name is always kept; "Na" is a real name
    if name == "name":
        return answer.strip()
    if is_negative(answer):
        return None
    if name == "email":
        return _first_match(EMAIL_PATTERN, answer)
    if name == "phone":
        return _first_match(PHONE_PATTERN, answer)
    if name in ("linkedin", "website"):
        return _first_match(URL_PATTERN, answer)
    return answer.strip()


def apply_answer(profile: Profile, field: str, answer: str) -> Profile:
    """Return a copy of ``profile`` with ``answer`` written into ``field``.

    ``field`` is a dotted path as carried by :class:`Question`. Blank answers
    and "none"-style answers leave the profile untouched.
    """
    if not answer.strip():
        return profile

    section, _, name = field.partition(".")
    data = profile.model_dump()

    if section == "personal_info":
        value = _normalize_personal(name, answer)
        if value is None:
            return profile
        data["personal_info"][name] = value
    elif section == "details":
        if name in LIST_FIELDS:
            items = split_list(answer)
            if not items:
                return profile
            data["details"][name] = items
        else:
            if is_negative(answer):
                return profile
            data["details"][name] = answer.strip()
    elif section == "years_experience":
        match = NUMBER_PATTERN.search(answer)
        if match is None:
            logger.debug("No number in years-of-experience answer: %r", answer)
            return profile
        years = int(match.group(0))
        data["years_experience"] = years
        if data["career_level"] is None:
            data["career_level"] = infer_career_level(years)
    elif section in ("target_role", "industry"):
        if is_negative(answer):
            return profile
        data[section] = answer.strip()
    else:
        raise ValueError(f"Unknown profile field: {field!r}")

    logger.debug("Attributed answer to %s", field)
    return Profile.model_validate(data)
