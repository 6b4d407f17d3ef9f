"""Optional answer validation hooks for the interview."""

from __future__ import annotations

from typing import Callable

from resume_assistant.interview.extraction import (
    EMAIL_PATTERN,
    NUMBER_PATTERN,
    PHONE_PATTERN,
    URL_PATTERN,
    is_negative,
)
from resume_assistant.models.session import Question

# Returns None to accept the answer, or a message explaining the rejection.
AnswerValidator = Callable[[Question, str], str | None]


def accept_all(question: Question, answer: str) -> str | None:
    return None


def default_validator(question: Question, answer: str) -> str | None:
    """Check answer shape for the fields that have one."""
    if question.field == "personal_info.email" and not EMAIL_PATTERN.search(answer):
        return "That doesn't look like an email address. Could you double-check it?"
    if question.field == "personal_info.phone" and not PHONE_PATTERN.search(answer):
        return "That doesn't look like a phone number. Please include the digits."
    if question.field == "personal_info.linkedin":
        if not is_negative(answer) and not URL_PATTERN.search(answer):
            return "Please share the profile URL, or answer 'no' if you don't have one."
    if question.field == "years_experience" and not NUMBER_PATTERN.search(answer):
        return "Please answer with a number of years (for example, 5)."
    return None
