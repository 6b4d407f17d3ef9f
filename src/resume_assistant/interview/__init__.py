"""Interview sequencing, answer attribution and the conversation state machine."""

from resume_assistant.interview.conversation import (
    advance,
    attach_document,
    current_question,
    progress,
    reset_session,
    start_interview,
)
from resume_assistant.interview.intent import Intent, classify_intent
from resume_assistant.interview.sequencer import generate_questions, plan_questions

__all__ = [
    "Intent",
    "advance",
    "attach_document",
    "classify_intent",
    "current_question",
    "generate_questions",
    "plan_questions",
    "progress",
    "reset_session",
    "start_interview",
]
