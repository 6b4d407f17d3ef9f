"""Conversation state machine driving the resume interview.

Every transition takes a :class:`SessionState` and returns a new one; nothing
here holds state between calls. ``idle -> interviewing -> synthesizing ->
complete`` is the only forward path, and :func:`reset_session` returns any
state to ``idle``.
"""

from __future__ import annotations

import logging

from resume_assistant.errors import SessionStateError
from resume_assistant.interview.extraction import apply_answer
from resume_assistant.interview.intent import detect_entry_level
from resume_assistant.interview.sequencer import plan_questions
from resume_assistant.interview.validation import AnswerValidator, accept_all
from resume_assistant.models.document import ResumeDocument
from resume_assistant.models.profile import CareerLevel, Profile
from resume_assistant.models.session import (
    ConversationState,
    Exchange,
    Question,
    QuestionSequence,
    SessionState,
)

logger = logging.getLogger(__name__)


def _require(session: SessionState, expected: ConversationState, action: str) -> None:
    if session.state is not expected:
        raise SessionStateError(
            f"Cannot {action} while {session.state.value}; expected {expected.value}"
        )


def start_interview(session: SessionState, trigger_text: str) -> SessionState:
    """Begin a new interview from ``idle`` and position on the first question."""
    _require(session, ConversationState.IDLE, "start an interview")

    profile = session.profile
    if detect_entry_level(trigger_text) and profile.career_level is None:
        profile = Profile.model_validate({**profile.model_dump(), "career_level": CareerLevel.ENTRY})

    questions = plan_questions(trigger_text, profile)
    logger.info("Interview started with %d questions", len(questions))
    return session.evolve(
        state=ConversationState.INTERVIEWING,
        profile=profile,
        sequence=QuestionSequence(questions=tuple(questions)),
        document=None,
        context=trigger_text,
        transcript=(),
    )


def current_question(session: SessionState) -> Question | None:
    if session.sequence is None:
        return None
    return session.sequence.current


def progress(session: SessionState) -> tuple[int, int]:
    """Return ``(answered, total)`` for the active sequence."""
    if session.sequence is None:
        return 0, 0
    return session.sequence.cursor, len(session.sequence)


def advance(
    session: SessionState,
    answer: str,
    validator: AnswerValidator = accept_all,
) -> tuple[SessionState, str | None]:
    """Consume ``answer`` for the current question.

    Returns the new session and, when ``validator`` rejected the answer, the
    rejection message. A rejected answer leaves the session unchanged.
    """
    _require(session, ConversationState.INTERVIEWING, "record an answer")
    question = session.sequence.current

    rejection = validator(question, answer)
    if rejection is not None:
        logger.info("Answer to %s rejected by validator", question.field)
        return session, rejection

    sequence = session.sequence.advanced()
    state = ConversationState.SYNTHESIZING if sequence.exhausted else ConversationState.INTERVIEWING
    if sequence.exhausted:
        logger.info("All %d questions answered; synthesis pending", len(sequence))

    updated = session.evolve(
        state=state,
        profile=apply_answer(session.profile, question.field, answer),
        sequence=sequence,
        transcript=(*session.transcript, Exchange(question=question.prompt, answer=answer)),
    )
    return updated, None


def attach_document(session: SessionState, document: ResumeDocument) -> SessionState:
    """Finish synthesis by attaching the generated document."""
    _require(session, ConversationState.SYNTHESIZING, "attach a document")
    logger.info("Resume attached (score %d)", document.score)
    return session.evolve(state=ConversationState.COMPLETE, document=document)


def reset_session(session: SessionState, clear_profile: bool = False) -> SessionState:
    """Return to ``idle``, dropping the sequence, document and transcript."""
    logger.info("Session reset from %s (clear_profile=%s)", session.state.value, clear_profile)
    return SessionState(profile=Profile() if clear_profile else session.profile)
