"""Tests for the interview state machine."""

import pytest

from resume_assistant.errors import SessionStateError
from resume_assistant.interview.conversation import (
    advance,
    attach_document,
    current_question,
    progress,
    reset_session,
    start_interview,
)
from resume_assistant.interview.validation import default_validator
from resume_assistant.models.profile import CareerLevel, Profile
from resume_assistant.models.session import ConversationState, SessionState
from resume_assistant.synthesis.synthesizer import synthesize

TRIGGER = "I need a resume for a software engineer position"


def _finish_answers(session: SessionState) -> SessionState:
    while session.state is ConversationState.INTERVIEWING:
        session, _ = advance(session, "n/a")
    return session


class TestStartInterview:
    def test_starts_at_first_question(self, idle_session):
        session = start_interview(idle_session, TRIGGER)
        assert session.state is ConversationState.INTERVIEWING
        assert current_question(session).field == "personal_info.name"
        assert progress(session) == (0, 24)
        assert session.context == TRIGGER
        assert session.transcript == ()

    def test_entry_level_trigger_sets_career_level(self, idle_session):
        session = start_interview(idle_session, "Recent graduate, need a resume")
        assert session.profile.career_level is CareerLevel.ENTRY
        assert progress(session) == (0, 25)

    def test_existing_career_level_is_kept(self):
        session = SessionState(profile=Profile(career_level=CareerLevel.MID))
        session = start_interview(session, "Recent graduate, need a resume")
        assert session.profile.career_level is CareerLevel.MID

    def test_only_from_idle(self, idle_session):
        session = start_interview(idle_session, TRIGGER)
        with pytest.raises(SessionStateError):
            start_interview(session, TRIGGER)

    def test_idle_has_no_question(self, idle_session):
        assert current_question(idle_session) is None
        assert progress(idle_session) == (0, 0)


class TestAdvance:
    def test_answer_is_attributed_to_current_question(self, idle_session):
        session = start_interview(idle_session, TRIGGER)
        session, rejection = advance(session, "Jane Doe")
        assert rejection is None
        assert session.profile.personal_info.name == "Jane Doe"
        assert current_question(session).field == "personal_info.email"
        assert progress(session) == (1, 24)
        assert session.transcript[0].answer == "Jane Doe"
        assert session.transcript[0].question.endswith("What's your full name?")

    def test_context_stays_the_trigger(self, idle_session):
        session = start_interview(idle_session, TRIGGER)
        session, _ = advance(session, "Jane Doe")
        assert session.context == TRIGGER

    def test_last_answer_moves_to_synthesizing(self, idle_session):
        session = _finish_answers(start_interview(idle_session, TRIGGER))
        assert session.state is ConversationState.SYNTHESIZING
        assert session.sequence.exhausted
        assert len(session.transcript) == 24
        assert current_question(session) is None

    def test_outside_interviewing_raises(self, idle_session):
        with pytest.raises(SessionStateError, match="idle"):
            advance(idle_session, "hello")

    def test_after_last_answer_raises(self, idle_session):
        session = _finish_answers(start_interview(idle_session, TRIGGER))
        with pytest.raises(SessionStateError):
            advance(session, "one more thing")

    def test_rejected_answer_leaves_session(self, idle_session):
        session = start_interview(idle_session, TRIGGER)
        session, _ = advance(session, "Jane Doe")
        updated, rejection = advance(session, "not telling", default_validator)
        assert rejection is not None
        assert updated is session

    def test_valid_answer_passes_validator(self, idle_session):
        session = start_interview(idle_session, TRIGGER)
        session, _ = advance(session, "Jane Doe")
        session, rejection = advance(session, "jane@example.com", default_validator)
        assert rejection is None
        assert session.profile.personal_info.email == "jane@example.com"


class TestAttachAndReset:
    def test_attach_document(self, idle_session):
        session = _finish_answers(start_interview(idle_session, TRIGGER))
        session = attach_document(session, synthesize(session.profile, session.context))
        assert session.state is ConversationState.COMPLETE
        assert session.document is not None

    def test_attach_requires_synthesizing(self, idle_session):
        session = start_interview(idle_session, TRIGGER)
        with pytest.raises(SessionStateError):
            attach_document(session, synthesize(Profile()))

    def test_reset_keeps_profile(self, idle_session):
        session = start_interview(idle_session, TRIGGER)
        session, _ = advance(session, "Jane Doe")
        reset = reset_session(session)
        assert reset.state is ConversationState.IDLE
        assert reset.sequence is None
        assert reset.transcript == ()
        assert reset.profile.personal_info.name == "Jane Doe"

    def test_reset_clears_profile(self, idle_session):
        session = start_interview(idle_session, TRIGGER)
        session, _ = advance(session, "Jane Doe")
        assert reset_session(session, clear_profile=True).profile == Profile()

    def test_reset_is_idempotent(self, idle_session):
        session = start_interview(idle_session, TRIGGER)
        once = reset_session(session)
        assert reset_session(once) == once

    def test_known_answers_not_asked_again(self, idle_session):
        session = start_interview(idle_session, TRIGGER)
        session, _ = advance(session, "Jane Doe")
        session = start_interview(reset_session(session), TRIGGER)
        assert progress(session) == (0, 23)
