"""Assistant response generator: one reply per user input."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from resume_assistant.config import AppConfig
from resume_assistant.errors import SessionStateError
from resume_assistant.interview.conversation import (
    advance,
    attach_document,
    current_question,
    reset_session,
    start_interview,
)
from resume_assistant.interview.intent import Intent, classify_intent, detect_career_change
from resume_assistant.interview.validation import accept_all, default_validator
from resume_assistant.models.document import DraftDocument
from resume_assistant.models.score import AnalysisResult
from resume_assistant.models.session import ConversationState, SessionState
from resume_assistant.parsers.document_parser import extract_text
from resume_assistant.scoring.analysis import analyze_document, build_heuristics
from resume_assistant.scoring.completeness import score_draft
from resume_assistant.synthesis.synthesizer import synthesize

logger = logging.getLogger(__name__)

GREETING = (
    "Hello! I'm your resume assistant. I'll help you create a professional resume "
    "by gathering detailed information step by step.\n\n"
    "To get started, I can help you with:\n\n"
    "- Complete Resume Creation: I'll ask detailed questions about your background\n"
    "- Cover Letter Writing: tailored to specific job applications\n"
    "- Resume Optimization: improve existing resumes\n\n"
    "What would you like to work on today? Just tell me something like:\n"
    "- 'I need a resume for a software engineer position'\n"
    "- 'Help me create a marketing resume'\n"
    "- 'I'm a recent graduate looking for my first job'"
)

INTERVIEW_INTRO = (
    "Perfect! I'll help you create a professional resume. I'm going to ask you detailed "
    "questions to build a comprehensive profile. This ensures your resume stands out and "
    "passes ATS (Applicant Tracking System) screening.\n\n"
)

ACKNOWLEDGEMENT = "Great! I've noted that information.\n\n"

INTERVIEW_CLOSING = (
    "Excellent! I have all the information I need. Let me now generate your professional "
    "resume with ATS optimization, industry-specific keywords, and achievement-focused "
    "content. This will take just a moment..."
)

COVER_LETTER_PROMPT = (
    "I'll help you create a compelling cover letter. First, let me know:\n\n"
    "1. What specific job are you applying for?\n"
    "2. What company is this for?\n"
    "3. Do you have the job description? (This helps me tailor the content)\n"
    "4. What are your top 3 achievements you want to highlight?"
)

OPTIMIZE_PROMPT = (
    "I can help optimize your resume for better ATS compatibility and impact. Please tell me:\n\n"
    "1. What industry are you targeting?\n"
    "2. What specific areas do you want to improve? (e.g., work experience descriptions, "
    "skills section, formatting)\n"
    "3. Are you applying for a specific role or company?"
)

CLARIFYING_PROMPT = (
    "I understand! Let me help you with that. Could you provide a bit more detail about "
    "what you're looking for? For example:\n\n"
    "- Are you creating a new resume or updating an existing one?\n"
    "- What's your target role or industry?\n"
    "- What's your experience level?\n\n"
    "The more specific you are, the better I can assist you!"
)

SYNTHESIZING_NOTICE = (
    "I'm still generating your resume. It will be ready in just a moment."
)

READY_NOTICE = (
    "Your resume is ready with a completeness score of {score}/100. "
    "Say 'reset' to start over, or ask me about a cover letter or optimizing your resume."
)


class ResumeAssistant:
    """Drives a resume session from free-text input.

    Sessions are passed in and returned; the assistant itself only holds
    configuration, so one instance can serve any number of sessions.
    """

    def __init__(self, config: AppConfig | None = None) -> None:
        self.config = config or AppConfig()
        self.validator = default_validator if self.config.interview.validate_answers else accept_all

    def respond(self, text: str, session: SessionState) -> tuple[str, SessionState]:
        """Produce the reply to ``text`` and the session that follows it."""
        state = session.state
        if state is ConversationState.IDLE:
            return self._respond_idle(text, session)
        if state is ConversationState.INTERVIEWING:
            return self._respond_interviewing(text, session)
        if state is ConversationState.SYNTHESIZING:
            logger.debug("Input received while synthesizing; not consumed")
            return SYNTHESIZING_NOTICE, session
        return self._respond_complete(text, session)

    def _respond_idle(self, text: str, session: SessionState) -> tuple[str, SessionState]:
        intent = classify_intent(text)
        logger.info("Idle input classified as %s", intent.value)
        if intent is Intent.RESUME:
            if detect_career_change(text):
                logger.info("Career change mentioned in request")
            session = start_interview(session, text)
            question = current_question(session)
            return INTERVIEW_INTRO + question.prompt, session
        if intent is Intent.COVER_LETTER:
            return COVER_LETTER_PROMPT, session
        if intent is Intent.OPTIMIZE:
            return OPTIMIZE_PROMPT, session
        return CLARIFYING_PROMPT, session

    def _respond_interviewing(self, text: str, session: SessionState) -> tuple[str, SessionState]:
        session, rejection = advance(session, text, self.validator)
        if rejection is not None:
            return f"{rejection}\n\n{current_question(session).prompt}", session
        if session.state is ConversationState.SYNTHESIZING:
            return INTERVIEW_CLOSING, session
        return ACKNOWLEDGEMENT + current_question(session).prompt, session

    def _respond_complete(self, text: str, session: SessionState) -> tuple[str, SessionState]:
        intent = classify_intent(text)
        if intent is Intent.COVER_LETTER:
            return COVER_LETTER_PROMPT, session
        if intent is Intent.OPTIMIZE:
            return OPTIMIZE_PROMPT, session
        return READY_NOTICE.format(score=session.document.score), session

    async def finish(self, session: SessionState) -> SessionState:
        """Synthesize the resume for a session whose interview just ended."""
        if session.state is not ConversationState.SYNTHESIZING:
            raise SessionStateError(
                f"Cannot synthesize while {session.state.value}; expected synthesizing"
            )
        delay = self.config.interview.synthesis_delay_seconds
        if delay:
            await asyncio.sleep(delay)
        document = synthesize(session.profile, session.context, defaults=self.config.synthesis)
        return attach_document(session, document)

    async def respond_async(self, text: str, session: SessionState) -> tuple[str, SessionState]:
        """Like :meth:`respond`, running synthesis when the input ends the interview."""
        was_interviewing = session.state is ConversationState.INTERVIEWING
        reply, session = self.respond(text, session)
        if was_interviewing and session.state is ConversationState.SYNTHESIZING:
            session = await self.finish(session)
        return reply, session

    def reset(self, session: SessionState, clear_profile: bool = False) -> SessionState:
        return reset_session(session, clear_profile=clear_profile)

    def score_draft(self, draft: DraftDocument) -> int:
        return score_draft(draft)

    def analyze_uploaded_document(
        self, path: str | Path, mime_type: str | None = None
    ) -> AnalysisResult:
        """Extract an uploaded PDF or DOCX and score it per category."""
        text = extract_text(path, mime_type)
        return analyze_document(text, build_heuristics(self.config.analysis))


def respond(text: str, session: SessionState) -> tuple[str, SessionState]:
    """Reply to ``text`` using a default-configured assistant."""
    return ResumeAssistant().respond(text, session)
