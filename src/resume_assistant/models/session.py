"""Pydantic models for the per-session conversation state."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, model_validator

from resume_assistant.models.document import ResumeDocument
from resume_assistant.models.profile import Profile


class ConversationState(str, Enum):
    IDLE = "idle"
    INTERVIEWING = "interviewing"
    SYNTHESIZING = "synthesizing"
    COMPLETE = "complete"


class Question(BaseModel):
    prompt: str
    field: str  # dotted Profile path the answer is attributed to

    model_config = {"frozen": True}


class QuestionSequence(BaseModel):
    questions: tuple[Question, ...]
    cursor: int = 0

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _check_cursor(self) -> QuestionSequence:
        if not 0 <= self.cursor <= len(self.questions):
            raise ValueError(
                f"cursor {self.cursor} out of range for a sequence of {len(self.questions)} questions"
            )
        return self

    def __len__(self) -> int:
        return len(self.questions)

    @property
    def exhausted(self) -> bool:
        return self.cursor == len(self.questions)

    @property
    def current(self) -> Question | None:
        if self.exhausted:
            return None
        return self.questions[self.cursor]

    def advanced(self) -> QuestionSequence:
        # Rebuilt rather than copied so the cursor bound is re-checked
        return QuestionSequence(questions=self.questions, cursor=self.cursor + 1)


class Exchange(BaseModel):
    question: str
    answer: str

    model_config = {"frozen": True}


class SessionState(BaseModel):
    state: ConversationState = ConversationState.IDLE
    profile: Profile = Field(default_factory=Profile)
    sequence: QuestionSequence | None = None
    document: ResumeDocument | None = None
    context: str = ""
    transcript: tuple[Exchange, ...] = ()

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _check_state(self) -> SessionState:
        if self.state is ConversationState.IDLE:
            if self.sequence is not None:
                raise ValueError("idle session cannot carry a question sequence")
        elif self.sequence is None:
            raise ValueError(f"{self.state.value} session requires a question sequence")
        elif self.state is ConversationState.INTERVIEWING:
            if self.sequence.exhausted:
                raise ValueError("interviewing session has no unanswered question")
        elif not self.sequence.exhausted:
            raise ValueError(f"{self.state.value} session has unanswered questions")
        if self.state is ConversationState.COMPLETE and self.document is None:
            raise ValueError("complete session requires a document")
        return self

    def evolve(self, **changes) -> SessionState:
        """Return a validated copy with ``changes`` applied."""
        return SessionState(**{**dict(self), **changes})
