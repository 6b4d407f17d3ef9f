"""Guided resume interview, synthesis and scoring."""

from resume_assistant.assistant import ResumeAssistant, respond

__all__ = ["ResumeAssistant", "respond"]
