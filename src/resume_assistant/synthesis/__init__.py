"""Resume synthesis from interview profiles."""

from resume_assistant.synthesis.synthesizer import synthesize, to_draft

__all__ = ["synthesize", "to_draft"]
