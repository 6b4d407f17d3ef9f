"""Exception types raised by the assistant core."""

from __future__ import annotations


class ConfigError(ValueError):
    """Raised when a config.yaml value is out of range."""


class SessionStateError(RuntimeError):
    """Raised when an operation is invoked in a conversation state that cannot accept it."""


class UnsupportedDocumentError(ValueError):
    """Raised when an uploaded file is neither a PDF nor a .docx document."""

    def __init__(self, mime_type: str | None):
        self.mime_type = mime_type
        super().__init__("Please upload a PDF or Word document (.docx)")
