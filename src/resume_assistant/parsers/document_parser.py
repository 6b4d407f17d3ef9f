"""Accept uploaded resumes and extract their plain text."""

from __future__ import annotations

import logging
import mimetypes
import re
from pathlib import Path

from resume_assistant.errors import UnsupportedDocumentError

logger = logging.getLogger(__name__)

PDF_MIME = "application/pdf"
DOCX_MIME = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
ACCEPTED_MIME_TYPES = (PDF_MIME, DOCX_MIME)

# Not every platform's mimetypes table knows .docx
_SUFFIX_MIME = {".pdf": PDF_MIME, ".docx": DOCX_MIME}


def resolve_mime_type(path: str | Path, mime_type: str | None = None) -> str | None:
    """Return the declared MIME type, or guess one from the file suffix."""
    if mime_type:
        return mime_type.split(";")[0].strip().lower()
    suffix = Path(path).suffix.lower()
    if suffix in _SUFFIX_MIME:
        return _SUFFIX_MIME[suffix]
    guessed, _ = mimetypes.guess_type(str(path))
    return guessed


def check_upload(path: str | Path, mime_type: str | None = None) -> str:
    """Validate the upload type, returning the accepted MIME type."""
    resolved = resolve_mime_type(path, mime_type)
    if resolved not in ACCEPTED_MIME_TYPES:
        logger.warning("Rejected upload %s (type %s)", Path(path).name, resolved)
        raise UnsupportedDocumentError(resolved)
    return resolved


def extract_text(path: str | Path, mime_type: str | None = None) -> str:
    """Extract clean plain text from an accepted PDF or DOCX upload."""
    path = Path(path)
    resolved = check_upload(path, mime_type)
    if resolved == PDF_MIME:
        raw = _parse_pdf(path)
    else:
        raw = _parse_docx(path)
    text = clean_text(raw)
    logger.debug("Extracted %d characters from %s", len(text), path.name)
    return text


def clean_text(text: str) -> str:
    """Normalize extraction artifacts: zero-width characters, bullets, spacing."""
    text = re.sub(r"[\u200b\u200c\u200d\u00ad\u2060\ufeff]", "", text)

    # Normalize bullet glyphs (●, •, ◦, ◆, ■, ▪, ★, ○) to "-"
    text = re.sub(r"^(\s*)[●•◦◆■▪★○]\s*", r"\1- ", text, flags=re.MULTILINE)

    lines = [re.sub(r"[ \t]{2,}", " ", line).rstrip() for line in text.splitlines()]
    text = "\n".join(lines)
    text = re.sub(r"\n{3,}", "\n\n", text)
    return text.strip()


def _parse_pdf(path: Path) -> str:
    import fitz  # pymupdf

    doc = fitz.open(str(path))
    text = []
    for page in doc:
        text.append(page.get_text())
    doc.close()
    return "\n".join(text)


def _parse_docx(path: Path) -> str:
    from docx import Document

    doc = Document(str(path))
    return "\n".join(p.text for p in doc.paragraphs if p.text.strip())
