"""Resume document decoding: PDF, DOCX and plain text to a single text body."""

import io
import logging
from typing import Literal

import pdfplumber
from docx import Document

logger = logging.getLogger(__name__)

FileType = Literal["pdf", "docx", "doc", "txt", "unknown"]

# ZIP local-file, empty-archive and spanned-archive signatures
_ZIP_SIGNATURES = (b"PK\x03\x04", b"PK\x05\x06", b"PK\x07\x08")

# Below this, extraction almost certainly hit an image-only or protected file
MIN_TEXT_LENGTH = 20


class DocumentParseError(ValueError):
    """A resume document could not be decoded into usable text."""


def detect_file_type(filename: str | None, content_type: str | None = None) -> FileType:
    """Detect file type from extension first, then MIME type."""
    name = (filename or "").lower()
    mime = (content_type or "").lower()

    if name.endswith(".pdf"):
        return "pdf"
    if name.endswith(".docx"):
        return "docx"
    if name.endswith(".doc"):
        return "doc"
    if name.endswith((".txt", ".text")):
        return "txt"

    if mime == "application/pdf":
        return "pdf"
    if mime == "application/vnd.openxmlformats-officedocument.wordprocessingml.document":
        return "docx"
    if mime == "application/msword":
        return "doc"
    if mime.startswith("text/"):
        return "txt"
    return "unknown"


def extract_text_pdf(pdf_bytes: bytes) -> str:
    """Extract all text from a PDF file."""
    if not pdf_bytes.startswith(b"%PDF"):
        raise DocumentParseError("Invalid PDF file. The file may be corrupted or not a valid PDF.")
    try:
        with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
            if not pdf.pages:
                raise DocumentParseError("PDF file appears to be empty or corrupted.")
            pages = [page.extract_text() or "" for page in pdf.pages]
    except DocumentParseError:
        raise
    except Exception as e:
        logger.warning("pdfplumber failed to read document: %s", e)
        raise DocumentParseError(f"Failed to parse PDF: {e}") from e
    return "\n".join(pages).strip()


def extract_text_docx(docx_bytes: bytes) -> str:
    """Extract all text from a DOCX file."""
    if not docx_bytes.startswith(_ZIP_SIGNATURES):
        raise DocumentParseError("Invalid DOCX file. The file may be corrupted or not a valid DOCX document.")
    try:
        doc = Document(io.BytesIO(docx_bytes))
    except Exception as e:
        logger.warning("python-docx failed to read document: %s", e)
        raise DocumentParseError(
            "Invalid DOCX file format. Please ensure the file is a valid Microsoft Word document (.docx)."
        ) from e
    return "\n".join(p.text for p in doc.paragraphs).strip()


def extract_text_txt(raw: bytes) -> str:
    try:
        return raw.decode("utf-8-sig").strip()
    except UnicodeDecodeError as e:
        raise DocumentParseError("Text file is not valid UTF-8.") from e


def extract_text(content: bytes, filename: str | None, content_type: str | None = None) -> str:
    """Decode an uploaded resume into text.

    Raises DocumentParseError for unsupported formats, undecodable files and
    files that yield too little text to be meaningful.
    """
    file_type = detect_file_type(filename, content_type)

    if file_type == "doc":
        raise DocumentParseError(
            "Old Word format (.doc) is not supported. Please save your resume as a .docx file or export it as PDF."
        )
    if file_type == "unknown":
        raise DocumentParseError(
            "Unsupported file type. Please upload a PDF, DOCX, or TXT file. "
            f"Detected file: {filename} ({content_type or 'unknown type'})"
        )

    if file_type == "pdf":
        text = extract_text_pdf(content)
    elif file_type == "docx":
        text = extract_text_docx(content)
    else:
        text = extract_text_txt(content)

    if len(text.strip()) < MIN_TEXT_LENGTH:
        raise DocumentParseError(
            "Could not extract meaningful text from the file. "
            "The file may be corrupted, password-protected, or image-based."
        )
    return text
