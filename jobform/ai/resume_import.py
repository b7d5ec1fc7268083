from __future__ import annotations

import logging
import time

from pydantic import ValidationError

from jobform.ai.types import DocumentAIClient
from jobform.schemas.application import ParsedResumeData

logger = logging.getLogger(__name__)

ALLOWED_MIME_TYPES = ("application/pdf", "image/jpeg", "image/png", "image/webp")
MAX_RESUME_BYTES = 5 * 1024 * 1024  # 5 MiB

EXTRACTION_PROMPT = (
    "Please analyze this resume and extract the following information into a JSON format: "
    "First Name, Last Name, Email, Phone Number, Address, and a brief summary of relevant physical "
    "or maintenance experience. Use the keys first_name, last_name, email, phone, address and "
    "experience_summary. If a field is not found, leave it as an empty string."
)


class ResumeImportError(RuntimeError):
    def __init__(self, message: str, *, code: str):
        super().__init__(message)
        self.code = code


class UnsupportedFormatError(ResumeImportError):
    def __init__(self, mime_type: str):
        super().__init__(f"Unsupported resume format '{mime_type}'.", code="unsupported_format")
        self.mime_type = mime_type


class FileTooLargeError(ResumeImportError):
    def __init__(self, size: int, limit: int = MAX_RESUME_BYTES):
        super().__init__(f"Resume is {size} bytes; the limit is {limit}.", code="too_large")
        self.size = size
        self.limit = limit


class ExtractionFailedError(ResumeImportError):
    def __init__(self, message: str):
        super().__init__(message, code="extraction_failed")


def normalize_mime_type(mime_type: str | None) -> str:
    return (mime_type or "").split(";")[0].strip().lower()


def check_document(size: int, mime_type: str | None) -> str:
    """Return the normalized MIME type or raise for an unusable upload."""
    normalized = normalize_mime_type(mime_type)
    if normalized not in ALLOWED_MIME_TYPES:
        raise UnsupportedFormatError(normalized or "unknown")
    if size > MAX_RESUME_BYTES:
        raise FileTooLargeError(size)
    return normalized


def parse_extraction_payload(text: str) -> ParsedResumeData:
    if not text or not text.strip():
        raise ExtractionFailedError("No response from the document service.")
    try:
        return ParsedResumeData.model_validate_json(text)
    except ValidationError as exc:
        raise ExtractionFailedError(f"Document service returned an unexpected payload: {exc}") from exc


class DocumentImportAdapter:
    def __init__(self, client: DocumentAIClient, prompt: str = EXTRACTION_PROMPT):
        self._client = client
        self._prompt = prompt

    async def extract(self, content: bytes, mime_type: str) -> ParsedResumeData:
        normalized = check_document(len(content), mime_type)
        provider = getattr(self._client, "provider_name", "unknown")
        started = time.perf_counter()
        try:
            text = await self._client.complete_document(content=content, mime_type=normalized, prompt=self._prompt)
        except Exception as exc:  # noqa: BLE001 - every downstream failure maps to one outcome
            logger.warning(
                "resume_import_failed provider=%s mime=%s bytes=%s: %s",
                provider,
                normalized,
                len(content),
                exc,
            )
            raise ExtractionFailedError(str(exc) or exc.__class__.__name__) from exc

        try:
            parsed = parse_extraction_payload(text)
        except ExtractionFailedError as exc:
            logger.warning("resume_import_invalid provider=%s: %s", provider, exc)
            raise
        logger.info(
            "resume_import_succeeded provider=%s mime=%s latency_ms=%s",
            provider,
            normalized,
            int((time.perf_counter() - started) * 1000),
        )
        return parsed
