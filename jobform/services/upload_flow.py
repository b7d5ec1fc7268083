from __future__ import annotations

import logging
from typing import Callable

from jobform.ai.resume_import import (
    DocumentImportAdapter,
    ExtractionFailedError,
    FileTooLargeError,
    ResumeImportError,
    UnsupportedFormatError,
    check_document,
)
from jobform.forms.constants import IMPORT_FAILED_MESSAGE, TOO_LARGE_MESSAGE, UNSUPPORTED_FORMAT_MESSAGE
from jobform.schemas.application import ParsedResumeData, UploadStatus, UploadView

logger = logging.getLogger(__name__)


class ImportInProgressError(RuntimeError):
    pass


def _rejection_message(exc: ResumeImportError) -> str:
    if isinstance(exc, UnsupportedFormatError):
        return UNSUPPORTED_FORMAT_MESSAGE
    if isinstance(exc, FileTooLargeError):
        return TOO_LARGE_MESSAGE
    return IMPORT_FAILED_MESSAGE


class UploadSession:
    """Lifecycle of one resume selection: idle, uploading, parsing, then success or error."""

    def __init__(self, adapter: DocumentImportAdapter):
        self._adapter = adapter
        self.status = UploadStatus.IDLE
        self.file_name = ""
        self.validation_message: str | None = None
        self.error_message: str | None = None

    @property
    def busy(self) -> bool:
        return self.status in {UploadStatus.UPLOADING, UploadStatus.PARSING}

    async def select_file(
        self,
        *,
        filename: str,
        content: bytes,
        mime_type: str | None,
        on_parsed: Callable[[ParsedResumeData], object],
    ) -> UploadStatus:
        if self.busy:
            raise ImportInProgressError("A resume is already being read.")

        try:
            normalized = check_document(len(content), mime_type)
        except ResumeImportError as exc:
            # Rejected before upload: status is left as it was.
            self.validation_message = _rejection_message(exc)
            logger.info("resume_rejected code=%s file=%s", exc.code, filename)
            raise

        self.file_name = filename
        self.validation_message = None
        self.error_message = None
        self.status = UploadStatus.UPLOADING
        # Bytes arrive with the request, so reading is already done here.
        self.status = UploadStatus.PARSING
        try:
            parsed = await self._adapter.extract(content, normalized)
            on_parsed(parsed)
        except ExtractionFailedError:
            self._fail()
            return self.status
        except BaseException:
            # Cancellation included: parsing only ever ends in success or error.
            self._fail()
            raise
        self.status = UploadStatus.SUCCESS
        return self.status

    def _fail(self) -> None:
        self.error_message = IMPORT_FAILED_MESSAGE
        self.status = UploadStatus.ERROR

    def view(self) -> UploadView:
        return UploadView(
            status=self.status,
            file_name=self.file_name,
            validation_message=self.validation_message,
            error_message=self.error_message if self.status == UploadStatus.ERROR else None,
        )
