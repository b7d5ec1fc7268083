from __future__ import annotations

import logging
import time
from functools import partial
from typing import Callable, Protocol

from jobform.ai.resume_import import DocumentImportAdapter
from jobform.core.draft_store import DraftStore
from jobform.forms import validation
from jobform.forms.constants import (
    COMPANY_NAME,
    CONFIRMATION_TEMPLATE,
    CONFIRMATION_TITLE,
    JOB_TITLE,
    SAVE_MESSAGE,
)
from jobform.forms.reconcile import merge_parsed_resume
from jobform.forms.state import FormState
from jobform.schemas.application import (
    ApplicationState,
    ApplicationView,
    ConfirmationView,
    ControllerStatus,
    EligibilityView,
    ParsedResumeData,
    UploadStatus,
)
from jobform.services.upload_flow import UploadSession

logger = logging.getLogger(__name__)


class ApplicationSubmittedError(RuntimeError):
    def __init__(self):
        super().__init__("The application has already been submitted.")


class SessionRestartedError(RuntimeError):
    def __init__(self):
        super().__init__("The application was restarted while the resume was being read.")


class SubmissionBlockedError(RuntimeError):
    def __init__(self, unmet: list[str]):
        super().__init__("The application is not ready to submit.")
        self.unmet = unmet


class SubmissionSink(Protocol):
    def accept(self, state: ApplicationState) -> None: ...


class LoggingSubmissionSink:
    def accept(self, state: ApplicationState) -> None:
        logger.info(
            "application_submitted job_title=%s position_type=%s start_date=%s",
            JOB_TITLE,
            state.position_type.value,
            state.start_date or "-",
        )


class ApplicationController:
    """Single applicant session: editing until an eligible submit, then submitted."""

    def __init__(
        self,
        store: DraftStore,
        importer: DocumentImportAdapter,
        sink: SubmissionSink | None = None,
        *,
        save_message_ttl_seconds: float = 5,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._store = store
        self._importer = importer
        self._sink = sink or LoggingSubmissionSink()
        self._save_message_ttl = save_message_ttl_seconds
        self._clock = clock
        self.start()

    def start(self) -> None:
        self._form: FormState | None = FormState.from_snapshot(self._store.load())
        self.status = ControllerStatus.EDITING
        self.upload = UploadSession(self._importer)
        self._save_message: str | None = None
        self._save_message_expires_at = 0.0
        logger.info("application_session_started key=%s", self._store.key)

    restart = start

    def _editable_form(self) -> FormState:
        if self.status == ControllerStatus.SUBMITTED or self._form is None:
            raise ApplicationSubmittedError()
        return self._form

    @property
    def state(self) -> ApplicationState | None:
        return self._form.state if self._form is not None else None

    def update_field(self, name: str, value: str) -> None:
        self._editable_form().update_field(name, value)

    def update_flag(self, name: str, checked: bool) -> None:
        self._editable_form().update_flag(name, checked)

    def eligibility(self) -> EligibilityView:
        return validation.evaluate(self._editable_form().state)

    def save(self) -> str:
        form = self._editable_form()
        self._store.save(form.to_json())
        self._save_message = SAVE_MESSAGE
        self._save_message_expires_at = self._clock() + self._save_message_ttl
        return SAVE_MESSAGE

    @property
    def save_message(self) -> str | None:
        if self._save_message and self._clock() < self._save_message_expires_at:
            return self._save_message
        self._save_message = None
        return None

    def submit(self) -> ConfirmationView:
        form = self._editable_form()
        if not validation.can_submit(form.state):
            unmet = validation.unmet_requirements(form.state)
            logger.info("application_submit_blocked unmet=%s", len(unmet))
            raise SubmissionBlockedError(unmet)

        self._sink.accept(form.state.model_copy(deep=True))
        self._store.clear()
        self._form = None
        self._save_message = None
        self.status = ControllerStatus.SUBMITTED
        return self.confirmation()

    def confirmation(self) -> ConfirmationView | None:
        if self.status != ControllerStatus.SUBMITTED:
            return None
        return ConfirmationView(
            title=CONFIRMATION_TITLE,
            message=CONFIRMATION_TEMPLATE.format(job_title=JOB_TITLE, company_name=COMPANY_NAME),
        )

    def _apply_resume(self, form: FormState, parsed: ParsedResumeData) -> None:
        if self.status == ControllerStatus.SUBMITTED:
            raise ApplicationSubmittedError()
        if self._form is not form:
            logger.info("resume_import_dropped reason=session_restarted")
            raise SessionRestartedError()
        changed = merge_parsed_resume(form, parsed)
        logger.info("resume_reconciled fields=%s", ",".join(changed) or "-")

    async def import_resume(self, *, filename: str, content: bytes, mime_type: str | None) -> UploadStatus:
        # The result only ever lands in the form the import started on.
        form = self._editable_form()
        return await self.upload.select_file(
            filename=filename,
            content=content,
            mime_type=mime_type,
            on_parsed=partial(self._apply_resume, form),
        )

    def view(self) -> ApplicationView:
        if self.status == ControllerStatus.SUBMITTED or self._form is None:
            return ApplicationView(
                status=self.status,
                upload=self.upload.view(),
                confirmation=self.confirmation(),
            )
        return ApplicationView(
            status=self.status,
            state=self._form.state,
            eligibility=validation.evaluate(self._form.state),
            save_message=self.save_message,
            upload=self.upload.view(),
        )
