from fastapi import APIRouter, Depends, File, HTTPException, Request, UploadFile, status

from jobform.ai.resume_import import MAX_RESUME_BYTES, ResumeImportError
from jobform.api.deps import get_controller
from jobform.core.config import settings
from jobform.core.rate_limit import rate_limit
from jobform.forms.constants import (
    ACKNOWLEDGMENTS,
    COMPANY_NAME,
    INTRO_TEXT,
    JOB_TITLE,
    SUBMIT_BLOCKED_MESSAGE,
)
from jobform.schemas.application import (
    AcknowledgmentItem,
    AcknowledgmentUpdateRequest,
    ApplicationView,
    ConfirmationView,
    FieldUpdateRequest,
    FormDefinitionResponse,
    PositionType,
    UploadView,
)
from jobform.services.application_service import (
    ApplicationController,
    ApplicationSubmittedError,
    SessionRestartedError,
    SubmissionBlockedError,
)
from jobform.services.upload_flow import ImportInProgressError

router = APIRouter()


def _conflict(exc: Exception) -> HTTPException:
    return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc))


@router.get("/application/form", response_model=FormDefinitionResponse)
async def get_form_definition():
    return FormDefinitionResponse(
        job_title=JOB_TITLE,
        company_name=COMPANY_NAME,
        intro_text=INTRO_TEXT,
        acknowledgments=[AcknowledgmentItem(key=key, text=text) for key, text in ACKNOWLEDGMENTS],
        position_types=[item.value for item in PositionType if item != PositionType.UNSET],
    )


@router.get("/application", response_model=ApplicationView)
async def get_application(controller: ApplicationController = Depends(get_controller)):
    return controller.view()


@router.patch("/application/fields", response_model=ApplicationView)
async def update_field(payload: FieldUpdateRequest, controller: ApplicationController = Depends(get_controller)):
    try:
        controller.update_field(payload.name, payload.value)
    except ApplicationSubmittedError as exc:
        raise _conflict(exc) from exc
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return controller.view()


@router.patch("/application/acknowledgments", response_model=ApplicationView)
async def update_acknowledgment(
    payload: AcknowledgmentUpdateRequest,
    controller: ApplicationController = Depends(get_controller),
):
    try:
        controller.update_flag(payload.name, payload.checked)
    except ApplicationSubmittedError as exc:
        raise _conflict(exc) from exc
    return controller.view()


@router.post("/application/save", response_model=ApplicationView)
async def save_application(controller: ApplicationController = Depends(get_controller)):
    try:
        controller.save()
    except ApplicationSubmittedError as exc:
        raise _conflict(exc) from exc
    return controller.view()


@router.post("/application/submit", response_model=ConfirmationView)
async def submit_application(controller: ApplicationController = Depends(get_controller)):
    try:
        return controller.submit()
    except ApplicationSubmittedError as exc:
        raise _conflict(exc) from exc
    except SubmissionBlockedError as exc:
        raise HTTPException(
            status_code=422,
            detail={"message": SUBMIT_BLOCKED_MESSAGE, "unmet_requirements": exc.unmet},
        ) from exc


@router.post("/application/reset", response_model=ApplicationView)
async def reset_application(controller: ApplicationController = Depends(get_controller)):
    controller.restart()
    return controller.view()


@router.get("/application/resume", response_model=UploadView)
async def get_resume_upload(controller: ApplicationController = Depends(get_controller)):
    return controller.upload.view()


@router.post("/application/resume", response_model=UploadView)
@rate_limit(settings.upload_rate_limit)
async def upload_resume(
    request: Request,
    file: UploadFile = File(...),
    controller: ApplicationController = Depends(get_controller),
):
    _ = request
    # One byte past the ceiling is enough to trip the size check.
    content = await file.read(MAX_RESUME_BYTES + 1)
    try:
        await controller.import_resume(
            filename=file.filename or "resume",
            content=content,
            mime_type=file.content_type,
        )
    except ResumeImportError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=controller.upload.validation_message or str(exc),
        ) from exc
    except (ImportInProgressError, ApplicationSubmittedError, SessionRestartedError) as exc:
        raise _conflict(exc) from exc
    return controller.upload.view()
