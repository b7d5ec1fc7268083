from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from jobform.forms.constants import ACKNOWLEDGMENT_KEYS, default_acknowledgments


class PositionType(str, Enum):
    FULL_TIME = "Full-Time"
    PART_TIME = "Part-Time"
    UNSET = ""


class UploadStatus(str, Enum):
    IDLE = "idle"
    UPLOADING = "uploading"
    PARSING = "parsing"
    SUCCESS = "success"
    ERROR = "error"


class ControllerStatus(str, Enum):
    EDITING = "editing"
    SUBMITTED = "submitted"


TextFieldName = Literal[
    "first_name",
    "last_name",
    "email",
    "phone",
    "address",
    "position_type",
    "start_date",
    "experience",
    "references",
    "motivation",
]


class ApplicationState(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone: str = ""
    address: str = ""
    position_type: PositionType = PositionType.UNSET
    start_date: str = ""
    experience: str = ""
    references: str = ""
    motivation: str = ""
    acknowledgments: dict[str, bool] = Field(default_factory=default_acknowledgments)


class ParsedResumeData(BaseModel):
    model_config = ConfigDict(extra="ignore")

    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    phone: str | None = None
    address: str | None = None
    experience_summary: str | None = None


class AcknowledgmentItem(BaseModel):
    key: str
    text: str


class FormDefinitionResponse(BaseModel):
    job_title: str
    company_name: str
    intro_text: str
    acknowledgments: list[AcknowledgmentItem]
    position_types: list[str]


class FieldUpdateRequest(BaseModel):
    name: TextFieldName
    value: str = ""


class AcknowledgmentUpdateRequest(BaseModel):
    name: str
    checked: bool

    @field_validator("name")
    @classmethod
    def _validate_name(cls, value: str) -> str:
        if value not in ACKNOWLEDGMENT_KEYS:
            raise ValueError(f"unknown acknowledgment '{value}'")
        return value


class EligibilityView(BaseModel):
    can_submit: bool
    all_acknowledged: bool
    show_part_time_notice: bool
    show_acknowledgment_warning: bool
    unmet_requirements: list[str] = Field(default_factory=list)


class UploadView(BaseModel):
    status: UploadStatus
    file_name: str = ""
    validation_message: str | None = None
    error_message: str | None = None


class ConfirmationView(BaseModel):
    title: str
    message: str


class ApplicationView(BaseModel):
    status: ControllerStatus
    state: ApplicationState | None = None
    eligibility: EligibilityView | None = None
    save_message: str | None = None
    upload: UploadView
    confirmation: ConfirmationView | None = None