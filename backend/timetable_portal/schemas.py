"""
Form schemas for the portal (Pydantic v2).

Payloads use camelCase keys; fields are snake_case with camelCase aliases.
Errors are flattened to ``{"field", "message"}`` pairs by ``validate_form``.
"""

from typing import ClassVar, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, ValidationError, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel

from timetable_portal.generator import EXPORT_FORMATS

Role = Literal["student", "teacher", "admin"]
RequestType = Literal["leave", "special_class"]
SubjectType = Literal["theory", "lab", "tutorial"]
ExportFormat = Literal[EXPORT_FORMATS]

EMAIL_MESSAGE = "Please enter a valid email address"
PASSWORD_MESSAGE = "Password must be at least 6 characters"
NAME_MESSAGE = "Name must be at least 2 characters"


class FormSchema(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    # camelCase path (list indexes as "*") -> message shown for any error on it
    field_messages: ClassVar[Dict[str, str]] = {}

    @classmethod
    def error_message(cls, error):
        path = ".".join("*" if isinstance(part, int) else str(part) for part in error["loc"])
        if path in cls.field_messages:
            return cls.field_messages[path]
        if error["type"] == "value_error" and "error" in error.get("ctx", {}):
            return str(error["ctx"]["error"])
        return error["msg"]


class PasswordConfirmationForm(FormSchema):
    password: str = Field(min_length=6)
    confirm_password: str

    @field_validator("confirm_password")
    @classmethod
    def passwords_match(cls, value, info: ValidationInfo):
        # Only compared once the password itself is valid.
        if "password" in info.data and value != info.data["password"]:
            raise ValueError("Passwords don't match")
        return value


class RoleSelectionForm(FormSchema):
    role: str = Field(min_length=1)

    field_messages: ClassVar[Dict[str, str]] = {"role": "Role must be student or teacher"}


class LoginForm(FormSchema):
    email: EmailStr
    password: str = Field(min_length=6)
    role: Role

    field_messages: ClassVar[Dict[str, str]] = {
        "email": EMAIL_MESSAGE,
        "password": PASSWORD_MESSAGE,
        "role": "Please select a role",
    }


class StudentRegisterForm(PasswordConfirmationForm):
    name: str = Field(min_length=2)
    email: EmailStr
    phone: str = Field(min_length=10)
    stream: str = Field(min_length=1)
    year: int = Field(ge=1, le=4)
    semester: int = Field(ge=1, le=8)

    field_messages: ClassVar[Dict[str, str]] = {
        "name": NAME_MESSAGE,
        "email": EMAIL_MESSAGE,
        "phone": "Please enter a valid phone number",
        "password": PASSWORD_MESSAGE,
        "stream": "Please select a stream",
        "year": "Year must be between 1 and 4",
        "semester": "Semester must be between 1 and 8",
    }


class TeacherRegisterForm(PasswordConfirmationForm):
    name: str = Field(min_length=2)
    email: EmailStr
    teacher_id: str = Field(min_length=1)

    field_messages: ClassVar[Dict[str, str]] = {
        "name": NAME_MESSAGE,
        "email": EMAIL_MESSAGE,
        "teacherId": "Teacher ID is required",
        "password": PASSWORD_MESSAGE,
    }


class FacultyRequestForm(FormSchema):
    date: str = Field(min_length=1)
    reason: str = Field(min_length=10)
    request_type: RequestType

    field_messages: ClassVar[Dict[str, str]] = {
        "date": "Please select a date",
        "reason": "Please provide a detailed reason (minimum 10 characters)",
        "requestType": "Request type must be leave or special_class",
    }


class SubjectEntry(FormSchema):
    name: str = Field(min_length=1)
    teacher: str = Field(min_length=1)
    hours_per_week: int = Field(ge=1, le=10)
    type: SubjectType = "theory"


class TimetableGenerateForm(FormSchema):
    branch: str = Field(min_length=1)
    semester: str = Field(min_length=1)
    class_duration: int = Field(ge=30, le=180)
    lunch_duration: int = Field(ge=30, le=120)
    lunch_start_time: str = Field(min_length=1)
    subjects: List[SubjectEntry] = Field(min_length=1)

    field_messages: ClassVar[Dict[str, str]] = {
        "branch": "Branch is required",
        "semester": "Semester is required",
        "classDuration": "Class duration must be between 30 and 180 minutes",
        "lunchDuration": "Lunch duration must be between 30 and 120 minutes",
        "lunchStartTime": "Lunch start time is required",
        "subjects": "At least one subject is required",
        "subjects.*.name": "Subject name is required",
        "subjects.*.teacher": "Teacher is required",
        "subjects.*.hoursPerWeek": "Hours per week must be between 1 and 10",
        "subjects.*.type": "Subject type must be theory, lab or tutorial",
    }


class ForgotPasswordForm(FormSchema):
    email: EmailStr

    field_messages: ClassVar[Dict[str, str]] = {"email": EMAIL_MESSAGE}


class VerifyCodeForm(FormSchema):
    code: str = Field(min_length=6, max_length=6)

    field_messages: ClassVar[Dict[str, str]] = {"code": "Security code must be 6 digits"}


class ResetPasswordForm(PasswordConfirmationForm):
    field_messages: ClassVar[Dict[str, str]] = {"password": PASSWORD_MESSAGE}


class ProfileForm(FormSchema):
    name: str = Field(min_length=2)
    email: EmailStr
    phone: Optional[str] = None

    field_messages: ClassVar[Dict[str, str]] = {"name": NAME_MESSAGE, "email": EMAIL_MESSAGE}


class SubjectForm(FormSchema):
    name: str = Field(min_length=1)
    code: str = Field(min_length=1)
    credits: int = Field(default=3, ge=1, le=10)
    hours_per_week: int = Field(ge=1, le=10)
    teacher: str = Field(min_length=1)
    department: str = Field(min_length=1)


class FacultyForm(FormSchema):
    name: str = Field(min_length=2)
    email: EmailStr
    phone: str = ""
    department: str = Field(min_length=1)
    designation: str = Field(min_length=1)
    subjects: List[str] = []
    experience: str = ""
    qualification: str = ""
    availability: str = "Available"

    field_messages: ClassVar[Dict[str, str]] = {"name": NAME_MESSAGE, "email": EMAIL_MESSAGE}


class ExportForm(FormSchema):
    format: ExportFormat
    option_id: Optional[str] = None

    field_messages: ClassVar[Dict[str, str]] = {"format": "Format must be pdf, excel or csv"}


class ResolveRequestForm(FormSchema):
    admin_note: Optional[str] = Field(default=None, max_length=500)

    field_messages: ClassVar[Dict[str, str]] = {"adminNote": "Admin note must be text of at most 500 characters"}


class PreferencesForm(FormSchema):
    theme: Optional[Literal["light", "dark"]] = None
    sidebar_open: Optional[bool] = None


def validate_form(schema, payload):
    """Return ``(form, [])`` on success or ``(None, errors)``."""
    try:
        return schema.model_validate(payload or {}), []
    except ValidationError as exc:
        errors = []
        for error in exc.errors():
            field = ".".join(str(part) for part in error["loc"])
            errors.append({"field": field, "message": schema.error_message(error)})
        return None, errors


def form_to_payload(form, exclude=None):
    return form.model_dump(by_alias=True, exclude=exclude)
