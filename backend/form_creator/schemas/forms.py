from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# A piece of user-facing text: a bare string (legacy) or a language -> string map.
LocalizedText = str | dict[str, str]

# Upper bound of the INTEGER id columns.
MAX_ROW_ID = 2**31 - 1


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---------------------------------------------------------------------------
# Form definition schemas
# ---------------------------------------------------------------------------


class FormFieldSchema(CamelModel):
    """Single input element of a form. Unknown keys are kept verbatim."""

    model_config = ConfigDict(extra="allow")

    id: str
    type: str
    label: LocalizedText = ""
    placeholder: LocalizedText | None = None
    required: bool = False
    options: list[LocalizedText] | None = None
    validation: dict[str, Any] | None = None


class FormPayload(CamelModel):
    """Body of create and update. Update replaces every attribute."""

    title: LocalizedText = ""
    description: LocalizedText | None = None
    fields: list[FormFieldSchema] = Field(default_factory=list)
    submit_button_text: LocalizedText | None = None
    hero_image_url: str | None = None


class FormOut(CamelModel):
    id: int
    title: LocalizedText
    description: LocalizedText | None = None
    fields: list[dict[str, Any]]
    submit_button_text: LocalizedText | None = None
    hero_image_url: str = ""
    is_active: bool
    created_at: datetime
    updated_at: datetime


class FormListOut(CamelModel):
    data: list[FormOut]
    total_count: int
    page: int
    page_size: int
    total_pages: int


# ---------------------------------------------------------------------------
# Response (submission) schemas
# ---------------------------------------------------------------------------


class FormSubmission(CamelModel):
    form_id: int = Field(..., gt=0, le=MAX_ROW_ID)
    phone_number: str = ""
    response_data: dict[str, Any] = Field(
        default_factory=dict,
        description="Answers keyed by field id; not checked against the form definition",
    )
    language: str | None = Field(None, max_length=2)


class FormResponseOut(CamelModel):
    id: int
    form_id: int
    phone_number: str
    response_data: dict[str, Any]
    language: str
    submitted_at: datetime


# ---------------------------------------------------------------------------
# Misc
# ---------------------------------------------------------------------------


class MessageOut(BaseModel):
    message: str


class MigrationResultOut(BaseModel):
    status: str
    message: str


class FieldMigrationOut(BaseModel):
    migrated_forms: int
    migrated_fields: int
