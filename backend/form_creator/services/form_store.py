"""Form store — every SQL statement issued against forms and form_responses."""

import json
import logging
from datetime import datetime, timezone
from typing import Any

from pydantic import ValidationError
from sqlalchemy import func, select, update
from sqlalchemy.orm import Session

from form_creator.models.form import Form
from form_creator.models.form_response import FormResponse
from form_creator.schemas.forms import FormOut, FormPayload, FormResponseOut, FormSubmission
from form_creator.services.exceptions import CorruptRecordError

logger = logging.getLogger(__name__)


def utcnow() -> datetime:
    """Current UTC time as a naive datetime, matching the DateTime columns."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


# ---------------------------------------------------------------------------
# JSON column helpers
# ---------------------------------------------------------------------------


def encode_json_column(value: Any) -> str | None:
    if value is None:
        return None
    return json.dumps(value, ensure_ascii=False)


def decode_json_column(raw: str | None, *, table: str, record_id: int, column: str, default: Any = None) -> Any:
    if raw is None or raw == "":
        return default
    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        raise CorruptRecordError(table, record_id, column, f"invalid JSON: {exc}") from exc


def form_to_schema(form: Form) -> FormOut:
    def _decode(column: str, default: Any = None) -> Any:
        return decode_json_column(
            getattr(form, column),
            table=Form.__tablename__,
            record_id=form.id,
            column=column,
            default=default,
        )

    try:
        return FormOut(
            id=form.id,
            title=_decode("title", ""),
            description=_decode("description"),
            fields=_decode("fields", []),
            submit_button_text=_decode("submit_button_text"),
            hero_image_url=form.hero_image_url or "",
            is_active=form.is_active,
            created_at=form.created_at,
            updated_at=form.updated_at,
        )
    except ValidationError as exc:
        raise CorruptRecordError(Form.__tablename__, form.id, "*", str(exc)) from exc


def response_to_schema(response: FormResponse) -> FormResponseOut:
    data = decode_json_column(
        response.response_data,
        table=FormResponse.__tablename__,
        record_id=response.id,
        column="response_data",
        default={},
    )
    try:
        return FormResponseOut(
            id=response.id,
            form_id=response.form_id,
            phone_number=response.phone_number,
            response_data=data if data is not None else {},
            language=response.language,
            submitted_at=response.submitted_at,
        )
    except ValidationError as exc:
        raise CorruptRecordError(FormResponse.__tablename__, response.id, "*", str(exc)) from exc


def _form_columns(payload: FormPayload) -> dict[str, Any]:
    """Serialise a payload into column values. None members of fields are dropped."""
    return {
        "title": encode_json_column(payload.title),
        "description": encode_json_column(payload.description),
        "fields": encode_json_column(
            [field.model_dump(by_alias=True, exclude_none=True) for field in payload.fields]
        ),
        "submit_button_text": encode_json_column(payload.submit_button_text),
        "hero_image_url": payload.hero_image_url,
    }


# ---------------------------------------------------------------------------
# Store
# ---------------------------------------------------------------------------


class FormStore:
    """Data-access object for forms and their responses.

    Each public method is one unit of work: it commits before returning.
    Soft-deleted forms (is_active = false) are invisible to every read and
    write except the migrations.
    """

    def __init__(self, db: Session) -> None:
        self.db = db

    # -- forms ---------------------------------------------------------------

    def create_form(self, payload: FormPayload) -> Form:
        now = utcnow()
        form = Form(**_form_columns(payload), is_active=True, created_at=now, updated_at=now)
        self.db.add(form)
        self.db.commit()
        self.db.refresh(form)
        logger.info("Created form %d with %d fields", form.id, len(payload.fields))
        return form

    def list_forms(self, page: int, page_size: int) -> tuple[list[Form], int]:
        """Return one page of active forms (newest first) and the active total."""
        total = self.db.execute(
            select(func.count()).select_from(Form).where(Form.is_active.is_(True))
        ).scalar_one()

        offset = (page - 1) * page_size
        forms = (
            self.db.execute(
                select(Form)
                .where(Form.is_active.is_(True))
                .order_by(Form.created_at.desc(), Form.id.desc())
                .offset(offset)
                .limit(page_size)
            )
            .scalars()
            .all()
        )
        return list(forms), total

    def get_form(self, form_id: int) -> Form | None:
        return self.db.execute(
            select(Form).where(Form.id == form_id, Form.is_active.is_(True))
        ).scalar_one_or_none()

    def update_form(self, form_id: int, payload: FormPayload) -> Form | None:
        """Replace every attribute of an active form. Returns None if absent."""
        result = self.db.execute(
            update(Form)
            .where(Form.id == form_id, Form.is_active.is_(True))
            .values(**_form_columns(payload), updated_at=utcnow())
            .execution_options(synchronize_session=False)
        )
        self.db.commit()
        if result.rowcount == 0:
            return None
        return self.db.execute(select(Form).where(Form.id == form_id)).scalar_one_or_none()

    def soft_delete_form(self, form_id: int) -> bool:
        result = self.db.execute(
            update(Form)
            .where(Form.id == form_id, Form.is_active.is_(True))
            .values(is_active=False, updated_at=utcnow())
            .execution_options(synchronize_session=False)
        )
        self.db.commit()
        deleted = result.rowcount > 0
        if deleted:
            logger.info("Soft-deleted form %d", form_id)
        return deleted

    # -- responses -----------------------------------------------------------

    def submit_response(self, payload: FormSubmission, language: str) -> FormResponse:
        # form_id is not checked against forms; orphaned responses are allowed
        response = FormResponse(
            form_id=payload.form_id,
            phone_number=payload.phone_number,
            response_data=encode_json_column(payload.response_data),
            language=language,
            submitted_at=utcnow(),
        )
        self.db.add(response)
        self.db.commit()
        self.db.refresh(response)
        return response

    def list_responses(self, form_id: int) -> list[FormResponse]:
        rows = (
            self.db.execute(
                select(FormResponse)
                .where(FormResponse.form_id == form_id)
                .order_by(FormResponse.submitted_at.desc(), FormResponse.id.desc())
            )
            .scalars()
            .all()
        )
        return list(rows)
