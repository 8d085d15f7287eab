"""Form API — CRUD with soft delete, pagination, and per-form response listing."""

import math

from fastapi import APIRouter, Depends, HTTPException, Query

from form_creator.api.deps import get_form_store
from form_creator.core.config import settings
from form_creator.schemas.forms import MAX_ROW_ID, FormListOut, FormOut, FormPayload, FormResponseOut, MessageOut
from form_creator.services.form_store import FormStore, form_to_schema, response_to_schema

router = APIRouter()


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _parse_form_id(raw: str) -> int:
    try:
        form_id = int(raw)
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid form ID") from None
    # ids are INTEGER columns; anything outside their range can never match
    if not 1 <= form_id <= MAX_ROW_ID:
        raise HTTPException(status_code=400, detail="Invalid form ID")
    return form_id


def _parse_positive_int(raw: str | None, default: int, maximum: int | None = None) -> int:
    """Lenient query-string integer: anything unusable falls back to ``default``."""
    if raw is None or raw == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    if value <= 0 or (maximum is not None and value > maximum):
        return default
    return value


# ---------------------------------------------------------------------------
# Form CRUD
# ---------------------------------------------------------------------------


@router.post("", response_model=FormOut)
def create_form(payload: FormPayload, store: FormStore = Depends(get_form_store)):
    form = store.create_form(payload)
    return form_to_schema(form)


@router.get("", response_model=FormListOut)
def list_forms(
    page: str | None = Query(None),
    page_size: str | None = Query(None, alias="pageSize"),
    store: FormStore = Depends(get_form_store),
):
    page_number = _parse_positive_int(page, 1, MAX_ROW_ID)
    size = _parse_positive_int(page_size, settings.DEFAULT_PAGE_SIZE, settings.MAX_PAGE_SIZE)

    forms, total = store.list_forms(page_number, size)

    return FormListOut(
        data=[form_to_schema(form) for form in forms],
        total_count=total,
        page=page_number,
        page_size=size,
        total_pages=math.ceil(total / size),
    )


@router.get("/{form_id}", response_model=FormOut)
def get_form(form_id: str, store: FormStore = Depends(get_form_store)):
    form = store.get_form(_parse_form_id(form_id))
    if form is None:
        raise HTTPException(status_code=404, detail="Form not found")
    return form_to_schema(form)


@router.put("/{form_id}", response_model=FormOut)
def update_form(form_id: str, payload: FormPayload, store: FormStore = Depends(get_form_store)):
    form = store.update_form(_parse_form_id(form_id), payload)
    if form is None:
        raise HTTPException(status_code=404, detail="Form not found")
    return form_to_schema(form)


@router.delete("/{form_id}", response_model=MessageOut)
def delete_form(form_id: str, store: FormStore = Depends(get_form_store)):
    if not store.soft_delete_form(_parse_form_id(form_id)):
        raise HTTPException(status_code=404, detail="Form not found")
    return MessageOut(message="Form deleted successfully")


# ---------------------------------------------------------------------------
# Form responses
# ---------------------------------------------------------------------------


@router.get("/{form_id}/responses", response_model=list[FormResponseOut])
def list_form_responses(form_id: str, store: FormStore = Depends(get_form_store)):
    # Responses are listed even when the form itself is missing or deleted
    responses = store.list_responses(_parse_form_id(form_id))
    return [response_to_schema(response) for response in responses]


@router.api_route(
    "/{form_id}/{sub_path:path}",
    methods=["GET", "POST", "PUT", "PATCH", "DELETE"],
    include_in_schema=False,
)
def unknown_form_sub_resource(form_id: str, sub_path: str):
    if sub_path == "responses":
        raise HTTPException(status_code=405, detail="Method Not Allowed")
    raise HTTPException(status_code=400, detail="Invalid URL format")
