"""Public submission endpoint."""

import logging

from fastapi import APIRouter, Depends, HTTPException

from form_creator.api.deps import get_form_store
from form_creator.core.config import settings
from form_creator.schemas.forms import FormResponseOut, FormSubmission
from form_creator.services.form_store import FormStore, response_to_schema

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/submit", response_model=FormResponseOut)
def submit_form_response(payload: FormSubmission, store: FormStore = Depends(get_form_store)):
    if not payload.phone_number.strip():
        raise HTTPException(status_code=400, detail="Phone number is required")

    language = payload.language or settings.DEFAULT_LANGUAGE

    # response_data is stored as-is; it is not checked against the form's fields
    response = store.submit_response(payload, language)
    logger.info("Stored response %d for form %d", response.id, response.form_id)
    return response_to_schema(response)
