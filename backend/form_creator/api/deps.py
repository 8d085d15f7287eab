from fastapi import Depends
from sqlalchemy.orm import Session

from form_creator.core.database import get_db
from form_creator.services.form_store import FormStore


def get_form_store(db: Session = Depends(get_db)) -> FormStore:
    return FormStore(db)
