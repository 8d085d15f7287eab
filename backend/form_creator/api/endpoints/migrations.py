"""Administrative migration endpoints. Run once at deploy time."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from form_creator.core.database import get_db
from form_creator.schemas.forms import FieldMigrationOut, MigrationResultOut
from form_creator.services.migrations import (
    add_response_language_column,
    migrate_legacy_fields,
    widen_hero_image_column,
)

router = APIRouter()


@router.post("/migrate-hero-image", response_model=MigrationResultOut)
def migrate_hero_image(db: Session = Depends(get_db)):
    widen_hero_image_column(db)
    return MigrationResultOut(status="success", message="hero_image_url column migrated to TEXT")


@router.post("/migrate-multi-language", response_model=MigrationResultOut)
def migrate_multi_language(db: Session = Depends(get_db)):
    add_response_language_column(db)
    return MigrationResultOut(status="success", message="Multi-language migration completed successfully")


@router.post("/migrate-fields", response_model=FieldMigrationOut)
def migrate_fields(db: Session = Depends(get_db)):
    forms, fields = migrate_legacy_fields(db)
    return FieldMigrationOut(migrated_forms=forms, migrated_fields=fields)
