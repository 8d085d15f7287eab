"""One-off schema and data migrations exposed as admin endpoints.

None of these run on steady-state traffic and none offer a rollback.
"""

import json
import logging
from typing import Any

from sqlalchemy import inspect, select, text, update
from sqlalchemy.orm import Session

from form_creator.core.config import settings
from form_creator.models.form import Form
from form_creator.models.form_response import FormResponse
from form_creator.services.exceptions import MigrationError

logger = logging.getLogger(__name__)

SECONDARY_LANGUAGE = "ar"

# ALTER statements that widen forms.hero_image_url to TEXT, per dialect.
# SQLite column types are advisory, so nothing needs to change there.
HERO_IMAGE_DDL: dict[str, str | None] = {
    "postgresql": "ALTER TABLE forms ALTER COLUMN hero_image_url TYPE TEXT",
    "mysql": "ALTER TABLE forms MODIFY COLUMN hero_image_url TEXT",
    "mariadb": "ALTER TABLE forms MODIFY COLUMN hero_image_url TEXT",
    "sqlite": None,
}


def to_multi_language(value: str) -> dict[str, str]:
    return {settings.DEFAULT_LANGUAGE: value, SECONDARY_LANGUAGE: ""}


# ---------------------------------------------------------------------------
# Field rewriting (pure)
# ---------------------------------------------------------------------------


def localize_field(field: dict[str, Any], *, form_id: int | None = None, index: int = 0) -> int:
    """Rewrite legacy bare-string text in ``field`` in place.

    Returns how many values were rewritten. Each converted option counts once.
    An options list is only converted when every entry is a string.
    """
    migrated = 0
    for key in ("label", "placeholder"):
        value = field.get(key)
        if isinstance(value, str):
            logger.info("Migrating %s for form %s, field %d: %s", key, form_id, index, value)
            field[key] = to_multi_language(value)
            migrated += 1

    options = field.get("options")
    if isinstance(options, list) and options and all(isinstance(opt, str) for opt in options):
        logger.info("Migrating options for form %s, field %d", form_id, index)
        field["options"] = [to_multi_language(opt) for opt in options]
        migrated += len(options)

    return migrated


def localize_fields(fields: list[Any], *, form_id: int | None = None) -> int:
    migrated = 0
    for index, field in enumerate(fields):
        if isinstance(field, dict):
            migrated += localize_field(field, form_id=form_id, index=index)
    return migrated


# ---------------------------------------------------------------------------
# Database migrations
# ---------------------------------------------------------------------------


def widen_hero_image_column(db: Session) -> None:
    dialect = db.get_bind().dialect.name
    if dialect not in HERO_IMAGE_DDL:
        raise MigrationError(f"Unsupported database dialect for hero image migration: {dialect}")

    ddl = HERO_IMAGE_DDL[dialect]
    if ddl is None:
        logger.info("hero_image_url needs no change on %s", dialect)
        return

    db.execute(text(ddl))
    db.commit()
    logger.info("Successfully migrated hero_image_url column to TEXT")


def add_response_language_column(db: Session) -> bool:
    """Add form_responses.language if missing. Returns True when it was added."""
    inspector = inspect(db.connection())
    columns = {column["name"] for column in inspector.get_columns(FormResponse.__tablename__)}
    if "language" in columns:
        logger.info("form_responses.language already present")
        return False

    db.execute(
        text(
            f"ALTER TABLE {FormResponse.__tablename__} "
            f"ADD COLUMN language VARCHAR(2) DEFAULT '{settings.DEFAULT_LANGUAGE}'"
        )
    )
    db.commit()
    logger.info("Successfully migrated database for multi-language support")
    return True


def migrate_legacy_fields(db: Session) -> tuple[int, int]:
    """Rewrite every stored form's legacy field text into per-language maps.

    Soft-deleted forms are included. Forms whose fields cannot be decoded are
    logged and skipped. Returns (forms updated, values migrated).
    """
    rows = db.execute(select(Form.id, Form.fields)).all()

    updated_forms = 0
    updated_fields = 0
    for form_id, raw_fields in rows:
        try:
            fields = json.loads(raw_fields or "[]")
        except json.JSONDecodeError:
            logger.warning("Skipping form %d: fields column is not valid JSON", form_id)
            continue
        if not isinstance(fields, list):
            logger.warning("Skipping form %d: fields column is not a list", form_id)
            continue

        migrated = localize_fields(fields, form_id=form_id)
        if not migrated:
            continue

        db.execute(
            update(Form)
            .where(Form.id == form_id)
            .values(fields=json.dumps(fields, ensure_ascii=False))
            .execution_options(synchronize_session=False)
        )
        updated_forms += 1
        updated_fields += migrated

    db.commit()
    logger.info("Field migration touched %d forms, %d values", updated_forms, updated_fields)
    return updated_forms, updated_fields
