from datetime import datetime

from sqlalchemy import Boolean, DateTime, Index, Text
from sqlalchemy.orm import Mapped, mapped_column

from form_creator.core.database import Base


class Form(Base):
    """Form definition.

    title, description, submit_button_text and fields are TEXT columns holding
    JSON. The text values are either a plain string (legacy rows) or a
    language-code -> string map:
        "Survey"
        {"en": "Survey", "ar": "استبيان"}

    fields is an ordered JSON array of field dicts:
        {
            "id": "q1",
            "type": "text" | "textarea" | "select" | "radio" | ...,
            "label": "Name" | {"en": "Name", "ar": "..."},
            "placeholder": ...,          # optional, same shape as label
            "required": true/false,
            "options": [...],            # optional, for choice fields
            "validation": {...}          # optional, passed through verbatim
        }
    """

    __tablename__ = "forms"
    __table_args__ = (Index("ix_forms_active_created", "is_active", "created_at"),)

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str | None] = mapped_column(Text)
    fields: Mapped[str] = mapped_column(Text, nullable=False, default="[]")
    submit_button_text: Mapped[str | None] = mapped_column(Text)
    hero_image_url: Mapped[str | None] = mapped_column(Text)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)

    def __repr__(self) -> str:
        state = "active" if self.is_active else "deleted"
        return f"<Form {self.id} ({state})>"
