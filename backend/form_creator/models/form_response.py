from datetime import datetime

from sqlalchemy import DateTime, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from form_creator.core.config import settings
from form_creator.core.database import Base


class FormResponse(Base):
    """One submission against a form, keyed by the submitter's phone number.

    response_data is a TEXT column holding a JSON object keyed by field id:
        {
            "q1": "Free text here",
            "q2": ["Option A", "Option B"],
            "q3": {"nested": true}
        }

    form_id is deliberately not a foreign key; responses may outlive or
    predate the form they point at.
    """

    __tablename__ = "form_responses"
    __table_args__ = (Index("ix_form_responses_form_submitted", "form_id", "submitted_at"),)

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    form_id: Mapped[int] = mapped_column(nullable=False)
    phone_number: Mapped[str] = mapped_column(Text, nullable=False)
    response_data: Mapped[str] = mapped_column(Text, nullable=False, default="{}")
    language: Mapped[str] = mapped_column(
        String(2), nullable=False, default=settings.DEFAULT_LANGUAGE, server_default=settings.DEFAULT_LANGUAGE
    )
    submitted_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)

    def __repr__(self) -> str:
        return f"<FormResponse form={self.form_id} ({self.language})>"
