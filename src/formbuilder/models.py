from __future__ import annotations

from sqlalchemy import Boolean, Column, ForeignKey, Integer, String, Text
from sqlalchemy.orm import DeclarativeBase

from formbuilder.config import DEFAULT_FORM_STATUS, DEFAULT_SUBMISSION_STATUS


class Base(DeclarativeBase):
    pass


class FormModel(Base):
    __tablename__ = "forms"

    id = Column(String, primary_key=True)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    status = Column(String, nullable=False, default=DEFAULT_FORM_STATUS)
    created_at = Column(String, nullable=False, index=True)
    updated_at = Column(String, nullable=False)


class FormFieldModel(Base):
    __tablename__ = "form_fields"

    id = Column(String, primary_key=True)
    form_id = Column(
        String, ForeignKey("forms.id", ondelete="CASCADE"), nullable=False, index=True
    )
    type = Column(String, nullable=False)
    name = Column(String, nullable=False)
    label = Column(String, nullable=True)
    required = Column(Boolean, nullable=False, default=False)
    ord = Column(Integer, nullable=False, default=0)
    # position in the list the field was written with; breaks ord ties
    seq = Column(Integer, nullable=False, default=0)
    config = Column(Text, nullable=True)
    created_at = Column(String, nullable=False)
    updated_at = Column(String, nullable=False)


class SubmissionModel(Base):
    __tablename__ = "submissions"

    id = Column(String, primary_key=True)
    form_id = Column(
        String, ForeignKey("forms.id", ondelete="CASCADE"), nullable=False, index=True
    )
    payload = Column(Text, nullable=False)
    status = Column(String, nullable=False, default=DEFAULT_SUBMISSION_STATUS)
    created_at = Column(String, nullable=False, index=True)
    updated_at = Column(String, nullable=False)
