"""Immutable value models: the requesting student and the issued document.

Both models are frozen pydantic models validated at construction. A
:class:`Student` that fails validation is never created, so every later
stage can assume well-formed input.
"""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, Field, field_validator

from docissue.domain.types import RequestType

GPA_MIN = 0.0
GPA_MAX = 5.0


class Student(BaseModel):
    """A student record as supplied with the request.

    String fields are stored exactly as given; only blank or
    whitespace-only values are rejected.
    """

    model_config = {"frozen": True}

    id: str
    name: str
    program: str
    gpa: float = Field(ge=GPA_MIN, le=GPA_MAX)

    @field_validator("id", "name", "program")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            msg = "must not be blank"
            raise ValueError(msg)
        return value


class Document(BaseModel):
    """An issued document: rendered body plus its pseudo-stamp."""

    model_config = {"frozen": True}

    request_type: RequestType
    body: str = Field(min_length=1)
    stamp: str = Field(min_length=1)
    issued_on: date
