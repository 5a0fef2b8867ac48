"""
Pydantic schemas for student records.

A student is identified by a server‑assigned integer ``id`` and
carries three free‑form text fields: ``name``, ``faculty`` and
``gender``.  The same JSON shape is used for request and response
bodies; on requests the ``id`` is accepted but never used.
"""

from typing import Optional

from pydantic import BaseModel, Field, StrictInt, StrictStr, field_validator, model_validator


class StudentWrite(BaseModel):
    """Schema for creating or replacing a student.

    Keys are matched case‑insensitively (``"Name"`` sets ``name``); when
    several keys map to the same field the last one wins.  Missing or
    ``null`` text fields become an empty string and unknown keys are
    ignored.  Values are not coerced: a number for ``name`` or a string
    for ``id`` makes the body invalid.
    """

    id: Optional[StrictInt] = Field(None, description="Ignored; ids are assigned by the server")
    name: StrictStr = Field("", examples=["Ada"])
    faculty: StrictStr = Field("", examples=["CS"])
    gender: StrictStr = Field("", examples=["F"])

    @model_validator(mode="before")
    @classmethod
    def fold_keys(cls, data):
        if not isinstance(data, dict):
            return data
        folded = {}
        for key, value in data.items():
            lowered = key.lower() if isinstance(key, str) else key
            folded[lowered if lowered in cls.model_fields else key] = value
        return folded

    @field_validator("name", "faculty", "gender", mode="before")
    @classmethod
    def null_as_empty(cls, v):
        # An explicit JSON null leaves the field at its zero value.
        return "" if v is None else v


class StudentRead(BaseModel):
    """Schema for reading a student."""

    id: int
    name: str
    faculty: str
    gender: str
