"""
Pydantic schemas for student records.

A student is a flat record of name, age and email.  The ``id`` is
assigned by the store and is never taken from a request body: unknown
keys, a client supplied ``id`` among them, are ignored.  Types are
decoded strictly (``"21"`` is not an age) but no further validation
is applied.  Omitted fields and fields sent as ``null`` take their
zero values.
"""

from typing import Any

from pydantic import BaseModel, Field, StrictInt, StrictStr, ValidationInfo, field_validator


class StudentIn(BaseModel):
    """Schema for creating or replacing a student."""

    name: StrictStr = Field("", description="Student's name")
    age: StrictInt = Field(0, description="Student's age in years")
    email: StrictStr = Field("", description="Contact email address")

    @field_validator("name", "age", "email", mode="before")
    @classmethod
    def null_to_zero_value(cls, v: Any, info: ValidationInfo) -> Any:
        if v is None:
            return cls.model_fields[info.field_name].default
        return v


class StudentRead(StudentIn):
    """Schema for a stored student."""

    id: int

    model_config = {
        "from_attributes": True,
    }


class SummaryRead(BaseModel):
    """Generated natural-language summary of a student."""

    summary: str
