"""Pydantic schemas for skill records (a named skill held at some level)."""

from typing import Optional

from pydantic import Field

from .record import CamelModel, NonEmptyStr, PositiveInt, RecordBase, Text


class SkillRecordBase(CamelModel):
    holder_name: NonEmptyStr = Field(..., examples=["Ada"])
    skill: NonEmptyStr = Field(..., examples=["Rust"])
    level: PositiveInt = Field(..., examples=[3], description="Proficiency level, 1 or higher")
    description: Optional[Text] = Field(None, examples=["Writes canisters for a living"])


class SkillRecordCreate(SkillRecordBase):
    """Schema for creating a skill record."""


class SkillRecordUpdate(CamelModel):
    """Partial update; omitted fields keep their stored values."""

    holder_name: Optional[NonEmptyStr] = None
    skill: Optional[NonEmptyStr] = None
    level: Optional[PositiveInt] = None
    description: Optional[Text] = None


class SkillRecord(SkillRecordBase, RecordBase):
    pass
