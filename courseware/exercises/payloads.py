from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ExamReferencePayload(BaseModel):
    """Wire form of an exam whose exercises are referenced by id."""

    model_config = ConfigDict(populate_by_name=True, frozen=True, strict=True)

    id: int = Field(alias="Id")
    section_id: int | None = Field(default=None, alias="SectionId")
    exercises: list[int] = Field(alias="Exercises")
