from __future__ import annotations

from sqlalchemy import JSON, CheckConstraint, ForeignKey, Index, Integer, SmallInteger, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from courseware.db.models.base import Base


class ExerciseRecord(Base):
    __tablename__ = "exercises"
    __table_args__ = (
        CheckConstraint(
            "exercise_type IN ('Association','FillInTheBlank','MultipleChoice','Flashcard')",
            name="ck_exercises_exercise_type",
        ),
        CheckConstraint(
            "difficulty IN ('Easy','Normal','Hard')",
            name="ck_exercises_difficulty",
        ),
        Index("idx_exercises_question", "question"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    exercise_type: Mapped[str] = mapped_column(String(32), nullable=False)
    question: Mapped[str] = mapped_column(Text, nullable=False)
    difficulty: Mapped[str] = mapped_column(String(16), nullable=False)
    answer: Mapped[str | None] = mapped_column(Text, nullable=True)
    time_in_seconds: Mapped[int | None] = mapped_column(SmallInteger, nullable=True)
    possible_correct_answers: Mapped[list[str] | None] = mapped_column(JSON, nullable=True)
    first_answers: Mapped[list[str] | None] = mapped_column(JSON, nullable=True)
    second_answers: Mapped[list[str] | None] = mapped_column(JSON, nullable=True)

    choices: Mapped[list[MultipleChoiceAnswerRecord]] = relationship(
        back_populates="exercise",
        order_by="MultipleChoiceAnswerRecord.position",
        lazy="selectin",
    )


class MultipleChoiceAnswerRecord(Base):
    __tablename__ = "multiple_choice_answers"
    __table_args__ = (
        CheckConstraint("position >= 0", name="ck_multiple_choice_answers_position_non_negative"),
        Index("idx_multiple_choice_answers_exercise", "exercise_id", "position"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    exercise_id: Mapped[int] = mapped_column(Integer, ForeignKey("exercises.id"), nullable=False)
    position: Mapped[int] = mapped_column(SmallInteger, nullable=False)
    answer: Mapped[str] = mapped_column(Text, nullable=False)
    is_correct: Mapped[bool] = mapped_column(nullable=False, default=False)

    exercise: Mapped[ExerciseRecord] = relationship(back_populates="choices")
