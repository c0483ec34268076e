from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from courseware.db.models.exercises import ExerciseRecord
from courseware.db.repo.exercises_repo import ExercisesRepo
from courseware.exercises.constants import ExerciseType
from courseware.exercises.errors import UnsupportedTypeError
from courseware.exercises.types import (
    AssociationExercise,
    Exercise,
    FillInTheBlankExercise,
    FlashcardExercise,
    MultipleChoiceAnswer,
    MultipleChoiceExercise,
)


def exercise_from_record(record: ExerciseRecord) -> Exercise:
    try:
        exercise_type = ExerciseType(record.exercise_type)
    except ValueError as exc:
        raise UnsupportedTypeError(str(record.exercise_type)) from exc

    if exercise_type is ExerciseType.MULTIPLE_CHOICE:
        return MultipleChoiceExercise(
            id=record.id,
            question=record.question,
            difficulty=record.difficulty,
            choices=[
                MultipleChoiceAnswer(answer=choice.answer, is_correct=bool(choice.is_correct))
                for choice in record.choices
            ],
        )
    if exercise_type is ExerciseType.FILL_IN_THE_BLANK:
        return FillInTheBlankExercise(
            id=record.id,
            question=record.question,
            difficulty=record.difficulty,
            possible_correct_answers=list(record.possible_correct_answers or []),
        )
    if exercise_type is ExerciseType.ASSOCIATION:
        return AssociationExercise(
            id=record.id,
            question=record.question,
            difficulty=record.difficulty,
            first_answers=list(record.first_answers or []),
            second_answers=list(record.second_answers or []),
        )
    return FlashcardExercise(
        id=record.id,
        question=record.question,
        difficulty=record.difficulty,
        answer=record.answer,
        time_in_seconds=record.time_in_seconds,
    )


class SqlExerciseStore:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, exercise_id: int) -> Exercise | None:
        record = await ExercisesRepo.get_by_id(self._session, exercise_id)
        if record is None:
            return None
        return exercise_from_record(record)

    async def list_exercises(self) -> list[Exercise]:
        records = await ExercisesRepo.list_all(self._session)
        return [exercise_from_record(record) for record in records]
