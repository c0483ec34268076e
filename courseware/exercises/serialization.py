"""Exam payloads with typed exercises.

Serialization writes every exercise in full, tagged with its ``Type``.
Deserialization reads exercise ids only and resolves each one through an
``ExerciseStore``, so a round trip always goes through the store.
"""

from __future__ import annotations

import json

import structlog
from pydantic import ValidationError

from courseware.core.config import get_settings
from courseware.exercises.errors import InvalidArgumentError, NotFoundError, UnsupportedTypeError
from courseware.exercises.payloads import ExamReferencePayload
from courseware.exercises.store import ExerciseStore
from courseware.exercises.types import (
    AssociationExercise,
    Exercise,
    FillInTheBlankExercise,
    FlashcardExercise,
    MultipleChoiceExercise,
)
from courseware.quizzes.types import Exam

logger = structlog.get_logger("courseware.exercises.serialization")


def _base_payload(exercise: Exercise, type_tag: str) -> dict[str, object]:
    return {
        "Id": exercise.id,
        "Question": exercise.question,
        "Difficulty": exercise.difficulty.value,
        "Type": type_tag,
    }


def exercise_to_payload(exercise: Exercise) -> dict[str, object]:
    match exercise:
        case AssociationExercise():
            payload = _base_payload(exercise, AssociationExercise.exercise_type.value)
            payload["FirstAnswersList"] = list(exercise.first_answers)
            payload["SecondAnswersList"] = list(exercise.second_answers)
        case FlashcardExercise():
            payload = _base_payload(exercise, FlashcardExercise.exercise_type.value)
            payload["Answer"] = exercise.answer
            payload["TimeInSeconds"] = exercise.time_in_seconds
        case MultipleChoiceExercise():
            payload = _base_payload(exercise, MultipleChoiceExercise.exercise_type.value)
            payload["Choices"] = [
                {"Answer": choice.answer, "IsCorrect": choice.is_correct}
                for choice in exercise.choices
            ]
        case FillInTheBlankExercise():
            payload = _base_payload(exercise, FillInTheBlankExercise.exercise_type.value)
            payload["PossibleCorrectAnswers"] = list(exercise.possible_correct_answers)
        case _:
            raise UnsupportedTypeError(type(exercise).__name__)
    return payload


def exam_to_payload(exam: Exam) -> dict[str, object]:
    return {
        "Id": exam.id,
        "SectionId": exam.section_id,
        "Exercises": [exercise_to_payload(exercise) for exercise in exam.exercises],
    }


def serialize_exam(exam: Exam, *, indent: int | None = None) -> str:
    resolved_indent = get_settings().exam_json_indent if indent is None else indent
    return json.dumps(exam_to_payload(exam), indent=resolved_indent or None, ensure_ascii=False)


def exam_reference_payload(exam: Exam) -> str:
    reference = ExamReferencePayload(
        id=exam.id,
        section_id=exam.section_id,
        exercises=[exercise.id for exercise in exam.exercises],
    )
    return reference.model_dump_json(by_alias=True)


async def deserialize_exam(raw: str | bytes, store: ExerciseStore) -> Exam:
    try:
        reference = ExamReferencePayload.model_validate_json(raw)
    except ValidationError as exc:
        raise InvalidArgumentError(f"invalid exam payload: {exc.error_count()} error(s)") from exc

    exercises: list[Exercise] = []
    for exercise_id in reference.exercises:
        exercise = await store.get_by_id(exercise_id)
        if exercise is None:
            logger.warning(
                "exam_exercise_not_found",
                exam_id=reference.id,
                exercise_id=exercise_id,
            )
            raise NotFoundError(exercise_id)
        exercises.append(exercise)

    return Exam(id=reference.id, section_id=reference.section_id, exercises=exercises)
