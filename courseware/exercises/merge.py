from __future__ import annotations

from collections.abc import Iterable

import structlog

from courseware.exercises.types import (
    AssociationExercise,
    Exercise,
    FillInTheBlankExercise,
    FlashcardExercise,
    MultipleChoiceExercise,
)

logger = structlog.get_logger(__name__)


def _seed_canonical(exercise: Exercise) -> Exercise:
    match exercise:
        case MultipleChoiceExercise():
            return MultipleChoiceExercise(
                id=exercise.id,
                question=exercise.question,
                difficulty=exercise.difficulty,
                choices=list(exercise.choices),
            )
        case FillInTheBlankExercise():
            return FillInTheBlankExercise(
                id=exercise.id,
                question=exercise.question,
                difficulty=exercise.difficulty,
                possible_correct_answers=list(exercise.possible_correct_answers),
            )
        case AssociationExercise():
            return AssociationExercise(
                id=exercise.id,
                question=exercise.question,
                difficulty=exercise.difficulty,
                first_answers=list(exercise.first_answers),
                second_answers=list(exercise.second_answers),
            )
        case FlashcardExercise():
            return FlashcardExercise(
                id=exercise.id,
                question=exercise.question,
                difficulty=exercise.difficulty,
                answer=exercise.answer,
                time_in_seconds=exercise.time_in_seconds,
                elapsed_time=exercise.elapsed_time,
            )
        case _:
            return exercise


def _merge_into(canonical: Exercise, incoming: Exercise) -> None:
    match canonical, incoming:
        case MultipleChoiceExercise(), MultipleChoiceExercise():
            # Correct choices were already taken from the first record.
            canonical.choices.extend(choice for choice in incoming.choices if not choice.is_correct)
        case FillInTheBlankExercise(), FillInTheBlankExercise():
            canonical.possible_correct_answers.extend(incoming.possible_correct_answers)
        case AssociationExercise(), AssociationExercise():
            for first, second in zip(incoming.first_answers, incoming.second_answers):
                canonical.first_answers.append(first)
                canonical.second_answers.append(second)
        case FlashcardExercise(), FlashcardExercise():
            pass
        case _ if type(canonical) is not type(incoming):
            logger.debug(
                "exercise_merge_variant_mismatch",
                exercise_id=canonical.id,
                canonical_type=type(canonical).__name__,
                incoming_type=type(incoming).__name__,
            )


def merge_exercises(exercises: Iterable[Exercise]) -> list[Exercise]:
    """Fold duplicate exercise records into one canonical exercise per id.

    The first record seen for an id is copied; later records with the same id
    contribute their answer data according to the variant. Records of a
    different variant than the first one seen are ignored. Known variants are
    returned as new objects; exercises of any other type are returned as the
    same object, untouched. Input objects are never modified and the result
    keeps first-occurrence order.
    """
    canonical_by_id: dict[int, Exercise] = {}
    for exercise in exercises:
        canonical = canonical_by_id.get(exercise.id)
        if canonical is None:
            canonical_by_id[exercise.id] = _seed_canonical(exercise)
            continue
        _merge_into(canonical, exercise)
    return list(canonical_by_id.values())
