from __future__ import annotations

from collections.abc import Sequence

from courseware.exercises.types import (
    AssociationExercise,
    Exercise,
    FillInTheBlankExercise,
    FlashcardExercise,
    MultipleChoiceExercise,
)
from courseware.quizzes.payloads import AnswerSubmission


def _as_index(value: object) -> int | None:
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


def _in_range(index: int, items: Sequence[object]) -> bool:
    return 0 <= index < len(items)


def _normalize_text(value: str) -> str:
    return value.strip().casefold()


def _texts_match(submitted: object, expected: object) -> bool:
    if not isinstance(submitted, str) or not isinstance(expected, str):
        return False
    return _normalize_text(submitted) == _normalize_text(expected)


def _score_multiple_choice(exercise: MultipleChoiceExercise, answer: AnswerSubmission) -> bool:
    index = _as_index(answer.selected_option_index)
    if index is None or not _in_range(index, exercise.choices):
        return False
    return exercise.choices[index].is_correct is True


def _score_fill_in_the_blank(exercise: FillInTheBlankExercise, answer: AnswerSubmission) -> bool:
    written = answer.written_answer
    if not isinstance(written, str):
        return False
    return any(_texts_match(written, expected) for expected in exercise.possible_correct_answers)


def _score_flashcard(exercise: FlashcardExercise, answer: AnswerSubmission) -> bool:
    written = answer.written_answer if answer.written_answer is not None else ""
    if not isinstance(written, str) or not written.strip():
        return False
    return _texts_match(written, exercise.answer)


def _score_association(exercise: AssociationExercise, answer: AnswerSubmission) -> bool:
    first_index = _as_index(answer.selected_option_index)
    second_index = _as_index(answer.associated_pair_id)
    if first_index is None or second_index is None:
        return False
    if not _in_range(first_index, exercise.first_answers):
        return False
    if not _in_range(second_index, exercise.second_answers):
        return False
    # Pairs are position-aligned, so a correct association shares its index.
    return first_index == second_index


def score_answer(exercise: Exercise, answer: AnswerSubmission) -> bool:
    """Return whether ``answer`` solves ``exercise``.

    Pure predicate: missing, malformed or out-of-range answer data is scored
    as incorrect and never raises.
    """
    if not isinstance(answer, AnswerSubmission):
        return False
    match exercise:
        case MultipleChoiceExercise():
            return _score_multiple_choice(exercise, answer)
        case FillInTheBlankExercise():
            return _score_fill_in_the_blank(exercise, answer)
        case FlashcardExercise():
            return _score_flashcard(exercise, answer)
        case AssociationExercise():
            return _score_association(exercise, answer)
        case _:
            return False


def matches_all_blanks(exercise: FillInTheBlankExercise, answers: Sequence[str] | None) -> bool:
    """Check a full set of blank answers position by position."""
    if answers is None or isinstance(answers, str):
        return False
    expected = exercise.possible_correct_answers
    if len(answers) != len(expected):
        return False
    return all(
        _texts_match(submitted, correct) for submitted, correct in zip(answers, expected)
    )
