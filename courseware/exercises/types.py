from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import timedelta
from typing import ClassVar

from courseware.exercises.constants import (
    FLASHCARD_DEFAULT_SECONDS,
    FLASHCARD_FALLBACK_SECONDS,
    Difficulty,
    ExerciseType,
)
from courseware.exercises.errors import InvalidArgumentError


def _coerce_difficulty(value: object) -> Difficulty:
    if isinstance(value, Difficulty):
        return value
    try:
        return Difficulty(value)
    except ValueError as exc:
        raise InvalidArgumentError(f"unknown difficulty: {value!r}") from exc


def _require_text(value: object, *, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise InvalidArgumentError(f"{field_name} cannot be empty")
    return value


def _copy_texts(values: object, *, field_name: str) -> list[str]:
    if values is None or isinstance(values, str) or not isinstance(values, Sequence):
        raise InvalidArgumentError(f"{field_name} must be a sequence of strings")
    copied = list(values)
    if any(not isinstance(item, str) for item in copied):
        raise InvalidArgumentError(f"{field_name} must contain only strings")
    return copied


@dataclass(frozen=True, slots=True)
class MultipleChoiceAnswer:
    answer: str
    is_correct: bool = False

    def __post_init__(self) -> None:
        _require_text(self.answer, field_name="answer")
        if not isinstance(self.is_correct, bool):
            raise InvalidArgumentError(f"is_correct must be a boolean, got {self.is_correct!r}")

    def __str__(self) -> str:
        return f"{self.answer} (Correct)" if self.is_correct else self.answer


@dataclass(slots=True)
class Exercise:
    """Fields shared by every exercise variant.

    Subclasses validate their own payload in ``__post_init__`` and copy the
    sequences they receive, so two instances never share a list.
    """

    id: int
    question: str
    difficulty: Difficulty

    exercise_type: ClassVar[ExerciseType | None] = None

    def __post_init__(self) -> None:
        if isinstance(self.id, bool) or not isinstance(self.id, int):
            raise InvalidArgumentError(f"exercise id must be an integer, got {self.id!r}")
        _require_text(self.question, field_name="question")
        self.difficulty = _coerce_difficulty(self.difficulty)

    def __str__(self) -> str:
        return f"Exercise {self.id}: {self.question} (Difficulty: {self.difficulty.value})"


@dataclass(slots=True)
class MultipleChoiceExercise(Exercise):
    choices: list[MultipleChoiceAnswer]

    exercise_type: ClassVar[ExerciseType] = ExerciseType.MULTIPLE_CHOICE

    def __post_init__(self) -> None:
        Exercise.__post_init__(self)
        if self.choices is None or not isinstance(self.choices, Sequence):
            raise InvalidArgumentError("choices must be a sequence")
        choices = list(self.choices)
        if not choices:
            raise InvalidArgumentError("choices cannot be empty")
        if any(not isinstance(choice, MultipleChoiceAnswer) for choice in choices):
            raise InvalidArgumentError("choices must contain MultipleChoiceAnswer items")
        self.choices = choices

    def __str__(self) -> str:
        rendered = ", ".join(str(choice) for choice in self.choices)
        return f"{Exercise.__str__(self)} [Multiple Choice] Choices: {rendered}"


@dataclass(slots=True)
class FillInTheBlankExercise(Exercise):
    possible_correct_answers: list[str]

    exercise_type: ClassVar[ExerciseType] = ExerciseType.FILL_IN_THE_BLANK

    def __post_init__(self) -> None:
        Exercise.__post_init__(self)
        answers = _copy_texts(self.possible_correct_answers, field_name="possible_correct_answers")
        if not answers:
            raise InvalidArgumentError("possible_correct_answers cannot be empty")
        self.possible_correct_answers = answers

    def __str__(self) -> str:
        rendered = ", ".join(self.possible_correct_answers)
        return f"{Exercise.__str__(self)} [Fill in the Blank] Correct Answers: {rendered}"


@dataclass(slots=True)
class AssociationExercise(Exercise):
    first_answers: list[str]
    second_answers: list[str]

    exercise_type: ClassVar[ExerciseType] = ExerciseType.ASSOCIATION

    def __post_init__(self) -> None:
        Exercise.__post_init__(self)
        first = _copy_texts(self.first_answers, field_name="first_answers")
        second = _copy_texts(self.second_answers, field_name="second_answers")
        if len(first) != len(second):
            raise InvalidArgumentError("answer lists must have the same length")
        self.first_answers = first
        self.second_answers = second

    @property
    def pairs(self) -> list[tuple[str, str]]:
        return list(zip(self.first_answers, self.second_answers))

    def __str__(self) -> str:
        rendered = ", ".join(f"{first} - {second}" for first, second in self.pairs)
        return f"{Exercise.__str__(self)} [Association] Pairs: {rendered}"


@dataclass(slots=True)
class FlashcardExercise(Exercise):
    answer: str
    time_in_seconds: int | None = None
    elapsed_time: timedelta = field(default_factory=timedelta)

    exercise_type: ClassVar[ExerciseType] = ExerciseType.FLASHCARD

    def __post_init__(self) -> None:
        Exercise.__post_init__(self)
        _require_text(self.answer, field_name="answer")
        if self.time_in_seconds is None:
            self.time_in_seconds = FLASHCARD_DEFAULT_SECONDS.get(
                self.difficulty,
                FLASHCARD_FALLBACK_SECONDS,
            )
        elif isinstance(self.time_in_seconds, bool) or not isinstance(self.time_in_seconds, int):
            raise InvalidArgumentError(
                f"time_in_seconds must be an integer, got {self.time_in_seconds!r}"
            )
        elif self.time_in_seconds <= 0:
            raise InvalidArgumentError("time_in_seconds must be positive")

    def __str__(self) -> str:
        return (
            f"{Exercise.__str__(self)} [Flashcard] Answer: {self.answer}, "
            f"Time: {self.time_in_seconds}s"
        )
