from __future__ import annotations

from enum import Enum


class Difficulty(str, Enum):
    EASY = "Easy"
    NORMAL = "Normal"
    HARD = "Hard"


class ExerciseType(str, Enum):
    ASSOCIATION = "Association"
    FILL_IN_THE_BLANK = "FillInTheBlank"
    MULTIPLE_CHOICE = "MultipleChoice"
    FLASHCARD = "Flashcard"

    @property
    def label(self) -> str:
        return EXERCISE_TYPE_LABELS[self]


EXERCISE_TYPE_LABELS: dict[ExerciseType, str] = {
    ExerciseType.ASSOCIATION: "Association",
    ExerciseType.FILL_IN_THE_BLANK: "Fill in the Blank",
    ExerciseType.MULTIPLE_CHOICE: "Multiple Choice",
    ExerciseType.FLASHCARD: "Flashcard",
}

# Seconds a flashcard stays on screen when no explicit time is configured.
FLASHCARD_DEFAULT_SECONDS: dict[Difficulty, int] = {
    Difficulty.EASY: 15,
    Difficulty.NORMAL: 30,
    Difficulty.HARD: 45,
}
FLASHCARD_FALLBACK_SECONDS = 30
