from courseware.exercises.constants import Difficulty, ExerciseType
from courseware.exercises.errors import (
    ExerciseEngineError,
    InvalidArgumentError,
    NotFoundError,
    UnsupportedTypeError,
)
from courseware.exercises.merge import merge_exercises
from courseware.exercises.types import (
    AssociationExercise,
    Exercise,
    FillInTheBlankExercise,
    FlashcardExercise,
    MultipleChoiceAnswer,
    MultipleChoiceExercise,
)

__all__ = [
    "AssociationExercise",
    "Difficulty",
    "Exercise",
    "ExerciseEngineError",
    "ExerciseType",
    "FillInTheBlankExercise",
    "FlashcardExercise",
    "InvalidArgumentError",
    "MultipleChoiceAnswer",
    "MultipleChoiceExercise",
    "NotFoundError",
    "UnsupportedTypeError",
    "merge_exercises",
]
