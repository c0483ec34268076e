from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from courseware.exercises.types import Exercise


@dataclass(slots=True)
class BaseQuiz:
    id: int
    section_id: int | None = None
    exercises: list[Exercise] = field(default_factory=list)
    max_exercises: int = 0
    passing_threshold: float = 0.0

    def find_exercise(self, exercise_id: int) -> Exercise | None:
        for exercise in self.exercises:
            if exercise.id == exercise_id:
                return exercise
        return None


@dataclass(slots=True)
class Quiz(BaseQuiz):
    order_number: int | None = None


@dataclass(slots=True)
class Exam(BaseQuiz):
    pass


@dataclass(frozen=True, slots=True)
class AnswerSubmissionEntity:
    question_id: int
    is_correct: bool


@dataclass(frozen=True, slots=True)
class QuizSubmissionEntity:
    quiz_id: int
    start_time: datetime
    end_time: datetime
    answers: tuple[AnswerSubmissionEntity, ...] = ()
