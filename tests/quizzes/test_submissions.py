from __future__ import annotations

from dataclasses import FrozenInstanceError
from datetime import datetime, timedelta, timezone

import pytest

from courseware.exercises.constants import Difficulty
from courseware.exercises.errors import InvalidArgumentError
from courseware.exercises.types import (
    AssociationExercise,
    FillInTheBlankExercise,
    MultipleChoiceAnswer,
    MultipleChoiceExercise,
)
from courseware.quizzes.payloads import QuizResult, QuizSubmissionRequest
from courseware.quizzes.submissions import build_quiz_result, has_passed, score_submission
from courseware.quizzes.types import AnswerSubmissionEntity, Quiz

UTC = timezone.utc
STARTED_AT = datetime(2026, 3, 1, 10, 0, tzinfo=UTC)


def _quiz() -> Quiz:
    return Quiz(
        id=21,
        section_id=3,
        order_number=1,
        passing_threshold=0.5,
        exercises=[
            MultipleChoiceExercise(
                id=1,
                question="Capital of France?",
                difficulty=Difficulty.EASY,
                choices=[
                    MultipleChoiceAnswer(answer="Paris", is_correct=True),
                    MultipleChoiceAnswer(answer="Berlin"),
                ],
            ),
            FillInTheBlankExercise(
                id=2,
                question="Name a capital: ___",
                difficulty=Difficulty.NORMAL,
                possible_correct_answers=["Paris", "Berlin"],
            ),
            AssociationExercise(
                id=3,
                question="Match",
                difficulty=Difficulty.HARD,
                first_answers=["USA", "France"],
                second_answers=["DC", "Paris"],
            ),
        ],
    )


def _request() -> QuizSubmissionRequest:
    return QuizSubmissionRequest.model_validate(
        {
            "QuizId": 21,
            "Answers": [
                {"QuestionId": 1, "SelectedOptionIndex": 0},
                {"QuestionId": 2, "WrittenAnswer": " berlin "},
                {"QuestionId": 3, "SelectedOptionIndex": 0, "AssociatedPairId": 1},
                {"QuestionId": 404, "WrittenAnswer": "ignored"},
            ],
        }
    )


def test_score_submission_scores_known_questions_in_order() -> None:
    submission = score_submission(
        _quiz(),
        _request(),
        started_at=STARTED_AT,
        finished_at=STARTED_AT + timedelta(minutes=5),
    )

    assert submission.quiz_id == 21
    assert submission.answers == (
        AnswerSubmissionEntity(question_id=1, is_correct=True),
        AnswerSubmissionEntity(question_id=2, is_correct=True),
        AnswerSubmissionEntity(question_id=3, is_correct=False),
    )
    with pytest.raises(FrozenInstanceError):
        submission.quiz_id = 22  # type: ignore[misc]


def test_score_submission_rejects_inverted_time_window() -> None:
    with pytest.raises(InvalidArgumentError):
        score_submission(
            _quiz(),
            _request(),
            started_at=STARTED_AT,
            finished_at=STARTED_AT - timedelta(seconds=1),
        )


def test_build_quiz_result_counts_answers_and_duration() -> None:
    submission = score_submission(
        _quiz(),
        _request(),
        started_at=STARTED_AT,
        finished_at=STARTED_AT + timedelta(minutes=5),
    )
    result = build_quiz_result(submission)

    assert result.quiz_id == 21
    assert result.total_questions == 3
    assert result.correct_answers == 2
    assert result.time_taken == timedelta(minutes=5)
    assert set(result.model_dump(by_alias=True)) == {
        "QuizId",
        "TotalQuestions",
        "CorrectAnswers",
        "TimeTaken",
    }


@pytest.mark.parametrize(
    ("total_questions", "correct_answers", "threshold", "expected"),
    [
        (4, 2, 0.5, True),
        (4, 1, 0.5, False),
        (3, 3, 1.0, True),
        (0, 0, 0.0, False),
    ],
)
def test_has_passed(total_questions: int, correct_answers: int, threshold: float, expected: bool) -> None:
    result = QuizResult(
        quiz_id=1,
        total_questions=total_questions,
        correct_answers=correct_answers,
        time_taken=timedelta(0),
    )
    assert has_passed(result, passing_threshold=threshold) is expected


def test_quiz_find_exercise() -> None:
    quiz = _quiz()
    assert quiz.find_exercise(2) is quiz.exercises[1]
    assert quiz.find_exercise(99) is None


def test_score_submission_rejects_request_for_another_quiz() -> None:
    request = QuizSubmissionRequest(quiz_id=7, answers=[])
    with pytest.raises(InvalidArgumentError):
        score_submission(
            _quiz(),
            request,
            started_at=STARTED_AT,
            finished_at=STARTED_AT + timedelta(minutes=1),
        )
