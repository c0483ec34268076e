from __future__ import annotations

from datetime import datetime

import structlog

from courseware.exercises.errors import InvalidArgumentError
from courseware.exercises.scoring import score_answer
from courseware.quizzes.payloads import QuizResult, QuizSubmissionRequest
from courseware.quizzes.types import AnswerSubmissionEntity, BaseQuiz, QuizSubmissionEntity

logger = structlog.get_logger("courseware.quizzes.submissions")


def score_submission(
    quiz: BaseQuiz,
    request: QuizSubmissionRequest,
    *,
    started_at: datetime,
    finished_at: datetime,
) -> QuizSubmissionEntity:
    if finished_at < started_at:
        raise InvalidArgumentError("submission cannot finish before it starts")
    if request.quiz_id != quiz.id:
        raise InvalidArgumentError(
            f"submission for quiz {request.quiz_id} cannot be scored against quiz {quiz.id}"
        )

    scored: list[AnswerSubmissionEntity] = []
    for answer in request.answers:
        exercise = quiz.find_exercise(answer.question_id)
        if exercise is None:
            logger.debug(
                "quiz_submission_answer_skipped",
                quiz_id=quiz.id,
                question_id=answer.question_id,
            )
            continue
        scored.append(
            AnswerSubmissionEntity(
                question_id=answer.question_id,
                is_correct=score_answer(exercise, answer),
            )
        )

    submission = QuizSubmissionEntity(
        quiz_id=request.quiz_id,
        start_time=started_at,
        end_time=finished_at,
        answers=tuple(scored),
    )
    logger.info(
        "quiz_submission_scored",
        quiz_id=submission.quiz_id,
        total_questions=len(submission.answers),
        correct_answers=sum(1 for item in submission.answers if item.is_correct),
    )
    return submission


def build_quiz_result(submission: QuizSubmissionEntity) -> QuizResult:
    return QuizResult(
        quiz_id=submission.quiz_id,
        total_questions=len(submission.answers),
        correct_answers=sum(1 for item in submission.answers if item.is_correct),
        time_taken=submission.end_time - submission.start_time,
    )


def has_passed(result: QuizResult, *, passing_threshold: float) -> bool:
    if result.total_questions == 0:
        return False
    return result.correct_answers / result.total_questions >= passing_threshold
