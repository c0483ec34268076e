from __future__ import annotations

from datetime import timedelta

from pydantic import BaseModel, ConfigDict, Field


class AnswerSubmission(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    question_id: int = Field(alias="QuestionId")
    selected_option_index: int | None = Field(default=None, alias="SelectedOptionIndex")
    written_answer: str | None = Field(default=None, alias="WrittenAnswer")
    associated_pair_id: int | None = Field(default=None, alias="AssociatedPairId")


class QuizSubmissionRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    quiz_id: int = Field(alias="QuizId")
    answers: list[AnswerSubmission] = Field(default_factory=list, alias="Answers")


class QuizResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    quiz_id: int = Field(alias="QuizId")
    total_questions: int = Field(ge=0, alias="TotalQuestions")
    correct_answers: int = Field(ge=0, alias="CorrectAnswers")
    time_taken: timedelta = Field(alias="TimeTaken")
