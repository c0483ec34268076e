from courseware.db.models.exercises import ExerciseRecord, MultipleChoiceAnswerRecord

__all__ = [
    "ExerciseRecord",
    "MultipleChoiceAnswerRecord",
]
