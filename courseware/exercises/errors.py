class ExerciseEngineError(Exception):
    pass


class InvalidArgumentError(ExerciseEngineError):
    pass


class UnsupportedTypeError(ExerciseEngineError):
    def __init__(self, type_name: str) -> None:
        super().__init__(f"unsupported exercise type: {type_name}")
        self.type_name = type_name


class NotFoundError(ExerciseEngineError):
    def __init__(self, exercise_id: int) -> None:
        super().__init__(f"exercise {exercise_id} not found")
        self.exercise_id = exercise_id
