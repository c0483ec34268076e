from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol

from courseware.exercises.types import Exercise


class ExerciseStore(Protocol):
    async def get_by_id(self, exercise_id: int) -> Exercise | None: ...

    async def list_exercises(self) -> list[Exercise]: ...


class InMemoryExerciseStore:
    """Dictionary-backed store.

    ``add`` replaces the record returned by ``get_by_id``; ``add_row`` keeps
    every record so ``list_exercises`` can return duplicates the way joined
    queries do.
    """

    def __init__(self, exercises: Iterable[Exercise] = ()) -> None:
        self._by_id: dict[int, Exercise] = {}
        self._rows: list[Exercise] = []
        for exercise in exercises:
            self.add(exercise)

    def add(self, exercise: Exercise) -> None:
        self._rows = [row for row in self._rows if row.id != exercise.id]
        self._by_id[exercise.id] = exercise
        self._rows.append(exercise)

    def add_row(self, exercise: Exercise) -> None:
        self._by_id.setdefault(exercise.id, exercise)
        self._rows.append(exercise)

    async def get_by_id(self, exercise_id: int) -> Exercise | None:
        return self._by_id.get(exercise_id)

    async def list_exercises(self) -> list[Exercise]:
        return list(self._rows)
