from __future__ import annotations

from courseware.exercises.errors import NotFoundError
from courseware.exercises.merge import merge_exercises
from courseware.exercises.store import ExerciseStore
from courseware.exercises.types import Exercise


async def list_canonical_exercises(store: ExerciseStore) -> list[Exercise]:
    return merge_exercises(await store.list_exercises())


async def get_canonical_exercise(store: ExerciseStore, exercise_id: int) -> Exercise:
    exercise = await store.get_by_id(exercise_id)
    if exercise is None:
        raise NotFoundError(exercise_id)
    return merge_exercises([exercise])[0]
