from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from courseware.db.models.exercises import ExerciseRecord


class ExercisesRepo:
    @staticmethod
    async def get_by_id(session: AsyncSession, exercise_id: int) -> ExerciseRecord | None:
        return await session.get(ExerciseRecord, exercise_id)

    @staticmethod
    async def list_all(session: AsyncSession) -> list[ExerciseRecord]:
        stmt = select(ExerciseRecord).order_by(ExerciseRecord.id.asc())
        result = await session.execute(stmt)
        return list(result.scalars().all())
