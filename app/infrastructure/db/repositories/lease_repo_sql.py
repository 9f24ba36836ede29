from typing import Any, Sequence

from sqlalchemy import insert, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces.lease_repo import LeaseRepo
from app.domain.entities.lease import LeaseRecord
from app.domain.errors import LeaseAlreadyExistsError
from app.infrastructure.db.tables import lease_records


def _to_entity(row: Any) -> LeaseRecord:
    return LeaseRecord(
        id=row["id"],
        application_id=row["application_id"],
        start_date=row["start_date"],
        end_date=row["end_date"],
        monthly_amount=row["monthly_amount"],
        active=bool(row["active"]),
    )


class LeaseRepoSQL(LeaseRepo):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def add(self, lease: LeaseRecord) -> LeaseRecord:
        stmt = insert(lease_records).values(
            application_id=lease.application_id,
            start_date=lease.start_date,
            end_date=lease.end_date,
            monthly_amount=lease.monthly_amount,
            active=lease.active,
            active_application_id=lease.application_id if lease.active else None,
        )
        try:
            result = await self._session.execute(stmt)
        except IntegrityError as exc:
            raise LeaseAlreadyExistsError(lease.application_id) from exc
        lease.id = result.inserted_primary_key[0]
        return lease

    async def get_by_id(self, lease_id: int) -> LeaseRecord | None:
        stmt = select(lease_records).where(lease_records.c.id == lease_id).limit(1)
        result = await self._session.execute(stmt)
        row = result.mappings().first()
        return _to_entity(row) if row else None

    async def list_all(self) -> Sequence[LeaseRecord]:
        result = await self._session.execute(select(lease_records).order_by(lease_records.c.id))
        return [_to_entity(row) for row in result.mappings().all()]

    async def list_by_application(self, application_id: int) -> Sequence[LeaseRecord]:
        stmt = (
            select(lease_records)
            .where(lease_records.c.application_id == application_id)
            .order_by(lease_records.c.id)
        )
        result = await self._session.execute(stmt)
        return [_to_entity(row) for row in result.mappings().all()]

    async def has_active_for_application(self, application_id: int) -> bool:
        stmt = (
            select(lease_records.c.id)
            .where(
                lease_records.c.application_id == application_id,
                lease_records.c.active.is_(True),
            )
            .limit(1)
        )
        result = await self._session.execute(stmt)
        return result.scalar() is not None

    async def deactivate(self, lease_id: int) -> bool:
        stmt = (
            update(lease_records)
            .where(lease_records.c.id == lease_id, lease_records.c.active.is_(True))
            .values(active=False, active_application_id=None)
        )
        result = await self._session.execute(stmt)
        return result.rowcount == 1
