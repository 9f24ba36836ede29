from typing import Any, Sequence

from sqlalchemy import func, insert, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces.application_repo import ApplicationRepo
from app.domain.constants import REJECTION_MESSAGES, RejectionReason
from app.domain.entities.application import Application, ApplicationState
from app.domain.errors import ApplicationRejectedError
from app.infrastructure.db.tables import applications


def _to_entity(row: Any) -> Application:
    return Application(
        id=row["id"],
        user_id=row["user_id"],
        property_id=row["property_id"],
        state=ApplicationState(row["state"]),
        created_at=row["created_at"],
    )


class ApplicationRepoSQL(ApplicationRepo):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def add(self, application: Application) -> Application:
        stmt = insert(applications).values(
            user_id=application.user_id,
            property_id=application.property_id,
            state=application.state.value,
            created_at=application.created_at,
            pending_key=application.pending_key,
        )
        try:
            result = await self._session.execute(stmt)
        except IntegrityError as exc:
            raise ApplicationRejectedError(
                RejectionReason.DUPLICATE_APPLICATION,
                REJECTION_MESSAGES[RejectionReason.DUPLICATE_APPLICATION],
            ) from exc
        application.id = result.inserted_primary_key[0]
        return application

    async def get_by_id(self, application_id: int) -> Application | None:
        stmt = select(applications).where(applications.c.id == application_id).limit(1)
        result = await self._session.execute(stmt)
        row = result.mappings().first()
        return _to_entity(row) if row else None

    async def _list(self, *where: Any) -> Sequence[Application]:
        stmt = select(applications).where(*where).order_by(applications.c.id)
        result = await self._session.execute(stmt)
        return [_to_entity(row) for row in result.mappings().all()]

    async def list_all(self) -> Sequence[Application]:
        return await self._list()

    async def list_by_user(self, user_id: int) -> Sequence[Application]:
        return await self._list(applications.c.user_id == user_id)

    async def list_by_property(self, property_id: int) -> Sequence[Application]:
        return await self._list(applications.c.property_id == property_id)

    async def count_by_user_and_state(self, user_id: int, state: ApplicationState) -> int:
        stmt = select(func.count()).select_from(applications).where(
            applications.c.user_id == user_id,
            applications.c.state == state.value,
        )
        result = await self._session.execute(stmt)
        return int(result.scalar() or 0)

    async def exists_by_user_property_and_state(
        self,
        user_id: int,
        property_id: int,
        state: ApplicationState,
    ) -> bool:
        stmt = (
            select(applications.c.id)
            .where(
                applications.c.user_id == user_id,
                applications.c.property_id == property_id,
                applications.c.state == state.value,
            )
            .limit(1)
        )
        result = await self._session.execute(stmt)
        return result.scalar() is not None

    async def update_state(
        self,
        application_id: int,
        new_state: ApplicationState,
        expected_state: ApplicationState,
    ) -> bool:
        stmt = (
            update(applications)
            .where(
                applications.c.id == application_id,
                applications.c.state == expected_state.value,
            )
            .values(
                state=new_state.value,
                pending_key=None,
            )
        )
        result = await self._session.execute(stmt)
        return result.rowcount == 1
