from dataclasses import replace
from typing import Sequence

from app.application.interfaces.application_repo import ApplicationRepo
from app.domain.constants import REJECTION_MESSAGES, RejectionReason
from app.domain.entities.application import Application, ApplicationState
from app.domain.errors import ApplicationRejectedError


class InMemoryApplicationRepo(ApplicationRepo):
    """Repositorio en memoria. Devuelve copias para que los cambios solo se apliquen vía update_state."""

    def __init__(self) -> None:
        self._applications: dict[int, Application] = {}
        self._next_id = 1

    async def add(self, application: Application) -> Application:
        key = application.pending_key
        if key is not None and any(a.pending_key == key for a in self._applications.values()):
            raise ApplicationRejectedError(
                RejectionReason.DUPLICATE_APPLICATION,
                REJECTION_MESSAGES[RejectionReason.DUPLICATE_APPLICATION],
            )
        stored = replace(application, id=self._next_id)
        self._next_id += 1
        self._applications[stored.id] = stored
        return replace(stored)

    async def get_by_id(self, application_id: int) -> Application | None:
        application = self._applications.get(application_id)
        return replace(application) if application else None

    async def list_all(self) -> Sequence[Application]:
        return [replace(a) for a in self._applications.values()]

    async def list_by_user(self, user_id: int) -> Sequence[Application]:
        return [replace(a) for a in self._applications.values() if a.user_id == user_id]

    async def list_by_property(self, property_id: int) -> Sequence[Application]:
        return [replace(a) for a in self._applications.values() if a.property_id == property_id]

    async def count_by_user_and_state(self, user_id: int, state: ApplicationState) -> int:
        return sum(
            1 for a in self._applications.values() if a.user_id == user_id and a.state == state
        )

    async def exists_by_user_property_and_state(
        self,
        user_id: int,
        property_id: int,
        state: ApplicationState,
    ) -> bool:
        return any(
            a.user_id == user_id and a.property_id == property_id and a.state == state
            for a in self._applications.values()
        )

    async def update_state(
        self,
        application_id: int,
        new_state: ApplicationState,
        expected_state: ApplicationState,
    ) -> bool:
        application = self._applications.get(application_id)
        if application is None or application.state != expected_state:
            return False
        application.state = new_state
        return True
