from typing import Sequence

from app.domain.entities.application import Application, ApplicationState


class ApplicationRepo:
    async def add(self, application: Application) -> Application:
        """
        Persists a new application and returns it with its id assigned.

        Raises ApplicationRejectedError(DUPLICATE_APPLICATION) when another
        PENDING application already exists for the same (user, property) pair.
        """
        raise NotImplementedError

    async def get_by_id(self, application_id: int) -> Application | None:
        raise NotImplementedError

    async def list_all(self) -> Sequence[Application]:
        raise NotImplementedError

    async def list_by_user(self, user_id: int) -> Sequence[Application]:
        raise NotImplementedError

    async def list_by_property(self, property_id: int) -> Sequence[Application]:
        raise NotImplementedError

    async def count_by_user_and_state(self, user_id: int, state: ApplicationState) -> int:
        raise NotImplementedError

    async def exists_by_user_property_and_state(
        self,
        user_id: int,
        property_id: int,
        state: ApplicationState,
    ) -> bool:
        raise NotImplementedError

    async def update_state(
        self,
        application_id: int,
        new_state: ApplicationState,
        expected_state: ApplicationState,
    ) -> bool:
        """Moves the application to new_state only if it is still in expected_state."""
        raise NotImplementedError
