from typing import Sequence

from app.domain.entities.lease import LeaseRecord


class LeaseRepo:
    async def add(self, lease: LeaseRecord) -> LeaseRecord:
        """
        Persists a new lease record.

        Raises LeaseAlreadyExistsError when the application already has an
        active lease record.
        """
        raise NotImplementedError

    async def get_by_id(self, lease_id: int) -> LeaseRecord | None:
        raise NotImplementedError

    async def list_all(self) -> Sequence[LeaseRecord]:
        raise NotImplementedError

    async def list_by_application(self, application_id: int) -> Sequence[LeaseRecord]:
        raise NotImplementedError

    async def has_active_for_application(self, application_id: int) -> bool:
        raise NotImplementedError

    async def deactivate(self, lease_id: int) -> bool:
        """Sets active=false only if the record is still active."""
        raise NotImplementedError
