from dataclasses import replace
from typing import Sequence

from app.application.interfaces.lease_repo import LeaseRepo
from app.domain.entities.lease import LeaseRecord
from app.domain.errors import LeaseAlreadyExistsError


class InMemoryLeaseRepo(LeaseRepo):
    def __init__(self) -> None:
        self._leases: dict[int, LeaseRecord] = {}
        self._next_id = 1

    async def add(self, lease: LeaseRecord) -> LeaseRecord:
        if lease.active and await self.has_active_for_application(lease.application_id):
            raise LeaseAlreadyExistsError(lease.application_id)
        stored = replace(lease, id=self._next_id)
        self._next_id += 1
        self._leases[stored.id] = stored
        return replace(stored)

    async def get_by_id(self, lease_id: int) -> LeaseRecord | None:
        lease = self._leases.get(lease_id)
        return replace(lease) if lease else None

    async def list_all(self) -> Sequence[LeaseRecord]:
        return [replace(lease) for lease in self._leases.values()]

    async def list_by_application(self, application_id: int) -> Sequence[LeaseRecord]:
        return [
            replace(lease)
            for lease in self._leases.values()
            if lease.application_id == application_id
        ]

    async def has_active_for_application(self, application_id: int) -> bool:
        return any(
            lease.active and lease.application_id == application_id
            for lease in self._leases.values()
        )

    async def deactivate(self, lease_id: int) -> bool:
        lease = self._leases.get(lease_id)
        if lease is None or not lease.active:
            return False
        lease.active = False
        return True
