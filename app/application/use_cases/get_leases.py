import logging

from app.api.schemas.leases import LeaseResponse
from app.application.interfaces.lease_repo import LeaseRepo
from app.application.presenters import lease_response
from app.application.use_cases.get_applications import GetApplicationsUseCase
from app.domain.entities.lease import LeaseRecord
from app.domain.errors import LeaseNotFoundError


class GetLeasesUseCase:
    def __init__(self, lease_repo: LeaseRepo, applications: GetApplicationsUseCase) -> None:
        self._lease_repo = lease_repo
        self._applications = applications
        self._logger = logging.getLogger(__name__)

    async def list_all(self, include_details: bool = False) -> list[LeaseResponse]:
        leases = await self._lease_repo.list_all()
        return [await self._to_response(lease, include_details) for lease in leases]

    async def get(self, lease_id: int, include_details: bool = True) -> LeaseResponse:
        lease = await self._lease_repo.get_by_id(lease_id)
        if lease is None:
            raise LeaseNotFoundError(lease_id)
        return await self._to_response(lease, include_details)

    async def list_by_application(self, application_id: int) -> list[LeaseResponse]:
        leases = await self._lease_repo.list_by_application(application_id)
        return [lease_response(lease) for lease in leases]

    async def _to_response(self, lease: LeaseRecord, include_details: bool) -> LeaseResponse:
        if not include_details:
            return lease_response(lease)
        application = await self._applications.find(lease.application_id, include_details=True)
        if application is None:
            self._logger.warning(
                "Lease references a missing application",
                extra={"lease_id": lease.id, "application_id": lease.application_id},
            )
        return lease_response(lease, application=application)
