import logging

from app.api.schemas.leases import LeaseResponse
from app.application.interfaces.lease_repo import LeaseRepo
from app.application.interfaces.transaction_manager import TransactionManager
from app.application.presenters import lease_response
from app.domain.errors import LeaseAlreadyInactiveError, LeaseNotFoundError


class CloseLeaseUseCase:
    def __init__(self, lease_repo: LeaseRepo, transaction_manager: TransactionManager) -> None:
        self._lease_repo = lease_repo
        self._transaction_manager = transaction_manager
        self._logger = logging.getLogger(__name__)

    async def execute(self, lease_id: int) -> LeaseResponse:
        async with self._transaction_manager.start():
            lease = await self._lease_repo.get_by_id(lease_id)
            if lease is None:
                raise LeaseNotFoundError(lease_id)

            lease.close()
            if not await self._lease_repo.deactivate(lease_id):
                # otra petición lo cerró entre la lectura y la escritura
                raise LeaseAlreadyInactiveError(lease_id)

        self._logger.info("Lease closed", extra={"lease_id": lease_id})
        return lease_response(lease)
