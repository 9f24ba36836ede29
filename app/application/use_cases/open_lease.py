import logging
from datetime import date
from decimal import Decimal

from app.api.schemas.leases import LeaseResponse
from app.application.interfaces.application_repo import ApplicationRepo
from app.application.interfaces.lease_repo import LeaseRepo
from app.application.interfaces.transaction_manager import TransactionManager
from app.application.presenters import lease_response
from app.domain.entities.lease import LeaseRecord
from app.domain.errors import (
    ApplicationNotAcceptedError,
    ApplicationNotFoundError,
    LeaseAlreadyExistsError,
)
from app.domain.value_objects.lease_terms import LeaseTerms


class OpenLeaseUseCase:
    """Materializa el registro de arriendo de una solicitud aceptada."""

    def __init__(
        self,
        lease_repo: LeaseRepo,
        application_repo: ApplicationRepo,
        transaction_manager: TransactionManager,
    ) -> None:
        self._lease_repo = lease_repo
        self._application_repo = application_repo
        self._transaction_manager = transaction_manager
        self._logger = logging.getLogger(__name__)

    async def open(
        self,
        application_id: int,
        start_date: date,
        monthly_amount: Decimal,
        end_date: date | None = None,
    ) -> LeaseRecord:
        async with self._transaction_manager.start():
            application = await self._application_repo.get_by_id(application_id)
            if application is None:
                raise ApplicationNotFoundError(application_id)
            if not application.is_accepted:
                raise ApplicationNotAcceptedError(application_id, application.state.value)
            await self.ensure_no_active_lease(application_id)

            terms = LeaseTerms(
                start_date=start_date,
                monthly_amount=monthly_amount,
                end_date=end_date,
            )
            lease = await self._lease_repo.add(LeaseRecord.open(application_id, terms))

        self._logger.info(
            "Lease opened",
            extra={"lease_id": lease.id, "application_id": application_id},
        )
        return lease

    async def ensure_no_active_lease(self, application_id: int) -> None:
        if await self._lease_repo.has_active_for_application(application_id):
            raise LeaseAlreadyExistsError(application_id)

    async def execute(
        self,
        application_id: int,
        start_date: date,
        monthly_amount: Decimal,
        end_date: date | None = None,
    ) -> LeaseResponse:
        lease = await self.open(application_id, start_date, monthly_amount, end_date)
        return lease_response(lease)
