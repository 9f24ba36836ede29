import logging

from app.api.schemas.applications import ApplicationResponse, CreateApplicationRequest
from app.application.interfaces.application_repo import ApplicationRepo
from app.application.interfaces.clock import Clock
from app.application.interfaces.transaction_manager import TransactionManager
from app.application.presenters import application_response
from app.application.validation_gate import ApplicationValidationGate, GateDecision, GateStatus
from app.domain.entities.application import Application, ApplicationState
from app.domain.errors import ApplicationRejectedError, MicroserviceUnavailableError


class CreateApplicationUseCase:
    def __init__(
        self,
        application_repo: ApplicationRepo,
        validation_gate: ApplicationValidationGate,
        transaction_manager: TransactionManager,
        clock: Clock,
    ) -> None:
        self._application_repo = application_repo
        self._validation_gate = validation_gate
        self._transaction_manager = transaction_manager
        self._clock = clock
        self._logger = logging.getLogger(__name__)

    async def execute(self, request: CreateApplicationRequest) -> ApplicationResponse:
        self._logger.info(
            "Creating application",
            extra={"user_id": request.user_id, "property_id": request.property_id},
        )

        # las consultas remotas corren fuera de la transacción
        self._raise_for(
            await self._validation_gate.validate_remote(request.user_id, request.property_id)
        )

        async with self._transaction_manager.start():
            self._raise_for(
                await self._validation_gate.validate_local(request.user_id, request.property_id)
            )

            application = await self._application_repo.add(
                Application(
                    user_id=request.user_id,
                    property_id=request.property_id,
                    state=ApplicationState.PENDING,
                    created_at=self._clock.now(),
                )
            )

        self._logger.info(
            "Application created",
            extra={"application_id": application.id, "user_id": application.user_id},
        )
        return application_response(application)

    @staticmethod
    def _raise_for(decision: GateDecision) -> None:
        if decision.status == GateStatus.UNAVAILABLE:
            raise MicroserviceUnavailableError(decision.service, decision.message)
        if decision.status == GateStatus.REJECTED:
            raise ApplicationRejectedError(decision.reason, decision.message)
