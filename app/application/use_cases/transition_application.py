import logging

from app.api.schemas.applications import LeaseTermsRequest, TransitionApplicationResponse
from app.application.interfaces.application_repo import ApplicationRepo
from app.application.interfaces.transaction_manager import TransactionManager
from app.application.interfaces.user_gateway import UserGateway
from app.application.presenters import application_response, lease_summary
from app.application.use_cases.open_lease import OpenLeaseUseCase
from app.domain.entities.application import Application, ApplicationState
from app.domain.errors import (
    ActorNotAllowedError,
    ActorNotFoundError,
    ApplicationNotFoundError,
    InvalidApplicationStateError,
    MicroserviceUnavailableError,
)
from app.domain.value_objects.lease_terms import LeaseTerms


class TransitionApplicationUseCase:
    """
    Aceptación y rechazo de solicitudes.

    Solo una solicitud PENDING puede transicionar y el actor debe ser
    propietario o administrador. Al aceptar con condiciones de arriendo, el
    registro se abre en la misma transacción.
    """

    def __init__(
        self,
        application_repo: ApplicationRepo,
        user_gateway: UserGateway,
        open_lease: OpenLeaseUseCase,
        transaction_manager: TransactionManager,
    ) -> None:
        self._application_repo = application_repo
        self._user_gateway = user_gateway
        self._open_lease = open_lease
        self._transaction_manager = transaction_manager
        self._logger = logging.getLogger(__name__)

    async def accept(
        self,
        application_id: int,
        actor_id: int,
        lease: LeaseTermsRequest | None = None,
    ) -> TransitionApplicationResponse:
        async with self._transaction_manager.start():
            application = await self._load(application_id)
            application.accept()
            await self._ensure_actor_can_resolve(actor_id)

            # condiciones y registro activo se verifican antes de escribir ACCEPTED
            terms = None
            if lease is not None:
                terms = LeaseTerms(
                    start_date=lease.start_date,
                    monthly_amount=lease.monthly_amount,
                    end_date=lease.end_date,
                )
                await self._open_lease.ensure_no_active_lease(application_id)

            await self._persist(application, operation="aceptar")

            opened = None
            if terms is not None:
                opened = await self._open_lease.open(
                    application_id=application_id,
                    start_date=terms.start_date,
                    monthly_amount=terms.monthly_amount,
                    end_date=terms.end_date,
                )

        self._logger.info(
            "Application accepted",
            extra={"application_id": application_id, "actor_id": actor_id},
        )
        return TransitionApplicationResponse(
            **application_response(application).model_dump(),
            lease=lease_summary(opened) if opened else None,
        )

    async def reject(self, application_id: int, actor_id: int) -> TransitionApplicationResponse:
        async with self._transaction_manager.start():
            application = await self._load(application_id)
            application.reject()
            await self._ensure_actor_can_resolve(actor_id)
            await self._persist(application, operation="rechazar")

        self._logger.info(
            "Application rejected",
            extra={"application_id": application_id, "actor_id": actor_id},
        )
        return TransitionApplicationResponse(**application_response(application).model_dump())

    async def _load(self, application_id: int) -> Application:
        application = await self._application_repo.get_by_id(application_id)
        if application is None:
            raise ApplicationNotFoundError(application_id)
        return application

    async def _ensure_actor_can_resolve(self, actor_id: int) -> None:
        result = await self._user_gateway.lookup_user(actor_id)
        if result.is_unavailable:
            raise MicroserviceUnavailableError(
                "User Service", "No se pudo verificar el usuario. Intente nuevamente."
            )
        if not result.is_found:
            raise ActorNotFoundError(actor_id)
        if not result.value.role.can_resolve_application:
            self._logger.warning(
                "Actor not allowed to resolve applications",
                extra={"actor_id": actor_id, "role": result.value.role.value},
            )
            raise ActorNotAllowedError(actor_id)

    async def _persist(self, application: Application, operation: str) -> None:
        updated = await self._application_repo.update_state(
            application.id,
            new_state=application.state,
            expected_state=ApplicationState.PENDING,
        )
        if not updated:
            current = await self._application_repo.get_by_id(application.id)
            raise InvalidApplicationStateError(
                application_id=application.id,
                current_state=current.state.value if current else "UNKNOWN",
                operation=operation,
            )
