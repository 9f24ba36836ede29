"""
Gate de validación para solicitudes nuevas.

Ejecuta las reglas de negocio en orden y se detiene en la primera que falla.
No escribe nada: consulta los servicios remotos y el repositorio local y
devuelve una decisión tipada que el caso de uso traduce a una respuesta.
"""

import logging
from dataclasses import dataclass
from enum import Enum

from app.application.interfaces.application_repo import ApplicationRepo
from app.application.interfaces.document_gateway import DocumentGateway
from app.application.interfaces.property_gateway import PropertyGateway
from app.application.interfaces.user_gateway import UserGateway
from app.domain.constants import (
    DEFAULT_MAX_ACTIVE_APPLICATIONS,
    REJECTION_MESSAGES,
    RejectionReason,
)
from app.domain.entities.application import ApplicationState

logger = logging.getLogger(__name__)


class GateStatus(str, Enum):
    OK = "OK"
    REJECTED = "REJECTED"
    UNAVAILABLE = "UNAVAILABLE"


@dataclass(frozen=True)
class GateDecision:
    status: GateStatus
    reason: RejectionReason | None = None
    message: str | None = None
    service: str | None = None

    @classmethod
    def ok(cls) -> "GateDecision":
        return cls(status=GateStatus.OK)

    @classmethod
    def rejected(cls, reason: RejectionReason, **fmt: object) -> "GateDecision":
        return cls(
            status=GateStatus.REJECTED,
            reason=reason,
            message=REJECTION_MESSAGES[reason].format(**fmt),
        )

    @classmethod
    def unavailable(cls, service: str) -> "GateDecision":
        return cls(
            status=GateStatus.UNAVAILABLE,
            service=service,
            message=f"No se pudo verificar la información en {service}. Intente nuevamente.",
        )

    @property
    def is_ok(self) -> bool:
        return self.status == GateStatus.OK


class ApplicationValidationGate:
    def __init__(
        self,
        user_gateway: UserGateway,
        property_gateway: PropertyGateway,
        document_gateway: DocumentGateway,
        application_repo: ApplicationRepo,
        max_active_applications: int = DEFAULT_MAX_ACTIVE_APPLICATIONS,
    ) -> None:
        self._user_gateway = user_gateway
        self._property_gateway = property_gateway
        self._document_gateway = document_gateway
        self._application_repo = application_repo
        self._max_active = max_active_applications

    async def validate(self, user_id: int, property_id: int) -> GateDecision:
        decision = await self.validate_remote(user_id, property_id)
        if not decision.is_ok:
            return decision
        return await self.validate_local(user_id, property_id)

    async def validate_remote(self, user_id: int, property_id: int) -> GateDecision:
        """Pasos que consultan otros microservicios: existencia, disponibilidad, rol y documentos."""
        user_result = await self._user_gateway.lookup_user(user_id)
        if user_result.is_unavailable:
            return GateDecision.unavailable("User Service")
        if not user_result.is_found:
            return self._reject(RejectionReason.USER_NOT_FOUND, user_id, property_id)
        user = user_result.value

        property_result = await self._property_gateway.lookup_property(property_id)
        if property_result.is_unavailable:
            return GateDecision.unavailable("Property Service")
        if not property_result.is_found:
            return self._reject(RejectionReason.PROPERTY_NOT_FOUND, user_id, property_id)

        if not property_result.value.available:
            return self._reject(RejectionReason.PROPERTY_NOT_AVAILABLE, user_id, property_id)

        if not user.role.can_create_application:
            logger.warning(
                "Role not allowed to create applications",
                extra={"user_id": user_id, "role": user.role.value},
            )
            return self._reject(RejectionReason.ROLE_NOT_ALLOWED, user_id, property_id)

        if not await self._document_gateway.has_approved_documents(user_id):
            return self._reject(RejectionReason.DOCUMENTS_NOT_APPROVED, user_id, property_id)

        return GateDecision.ok()

    async def validate_local(self, user_id: int, property_id: int) -> GateDecision:
        """Pasos sobre el repositorio local; corren dentro de la transacción del alta."""
        pending = await self._application_repo.count_by_user_and_state(
            user_id, ApplicationState.PENDING
        )
        if pending >= self._max_active:
            return self._reject(RejectionReason.MAX_ACTIVE_APPLICATIONS, user_id, property_id)

        if await self._application_repo.exists_by_user_property_and_state(
            user_id, property_id, ApplicationState.PENDING
        ):
            return self._reject(RejectionReason.DUPLICATE_APPLICATION, user_id, property_id)

        return GateDecision.ok()

    def _reject(self, reason: RejectionReason, user_id: int, property_id: int) -> GateDecision:
        logger.warning(
            "Application rejected by validation gate",
            extra={"user_id": user_id, "property_id": property_id, "reason": reason.value},
        )
        return GateDecision.rejected(
            reason,
            user_id=user_id,
            property_id=property_id,
            max_active=self._max_active,
        )
