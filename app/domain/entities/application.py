"""Entidad Application (solicitud de arriendo) y su máquina de estados."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from app.domain.errors import InvalidApplicationStateError


class ApplicationState(str, Enum):
    """Estados posibles de una solicitud."""

    PENDING = "PENDING"
    ACCEPTED = "ACCEPTED"
    REJECTED = "REJECTED"


ALLOWED_TRANSITIONS: dict[ApplicationState, tuple[ApplicationState, ...]] = {
    ApplicationState.PENDING: (ApplicationState.ACCEPTED, ApplicationState.REJECTED),
    ApplicationState.ACCEPTED: (),
    ApplicationState.REJECTED: (),
}


def can_transition(current: ApplicationState, new: ApplicationState) -> bool:
    return new in ALLOWED_TRANSITIONS.get(current, ())


@dataclass
class Application:
    """
    Solicitud de un arrendatario para arrendar una propiedad.

    Las referencias a usuario y propiedad son ids de entidades que viven en
    otros microservicios; nunca se guardan copias locales de esos datos.
    """

    user_id: int
    property_id: int
    state: ApplicationState = ApplicationState.PENDING
    created_at: datetime | None = None
    id: int | None = None

    @property
    def is_pending(self) -> bool:
        return self.state == ApplicationState.PENDING

    @property
    def is_accepted(self) -> bool:
        return self.state == ApplicationState.ACCEPTED

    @property
    def pending_key(self) -> str | None:
        """Clave única mientras la solicitud está pendiente; None en estados terminales."""
        if not self.is_pending:
            return None
        return pending_key_for(self.user_id, self.property_id)

    def accept(self) -> None:
        """Marca la solicitud como aceptada."""
        self._transition(ApplicationState.ACCEPTED, operation="aceptar")

    def reject(self) -> None:
        """Marca la solicitud como rechazada."""
        self._transition(ApplicationState.REJECTED, operation="rechazar")

    def _transition(self, new_state: ApplicationState, operation: str) -> None:
        if not can_transition(self.state, new_state):
            raise InvalidApplicationStateError(
                application_id=self.id,
                current_state=self.state.value,
                operation=operation,
            )
        self.state = new_state


def pending_key_for(user_id: int, property_id: int) -> str:
    return f"{user_id}:{property_id}"
