"""
Capa de Dominio - Servicio de Solicitudes de Arriendo.

Esta capa contiene la lógica de negocio pura, sin dependencias de frameworks.

Estructura:
- entities/: Solicitud, registro de arriendo y proyecciones remotas
- value_objects/: Condiciones del arriendo
- errors.py: Excepciones específicas del dominio
- constants.py: Límites y motivos de rechazo
"""

from app.domain.constants import (
    DEFAULT_MAX_ACTIVE_APPLICATIONS,
    DEFAULT_REMOTE_TIMEOUT_SECONDS,
    RejectionReason,
)
from app.domain.entities import (
    Application,
    ApplicationState,
    LeaseRecord,
    PropertyProfile,
    UserProfile,
    UserRole,
)
from app.domain.errors import (
    ApplicationNotAcceptedError,
    ApplicationNotFoundError,
    ApplicationRejectedError,
    BusinessValidationError,
    DomainError,
    InvalidApplicationStateError,
    InvalidLeaseDatesError,
    LeaseAlreadyExistsError,
    LeaseAlreadyInactiveError,
    LeaseNotFoundError,
    MicroserviceUnavailableError,
    NotFoundError,
)
from app.domain.value_objects import LeaseTerms

__all__ = [
    # Constants
    "DEFAULT_MAX_ACTIVE_APPLICATIONS",
    "DEFAULT_REMOTE_TIMEOUT_SECONDS",
    "RejectionReason",
    # Entities
    "Application",
    "ApplicationState",
    "LeaseRecord",
    "UserProfile",
    "UserRole",
    "PropertyProfile",
    # Value Objects
    "LeaseTerms",
    # Errors
    "DomainError",
    "NotFoundError",
    "BusinessValidationError",
    "MicroserviceUnavailableError",
    "ApplicationNotFoundError",
    "ApplicationRejectedError",
    "InvalidApplicationStateError",
    "ApplicationNotAcceptedError",
    "InvalidLeaseDatesError",
    "LeaseAlreadyExistsError",
    "LeaseAlreadyInactiveError",
    "LeaseNotFoundError",
]
