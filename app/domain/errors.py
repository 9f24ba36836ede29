"""Excepciones de dominio para el servicio de solicitudes de arriendo."""

from datetime import date

from app.domain.constants import RejectionReason


class DomainError(Exception):
    """Clase base para todos los errores de dominio."""

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


class NotFoundError(DomainError):
    """El recurso referenciado no existe (404)."""


class BusinessValidationError(DomainError):
    """Regla de negocio violada (400)."""


class MicroserviceUnavailableError(DomainError):
    """No se pudo completar una consulta obligatoria a otro microservicio (503)."""

    def __init__(self, service: str, message: str | None = None):
        super().__init__(
            message=message or f"No se pudo comunicar con {service}. Intente nuevamente.",
            code="MICROSERVICE_UNAVAILABLE",
        )
        self.service = service


# === Errores de Solicitud ===


class ApplicationNotFoundError(NotFoundError):
    """La solicitud no existe."""

    def __init__(self, application_id: int):
        super().__init__(
            message=f"Solicitud no encontrada con ID: {application_id}",
            code="NOT_FOUND",
        )
        self.application_id = application_id


class ApplicationRejectedError(BusinessValidationError):
    """El gate de validación rechazó la creación de la solicitud."""

    def __init__(self, reason: RejectionReason, message: str):
        super().__init__(message=message, code=reason.value)
        self.reason = reason


class InvalidApplicationStateError(BusinessValidationError):
    """El estado de la solicitud no permite la transición."""

    def __init__(self, application_id: int | None, current_state: str, operation: str):
        super().__init__(
            message=(
                f"No se puede {operation} la solicitud {application_id}: "
                f"estado actual '{current_state}', esperado 'PENDING'"
            ),
            code="INVALID_STATE",
        )
        self.application_id = application_id
        self.current_state = current_state
        self.operation = operation


class ActorNotAllowedError(BusinessValidationError):
    """El actor no tiene un rol que le permita resolver solicitudes."""

    def __init__(self, actor_id: int):
        super().__init__(
            message=f"El usuario {actor_id} no puede aceptar ni rechazar solicitudes",
            code="ROLE_NOT_ALLOWED",
        )
        self.actor_id = actor_id


class ActorNotFoundError(BusinessValidationError):
    """El actor que intenta la transición no existe en el servicio de usuarios."""

    def __init__(self, actor_id: int):
        super().__init__(
            message=f"El usuario con ID {actor_id} no existe",
            code="USER_NOT_FOUND",
        )
        self.actor_id = actor_id


# === Errores de Registro de Arriendo ===


class LeaseNotFoundError(NotFoundError):
    """El registro de arriendo no existe."""

    def __init__(self, lease_id: int):
        super().__init__(
            message=f"Registro no encontrado con ID: {lease_id}",
            code="NOT_FOUND",
        )
        self.lease_id = lease_id


class LeaseAlreadyExistsError(BusinessValidationError):
    """Ya existe un registro activo para la solicitud."""

    def __init__(self, application_id: int):
        super().__init__(
            message="Ya existe un registro activo para esta solicitud",
            code="ALREADY_EXISTS",
        )
        self.application_id = application_id


class ApplicationNotAcceptedError(BusinessValidationError):
    """Solo se pueden abrir registros para solicitudes aceptadas."""

    def __init__(self, application_id: int, current_state: str):
        super().__init__(
            message=(
                "Solo se pueden crear registros para solicitudes aceptadas. "
                f"Estado actual: {current_state}"
            ),
            code="APPLICATION_NOT_ACCEPTED",
        )
        self.application_id = application_id
        self.current_state = current_state


class InvalidLeaseDatesError(BusinessValidationError):
    """La fecha de inicio es posterior a la fecha de fin."""

    def __init__(self, start_date: date, end_date: date):
        super().__init__(
            message="La fecha de inicio no puede ser posterior a la fecha de fin",
            code="INVALID_DATES",
        )
        self.start_date = start_date
        self.end_date = end_date


class InvalidLeaseAmountError(BusinessValidationError):
    """El monto mensual debe ser mayor a cero."""

    def __init__(self, amount: object):
        super().__init__(
            message=f"El monto debe ser mayor a 0: {amount}",
            code="INVALID_AMOUNT",
        )
        self.amount = amount


class LeaseAlreadyInactiveError(BusinessValidationError):
    """El registro ya fue finalizado."""

    def __init__(self, lease_id: int):
        super().__init__(message="El registro ya está inactivo", code="ALREADY_INACTIVE")
        self.lease_id = lease_id
