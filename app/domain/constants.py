"""Constantes del dominio de solicitudes de arriendo."""

from enum import Enum

DEFAULT_MAX_ACTIVE_APPLICATIONS = 3
DEFAULT_REMOTE_TIMEOUT_SECONDS = 5.0


class RejectionReason(str, Enum):
    """Motivos por los que el gate de validación rechaza una solicitud nueva."""

    USER_NOT_FOUND = "USER_NOT_FOUND"
    PROPERTY_NOT_FOUND = "PROPERTY_NOT_FOUND"
    PROPERTY_NOT_AVAILABLE = "PROPERTY_NOT_AVAILABLE"
    ROLE_NOT_ALLOWED = "ROLE_NOT_ALLOWED"
    DOCUMENTS_NOT_APPROVED = "DOCUMENTS_NOT_APPROVED"
    MAX_ACTIVE_APPLICATIONS = "MAX_ACTIVE_APPLICATIONS"
    DUPLICATE_APPLICATION = "DUPLICATE_APPLICATION"


REJECTION_MESSAGES: dict[RejectionReason, str] = {
    RejectionReason.USER_NOT_FOUND: "El usuario con ID {user_id} no existe",
    RejectionReason.PROPERTY_NOT_FOUND: "La propiedad con ID {property_id} no existe",
    RejectionReason.PROPERTY_NOT_AVAILABLE: "La propiedad no está disponible para arriendo",
    RejectionReason.ROLE_NOT_ALLOWED: (
        "Solo usuarios con rol ARRIENDATARIO pueden crear solicitudes de arriendo"
    ),
    RejectionReason.DOCUMENTS_NOT_APPROVED: (
        "El usuario debe tener todos sus documentos aprobados antes de solicitar un arriendo"
    ),
    RejectionReason.MAX_ACTIVE_APPLICATIONS: (
        "El usuario ya tiene el máximo permitido de solicitudes activas ({max_active})"
    ),
    RejectionReason.DUPLICATE_APPLICATION: "Ya existe una solicitud pendiente para esta propiedad",
}
