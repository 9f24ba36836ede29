"""Entidades del dominio de solicitudes de arriendo."""

from app.domain.entities.application import Application, ApplicationState
from app.domain.entities.lease import LeaseRecord
from app.domain.entities.profiles import PropertyProfile, UserProfile, UserRole

__all__ = [
    "Application",
    "ApplicationState",
    "LeaseRecord",
    "UserProfile",
    "UserRole",
    "PropertyProfile",
]
