"""Interfaces (Puertos) de la capa de aplicación."""

from app.application.interfaces.application_repo import ApplicationRepo
from app.application.interfaces.clock import Clock, FakeClock, SystemClock
from app.application.interfaces.document_gateway import DocumentGateway
from app.application.interfaces.lease_repo import LeaseRepo
from app.application.interfaces.property_gateway import PropertyGateway
from app.application.interfaces.remote_lookup import LookupResult, LookupStatus
from app.application.interfaces.transaction_manager import TransactionManager
from app.application.interfaces.user_gateway import UserGateway

__all__ = [
    # Repositories
    "ApplicationRepo",
    "LeaseRepo",
    # Gateways
    "UserGateway",
    "PropertyGateway",
    "DocumentGateway",
    "LookupResult",
    "LookupStatus",
    # Infrastructure
    "TransactionManager",
    # Utilities
    "Clock",
    "SystemClock",
    "FakeClock",
]
