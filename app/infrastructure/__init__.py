"""
Capa de Infraestructura - Servicio de Solicitudes de Arriendo.

Implementaciones concretas de los puertos.

Estructura:
- db/: Tablas, repositorios SQL y transacciones
- gateways/: Clientes HTTP de User, Property y Document Service
- in_memory/: Implementaciones in-memory para desarrollo y testing
"""

from app.infrastructure.db.repositories.application_repo_sql import ApplicationRepoSQL
from app.infrastructure.db.repositories.lease_repo_sql import LeaseRepoSQL
from app.infrastructure.db.transaction_manager import SQLAlchemyTransactionManager
from app.infrastructure.gateways.document_service_http import DocumentServiceHTTP
from app.infrastructure.gateways.property_service_http import PropertyServiceHTTP
from app.infrastructure.gateways.user_service_http import UserServiceHTTP
from app.infrastructure.in_memory import (
    InMemoryApplicationRepo,
    InMemoryLeaseRepo,
    NoopTransactionManager,
    StubDocumentGateway,
    StubPropertyGateway,
    StubUserGateway,
)

__all__ = [
    # Database
    "ApplicationRepoSQL",
    "LeaseRepoSQL",
    "SQLAlchemyTransactionManager",
    # Gateways
    "UserServiceHTTP",
    "PropertyServiceHTTP",
    "DocumentServiceHTTP",
    # In-Memory Implementations
    "InMemoryApplicationRepo",
    "InMemoryLeaseRepo",
    "NoopTransactionManager",
    "StubUserGateway",
    "StubPropertyGateway",
    "StubDocumentGateway",
]
