"""Implementaciones in-memory para desarrollo local y testing."""

from app.infrastructure.in_memory.application_repo import InMemoryApplicationRepo
from app.infrastructure.in_memory.lease_repo import InMemoryLeaseRepo
from app.infrastructure.in_memory.remote_gateways import (
    StubDocumentGateway,
    StubPropertyGateway,
    StubUserGateway,
)
from app.infrastructure.in_memory.transaction_manager import NoopTransactionManager

__all__ = [
    # Repositories
    "InMemoryApplicationRepo",
    "InMemoryLeaseRepo",
    # Gateways
    "StubUserGateway",
    "StubPropertyGateway",
    "StubDocumentGateway",
    # Infrastructure
    "NoopTransactionManager",
]
