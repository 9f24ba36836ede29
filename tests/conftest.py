"""
Pytest configuration and shared fixtures.

Este módulo provee fixtures reutilizables para:
- Gateways remotos in-memory con usuarios y propiedades de prueba
- Repositorios in-memory y reloj fijo
- Casos de uso armados igual que en app.api.dependencies
- Cliente HTTP de prueba (FastAPI TestClient) con overrides de dependencias

Datos sembrados:
    usuarios   1 = TENANT con documentos aprobados
               2 = OWNER
               3 = ADMIN
               4 = TENANT sin documentos aprobados
               5 = rol desconocido
    propiedades 10..14 disponibles, 20 no disponible
"""

from datetime import datetime, timezone
from decimal import Decimal
from typing import Generator

import pytest
from fastapi.testclient import TestClient

from app.api.dependencies import get_clock, get_gateways, get_repositories
from app.application.interfaces.clock import FakeClock
from app.application.use_cases.close_lease import CloseLeaseUseCase
from app.application.use_cases.create_application import CreateApplicationUseCase
from app.application.use_cases.get_applications import GetApplicationsUseCase
from app.application.use_cases.get_leases import GetLeasesUseCase
from app.application.use_cases.open_lease import OpenLeaseUseCase
from app.application.use_cases.transition_application import TransitionApplicationUseCase
from app.application.validation_gate import ApplicationValidationGate
from app.domain.entities.profiles import PropertyProfile, UserProfile, UserRole
from app.infrastructure.in_memory import (
    InMemoryApplicationRepo,
    InMemoryLeaseRepo,
    NoopTransactionManager,
    StubDocumentGateway,
    StubPropertyGateway,
    StubUserGateway,
)
from app.main import app

FIXED_NOW = datetime(2026, 3, 1, 12, 0, 0, tzinfo=timezone.utc)


# ============================================================================
# FIXTURES DE GATEWAYS REMOTOS
# ============================================================================

@pytest.fixture
def user_gateway() -> StubUserGateway:
    return StubUserGateway(
        [
            UserProfile(id=1, role=UserRole.TENANT, documents_approved=True, name="Ana Tenant", email="ana@example.com"),
            UserProfile(id=2, role=UserRole.OWNER, name="Omar Owner", email="omar@example.com"),
            UserProfile(id=3, role=UserRole.ADMIN, documents_approved=True, name="Adela Admin"),
            UserProfile(id=4, role=UserRole.TENANT, documents_approved=False, name="Tomás Sin Docs"),
            UserProfile(id=5, role=UserRole.UNKNOWN, documents_approved=True),
        ]
    )


@pytest.fixture
def property_gateway() -> StubPropertyGateway:
    properties = [
        PropertyProfile(
            id=pid,
            available=True,
            owner_id=2,
            title=f"Departamento {pid}",
            monthly_price=Decimal("450000.00"),
        )
        for pid in range(10, 15)
    ]
    properties.append(PropertyProfile(id=20, available=False, owner_id=2, title="Casa arrendada"))
    return StubPropertyGateway(properties)


@pytest.fixture
def document_gateway(user_gateway: StubUserGateway) -> StubDocumentGateway:
    return StubDocumentGateway(user_gateway)


# ============================================================================
# FIXTURES DE REPOSITORIOS E INFRAESTRUCTURA
# ============================================================================

@pytest.fixture
def application_repo() -> InMemoryApplicationRepo:
    return InMemoryApplicationRepo()


@pytest.fixture
def lease_repo() -> InMemoryLeaseRepo:
    return InMemoryLeaseRepo()


@pytest.fixture
def tx_manager() -> NoopTransactionManager:
    return NoopTransactionManager()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(FIXED_NOW)


# ============================================================================
# FIXTURES DE CASOS DE USO
# ============================================================================

@pytest.fixture
def validation_gate(user_gateway, property_gateway, document_gateway, application_repo):
    return ApplicationValidationGate(
        user_gateway=user_gateway,
        property_gateway=property_gateway,
        document_gateway=document_gateway,
        application_repo=application_repo,
        max_active_applications=3,
    )


@pytest.fixture
def create_application(application_repo, validation_gate, tx_manager, clock):
    return CreateApplicationUseCase(
        application_repo=application_repo,
        validation_gate=validation_gate,
        transaction_manager=tx_manager,
        clock=clock,
    )


@pytest.fixture
def open_lease(lease_repo, application_repo, tx_manager):
    return OpenLeaseUseCase(
        lease_repo=lease_repo,
        application_repo=application_repo,
        transaction_manager=tx_manager,
    )


@pytest.fixture
def close_lease(lease_repo, tx_manager):
    return CloseLeaseUseCase(lease_repo=lease_repo, transaction_manager=tx_manager)


@pytest.fixture
def transition_application(application_repo, user_gateway, open_lease, tx_manager):
    return TransitionApplicationUseCase(
        application_repo=application_repo,
        user_gateway=user_gateway,
        open_lease=open_lease,
        transaction_manager=tx_manager,
    )


@pytest.fixture
def get_applications(application_repo, user_gateway, property_gateway):
    return GetApplicationsUseCase(
        application_repo=application_repo,
        user_gateway=user_gateway,
        property_gateway=property_gateway,
    )


@pytest.fixture
def get_leases(lease_repo, get_applications):
    return GetLeasesUseCase(lease_repo=lease_repo, applications=get_applications)


# ============================================================================
# FIXTURES DE CLIENTE HTTP
# ============================================================================

@pytest.fixture
def client(
    application_repo,
    lease_repo,
    tx_manager,
    user_gateway,
    property_gateway,
    document_gateway,
    clock,
) -> Generator[TestClient, None, None]:
    """
    FastAPI TestClient con repositorios in-memory y gateways stub.
    Cada test parte con almacenamiento vacío.
    """
    app.dependency_overrides[get_repositories] = lambda: {
        "application_repo": application_repo,
        "lease_repo": lease_repo,
        "tx_manager": tx_manager,
    }
    app.dependency_overrides[get_gateways] = lambda: {
        "user_gateway": user_gateway,
        "property_gateway": property_gateway,
        "document_gateway": document_gateway,
    }
    app.dependency_overrides[get_clock] = lambda: clock

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
