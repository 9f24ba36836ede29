from functools import lru_cache
from typing import Any

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import AsyncSessionLocal
from app.application.interfaces.clock import Clock, SystemClock
from app.application.use_cases.close_lease import CloseLeaseUseCase
from app.application.use_cases.create_application import CreateApplicationUseCase
from app.application.use_cases.get_applications import GetApplicationsUseCase
from app.application.use_cases.get_leases import GetLeasesUseCase
from app.application.use_cases.open_lease import OpenLeaseUseCase
from app.application.use_cases.transition_application import TransitionApplicationUseCase
from app.application.validation_gate import ApplicationValidationGate
from app.config import Settings, get_settings
from app.infrastructure.db.repositories.application_repo_sql import ApplicationRepoSQL
from app.infrastructure.db.repositories.lease_repo_sql import LeaseRepoSQL
from app.infrastructure.db.transaction_manager import SQLAlchemyTransactionManager
from app.infrastructure.gateways.document_service_http import DocumentServiceHTTP
from app.infrastructure.gateways.property_service_http import PropertyServiceHTTP
from app.infrastructure.gateways.user_service_http import UserServiceHTTP
from app.infrastructure.in_memory.application_repo import InMemoryApplicationRepo
from app.infrastructure.in_memory.lease_repo import InMemoryLeaseRepo
from app.infrastructure.in_memory.transaction_manager import NoopTransactionManager


async def get_session(settings: Settings = Depends(get_settings)) -> AsyncSession | None:
    if settings.use_in_memory:
        yield None
        return
    async with AsyncSessionLocal() as session:
        yield session


@lru_cache(maxsize=1)
def _in_memory_bundle() -> dict[str, Any]:
    return {
        "application_repo": InMemoryApplicationRepo(),
        "lease_repo": InMemoryLeaseRepo(),
        "tx_manager": NoopTransactionManager(),
    }


def get_repositories(
    settings: Settings = Depends(get_settings),
    session: AsyncSession | None = Depends(get_session),
) -> dict[str, Any]:
    if settings.use_in_memory:
        return _in_memory_bundle()

    if not session:
        raise RuntimeError("DB session not available")

    return {
        "application_repo": ApplicationRepoSQL(session),
        "lease_repo": LeaseRepoSQL(session),
        "tx_manager": SQLAlchemyTransactionManager(session),
    }


def get_gateways(settings: Settings = Depends(get_settings)) -> dict[str, Any]:
    timeout = settings.remote_timeout_seconds
    return {
        "user_gateway": UserServiceHTTP(settings.user_service_url, timeout_seconds=timeout),
        "property_gateway": PropertyServiceHTTP(settings.property_service_url, timeout_seconds=timeout),
        "document_gateway": DocumentServiceHTTP(settings.document_service_url, timeout_seconds=timeout),
    }


def get_clock() -> Clock:
    return SystemClock()


def get_use_cases(
    settings: Settings = Depends(get_settings),
    repos: dict[str, Any] = Depends(get_repositories),
    gateways: dict[str, Any] = Depends(get_gateways),
    clock: Clock = Depends(get_clock),
) -> dict[str, Any]:
    application_repo = repos["application_repo"]
    lease_repo = repos["lease_repo"]
    tx_manager = repos["tx_manager"]

    validation_gate = ApplicationValidationGate(
        user_gateway=gateways["user_gateway"],
        property_gateway=gateways["property_gateway"],
        document_gateway=gateways["document_gateway"],
        application_repo=application_repo,
        max_active_applications=settings.max_active_applications,
    )
    open_lease = OpenLeaseUseCase(
        lease_repo=lease_repo,
        application_repo=application_repo,
        transaction_manager=tx_manager,
    )
    get_applications = GetApplicationsUseCase(
        application_repo=application_repo,
        user_gateway=gateways["user_gateway"],
        property_gateway=gateways["property_gateway"],
    )

    return {
        "create_application": CreateApplicationUseCase(
            application_repo=application_repo,
            validation_gate=validation_gate,
            transaction_manager=tx_manager,
            clock=clock,
        ),
        "transition_application": TransitionApplicationUseCase(
            application_repo=application_repo,
            user_gateway=gateways["user_gateway"],
            open_lease=open_lease,
            transaction_manager=tx_manager,
        ),
        "get_applications": get_applications,
        "open_lease": open_lease,
        "close_lease": CloseLeaseUseCase(lease_repo=lease_repo, transaction_manager=tx_manager),
        "get_leases": GetLeasesUseCase(lease_repo=lease_repo, applications=get_applications),
    }
