from datetime import date, datetime, timezone
from decimal import Decimal

import pytest

from app.api.schemas.applications import LeaseTermsRequest
from app.domain.entities.application import Application, ApplicationState
from app.domain.errors import (
    ActorNotAllowedError,
    ActorNotFoundError,
    ApplicationNotFoundError,
    InvalidApplicationStateError,
    InvalidLeaseDatesError,
    MicroserviceUnavailableError,
)

NOW = datetime(2026, 3, 1, tzinfo=timezone.utc)
OWNER_ID = 2
ADMIN_ID = 3


@pytest.fixture
async def pending(application_repo) -> Application:
    return await application_repo.add(Application(user_id=1, property_id=10, created_at=NOW))


async def test_owner_accepts_pending_application(transition_application, application_repo, pending):
    response = await transition_application.accept(pending.id, actor_id=OWNER_ID)

    assert response.state == ApplicationState.ACCEPTED
    assert response.lease is None
    stored = await application_repo.get_by_id(pending.id)
    assert stored.state == ApplicationState.ACCEPTED


async def test_admin_rejects_pending_application(transition_application, application_repo, pending):
    response = await transition_application.reject(pending.id, actor_id=ADMIN_ID)

    assert response.state == ApplicationState.REJECTED
    assert (await application_repo.get_by_id(pending.id)).state == ApplicationState.REJECTED


async def test_accept_with_lease_terms_opens_lease(transition_application, lease_repo, tx_manager, pending):
    terms = LeaseTermsRequest(start_date=date(2026, 4, 1), monthly_amount=Decimal("450000.00"))

    response = await transition_application.accept(pending.id, actor_id=OWNER_ID, lease=terms)

    assert response.lease is not None
    assert response.lease.application_id == pending.id
    assert response.lease.active
    assert await lease_repo.has_active_for_application(pending.id)
    # el registro se abre dentro de la transacción de la aceptación
    assert tx_manager.started == 1


async def test_accept_with_invalid_lease_terms_fails(transition_application, application_repo, lease_repo, pending):
    terms = LeaseTermsRequest(
        start_date=date(2026, 4, 2),
        monthly_amount=Decimal("100.00"),
        end_date=date(2026, 4, 1),
    )

    with pytest.raises(InvalidLeaseDatesError):
        await transition_application.accept(pending.id, actor_id=OWNER_ID, lease=terms)

    assert not await lease_repo.has_active_for_application(pending.id)
    assert (await application_repo.get_by_id(pending.id)).state == ApplicationState.PENDING


async def test_accept_can_be_retried_after_invalid_lease_terms(transition_application, application_repo, pending):
    bad = LeaseTermsRequest(
        start_date=date(2026, 4, 2),
        monthly_amount=Decimal("100.00"),
        end_date=date(2026, 4, 1),
    )
    with pytest.raises(InvalidLeaseDatesError):
        await transition_application.accept(pending.id, actor_id=OWNER_ID, lease=bad)

    good = LeaseTermsRequest(start_date=date(2026, 4, 1), monthly_amount=Decimal("100.00"))
    response = await transition_application.accept(pending.id, actor_id=OWNER_ID, lease=good)

    assert response.state == ApplicationState.ACCEPTED
    assert response.lease.start_date == date(2026, 4, 1)


async def test_unknown_application(transition_application):
    with pytest.raises(ApplicationNotFoundError) as exc_info:
        await transition_application.accept(999, actor_id=OWNER_ID)

    assert exc_info.value.code == "NOT_FOUND"


async def test_second_transition_fails_with_invalid_state(transition_application, application_repo, pending):
    await transition_application.accept(pending.id, actor_id=OWNER_ID)

    with pytest.raises(InvalidApplicationStateError) as exc_info:
        await transition_application.reject(pending.id, actor_id=OWNER_ID)

    assert exc_info.value.code == "INVALID_STATE"
    assert (await application_repo.get_by_id(pending.id)).state == ApplicationState.ACCEPTED


async def test_rejected_application_cannot_be_accepted(transition_application, pending):
    await transition_application.reject(pending.id, actor_id=OWNER_ID)

    with pytest.raises(InvalidApplicationStateError):
        await transition_application.accept(pending.id, actor_id=OWNER_ID)


@pytest.mark.parametrize("actor_id", [1, 5])
async def test_actor_without_owner_or_admin_role(transition_application, application_repo, pending, actor_id):
    with pytest.raises(ActorNotAllowedError) as exc_info:
        await transition_application.accept(pending.id, actor_id=actor_id)

    assert exc_info.value.code == "ROLE_NOT_ALLOWED"
    assert (await application_repo.get_by_id(pending.id)).is_pending


async def test_unknown_actor(transition_application, pending):
    with pytest.raises(ActorNotFoundError) as exc_info:
        await transition_application.reject(pending.id, actor_id=999)

    assert exc_info.value.code == "USER_NOT_FOUND"


async def test_user_service_down_during_transition(transition_application, user_gateway, application_repo, pending):
    user_gateway.unavailable = True

    with pytest.raises(MicroserviceUnavailableError):
        await transition_application.accept(pending.id, actor_id=OWNER_ID)

    assert (await application_repo.get_by_id(pending.id)).is_pending


async def test_conditional_update_loses_race(transition_application, application_repo, pending):
    # otra petición resolvió la solicitud entre la lectura y la escritura
    original_get = application_repo.get_by_id
    calls = {"n": 0}

    async def racing_get(application_id):
        application = await original_get(application_id)
        calls["n"] += 1
        if calls["n"] == 1:
            await application_repo.update_state(
                application_id, ApplicationState.REJECTED, ApplicationState.PENDING
            )
        return application

    application_repo.get_by_id = racing_get

    with pytest.raises(InvalidApplicationStateError) as exc_info:
        await transition_application.accept(pending.id, actor_id=OWNER_ID)

    assert exc_info.value.current_state == "REJECTED"
