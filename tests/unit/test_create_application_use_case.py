import pytest

from app.api.schemas.applications import CreateApplicationRequest
from app.domain.entities.application import Application, ApplicationState
from app.domain.errors import ApplicationRejectedError, MicroserviceUnavailableError


def _request(user_id: int = 1, property_id: int = 10) -> CreateApplicationRequest:
    return CreateApplicationRequest(user_id=user_id, property_id=property_id)


async def test_creates_pending_application(create_application, application_repo, tx_manager, clock):
    response = await create_application.execute(_request())

    assert response.id == 1
    assert response.state == ApplicationState.PENDING
    assert response.created_at == clock.now()

    stored = await application_repo.get_by_id(response.id)
    assert stored.is_pending
    assert tx_manager.started == 1


async def test_fourth_pending_application_is_rejected(create_application, application_repo):
    for property_id in (10, 11, 12):
        await create_application.execute(_request(property_id=property_id))

    with pytest.raises(ApplicationRejectedError) as exc_info:
        await create_application.execute(_request(property_id=13))

    assert exc_info.value.code == "MAX_ACTIVE_APPLICATIONS"
    assert await application_repo.count_by_user_and_state(1, ApplicationState.PENDING) == 3


async def test_duplicate_application_is_rejected(create_application):
    await create_application.execute(_request())

    with pytest.raises(ApplicationRejectedError) as exc_info:
        await create_application.execute(_request())

    assert exc_info.value.code == "DUPLICATE_APPLICATION"


async def test_unavailable_user_service_raises_communication_error(
    create_application, user_gateway, application_repo
):
    user_gateway.unavailable = True

    with pytest.raises(MicroserviceUnavailableError) as exc_info:
        await create_application.execute(_request())

    assert exc_info.value.code == "MICROSERVICE_UNAVAILABLE"
    assert exc_info.value.service == "User Service"
    assert await application_repo.list_all() == []


async def test_storage_level_duplicate_guard(application_repo, clock):
    await application_repo.add(Application(user_id=1, property_id=10, created_at=clock.now()))

    with pytest.raises(ApplicationRejectedError) as exc_info:
        await application_repo.add(Application(user_id=1, property_id=10, created_at=clock.now()))

    assert exc_info.value.code == "DUPLICATE_APPLICATION"


async def test_remote_lookups_run_outside_the_transaction(
    create_application, user_gateway, property_gateway, document_gateway, application_repo, tx_manager
):
    depths: dict[str, list[int]] = {"user": [], "property": [], "documents": [], "count": []}

    def recording(name, call):
        async def wrapper(*args, **kwargs):
            depths[name].append(tx_manager.depth)
            return await call(*args, **kwargs)
        return wrapper

    user_gateway.lookup_user = recording("user", user_gateway.lookup_user)
    property_gateway.lookup_property = recording("property", property_gateway.lookup_property)
    document_gateway.has_approved_documents = recording("documents", document_gateway.has_approved_documents)
    application_repo.count_by_user_and_state = recording("count", application_repo.count_by_user_and_state)

    await create_application.execute(_request())

    assert depths == {"user": [0], "property": [0], "documents": [0], "count": [1]}
    assert tx_manager.started == 1


async def test_remote_rejection_opens_no_transaction(create_application, tx_manager):
    with pytest.raises(ApplicationRejectedError):
        await create_application.execute(_request(user_id=4))

    assert tx_manager.started == 0
