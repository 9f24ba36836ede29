import logging

from app.api.schemas.applications import ApplicationResponse
from app.application.interfaces.application_repo import ApplicationRepo
from app.application.interfaces.property_gateway import PropertyGateway
from app.application.interfaces.user_gateway import UserGateway
from app.application.presenters import application_response
from app.domain.entities.application import Application
from app.domain.errors import ApplicationNotFoundError


class GetApplicationsUseCase:
    """
    Consultas de solicitudes.

    Con include_details se adjuntan los datos del usuario y de la propiedad
    consultados a sus servicios. Es un enriquecimiento opcional: si la
    consulta falla, la sección queda en null y la respuesta sigue adelante.
    """

    def __init__(
        self,
        application_repo: ApplicationRepo,
        user_gateway: UserGateway,
        property_gateway: PropertyGateway,
    ) -> None:
        self._application_repo = application_repo
        self._user_gateway = user_gateway
        self._property_gateway = property_gateway
        self._logger = logging.getLogger(__name__)

    async def list_all(self, include_details: bool = False) -> list[ApplicationResponse]:
        applications = await self._application_repo.list_all()
        return [await self._to_response(a, include_details) for a in applications]

    async def get(self, application_id: int, include_details: bool = True) -> ApplicationResponse:
        application = await self._application_repo.get_by_id(application_id)
        if application is None:
            raise ApplicationNotFoundError(application_id)
        return await self._to_response(application, include_details)

    async def find(self, application_id: int, include_details: bool = True) -> ApplicationResponse | None:
        application = await self._application_repo.get_by_id(application_id)
        if application is None:
            return None
        return await self._to_response(application, include_details)

    async def list_by_user(self, user_id: int) -> list[ApplicationResponse]:
        applications = await self._application_repo.list_by_user(user_id)
        return [application_response(a) for a in applications]

    async def list_by_property(self, property_id: int) -> list[ApplicationResponse]:
        applications = await self._application_repo.list_by_property(property_id)
        return [application_response(a) for a in applications]

    async def _to_response(self, application: Application, include_details: bool) -> ApplicationResponse:
        if not include_details:
            return application_response(application)

        user = await self._user_gateway.fetch_user(application.user_id)
        if user is None:
            self._logger.warning(
                "Could not enrich application with user data",
                extra={"application_id": application.id, "user_id": application.user_id},
            )
        prop = await self._property_gateway.fetch_property(application.property_id)
        if prop is None:
            self._logger.warning(
                "Could not enrich application with property data",
                extra={"application_id": application.id, "property_id": application.property_id},
            )
        return application_response(application, user=user, prop=prop)
