import logging

from app.application.interfaces.document_gateway import DocumentGateway
from app.domain.constants import DEFAULT_REMOTE_TIMEOUT_SECONDS
from app.infrastructure.gateways.http_lookup import HttpLookupClient

logger = logging.getLogger(__name__)


class DocumentServiceHTTP(DocumentGateway):
    def __init__(self, base_url: str, timeout_seconds: float = DEFAULT_REMOTE_TIMEOUT_SECONDS) -> None:
        self._client = HttpLookupClient(base_url, "Document Service", timeout_seconds)

    async def has_approved_documents(self, user_id: int) -> bool:
        result = await self._client.get_json(
            f"/api/documentos/usuario/{user_id}/verificar-aprobados",
            {"user_id": user_id},
        )
        approved = result.is_found and result.value is True
        logger.debug(
            "Document approval checked",
            extra={"user_id": user_id, "approved": approved, "lookup_status": result.status.value},
        )
        return approved
