import unittest
from unittest.mock import AsyncMock, MagicMock, patch

import httpx

from app.infrastructure.gateways.document_service_http import DocumentServiceHTTP


class TestDocumentServiceHTTP(unittest.IsolatedAsyncioTestCase):
    def setUp(self):
        self.gateway = DocumentServiceHTTP(base_url="http://documents.test")

    def _client(self, mock_client_cls, status_code=200, body=None, side_effect=None):
        mock_resp = MagicMock()
        mock_resp.status_code = status_code
        mock_resp.json.return_value = body

        mock_client = AsyncMock()
        mock_client.__aenter__.return_value = mock_client
        if side_effect is not None:
            mock_client.get.side_effect = side_effect
        else:
            mock_client.get.return_value = mock_resp
        mock_client_cls.return_value = mock_client
        return mock_client

    @patch("httpx.AsyncClient")
    async def test_approved(self, mock_client_cls):
        mock_client = self._client(mock_client_cls, body=True)

        self.assertTrue(await self.gateway.has_approved_documents(1))
        self.assertEqual(
            mock_client.get.call_args.args[0],
            "http://documents.test/api/documentos/usuario/1/verificar-aprobados",
        )

    @patch("httpx.AsyncClient")
    async def test_not_approved(self, mock_client_cls):
        self._client(mock_client_cls, body=False)

        self.assertFalse(await self.gateway.has_approved_documents(1))

    @patch("httpx.AsyncClient")
    async def test_truthy_non_boolean_body_is_not_approval(self, mock_client_cls):
        self._client(mock_client_cls, body="true")

        self.assertFalse(await self.gateway.has_approved_documents(1))

    @patch("httpx.AsyncClient")
    async def test_service_error_means_not_approved(self, mock_client_cls):
        self._client(mock_client_cls, status_code=503)

        self.assertFalse(await self.gateway.has_approved_documents(1))

    @patch("httpx.AsyncClient")
    async def test_network_failure_means_not_approved(self, mock_client_cls):
        self._client(mock_client_cls, side_effect=httpx.ConnectError("down"))

        self.assertFalse(await self.gateway.has_approved_documents(1))
