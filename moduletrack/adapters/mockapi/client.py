"""
MockAPI Client - Remote store for training modules.

Features:
- Async HTTP client (httpx)
- One FetchError per failed operation, with a localized message
- No retries: each operation is exactly one HTTP call
"""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import httpx
from pydantic import TypeAdapter, ValidationError

from moduletrack.config.errors import FetchError
from moduletrack.config.settings import DEFAULT_MODULES_API_URL
from moduletrack.domains.modules.models import Module, ModuleCreate, ModuleUpdate

logger = logging.getLogger(__name__)

__all__ = ["MockAPIClient"]

_MODULE_LIST = TypeAdapter(list[Module])

# Prefix of the FetchError message for each operation
_LIST_FAILED = "Erreur lors de la récupération des modules"
_GET_FAILED = "Erreur lors de la récupération du module"
_CREATE_FAILED = "Erreur lors de la création du module"
_UPDATE_FAILED = "Erreur lors de la mise à jour du module"
_DELETE_FAILED = "Erreur lors de la suppression du module"


class MockAPIClient:
    """
    Client for the modules collection of a mockapi.io project.

    Example:
        >>> async with MockAPIClient() as client:
        ...     modules = await client.list_modules()
        ...     created = await client.create_module(ModuleCreate(nom="Git", duree=7))
    """

    def __init__(
        self,
        base_url: str = DEFAULT_MODULES_API_URL,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize client.

        Args:
            base_url: Collection URL, e.g. https://<project>.mockapi.io/api/tgcc
            timeout: Request timeout in seconds. None keeps the httpx default.
            transport: Custom transport (tests use httpx.MockTransport)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None:
            kwargs: dict[str, Any] = {"base_url": self.base_url}
            if self.timeout is not None:
                kwargs["timeout"] = self.timeout
            if self._transport is not None:
                kwargs["transport"] = self._transport
            self._client = httpx.AsyncClient(**kwargs)
        return self._client

    @staticmethod
    def _path(module_id: str) -> str:
        return "/" + quote(str(module_id), safe="")

    async def _request(
        self,
        method: str,
        path: str,
        failure: str,
        json: dict[str, Any] | None = None,
    ) -> httpx.Response:
        """Send one request; transport errors and non-2xx become FetchError."""
        client = await self._get_client()
        logger.debug("%s %s%s", method, self.base_url, path)

        try:
            response = await client.request(method, path, json=json)
        except httpx.HTTPError as e:
            logger.warning("%s %s failed: %s", method, path, e)
            raise FetchError(f"{failure}: {e}", {"operation": failure}) from e

        if not response.is_success:
            logger.warning("%s %s returned HTTP %d", method, path, response.status_code)
            raise FetchError(
                f"{failure}: Erreur HTTP: {response.status_code}",
                {"operation": failure},
            )
        return response

    @staticmethod
    def _decode(response: httpx.Response, failure: str, adapter: Any) -> Any:
        """Parse a JSON body into the expected model."""
        try:
            payload = response.json()
            return adapter(payload)
        except (ValueError, ValidationError) as e:
            logger.warning("Unexpected payload from %s: %s", response.request.url, e)
            raise FetchError(
                f"{failure}: Réponse invalide du serveur",
                {"operation": failure},
            ) from e

    async def list_modules(self) -> list[Module]:
        """GET the whole collection."""
        response = await self._request("GET", "/", _LIST_FAILED)
        return self._decode(response, _LIST_FAILED, _MODULE_LIST.validate_python)

    async def get_module(self, module_id: str) -> Module:
        """GET one module."""
        response = await self._request("GET", self._path(module_id), _GET_FAILED)
        return self._decode(response, _GET_FAILED, Module.model_validate)

    async def create_module(self, data: ModuleCreate) -> Module:
        """POST a new module; the server assigns the ID."""
        response = await self._request("POST", "/", _CREATE_FAILED, json=data.model_dump())
        return self._decode(response, _CREATE_FAILED, Module.model_validate)

    async def update_module(self, module_id: str, data: ModuleUpdate) -> Module:
        """PUT the fields that are set."""
        response = await self._request(
            "PUT",
            self._path(module_id),
            _UPDATE_FAILED,
            json=data.model_dump(exclude_none=True),
        )
        return self._decode(response, _UPDATE_FAILED, Module.model_validate)

    async def delete_module(self, module_id: str) -> None:
        """DELETE one module."""
        await self._request("DELETE", self._path(module_id), _DELETE_FAILED)

    async def close(self) -> None:
        """Close HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> MockAPIClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()
