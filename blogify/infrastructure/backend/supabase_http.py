# -*- coding: utf-8 -*-
"""
Общая HTTP-часть клиентов Supabase (PostgREST, GoTrue).
"""

import logging
from typing import Any, Dict, Optional

import aiohttp

from blogify.infrastructure.config.settings import Settings, get_settings
from blogify.shared.exceptions.infrastructure_exceptions import (
    ROW_NOT_FOUND_CODE,
    BackendError,
    RowNotFoundError,
)

logger = logging.getLogger(__name__)


class SupabaseHttpClient:
    """
    Базовый async HTTP клиент.

    Использование:
        async with SupabaseRestClient(access_token=token) as client:
            rows = await client.select("blogs", {"status": "approved"})
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        access_token: Optional[str] = None,
    ):
        self.settings = settings or get_settings()
        self.access_token = access_token
        self.session: Optional[aiohttp.ClientSession] = None

    def _default_headers(self) -> Dict[str, str]:
        key = self.settings.supabase_anon_key
        return {
            "apikey": key,
            "Authorization": f"Bearer {self.access_token or key}",
        }

    async def __aenter__(self):
        self.session = aiohttp.ClientSession(
            headers=self._default_headers(),
            timeout=aiohttp.ClientTimeout(total=self.settings.request_timeout_seconds),
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if self.session:
            await self.session.close()
            self.session = None

    async def _request(
        self,
        method: str,
        url: str,
        **kwargs
    ) -> Any:
        if not self.session:
            raise RuntimeError("Client not initialized. Use async with.")

        try:
            async with self.session.request(method, url, **kwargs) as response:
                if response.status >= 400:
                    raise await self._error_from_response(response)
                if response.status == 204:
                    return None
                return await response.json(content_type=None)
        except aiohttp.ClientError as e:
            logger.warning(f"{method} {url} failed: {e}")
            raise BackendError(str(e) or "Network request failed") from e

    @staticmethod
    async def _error_from_response(response: aiohttp.ClientResponse) -> BackendError:
        """Собрать BackendError из тела ответа PostgREST/GoTrue."""
        text = await response.text()
        try:
            payload = await response.json(content_type=None)
        except ValueError:
            payload = None
        if not isinstance(payload, dict):
            payload = {}

        code = payload.get("code")
        message = (
            payload.get("message")
            or payload.get("msg")
            or payload.get("error_description")
            or text
            or response.reason
            or f"HTTP {response.status}"
        )
        details = payload.get("details")

        if code == ROW_NOT_FOUND_CODE:
            return RowNotFoundError(message, details=details)

        logger.warning(f"Backend error {response.status}: code={code} message={message}")
        return BackendError(message, code=str(code) if code is not None else None, details=details)
