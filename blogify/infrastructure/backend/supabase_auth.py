# -*- coding: utf-8 -*-
"""
GoTrue адаптер: кто текущий пользователь.
"""

import logging
from typing import Tuple

from blogify.domain.entities.identity import Identity
from blogify.infrastructure.backend.supabase_http import SupabaseHttpClient
from blogify.shared.exceptions.domain_exceptions import NotAuthenticatedError
from blogify.shared.exceptions.infrastructure_exceptions import BackendError

logger = logging.getLogger(__name__)


def _identity_from_user(user: dict) -> Identity:
    return Identity(id=str(user["id"]), email=user.get("email") or "")


class SupabaseAuthClient(SupabaseHttpClient):
    """Клиент аутентификации Supabase."""

    def _auth_url(self, path: str) -> str:
        return f"{self.settings.get_auth_url()}/{path.lstrip('/')}"

    async def get_user(self, access_token: str) -> Identity:
        """
        Пользователь по access token.

        Raises:
            NotAuthenticatedError: токен отсутствует или недействителен
        """
        if not access_token:
            raise NotAuthenticatedError("Sign in required")
        try:
            user = await self._request(
                "GET",
                self._auth_url("user"),
                headers={"Authorization": f"Bearer {access_token}"},
            )
        except BackendError as e:
            logger.info(f"Token rejected: {e.message}")
            raise NotAuthenticatedError(e.message) from e
        return _identity_from_user(user)

    async def sign_in(self, email: str, password: str) -> Tuple[Identity, str]:
        """
        Вход по email и паролю.

        Возвращает:
            (пользователь, access token)
        """
        payload = await self._request(
            "POST",
            self._auth_url("token"),
            params={"grant_type": "password"},
            json={"email": email, "password": password},
        )
        identity = _identity_from_user(payload["user"])
        logger.info(f"Signed in user {identity.id}")
        return identity, payload["access_token"]
