"""
Resolve bearer credentials into identities via the identity provider.

Every call validates the credential against the OpenID Connect userinfo
endpoint; nothing is cached.
"""

import asyncio
from typing import Optional
from loguru import logger
from pydantic import ValidationError
import httpx

from recipes_api.errors import (
    IdentityProviderTimeout,
    IdentityTransportError,
    MalformedIdentityResponse,
    UnauthenticatedError,
)
from recipes_api.models import Identity


class IdentityResolver:
    """Client for the identity provider's userinfo endpoint."""

    def __init__(
        self,
        userinfo_url: str,
        timeout: float = 10.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.userinfo_url = userinfo_url
        self.timeout = timeout
        self._client = client

    async def _fetch(self, headers: dict) -> httpx.Response:
        if self._client is not None:
            return await self._client.get(self.userinfo_url, headers=headers, timeout=self.timeout)

        async with httpx.AsyncClient() as client:
            return await client.get(self.userinfo_url, headers=headers, timeout=self.timeout)

    async def resolve(self, credential: str) -> Identity:
        """
        Validate a bearer credential and return the caller's identity.

        Args:
            credential: Bearer token from the Authorization header

        Returns:
            Identity with ``subject`` populated

        Raises:
            UnauthenticatedError: credential empty or rejected by the provider
            IdentityProviderTimeout: provider did not answer in time
            IdentityTransportError: provider unreachable
            MalformedIdentityResponse: body is not JSON or has no ``sub``
        """
        if not credential or not credential.strip():
            raise UnauthenticatedError("Missing bearer credential")

        try:
            # Bounds the whole exchange; httpx timeouts apply per phase only
            response = await asyncio.wait_for(
                self._fetch({"Authorization": f"Bearer {credential}"}),
                timeout=self.timeout,
            )
        except (asyncio.TimeoutError, httpx.TimeoutException) as e:
            logger.error(f"Identity provider timed out after {self.timeout}s")
            raise IdentityProviderTimeout(self.timeout) from e
        except httpx.RequestError as e:
            logger.error(f"Identity provider request failed: {e}")
            raise IdentityTransportError(str(e)) from e

        if not response.is_success:
            logger.warning(f"Identity provider rejected credential: {response.status_code}")
            raise UnauthenticatedError(
                f"Identity provider responded with {response.status_code}",
                status_code=response.status_code,
            )

        try:
            identity = Identity.model_validate_json(response.content)
        except ValidationError as e:
            logger.error(f"Malformed identity response: {e.error_count()} validation errors")
            raise MalformedIdentityResponse("Identity response is not valid JSON or lacks 'sub'") from e

        logger.debug(f"Resolved identity for subject {identity.subject}")
        return identity
