"""Bearer token validation against the identity provider.

Tokens are RS256 JWTs issued by an OIDC provider. Signing keys come from
the provider's JWKS endpoint (found through the discovery document) and
are cached for a configurable time.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING, Any

import httpx
from jose import JWTError, jwt
from jose.exceptions import ExpiredSignatureError, JWTClaimsError

if TYPE_CHECKING:
    from shared_kernel.auth.observability import JWTValidatorProbe


@dataclass(frozen=True)
class TokenClaims:
    """Identity extracted from a verified token.

    Attributes:
        username: The caller's username, used for every ownership check
        subject: The raw ``sub`` claim
    """

    username: str
    subject: str


class InvalidTokenError(Exception):
    """Raised when a bearer token cannot be trusted."""


class JWTValidator:
    """Verifies bearer tokens and resolves the caller's username.

    The username is read from ``username_claim`` and falls back to
    ``sub`` when the provider does not include that claim.
    """

    def __init__(
        self,
        issuer_url: str,
        audience: str,
        probe: JWTValidatorProbe,
        username_claim: str = "user_name",
        jwks_cache_ttl: timedelta = timedelta(hours=12),
    ):
        self._issuer_url = issuer_url.rstrip("/")
        self._audience = audience
        self._probe = probe
        self._username_claim = username_claim
        self._jwks_cache_ttl = jwks_cache_ttl

        self._jwks: dict[str, Any] | None = None
        self._jwks_fetched_at: datetime | None = None
        self._jwks_lock = asyncio.Lock()

    async def validate_token(self, token: str) -> TokenClaims:
        """Verify the token and return the caller identity.

        Raises:
            InvalidTokenError: If the token is malformed, expired, signed by
                an unknown key, or issued for another audience or issuer
        """
        try:
            jwt.get_unverified_header(token)
        except JWTError as e:
            self._fail(f"Malformed token: {e}")

        jwks = await self._get_jwks()

        try:
            claims = jwt.decode(
                token=token,
                key=jwks,
                algorithms=["RS256"],
                audience=self._audience,
                issuer=self._issuer_url,
            )
        except ExpiredSignatureError:
            self._fail("Token expired")
        except JWTClaimsError as e:
            self._fail(f"Invalid claims: {e}")
        except JWTError as e:
            self._fail(f"Invalid token: {e}")

        subject = claims.get("sub")
        username = claims.get(self._username_claim) or subject
        if not username:
            self._fail(f"Missing {self._username_claim} and sub claims")

        self._probe.token_validated(username=str(username))
        return TokenClaims(username=str(username), subject=str(subject or username))

    def _fail(self, reason: str) -> None:
        self._probe.token_validation_failed(reason=reason)
        raise InvalidTokenError(reason)

    async def _get_jwks(self) -> dict[str, Any]:
        if self._is_cache_valid():
            return self._jwks  # type: ignore[return-value]

        async with self._jwks_lock:
            # Another request may have refreshed the keys while we waited
            if self._is_cache_valid():
                return self._jwks  # type: ignore[return-value]
            return await self._fetch_jwks()

    def _is_cache_valid(self) -> bool:
        if self._jwks is None or self._jwks_fetched_at is None:
            return False
        age = datetime.now(tz=timezone.utc) - self._jwks_fetched_at
        return age < self._jwks_cache_ttl

    async def _fetch_jwks(self) -> dict[str, Any]:
        """Fetch signing keys via the OpenID discovery document.

        Raises:
            InvalidTokenError: If the provider cannot be reached or returns
                no ``jwks_uri``
        """
        discovery_url = f"{self._issuer_url}/.well-known/openid-configuration"
        try:
            async with httpx.AsyncClient() as client:
                config_response = await client.get(discovery_url)
                config_response.raise_for_status()
                jwks_uri = config_response.json().get("jwks_uri")
                if not jwks_uri:
                    self._probe.jwks_fetch_failed(error="missing jwks_uri")
                    raise InvalidTokenError("OIDC provider did not publish jwks_uri")

                jwks_response = await client.get(jwks_uri)
                jwks_response.raise_for_status()
                jwks = jwks_response.json()
        except httpx.HTTPError as e:
            self._probe.jwks_fetch_failed(error=str(e))
            raise InvalidTokenError(f"Failed to fetch JWKS: {e}") from e

        self._jwks = jwks
        self._jwks_fetched_at = datetime.now(tz=timezone.utc)
        self._probe.jwks_fetched(key_count=len(jwks.get("keys", [])))
        return jwks
