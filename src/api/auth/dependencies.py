"""FastAPI dependencies that resolve the authenticated caller."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2AuthorizationCodeBearer

from auth.observability import AuthenticationProbe, DefaultAuthenticationProbe
from auth.value_objects import CurrentUser
from infrastructure.settings import get_oidc_settings
from shared_kernel.auth import (
    DefaultJWTValidatorProbe,
    InvalidTokenError,
    JWTValidator,
)


def _create_oauth2_scheme() -> OAuth2AuthorizationCodeBearer:
    """Create the OAuth2 security scheme shown in Swagger UI.

    ``auto_error`` is disabled so a missing token reaches
    ``get_current_user`` and is reported through the probe.
    """
    issuer = get_oidc_settings().issuer_url

    return OAuth2AuthorizationCodeBearer(
        authorizationUrl=f"{issuer}/protocol/openid-connect/auth",
        tokenUrl=f"{issuer}/protocol/openid-connect/token",
        scopes={"openid": "OpenID Connect", "profile": "User profile"},
        auto_error=False,
    )


oauth2_scheme = _create_oauth2_scheme()


@lru_cache
def get_jwt_validator() -> JWTValidator:
    """Get the process-wide validator so its JWKS cache is shared."""
    settings = get_oidc_settings()
    return JWTValidator(
        issuer_url=settings.issuer_url,
        audience=settings.audience,
        probe=DefaultJWTValidatorProbe(),
        username_claim=settings.username_claim,
    )


def get_authentication_probe() -> AuthenticationProbe:
    return DefaultAuthenticationProbe()


async def get_current_user(
    validator: Annotated[JWTValidator, Depends(get_jwt_validator)],
    probe: Annotated[AuthenticationProbe, Depends(get_authentication_probe)],
    token: Annotated[str | None, Depends(oauth2_scheme)] = None,
) -> CurrentUser:
    """Resolve the caller from the bearer token.

    Raises:
        HTTPException 401: If the token is missing or invalid
    """
    if token is None:
        probe.authentication_failed(reason="Missing authorization")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        claims = await validator.validate_token(token)
    except InvalidTokenError as e:
        probe.authentication_failed(reason=str(e))
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
            headers={"WWW-Authenticate": "Bearer"},
        ) from e

    probe.user_authenticated(username=claims.username)
    return CurrentUser(username=claims.username)
