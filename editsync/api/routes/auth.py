"""Credential sign-in API router.

Successful sign-in sets a signed session cookie; pages check the session
endpoint to choose between guest and signed-in rendering.
"""

from typing import Annotated

from fastapi import APIRouter, Cookie, Depends, Form, Response, status

from editsync.core.config.settings import settings
from editsync.core.models.api import SessionResponse
from editsync.infrastructure.auth.session_tokens import SessionTokenIssuer
from editsync.services.auth_service import AuthService, StaticCredentialVerifier

router = APIRouter(prefix="/auth", tags=["auth"])


# =============================================================================
# Dependencies
# =============================================================================


def get_auth_service() -> AuthService:
    """Create an AuthService for the configured account."""
    return AuthService(
        verifier=StaticCredentialVerifier(
            email=settings.auth_email,
            password=settings.auth_password,
        ),
        token_issuer=SessionTokenIssuer(),
    )


# =============================================================================
# Endpoints
# =============================================================================


@router.post(
    "/callback/credentials",
    response_model=SessionResponse,
    summary="Sign in with email and password",
    responses={status.HTTP_401_UNAUTHORIZED: {"model": SessionResponse}},
)
async def sign_in(
    response: Response,
    service: Annotated[AuthService, Depends(get_auth_service)],
    email: Annotated[str | None, Form(description="Email")] = None,
    password: Annotated[str | None, Form(description="Password")] = None,
) -> SessionResponse:
    """Check credentials and start a session."""
    outcome = service.sign_in(email, password)
    if outcome is None:
        response.status_code = status.HTTP_401_UNAUTHORIZED
        return SessionResponse(authenticated=False, user=None)

    identity, token = outcome
    response.set_cookie(
        key=settings.session_cookie_name,
        value=token,
        max_age=settings.session_max_age_seconds,
        httponly=True,
        samesite="lax",
        secure=settings.session_cookie_secure,
    )
    return SessionResponse(authenticated=True, user=identity)


@router.get(
    "/session",
    response_model=SessionResponse,
    summary="Current session",
)
async def get_session(
    service: Annotated[AuthService, Depends(get_auth_service)],
    session_token: Annotated[
        str | None, Cookie(alias=settings.session_cookie_name)
    ] = None,
) -> SessionResponse:
    """Return the signed-in user, or a guest session."""
    identity = service.get_session(session_token)
    return SessionResponse(authenticated=identity is not None, user=identity)


@router.post(
    "/signout",
    response_model=SessionResponse,
    summary="Sign out",
)
async def sign_out(response: Response) -> SessionResponse:
    """Clear the session cookie."""
    response.delete_cookie(
        key=settings.session_cookie_name,
        httponly=True,
        samesite="lax",
        secure=settings.session_cookie_secure,
    )
    return SessionResponse(authenticated=False, user=None)
