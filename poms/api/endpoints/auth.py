"""Auth API: login, logout, current session and out-of-band credential validation.

Login sets the session cookie and also returns the token for API clients
that prefer the Authorization header.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response

from poms.api.dependencies import (
    get_credential_authenticator,
    get_current_session_optional,
)
from poms.api.session_cookie import clear_session, issue_session
from poms.application.dtos.identity import IdentityResult
from poms.application.services.credential_authenticator import CredentialAuthenticator
from poms.core.limiter import limit_auth, limit_validate
from poms.domain.route_policy import landing_page
from poms.domain.session import SessionIdentity
from poms.schemas.auth import (
    LoginRequest,
    SessionResponse,
    SessionUser,
    TokenResponse,
    ValidateCredentialsRequest,
    ValidateResponse,
)

router = APIRouter()


def _session_user(identity: IdentityResult) -> SessionUser:
    return SessionUser(
        id=identity.id, name=identity.name, email=identity.email, role=identity.role
    )


@router.post("/login", response_model=TokenResponse)
@limit_auth
async def login(
    request: Request,
    response: Response,
    body: LoginRequest,
    authenticator: Annotated[CredentialAuthenticator, Depends(get_credential_authenticator)],
):
    """Authenticate with email and password; set the session cookie and return the JWT.

    Every rejection is 401 INVALID_CREDENTIALS with the same message.
    """
    identity = await authenticator.authenticate(body.email, body.password)
    token = issue_session(response, identity)
    return TokenResponse(
        access_token=token,
        user=_session_user(identity),
        redirect_to=landing_page(identity.role),
    )


@router.post("/logout", status_code=204)
async def logout() -> Response:
    """Clear the session cookie. Tokens are stateless, so this is client-side only."""
    response = Response(status_code=204)
    clear_session(response)
    return response


@router.get("/session", response_model=SessionResponse)
async def get_session(
    session: Annotated[SessionIdentity | None, Depends(get_current_session_optional)],
):
    """Return the current session's user, or null when there is none."""
    if session is None:
        return SessionResponse(user=None)
    return SessionResponse(
        user=SessionUser(
            id=session.user_id, name=session.name, email=session.email, role=session.role
        ),
        expires=session.expires_at,
    )


@router.post("/validate", response_model=ValidateResponse, response_model_exclude_none=True)
@limit_validate
async def validate_credentials(
    request: Request,
    body: ValidateCredentialsRequest,
    authenticator: Annotated[CredentialAuthenticator, Depends(get_credential_authenticator)],
):
    """Check an email/password pair without issuing a session. Always 200."""
    if not body.email or not body.password:
        return ValidateResponse(valid=False, error="Email and password are required")
    identity = await authenticator.check(body.email, body.password)
    if identity is None:
        return ValidateResponse(valid=False, error="Invalid email or password")
    return ValidateResponse(valid=True, user=_session_user(identity))
