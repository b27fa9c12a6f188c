"""
Auth endpoints - sign-up, sign-in and current identity (RESTful API).
Challenge: Secure auth, validation, clear status codes.
"""

from fastapi import APIRouter, status

from inventory_tracker.core.dependencies import CurrentActor, VerifierDep
from inventory_tracker.core.security import create_access_token
from inventory_tracker.schemas.user import Identity, SignInRequest, SignUpRequest, TokenResponse
from inventory_tracker.services.auth_service import AuthMode

router = APIRouter()


def _token_for(identity: Identity) -> TokenResponse:
    return TokenResponse(access_token=create_access_token(identity.id), user=identity)


@router.post("/signup", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
async def sign_up(data: SignUpRequest, verifier: VerifierDep):
    """Create a new account (or the demo account, when enabled) and return a JWT."""
    identity = await verifier.verify(
        data.email, data.password, AuthMode.SIGN_UP, name=data.name, role=data.role
    )
    return _token_for(identity)


@router.post("/signin", response_model=TokenResponse)
async def sign_in(data: SignInRequest, verifier: VerifierDep):
    """Authenticate and return JWT."""
    identity = await verifier.verify(data.email, data.password, AuthMode.SIGN_IN)
    return _token_for(identity)


@router.get("/me", response_model=Identity)
async def me(actor: CurrentActor):
    """Identity the bearer token resolves to, with the role as currently stored."""
    return actor
