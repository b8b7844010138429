from fastapi import APIRouter, Depends, Response, status

from unfold_india.api import deps
from unfold_india.core.session_context import Principal, SessionContext
from unfold_india.repositories.profile_repository import ProfileRepository
from unfold_india.schemas import auth as auth_schema
from unfold_india.services.identity import AuthSession, IdentityProvider

router = APIRouter()


def _token_pair(session: AuthSession) -> auth_schema.TokenPair:
    return auth_schema.TokenPair(
        access_token=session.access_token,
        refresh_token=session.refresh_token,
    )


@router.post("/register", response_model=auth_schema.TokenPair)
def register_user(
    payload: auth_schema.RegisterRequest,
    identity: IdentityProvider = Depends(deps.get_identity_provider),
) -> auth_schema.TokenPair:
    return _token_pair(identity.sign_up(payload.email, payload.password))


@router.post("/login", response_model=auth_schema.TokenPair)
def login_user(
    payload: auth_schema.LoginRequest,
    identity: IdentityProvider = Depends(deps.get_identity_provider),
) -> auth_schema.TokenPair:
    return _token_pair(identity.sign_in(payload.email, payload.password))


@router.post("/refresh", response_model=auth_schema.TokenPair)
def refresh_token(
    payload: auth_schema.RefreshRequest,
    identity: IdentityProvider = Depends(deps.get_identity_provider),
) -> auth_schema.TokenPair:
    return _token_pair(identity.refresh(payload.refresh_token))


@router.get("/me", response_model=auth_schema.PrincipalPublic)
def read_current_user(
    principal: Principal = Depends(deps.get_current_principal),
) -> auth_schema.PrincipalPublic:
    return auth_schema.PrincipalPublic(id=principal.id, email=principal.email)


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
def logout_user(
    principal: Principal = Depends(deps.get_current_principal),
    context: SessionContext = Depends(deps.get_session_context),
    identity: IdentityProvider = Depends(deps.get_identity_provider),
) -> Response:
    identity.sign_out(principal.id)
    context.sign_out()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/change-password")
def change_password(
    payload: auth_schema.ChangePasswordRequest,
    _: Principal = Depends(deps.get_current_principal),
    profiles: ProfileRepository = Depends(deps.get_profile_repository),
) -> dict[str, str]:
    profiles.change_password(payload.new_password, payload.confirm_password)
    return {"message": "Password updated successfully!"}
