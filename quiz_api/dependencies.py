from fastapi import Depends, Header, Request

from quiz_api.services.auth_service import AuthService, TokenClaims
from quiz_api.services.credential_store import CredentialStore
from quiz_api.services.quiz_store import QuizStore
from quiz_api.utils.exceptions import UnauthorizedError


def get_auth_service(request: Request) -> AuthService:
    return request.app.state.auth_service


def get_credential_store(request: Request) -> CredentialStore:
    return request.app.state.credential_store


def get_quiz_store(request: Request) -> QuizStore:
    return request.app.state.quiz_store


async def require_token(
    authorization: str | None = Header(default=None),
    auth: AuthService = Depends(get_auth_service),
) -> TokenClaims:
    # raw token, no "Bearer " prefix
    if not authorization:
        raise UnauthorizedError("Access Denied")
    return auth.verify_token(authorization)
