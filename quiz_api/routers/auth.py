from fastapi import APIRouter, Depends

from quiz_api.schemas.auth import LoginRequest, LoginResponse, RegisterRequest
from quiz_api.dependencies import get_auth_service, get_credential_store
from quiz_api.services.auth_service import AuthService
from quiz_api.services.credential_store import CredentialStore
from quiz_api.utils.exceptions import AppException, DuplicateUsernameError, StoreError
from quiz_api.utils.response import message_response

router = APIRouter(tags=["auth"])


@router.post("/register", status_code=201)
async def register(
    request: RegisterRequest,
    store: CredentialStore = Depends(get_credential_store),
):
    try:
        await store.register(request.username, request.password)
    except (DuplicateUsernameError, StoreError) as exc:
        raise AppException("Error registering user", status_code=400, error=exc.error or exc.message) from exc

    return message_response("User registered successfully!")


@router.post("/login")
async def login(
    request: LoginRequest,
    store: CredentialStore = Depends(get_credential_store),
    auth: AuthService = Depends(get_auth_service),
):
    user = await store.authenticate(request.username, request.password)
    token = auth.issue_token(user.username)
    return LoginResponse(message="Login successful", token=token).model_dump()
