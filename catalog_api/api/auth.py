from fastapi import APIRouter, Response, status
from catalog_api.schemas.auth import LoginRequest, LoginResponse
from catalog_api.services.auth import login

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/login", response_model=LoginResponse)
def login_user(data: LoginRequest):
    return login(data)


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def logout():
    # Серверных сессий нет, инвалидировать нечего
    return Response(status_code=status.HTTP_204_NO_CONTENT)
