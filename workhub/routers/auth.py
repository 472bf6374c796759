from fastapi import APIRouter, Depends
from workhub.dependencies import get_auth_service
from workhub.schemas.auth import LoginRequest, TokenResponse
from workhub.schemas.base import ErrorResponse
from workhub.services.auth.auth_service import AuthService

router = APIRouter(prefix="/auth", tags=["auth"])

@router.post("/login", response_model=TokenResponse, responses={401: {"model": ErrorResponse}})
async def login(
    login_data: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service)
):
    """관리자 로그인"""
    return auth_service.login(login_data.password)
