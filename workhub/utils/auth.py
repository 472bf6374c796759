from typing import Optional
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from workhub.core.config import Settings
from workhub.core.errors import UnauthorizedError
from workhub.core.security import InvalidTokenError, decode_access_token
from workhub.dependencies import get_app_settings

bearer_scheme = HTTPBearer(auto_error=False)

async def require_admin(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    settings: Settings = Depends(get_app_settings)
) -> dict:
    """Bearer 토큰으로 관리자 확인"""
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise UnauthorizedError()

    try:
        return decode_access_token(credentials.credentials, settings.SECRET_KEY, settings.ALGORITHM)
    except InvalidTokenError:
        raise UnauthorizedError()
