from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional
from jose import jwt, JWTError

ADMIN_ROLE = "admin"

class InvalidTokenError(Exception):
    """토큰 검증 실패"""

def create_access_token(
    data: Dict[str, Any],
    secret_key: str,
    algorithm: str = "HS256",
    expires_delta: Optional[timedelta] = None
) -> str:
    payload = dict(data)
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(minutes=15))
    payload["exp"] = expire
    return jwt.encode(payload, secret_key, algorithm=algorithm)

def decode_access_token(token: str, secret_key: str, algorithm: str = "HS256") -> Dict[str, Any]:
    """관리자 토큰 검증 후 payload 반환"""
    try:
        payload = jwt.decode(token, secret_key, algorithms=[algorithm])
    except JWTError as e:
        raise InvalidTokenError(str(e)) from e
    if payload.get("role") != ADMIN_ROLE:
        raise InvalidTokenError("role is not admin")
    return payload
