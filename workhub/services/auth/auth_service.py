import logging
import secrets
from datetime import timedelta
from typing import Dict
from workhub.core.errors import InvalidCredentialsError
from workhub.core.security import ADMIN_ROLE, create_access_token

logger = logging.getLogger(__name__)

class AuthService:
    """관리자 비밀번호 로그인"""

    def __init__(
        self,
        admin_password: str,
        secret_key: str,
        algorithm: str = "HS256",
        expire_minutes: int = 720
    ):
        self.admin_password = admin_password
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.expire_minutes = expire_minutes

    def login(self, password: str) -> Dict[str, str]:
        if not self.admin_password:
            logger.warning("ADMIN_PASSWORD 미설정 - 관리자 로그인 불가")
            raise InvalidCredentialsError()

        if not secrets.compare_digest(
            (password or "").encode("utf-8"),
            self.admin_password.encode("utf-8")
        ):
            logger.info("관리자 로그인 실패")
            raise InvalidCredentialsError()

        access_token = create_access_token(
            {"role": ADMIN_ROLE},
            self.secret_key,
            self.algorithm,
            timedelta(minutes=self.expire_minutes)
        )
        logger.info("관리자 로그인 성공")
        return {"access_token": access_token}
