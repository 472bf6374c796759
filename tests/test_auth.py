from datetime import timedelta

import pytest
from jose import jwt

from workhub.core.errors import InvalidCredentialsError
from workhub.core.security import InvalidTokenError, create_access_token, decode_access_token
from workhub.services.auth.auth_service import AuthService

SECRET = "unit-test-secret"


def test_login_issues_admin_token():
    service = AuthService("letmein", SECRET)

    token = service.login("letmein")["access_token"]

    payload = decode_access_token(token, SECRET)
    assert payload["role"] == "admin"
    assert "exp" in payload


@pytest.mark.parametrize("password", ["wrong", "", "letmein "])
def test_login_rejects_wrong_password(password):
    with pytest.raises(InvalidCredentialsError) as exc_info:
        AuthService("letmein", SECRET).login(password)

    assert exc_info.value.status_code == 401
    assert exc_info.value.message == "Invalid credentials"


def test_login_disabled_without_admin_password():
    with pytest.raises(InvalidCredentialsError):
        AuthService("", SECRET).login("")


def test_expired_token_is_rejected():
    token = create_access_token({"role": "admin"}, SECRET, expires_delta=timedelta(seconds=-30))

    with pytest.raises(InvalidTokenError):
        decode_access_token(token, SECRET)


def test_token_signed_with_other_secret_is_rejected():
    token = create_access_token({"role": "admin"}, "another-secret")

    with pytest.raises(InvalidTokenError):
        decode_access_token(token, SECRET)


def test_non_admin_role_is_rejected():
    token = jwt.encode({"role": "student"}, SECRET, algorithm="HS256")

    with pytest.raises(InvalidTokenError):
        decode_access_token(token, SECRET)
