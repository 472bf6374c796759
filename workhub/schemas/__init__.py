from .base import CamelModel, ErrorResponse, FieldErrorDetail
from .submission import SubmissionResponse, QuotaCheckResponse
from .auth import LoginRequest, TokenResponse

__all__ = [
    "CamelModel",
    "ErrorResponse",
    "FieldErrorDetail",
    "SubmissionResponse",
    "QuotaCheckResponse",
    "LoginRequest",
    "TokenResponse"
]
