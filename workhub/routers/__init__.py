from .submission import router as submission_router
from .auth import router as auth_router

__all__ = [
    'submission_router',
    'auth_router'
]
