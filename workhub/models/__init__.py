from .submission import Submission, Category

__all__ = [
    "Submission",
    "Category"
]
