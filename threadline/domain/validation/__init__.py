"""Input validation schemas."""

from .thread import (
    MIN_THREAD_LENGTH,
    CommentValidation,
    ThreadValidation,
    ValidationResult,
    validate,
)

__all__ = [
    "MIN_THREAD_LENGTH",
    "CommentValidation",
    "ThreadValidation",
    "ValidationResult",
    "validate",
]
