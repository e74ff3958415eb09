"""
Core functionality for the Resume Builder API
"""
from resume_builder.core.dependencies import get_current_user, get_current_admin
from resume_builder.core.exceptions import (
    ResumeBuilderError, NotFoundError, ValidationError, PaymentError
)

__all__ = [
    "get_current_user", "get_current_admin",
    "ResumeBuilderError", "NotFoundError", "ValidationError", "PaymentError"
]
