"""
Utility functions for the Resume Builder API
"""
from resume_builder.utils.security import (
    verify_password, get_password_hash,
    create_access_token, verify_token
)

__all__ = [
    "verify_password", "get_password_hash",
    "create_access_token", "verify_token"
]
