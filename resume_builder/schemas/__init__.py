"""
Pydantic schemas for the Resume Builder API
"""
from resume_builder.schemas.user import (
    UserBase, UserCreate, UserLogin, UserUpdate, UserResponse, Token
)
from resume_builder.schemas.resume import (
    ResumeCreate, ResumeUpdate, ResumeSummary, ResumeResponse,
    ResumeSaveResult, ResumeSaveResponse
)
from resume_builder.schemas.submission import (
    PaymentDetails, ContactInfo, SubmissionCreate, SubmissionResponse,
    SubmissionCreatedResponse, StatusUpdate, ReviewUpdate,
    ExpertAssignment, ExpertResponse
)

__all__ = [
    # User schemas
    "UserBase", "UserCreate", "UserLogin", "UserUpdate", "UserResponse", "Token",
    # Resume schemas
    "ResumeCreate", "ResumeUpdate", "ResumeSummary", "ResumeResponse",
    "ResumeSaveResult", "ResumeSaveResponse",
    # Submission schemas
    "PaymentDetails", "ContactInfo", "SubmissionCreate", "SubmissionResponse",
    "SubmissionCreatedResponse", "StatusUpdate", "ReviewUpdate",
    "ExpertAssignment", "ExpertResponse"
]
