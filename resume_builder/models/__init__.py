"""
Database models for the Resume Builder API
"""
from resume_builder.models.user import User
from resume_builder.models.resume import Resume, SECTION_COLUMNS
from resume_builder.models.resume_submission import ResumeSubmission, SubmissionStatus
from resume_builder.models.expert import Expert

__all__ = ["User", "Resume", "SECTION_COLUMNS", "ResumeSubmission", "SubmissionStatus", "Expert"]
