"""
Services for the Resume Builder API
"""
from resume_builder.services.completion import calculate_completion, score_resume
from resume_builder.services.resume_store import ResumeStore
from resume_builder.services.payment_verifier import PaymentVerifier
from resume_builder.services.submission_workflow import SubmissionWorkflow
from resume_builder.services.admin_queries import AdminQueries

__all__ = [
    "calculate_completion", "score_resume",
    "ResumeStore", "PaymentVerifier", "SubmissionWorkflow", "AdminQueries"
]
