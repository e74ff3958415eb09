"""
Domain errors raised by the service layer and rendered by the API
"""
from fastapi import status


class ResumeBuilderError(Exception):
    """Base error carrying the HTTP status used to report it"""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class NotFoundError(ResumeBuilderError):
    """Record is absent or not owned by the caller"""
    status_code = status.HTTP_404_NOT_FOUND


class ValidationError(ResumeBuilderError):
    """Missing or malformed input, or a disallowed status change"""
    status_code = status.HTTP_400_BAD_REQUEST


class PaymentError(ResumeBuilderError):
    """Payment details could not be verified"""
    status_code = status.HTTP_402_PAYMENT_REQUIRED
