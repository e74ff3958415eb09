"""
Pydantic schemas for expert review submissions
"""
from pydantic import BaseModel, ConfigDict, EmailStr, Field
from datetime import datetime
from typing import List, Optional


class PaymentDetails(BaseModel):
    """Payment claimed by the client at checkout"""
    model_config = ConfigDict(populate_by_name=True)

    amount: float = Field(..., gt=0)
    method: str = Field(..., min_length=1, max_length=50)
    transaction_id: str = Field(..., alias="transactionId", min_length=1, max_length=255)


class ContactInfo(BaseModel):
    """How the reviewer reaches the student"""
    email: EmailStr
    phone: str = Field(..., min_length=1, max_length=50)


class SubmissionCreate(BaseModel):
    """Body of POST /resumes/{id}/submit"""
    model_config = ConfigDict(populate_by_name=True)

    payment_details: PaymentDetails = Field(..., alias="paymentDetails")
    contact_info: ContactInfo = Field(..., alias="contactInfo")
    special_requests: Optional[str] = Field(None, alias="specialRequests")


class SubmissionResponse(BaseModel):
    """Submission row"""
    id: str
    resume_id: str
    status: str
    submitted_at: Optional[datetime] = None
    reviewed_at: Optional[datetime] = None
    reviewer_notes: Optional[str] = None
    review_score: Optional[int] = None
    payment_status: Optional[str] = None
    payment_amount: Optional[float] = None
    payment_method: Optional[str] = None
    transaction_id: Optional[str] = None
    contact_email: Optional[str] = None
    contact_phone: Optional[str] = None
    special_requests: Optional[str] = None
    expert_id: Optional[str] = None
    assigned_at: Optional[datetime] = None

    model_config = {
        "from_attributes": True
    }


class SubmissionCreatedResponse(BaseModel):
    """Response of POST /resumes/{id}/submit"""
    message: str = "Resume submitted for review successfully"
    submission: SubmissionResponse


class StatusUpdate(BaseModel):
    """Admin status change for a submission"""
    status: str = Field(..., min_length=1)
    notes: Optional[str] = None


class ReviewUpdate(StatusUpdate):
    """Admin review of a resume's latest submission"""
    score: Optional[int] = Field(None, ge=0, le=100)


class ExpertAssignment(BaseModel):
    """Assign an expert reviewer to a submission"""
    expert_id: str


class ExpertResponse(BaseModel):
    """Expert reviewer"""
    id: str
    name: str
    email: str
    specialization: Optional[str] = None
    experience_years: Optional[int] = None
    rating: Optional[float] = None
    total_reviews: Optional[int] = None
    background: Optional[str] = None
    expertise: List[str] = Field(default_factory=list)

    model_config = {
        "from_attributes": True
    }
