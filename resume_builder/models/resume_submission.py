"""
Resume Submission model for the paid expert review flow
"""
from enum import Enum

from sqlalchemy import Column, String, Integer, DateTime, Text, Numeric, ForeignKey, Index, text
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
import uuid

from resume_builder.database import Base

PAID_WHERE = text("payment_status = 'paid'")


class SubmissionStatus(str, Enum):
    """Review status of a submission"""
    PENDING = "pending"
    REVIEWING = "reviewing"
    REVISION = "revision"
    COMPLETED = "completed"
    REJECTED = "rejected"


class ResumeSubmission(Base):
    """A single pay-and-request-review event for a resume"""
    __tablename__ = "resume_submissions"
    __table_args__ = (
        # A gateway transaction pays for one submission only
        Index(
            "uq_submissions_paid_transaction",
            "transaction_id",
            unique=True,
            postgresql_where=PAID_WHERE,
            sqlite_where=PAID_WHERE
        ),
    )

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()), index=True)
    resume_id = Column(String(36), ForeignKey("resumes.id", ondelete="CASCADE"), nullable=False, index=True)
    status = Column(String(50), default=SubmissionStatus.PENDING.value, nullable=False, index=True)
    submitted_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)
    reviewed_at = Column(DateTime(timezone=True))
    reviewer_notes = Column(Text)
    review_score = Column(Integer)

    # Payment
    payment_status = Column(String(50), default="pending", index=True)
    payment_amount = Column(Numeric(10, 2))
    payment_method = Column(String(50))
    transaction_id = Column(String(255), index=True)

    # Contact
    contact_email = Column(String(255))
    contact_phone = Column(String(50))
    special_requests = Column(Text)

    # Expert assignment
    expert_id = Column(String(36), ForeignKey("experts.id", ondelete="SET NULL"), index=True)
    assigned_at = Column(DateTime(timezone=True))

    # Relationships
    resume = relationship("Resume", back_populates="submissions")
    expert = relationship("Expert", back_populates="submissions")

    def __repr__(self):
        return f"<ResumeSubmission {self.resume_id} - {self.status}>"
