"""
Expert reviewer reference data
"""
from sqlalchemy import Column, String, Integer, Boolean, DateTime, Text, Numeric, JSON
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
import uuid

from resume_builder.database import Base


class Expert(Base):
    """Resume reviewer available for paid submissions"""
    __tablename__ = "experts"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()), index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False)
    specialization = Column(String(255), index=True)
    experience_years = Column(Integer)
    rating = Column(Numeric(3, 2), default=0)
    total_reviews = Column(Integer, default=0)
    background = Column(Text)
    expertise = Column(JSON().with_variant(JSONB(), "postgresql"), default=list)
    is_active = Column(Boolean, default=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    submissions = relationship("ResumeSubmission", back_populates="expert")

    def __repr__(self):
        return f"<Expert {self.name}>"
