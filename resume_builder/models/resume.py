"""
Resume model - one row per resume with a JSON column per section
"""
from sqlalchemy import Column, String, Integer, Boolean, DateTime, ForeignKey, JSON
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
import uuid

from resume_builder.database import Base

# JSONB on PostgreSQL, plain JSON elsewhere
JSONType = JSON().with_variant(JSONB(), "postgresql")

# (api key, column name, empty value factory) in completion order
SECTION_COLUMNS = (
    ("personalInfo", "personal_info", dict),
    ("education", "education", list),
    ("experience", "experience", list),
    ("projects", "projects", list),
    ("skills", "skills", list),
    ("positions", "positions", list),
    ("awards", "awards", list),
    ("certifications", "certifications", list),
    ("volunteering", "volunteering", list),
    ("conferences", "conferences", list),
    ("publications", "publications", list),
    ("patents", "patents", list),
    ("testScores", "test_scores", list),
    ("scholarships", "scholarships", list),
    ("guardians", "guardians", list),
    ("languages", "languages", list),
    ("subjects", "subjects", list),
)


class Resume(Base):
    """A user's resume with independent JSON sections"""
    __tablename__ = "resumes"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()), index=True)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String(255), nullable=False, default="My Resume")
    template_id = Column(String(50), default="modern")
    is_active = Column(Boolean, default=True)
    completion_percentage = Column(Integer, default=0, nullable=False)

    # Sections
    personal_info = Column(JSONType, default=dict, nullable=False)
    education = Column(JSONType, default=list, nullable=False)
    experience = Column(JSONType, default=list, nullable=False)
    projects = Column(JSONType, default=list, nullable=False)
    skills = Column(JSONType, default=list, nullable=False)
    positions = Column(JSONType, default=list, nullable=False)
    awards = Column(JSONType, default=list, nullable=False)
    certifications = Column(JSONType, default=list, nullable=False)
    volunteering = Column(JSONType, default=list, nullable=False)
    conferences = Column(JSONType, default=list, nullable=False)
    publications = Column(JSONType, default=list, nullable=False)
    patents = Column(JSONType, default=list, nullable=False)
    test_scores = Column(JSONType, default=list, nullable=False)
    scholarships = Column(JSONType, default=list, nullable=False)
    guardians = Column(JSONType, default=list, nullable=False)
    # Miscellaneous
    languages = Column(JSONType, default=list, nullable=False)
    subjects = Column(JSONType, default=list, nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), index=True)

    # Relationships
    user = relationship("User", back_populates="resumes")
    submissions = relationship(
        "ResumeSubmission",
        back_populates="resume",
        cascade="all, delete-orphan",
        order_by="ResumeSubmission.submitted_at"
    )

    def section_values(self):
        """Section values in completion order"""
        return [getattr(self, column) for _, column, _ in SECTION_COLUMNS]

    def __repr__(self):
        return f"<Resume {self.title} - {self.completion_percentage}%>"
