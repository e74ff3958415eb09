"""
Pydantic schemas for resumes and their sections

Section entries accept unknown keys so fields added by the client
are stored unchanged.
"""
from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime
from typing import Any, Dict, List, Optional, Union

from resume_builder.models.resume import SECTION_COLUMNS

Scalar = Union[str, int, float]


class SectionEntry(BaseModel):
    """Base for a single entry inside a section"""
    model_config = ConfigDict(extra="allow")


class PersonalInfo(SectionEntry):
    firstName: Optional[str] = None
    lastName: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    dateOfBirth: Optional[str] = None
    linkedin: Optional[str] = None


class Education(SectionEntry):
    institution: Optional[str] = None
    degree: Optional[str] = None
    startYear: Optional[Scalar] = None
    endYear: Optional[Scalar] = None
    percentage: Optional[Scalar] = None


class Experience(SectionEntry):
    company: Optional[str] = None
    position: Optional[str] = None
    location: Optional[str] = None
    startDate: Optional[str] = None
    endDate: Optional[str] = None
    description: Optional[str] = None


class Project(SectionEntry):
    title: Optional[str] = None
    organization: Optional[str] = None
    domain: Optional[str] = None
    teamSize: Optional[Scalar] = None
    startDate: Optional[str] = None
    endDate: Optional[str] = None
    description: Optional[str] = None


class Skill(SectionEntry):
    name: Optional[str] = None
    level: Optional[str] = None
    type: Optional[str] = None


class Position(SectionEntry):
    title: Optional[str] = None
    organization: Optional[str] = None
    startDate: Optional[str] = None
    endDate: Optional[str] = None
    description: Optional[str] = None


class Award(SectionEntry):
    title: Optional[str] = None
    organization: Optional[str] = None
    date: Optional[str] = None
    description: Optional[str] = None


class Certification(SectionEntry):
    name: Optional[str] = None
    issuer: Optional[str] = None
    issueDate: Optional[str] = None
    expiryDate: Optional[str] = None
    credentialId: Optional[str] = None
    url: Optional[str] = None
    description: Optional[str] = None


class Volunteering(SectionEntry):
    organization: Optional[str] = None
    role: Optional[str] = None
    location: Optional[str] = None
    startDate: Optional[str] = None
    endDate: Optional[str] = None
    description: Optional[str] = None


class Conference(SectionEntry):
    title: Optional[str] = None
    organizer: Optional[str] = None
    address: Optional[str] = None
    date: Optional[str] = None
    description: Optional[str] = None


class Publication(SectionEntry):
    title: Optional[str] = None
    publisher: Optional[str] = None
    date: Optional[str] = None
    url: Optional[str] = None
    description: Optional[str] = None


class Patent(SectionEntry):
    title: Optional[str] = None
    office: Optional[str] = None
    applicationNumber: Optional[str] = None
    filingDate: Optional[str] = None
    issueDate: Optional[str] = None
    description: Optional[str] = None


class TestScore(SectionEntry):
    title: Optional[str] = None
    associatedWith: Optional[str] = None
    score: Optional[Scalar] = None
    totalScore: Optional[Scalar] = None
    examDate: Optional[str] = None
    description: Optional[str] = None


class Scholarship(SectionEntry):
    title: Optional[str] = None
    associatedWith: Optional[str] = None
    grantDate: Optional[str] = None
    description: Optional[str] = None


class Guardian(SectionEntry):
    name: Optional[str] = None
    occupation: Optional[str] = None
    organization: Optional[str] = None
    designation: Optional[str] = None
    email: Optional[str] = None
    mobile: Optional[str] = None
    dateOfBirth: Optional[str] = None
    notes: Optional[str] = None


class MiscItem(SectionEntry):
    """Language or subject"""
    name: Optional[str] = None
    level: Optional[str] = None


class ResumeCreate(BaseModel):
    """Schema for creating a resume"""
    title: Optional[str] = Field(None, max_length=255)


class ResumeUpdate(BaseModel):
    """
    Partial resume save

    Every field is optional; a missing or null field leaves the stored
    value untouched and a provided section replaces the stored one.
    """
    title: Optional[str] = Field(None, max_length=255)
    templateId: Optional[str] = Field(None, max_length=50)
    personalInfo: Optional[PersonalInfo] = None
    education: Optional[List[Education]] = None
    experience: Optional[List[Experience]] = None
    projects: Optional[List[Project]] = None
    skills: Optional[List[Skill]] = None
    positions: Optional[List[Position]] = None
    awards: Optional[List[Award]] = None
    certifications: Optional[List[Certification]] = None
    volunteering: Optional[List[Volunteering]] = None
    conferences: Optional[List[Conference]] = None
    publications: Optional[List[Publication]] = None
    patents: Optional[List[Patent]] = None
    testScores: Optional[List[TestScore]] = None
    scholarships: Optional[List[Scholarship]] = None
    guardians: Optional[List[Guardian]] = None
    languages: Optional[List[MiscItem]] = None
    subjects: Optional[List[MiscItem]] = None

    def section_updates(self) -> Dict[str, Any]:
        """Map provided sections to their column names as plain JSON values"""
        updates: Dict[str, Any] = {}
        for api_key, column, _ in SECTION_COLUMNS:
            value = getattr(self, api_key)
            if value is None:
                continue
            if isinstance(value, list):
                updates[column] = [entry.model_dump(exclude_unset=True) for entry in value]
            else:
                updates[column] = value.model_dump(exclude_unset=True)
        return updates


class ResumeSummary(BaseModel):
    """Resume as shown in list views"""
    id: str
    title: str
    template_id: Optional[str] = None
    is_active: Optional[bool] = None
    completion_percentage: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {
        "from_attributes": True
    }


class ResumeResponse(ResumeSummary):
    """Full resume including every section"""
    user_id: str
    personal_info: Dict[str, Any] = Field(default_factory=dict)
    education: List[Any] = Field(default_factory=list)
    experience: List[Any] = Field(default_factory=list)
    projects: List[Any] = Field(default_factory=list)
    skills: List[Any] = Field(default_factory=list)
    positions: List[Any] = Field(default_factory=list)
    awards: List[Any] = Field(default_factory=list)
    certifications: List[Any] = Field(default_factory=list)
    volunteering: List[Any] = Field(default_factory=list)
    conferences: List[Any] = Field(default_factory=list)
    publications: List[Any] = Field(default_factory=list)
    patents: List[Any] = Field(default_factory=list)
    test_scores: List[Any] = Field(default_factory=list)
    scholarships: List[Any] = Field(default_factory=list)
    guardians: List[Any] = Field(default_factory=list)
    languages: List[Any] = Field(default_factory=list)
    subjects: List[Any] = Field(default_factory=list)


class ResumeSaveResult(BaseModel):
    """Fields returned after a save"""
    id: str
    title: str
    completion_percentage: int
    updated_at: Optional[datetime] = None

    model_config = {
        "from_attributes": True
    }


class ResumeSaveResponse(BaseModel):
    """Response envelope for PUT /resumes/{id}"""
    success: bool = True
    message: str = "Resume saved successfully"
    data: ResumeSaveResult
