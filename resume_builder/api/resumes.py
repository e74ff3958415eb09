"""
Resume API endpoints
Owner-scoped CRUD, section saves and paid review submission
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List, Optional

from resume_builder.database import get_db
from resume_builder.models import User
from resume_builder.schemas import (
    ResumeCreate, ResumeUpdate, ResumeSummary, ResumeResponse,
    ResumeSaveResponse, ResumeSaveResult,
    SubmissionCreate, SubmissionCreatedResponse, SubmissionResponse
)
from resume_builder.core import get_current_user
from resume_builder.services import ResumeStore, SubmissionWorkflow

router = APIRouter(prefix="/resumes", tags=["Resumes"])


def get_submission_workflow() -> SubmissionWorkflow:
    """Workflow used for student submissions"""
    return SubmissionWorkflow()


@router.get("", response_model=List[ResumeSummary])
async def list_resumes(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """List the current user's resumes, most recently updated first"""
    return ResumeStore.list(db, current_user.id)


@router.post("", response_model=ResumeResponse, status_code=status.HTTP_201_CREATED)
async def create_resume(
    payload: Optional[ResumeCreate] = None,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Create a resume with empty sections"""
    title = payload.title if payload else None
    return ResumeStore.create(db, current_user.id, title)


@router.get("/{resume_id}", response_model=ResumeResponse)
async def get_resume(
    resume_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Get a resume with every section"""
    return ResumeStore.get(db, resume_id, current_user.id)


@router.put("/{resume_id}", response_model=ResumeSaveResponse)
async def save_resume(
    resume_id: str,
    payload: ResumeUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Save resume sections

    Only sections present and non-null in the body are replaced.
    """
    resume = ResumeStore.update(
        db,
        resume_id,
        current_user.id,
        payload.section_updates(),
        title=payload.title,
        template_id=payload.templateId
    )
    return ResumeSaveResponse(data=ResumeSaveResult.model_validate(resume))


@router.delete("/{resume_id}")
async def delete_resume(
    resume_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Delete a resume and its submissions"""
    ResumeStore.delete(db, resume_id, current_user.id)
    return {"message": "Resume deleted successfully"}


@router.post(
    "/{resume_id}/submit",
    response_model=SubmissionCreatedResponse,
    status_code=status.HTTP_201_CREATED
)
async def submit_resume(
    resume_id: str,
    payload: SubmissionCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
    workflow: SubmissionWorkflow = Depends(get_submission_workflow)
):
    """Pay for and request an expert review of a resume"""
    submission = workflow.submit(
        db,
        resume_id,
        current_user.id,
        amount=payload.payment_details.amount,
        method=payload.payment_details.method,
        transaction_id=payload.payment_details.transaction_id,
        contact_email=payload.contact_info.email,
        contact_phone=payload.contact_info.phone,
        special_requests=payload.special_requests
    )
    return SubmissionCreatedResponse(submission=SubmissionResponse.model_validate(submission))


@router.get("/{resume_id}/submissions", response_model=List[SubmissionResponse])
async def list_resume_submissions(
    resume_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Submission history of one of the current user's resumes"""
    return SubmissionWorkflow.list_for_resume(db, resume_id, current_user.id)
