"""
Admin API endpoints
Admin access only - review resumes, manage paid submissions, view statistics
"""
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import Any, Dict, List, Optional

from resume_builder.config import settings
from resume_builder.database import get_db
from resume_builder.models import User
from resume_builder.schemas import (
    ReviewUpdate, StatusUpdate, ExpertAssignment, ExpertResponse, SubmissionResponse
)
from resume_builder.core import get_current_admin
from resume_builder.services import AdminQueries, SubmissionWorkflow
from resume_builder.services.expert_directory import list_experts

router = APIRouter(prefix="/admin", tags=["Admin"])


@router.get("/resumes", response_model=Dict[str, Any])
async def get_all_resumes(
    status: Optional[str] = Query("all", description="Filter by latest submission status"),
    page: int = Query(1, ge=1, description="Page number"),
    limit: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE, description="Items per page"),
    current_admin: User = Depends(get_current_admin),
    db: Session = Depends(get_db)
):
    """
    Get every resume with its owner and latest submission (admin only)

    Args:
        status: Submission status filter, "all" for none
        page: Page number
        limit: Items per page
        current_admin: Current authenticated admin
        db: Database session

    Returns:
        Dict: Paginated list of resumes with metadata
    """
    return AdminQueries.list_resumes(db, status, page, limit)


@router.get("/resumes/{resume_id}", response_model=Dict[str, Any])
async def get_resume_detail(
    resume_id: str,
    current_admin: User = Depends(get_current_admin),
    db: Session = Depends(get_db)
):
    """Get a resume with all sections, its owner and latest submission (admin only)"""
    return AdminQueries.get_resume_detail(db, resume_id)


@router.put("/resumes/{resume_id}/review", response_model=SubmissionResponse)
async def review_resume(
    resume_id: str,
    review: ReviewUpdate,
    current_admin: User = Depends(get_current_admin),
    db: Session = Depends(get_db)
):
    """Set status, notes and score on a resume's latest submission (admin only)"""
    return SubmissionWorkflow.review_resume(
        db, resume_id, review.status, notes=review.notes, score=review.score
    )


@router.get("/stats", response_model=Dict[str, Any])
async def get_statistics(
    current_admin: User = Depends(get_current_admin),
    db: Session = Depends(get_db)
):
    """Resume and review counts (admin only)"""
    return AdminQueries.get_stats(db)


@router.get("/paid-submissions", response_model=Dict[str, Any])
async def get_paid_submissions(
    status: Optional[str] = Query("all", description="Filter by submission status"),
    page: int = Query(1, ge=1, description="Page number"),
    limit: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE, description="Items per page"),
    current_admin: User = Depends(get_current_admin),
    db: Session = Depends(get_db)
):
    """Get paid submissions, newest first (admin only)"""
    return AdminQueries.list_paid_submissions(db, status, page, limit)


@router.get("/submission-stats", response_model=Dict[str, Any])
async def get_submission_statistics(
    current_admin: User = Depends(get_current_admin),
    db: Session = Depends(get_db)
):
    """Paid submission counts and revenue (admin only)"""
    return AdminQueries.get_submission_stats(db)


@router.put("/submissions/{submission_id}/status", response_model=SubmissionResponse)
async def update_submission_status(
    submission_id: str,
    update: StatusUpdate,
    current_admin: User = Depends(get_current_admin),
    db: Session = Depends(get_db)
):
    """Move a submission through review; notes are appended (admin only)"""
    return SubmissionWorkflow.set_status(db, submission_id, update.status, notes=update.notes)


@router.put("/submissions/{submission_id}/assign", response_model=SubmissionResponse)
async def assign_submission_expert(
    submission_id: str,
    assignment: ExpertAssignment,
    current_admin: User = Depends(get_current_admin),
    db: Session = Depends(get_db)
):
    """Assign an expert reviewer to a submission (admin only)"""
    return SubmissionWorkflow.assign_expert(db, submission_id, assignment.expert_id)


@router.get("/experts", response_model=List[ExpertResponse])
async def get_experts(
    current_admin: User = Depends(get_current_admin),
    db: Session = Depends(get_db)
):
    """List active expert reviewers (admin only)"""
    return list_experts(db)
