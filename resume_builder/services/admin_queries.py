"""
Admin Query Layer
Read-side aggregation over resumes, owners and submissions
"""
from typing import Any, Dict, Optional

from sqlalchemy import case, func, select
from sqlalchemy.orm import Session, aliased

from resume_builder.core.exceptions import NotFoundError
from resume_builder.models import Resume, ResumeSubmission, SECTION_COLUMNS, SubmissionStatus, User
from resume_builder.services.submission_workflow import parse_status


def _iso(value) -> Optional[str]:
    return value.isoformat() if value else None


def _latest_submission_id():
    """Correlated subquery selecting the newest submission of each resume"""
    latest = aliased(ResumeSubmission)
    return (
        select(latest.id)
        .where(latest.resume_id == Resume.id)
        .order_by(latest.submitted_at.desc())
        .limit(1)
        .correlate(Resume)
        .scalar_subquery()
    )


def _status_filter(status: Optional[str]) -> Optional[str]:
    if not status or status.lower() == "all":
        return None
    return parse_status(status).value


def _pagination(total: int, page: int, per_page: int) -> Dict[str, Any]:
    total_pages = (total + per_page - 1) // per_page
    return {
        "page": page,
        "per_page": per_page,
        "total": total,
        "total_pages": total_pages,
        "has_next": page < total_pages,
        "has_prev": page > 1
    }


def _submission_dict(submission: Optional[ResumeSubmission]) -> Optional[Dict[str, Any]]:
    if submission is None:
        return None
    return {
        "id": submission.id,
        "status": submission.status,
        "submitted_at": _iso(submission.submitted_at),
        "reviewed_at": _iso(submission.reviewed_at),
        "reviewer_notes": submission.reviewer_notes,
        "review_score": submission.review_score,
        "payment_status": submission.payment_status,
        "payment_amount": float(submission.payment_amount) if submission.payment_amount is not None else None,
        "payment_method": submission.payment_method,
        "transaction_id": submission.transaction_id,
        "contact_email": submission.contact_email,
        "contact_phone": submission.contact_phone,
        "special_requests": submission.special_requests,
        "expert_id": submission.expert_id,
        "assigned_at": _iso(submission.assigned_at)
    }


class AdminQueries:
    """Administrator views over every user's resumes"""

    @staticmethod
    def list_resumes(
        db: Session,
        status: Optional[str] = None,
        page: int = 1,
        per_page: int = 20
    ) -> Dict[str, Any]:
        """
        Resumes with their owner and latest submission

        Args:
            db: Database session
            status: Submission status to filter on, "all" or None for no filter
            page: 1-based page number
            per_page: Page size

        Returns:
            Dict: {"resumes": [...], "pagination": {...}}
        """
        query = db.query(
            Resume,
            User,
            ResumeSubmission
        ).join(
            User, Resume.user_id == User.id
        ).outerjoin(
            ResumeSubmission, ResumeSubmission.id == _latest_submission_id()
        )

        status_value = _status_filter(status)
        if status_value:
            query = query.filter(ResumeSubmission.status == status_value)

        total = query.count()

        rows = query.order_by(
            ResumeSubmission.submitted_at.desc().nulls_last(),
            Resume.updated_at.desc()
        ).offset((page - 1) * per_page).limit(per_page).all()

        resumes = []
        for resume, user, submission in rows:
            resumes.append({
                "id": resume.id,
                "title": resume.title,
                "completion_percentage": resume.completion_percentage,
                "created_at": _iso(resume.created_at),
                "updated_at": _iso(resume.updated_at),
                "first_name": user.first_name,
                "last_name": user.last_name,
                "email": user.email,
                "phone": user.phone,
                "submission_id": submission.id if submission else None,
                "status": submission.status if submission else None,
                "submitted_at": _iso(submission.submitted_at) if submission else None,
                "reviewed_at": _iso(submission.reviewed_at) if submission else None,
                "reviewer_notes": submission.reviewer_notes if submission else None
            })

        return {
            "resumes": resumes,
            "pagination": _pagination(total, page, per_page)
        }

    @staticmethod
    def get_resume_detail(db: Session, resume_id: str) -> Dict[str, Any]:
        """
        Full resume with owner and latest submission

        Raises:
            NotFoundError: If the resume does not exist
        """
        row = db.query(
            Resume,
            User,
            ResumeSubmission
        ).join(
            User, Resume.user_id == User.id
        ).outerjoin(
            ResumeSubmission, ResumeSubmission.id == _latest_submission_id()
        ).filter(
            Resume.id == resume_id
        ).first()

        if row is None:
            raise NotFoundError("Resume not found")

        resume, user, submission = row

        result = {
            "id": resume.id,
            "title": resume.title,
            "template_id": resume.template_id,
            "is_active": resume.is_active,
            "completion_percentage": resume.completion_percentage,
            "created_at": _iso(resume.created_at),
            "updated_at": _iso(resume.updated_at),
            "user": {
                "id": user.id,
                "first_name": user.first_name,
                "last_name": user.last_name,
                "email": user.email,
                "phone": user.phone,
                "created_at": _iso(user.created_at)
            },
            "submission": _submission_dict(submission),
            "submission_count": len(resume.submissions)
        }
        for _, column, _ in SECTION_COLUMNS:
            result[column] = getattr(resume, column)

        return result

    @staticmethod
    def get_stats(db: Session) -> Dict[str, Any]:
        """Counts over resumes joined to their latest submission"""
        total, pending, approved, rejected, avg_completion = db.query(
            func.count(Resume.id),
            func.count(case((ResumeSubmission.status == SubmissionStatus.PENDING.value, 1))),
            func.count(case((ResumeSubmission.status == SubmissionStatus.COMPLETED.value, 1))),
            func.count(case((ResumeSubmission.status == SubmissionStatus.REJECTED.value, 1))),
            func.avg(Resume.completion_percentage)
        ).select_from(Resume).outerjoin(
            ResumeSubmission, ResumeSubmission.id == _latest_submission_id()
        ).one()

        return {
            "total_resumes": total,
            "pending_reviews": pending,
            "approved": approved,
            "rejected": rejected,
            "avg_completion": round(float(avg_completion), 2) if avg_completion is not None else 0
        }

    @staticmethod
    def list_paid_submissions(
        db: Session,
        status: Optional[str] = None,
        page: int = 1,
        per_page: int = 20
    ) -> Dict[str, Any]:
        """Paid submissions with resume title and owner, newest first"""
        query = db.query(
            ResumeSubmission,
            Resume.title,
            User
        ).join(
            Resume, ResumeSubmission.resume_id == Resume.id
        ).join(
            User, Resume.user_id == User.id
        ).filter(
            ResumeSubmission.payment_status == "paid"
        )

        status_value = _status_filter(status)
        if status_value:
            query = query.filter(ResumeSubmission.status == status_value)

        total = query.count()

        rows = query.order_by(
            ResumeSubmission.submitted_at.desc()
        ).offset((page - 1) * per_page).limit(per_page).all()

        submissions = []
        for submission, title, user in rows:
            item = _submission_dict(submission)
            item["submission_id"] = item.pop("id")
            item.update({
                "id": submission.resume_id,
                "title": title,
                "first_name": user.first_name,
                "last_name": user.last_name,
                "email": user.email
            })
            submissions.append(item)

        return {
            "submissions": submissions,
            "pagination": _pagination(total, page, per_page)
        }

    @staticmethod
    def get_submission_stats(db: Session) -> Dict[str, Any]:
        """Counts and revenue over paid submissions"""
        total_paid, revenue, pending, reviewing, revision, completed = db.query(
            func.count(ResumeSubmission.id),
            func.sum(ResumeSubmission.payment_amount),
            func.count(case((ResumeSubmission.status == SubmissionStatus.PENDING.value, 1))),
            func.count(case((ResumeSubmission.status == SubmissionStatus.REVIEWING.value, 1))),
            func.count(case((ResumeSubmission.status == SubmissionStatus.REVISION.value, 1))),
            func.count(case((ResumeSubmission.status == SubmissionStatus.COMPLETED.value, 1)))
        ).filter(
            ResumeSubmission.payment_status == "paid"
        ).one()

        return {
            "total_paid": total_paid,
            "total_revenue": float(revenue) if revenue is not None else 0,
            "pending_review": pending,
            "in_review": reviewing,
            "revision": revision,
            "completed": completed
        }
