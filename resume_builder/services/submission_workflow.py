"""
Submission Workflow
Paid expert-review submissions and their admin-driven status transitions

    pending -> reviewing | rejected
    reviewing -> completed | revision | rejected
    revision -> reviewing

completed and rejected are terminal. The legacy statuses "approved" and
"needs_revision" are read as "completed" and "revision". The legacy resume
review also decides pending submissions directly:

    pending -> completed | revision | rejected
"""
import logging
from datetime import datetime, timezone
from typing import Dict, FrozenSet, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from resume_builder.core.exceptions import NotFoundError, PaymentError, ValidationError
from resume_builder.models import Expert, Resume, ResumeSubmission, SubmissionStatus
from resume_builder.services.payment_verifier import PaymentVerifier, normalize_method
from resume_builder.services.resume_store import ResumeStore

logger = logging.getLogger(__name__)

S = SubmissionStatus

TRANSITIONS: Dict[SubmissionStatus, FrozenSet[SubmissionStatus]] = {
    S.PENDING: frozenset({S.REVIEWING, S.REJECTED}),
    S.REVIEWING: frozenset({S.COMPLETED, S.REVISION, S.REJECTED}),
    S.REVISION: frozenset({S.REVIEWING}),
    S.COMPLETED: frozenset(),
    S.REJECTED: frozenset(),
}

TERMINAL_STATUSES = frozenset({S.COMPLETED, S.REJECTED})

# Entering one of these marks the submission as reviewed
REVIEWED_STATUSES = frozenset({S.COMPLETED, S.REVISION, S.REJECTED})

LEGACY_STATUS_ALIASES = {"approved": S.COMPLETED, "needs_revision": S.REVISION}

# Extra moves allowed through the legacy resume review
LEGACY_TRANSITIONS: Dict[SubmissionStatus, FrozenSet[SubmissionStatus]] = {
    S.PENDING: frozenset({S.COMPLETED, S.REVISION, S.REJECTED}),
}


def parse_status(value: str) -> SubmissionStatus:
    """
    Normalize a status string to the canonical enum

    Raises:
        ValidationError: If the value is not a known status
    """
    key = (value or "").strip().lower()
    if key in LEGACY_STATUS_ALIASES:
        return LEGACY_STATUS_ALIASES[key]
    try:
        return SubmissionStatus(key)
    except ValueError:
        allowed = ", ".join(s.value for s in SubmissionStatus)
        raise ValidationError(f"Invalid status '{value}'. Allowed: {allowed}") from None


def can_transition(
    current: SubmissionStatus,
    target: SubmissionStatus,
    legacy: bool = False
) -> bool:
    """Whether an admin may move a submission from current to target"""
    if current == target:
        return current not in TERMINAL_STATUSES
    if legacy and target in LEGACY_TRANSITIONS.get(current, frozenset()):
        return True
    return target in TRANSITIONS[current]


def append_notes(existing: Optional[str], notes: Optional[str]) -> Optional[str]:
    """Join new reviewer notes onto existing ones with a newline"""
    if not notes:
        return existing
    if not existing:
        return notes
    return f"{existing}\n{notes}"


class SubmissionWorkflow:
    """Create submissions and move them through review"""

    def __init__(self, verifier: Optional[PaymentVerifier] = None):
        self.verifier = verifier or PaymentVerifier()

    def submit(
        self,
        db: Session,
        resume_id: str,
        user_id: str,
        amount: float,
        method: str,
        transaction_id: str,
        contact_email: str,
        contact_phone: str,
        special_requests: Optional[str] = None
    ) -> ResumeSubmission:
        """
        Record a paid request for expert review

        Raises:
            NotFoundError: If the resume does not exist or belongs to someone else
            PaymentError: If the payment cannot be verified
        """
        resume = ResumeStore.get(db, resume_id, user_id)

        self.verifier.verify(db, amount, method, transaction_id)
        method = normalize_method(method)

        submission = ResumeSubmission(
            resume_id=resume.id,
            status=S.PENDING.value,
            submitted_at=datetime.now(timezone.utc),
            payment_status="paid",
            payment_amount=amount,
            payment_method=method,
            transaction_id=transaction_id,
            contact_email=contact_email,
            contact_phone=contact_phone,
            special_requests=special_requests
        )

        db.add(submission)
        try:
            db.commit()
        except IntegrityError:
            # Lost a race with another submission paying with the same transaction
            db.rollback()
            logger.warning(f"Rejected payment {transaction_id}: transaction already used")
            raise PaymentError("Transaction has already been used") from None
        db.refresh(submission)

        logger.info(
            f"Submission {submission.id} created for resume {resume.id} "
            f"(amount={amount}, method={method}, txn={transaction_id})"
        )
        return submission

    @staticmethod
    def get(db: Session, submission_id: str) -> ResumeSubmission:
        """
        Raises:
            NotFoundError: If the submission does not exist
        """
        submission = db.query(ResumeSubmission).filter(
            ResumeSubmission.id == submission_id
        ).first()
        if submission is None:
            raise NotFoundError("Submission not found")
        return submission

    @staticmethod
    def list_for_resume(db: Session, resume_id: str, user_id: str):
        """A user's submissions for one of their resumes, newest first"""
        resume = ResumeStore.get(db, resume_id, user_id)
        return (
            db.query(ResumeSubmission)
            .filter(ResumeSubmission.resume_id == resume.id)
            .order_by(ResumeSubmission.submitted_at.desc())
            .all()
        )

    @staticmethod
    def latest_for_resume(db: Session, resume_id: str) -> ResumeSubmission:
        """
        Most recent submission of a resume, regardless of owner

        Raises:
            NotFoundError: If the resume has never been submitted
        """
        submission = (
            db.query(ResumeSubmission)
            .filter(ResumeSubmission.resume_id == resume_id)
            .order_by(ResumeSubmission.submitted_at.desc())
            .first()
        )
        if submission is None:
            raise NotFoundError("Submission not found")
        return submission

    @staticmethod
    def _apply_status(
        submission: ResumeSubmission,
        status: str,
        notes: Optional[str],
        legacy: bool = False
    ) -> None:
        target = parse_status(status)
        current = parse_status(submission.status)

        if not can_transition(current, target, legacy=legacy):
            raise ValidationError(
                f"Cannot change status from '{current.value}' to '{target.value}'"
            )

        submission.status = target.value
        submission.reviewer_notes = append_notes(submission.reviewer_notes, notes)
        if target in REVIEWED_STATUSES:
            submission.reviewed_at = datetime.now(timezone.utc)

        logger.info(f"Submission {submission.id}: {current.value} -> {target.value}")

    @staticmethod
    def set_status(
        db: Session,
        submission_id: str,
        status: str,
        notes: Optional[str] = None
    ) -> ResumeSubmission:
        """
        Move a submission to a new status

        Args:
            db: Database session
            submission_id: Submission to update
            status: Target status
            notes: Reviewer notes appended to the existing ones

        Returns:
            ResumeSubmission: Updated submission

        Raises:
            NotFoundError: If the submission does not exist
            ValidationError: If the status is unknown or the transition is not allowed
        """
        submission = SubmissionWorkflow.get(db, submission_id)
        SubmissionWorkflow._apply_status(submission, status, notes)

        db.commit()
        db.refresh(submission)
        return submission

    @staticmethod
    def review_resume(
        db: Session,
        resume_id: str,
        status: str,
        notes: Optional[str] = None,
        score: Optional[int] = None
    ) -> ResumeSubmission:
        """
        Review the latest submission of a resume, optionally scoring it

        Accepts the legacy statuses and lets a pending submission be
        approved, sent back for revision or rejected without first
        entering review.

        Raises:
            NotFoundError: If the resume has no submission
            ValidationError: If the status is unknown or the transition is not allowed
        """
        if db.query(Resume.id).filter(Resume.id == resume_id).first() is None:
            raise NotFoundError("Resume not found")

        submission = SubmissionWorkflow.latest_for_resume(db, resume_id)
        SubmissionWorkflow._apply_status(submission, status, notes, legacy=True)
        if score is not None:
            submission.review_score = score

        db.commit()
        db.refresh(submission)
        return submission

    @staticmethod
    def assign_expert(db: Session, submission_id: str, expert_id: str) -> ResumeSubmission:
        """
        Assign an active expert to review a submission

        Raises:
            NotFoundError: If the submission or an active expert is missing
        """
        submission = SubmissionWorkflow.get(db, submission_id)

        expert = db.query(Expert).filter(
            Expert.id == expert_id,
            Expert.is_active.is_(True)
        ).first()
        if expert is None:
            raise NotFoundError("Expert not found")

        submission.expert_id = expert.id
        submission.assigned_at = datetime.now(timezone.utc)

        db.commit()
        db.refresh(submission)

        logger.info(f"Submission {submission.id} assigned to expert {expert.name}")
        return submission
