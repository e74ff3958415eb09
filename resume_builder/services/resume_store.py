"""
Resume Record Store
Owner-scoped create/read/list/delete plus the null-preserving section save
"""
import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session, load_only

from resume_builder.core.exceptions import NotFoundError, ValidationError
from resume_builder.models import Resume, SECTION_COLUMNS
from resume_builder.services.completion import score_resume

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "My Resume"
SECTION_COLUMN_NAMES = {column for _, column, _ in SECTION_COLUMNS}
SUMMARY_COLUMNS = (
    Resume.id, Resume.title, Resume.template_id, Resume.is_active,
    Resume.completion_percentage, Resume.created_at, Resume.updated_at
)


def _clean_title(title: Optional[str]) -> Optional[str]:
    if title is None:
        return None
    title = title.strip()
    if not title or len(title) > 255:
        raise ValidationError("Title must be between 1 and 255 characters")
    return title


class ResumeStore:
    """Data access for resumes, always scoped to the owning user"""

    @staticmethod
    def create(db: Session, user_id: str, title: Optional[str] = None) -> Resume:
        """
        Insert a resume with every section empty

        Args:
            db: Database session
            user_id: Owner
            title: Optional title, defaults to "My Resume"

        Returns:
            Resume: The stored row
        """
        resume = Resume(user_id=user_id, title=_clean_title(title) or DEFAULT_TITLE)
        for _, column, empty in SECTION_COLUMNS:
            setattr(resume, column, empty())
        resume.completion_percentage = 0

        db.add(resume)
        db.commit()
        db.refresh(resume)

        logger.info(f"Resume {resume.id} created for user {user_id}")
        return resume

    @staticmethod
    def get(db: Session, resume_id: str, user_id: str) -> Resume:
        """
        Fetch a resume owned by user_id

        Raises:
            NotFoundError: If the resume does not exist or belongs to someone else
        """
        resume = db.query(Resume).filter(
            Resume.id == resume_id,
            Resume.user_id == user_id
        ).first()

        if resume is None:
            raise NotFoundError("Resume not found")

        return resume

    @staticmethod
    def list(db: Session, user_id: str) -> List[Resume]:
        """Summary rows for a user's resumes, most recently updated first"""
        return (
            db.query(Resume)
            .options(load_only(*SUMMARY_COLUMNS))
            .filter(Resume.user_id == user_id)
            .order_by(Resume.updated_at.desc())
            .all()
        )

    @staticmethod
    def update(
        db: Session,
        resume_id: str,
        user_id: str,
        sections: Dict[str, Any],
        title: Optional[str] = None,
        template_id: Optional[str] = None
    ) -> Resume:
        """
        Apply a partial save

        Keys that are absent or None keep the stored value; a provided section
        replaces the stored one as a whole. Completion is recomputed from the
        merged row.

        Args:
            db: Database session
            resume_id: Resume to update
            user_id: Caller, must own the resume
            sections: Column name to new section value
            title: New title, or None to keep
            template_id: New template, or None to keep

        Returns:
            Resume: The updated row

        Raises:
            NotFoundError: If the resume does not exist or belongs to someone else
            ValidationError: If a title is given but empty, or a section key is unknown
        """
        unknown = set(sections) - SECTION_COLUMN_NAMES
        if unknown:
            raise ValidationError(f"Unknown resume sections: {', '.join(sorted(unknown))}")

        resume = ResumeStore.get(db, resume_id, user_id)

        title = _clean_title(title)
        if title is not None:
            resume.title = title
        if template_id is not None:
            resume.template_id = template_id

        changed = []
        for column, value in sections.items():
            if value is None:
                continue
            setattr(resume, column, value)
            changed.append(column)

        resume.completion_percentage = score_resume(resume)
        resume.updated_at = datetime.now(timezone.utc)

        db.commit()
        db.refresh(resume)

        logger.info(
            f"Resume {resume.id} saved: sections={changed or 'none'}, "
            f"completion={resume.completion_percentage}%"
        )
        return resume

    @staticmethod
    def delete(db: Session, resume_id: str, user_id: str) -> None:
        """
        Delete a resume and, by cascade, its submissions

        Raises:
            NotFoundError: If the resume does not exist or belongs to someone else
        """
        resume = ResumeStore.get(db, resume_id, user_id)

        db.delete(resume)
        db.commit()

        logger.info(f"Resume {resume_id} deleted by user {user_id}")
