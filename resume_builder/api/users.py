"""
User profile API endpoints
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from resume_builder.database import get_db
from resume_builder.models import User
from resume_builder.schemas import UserUpdate, UserResponse
from resume_builder.core import get_current_user

router = APIRouter(prefix="/users", tags=["Users"])


@router.put("/profile", response_model=UserResponse)
async def update_profile(
    profile: UserUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Update name and phone; omitted or null fields keep their stored value"""
    for field, value in profile.model_dump(exclude_none=True).items():
        setattr(current_user, field, value)

    db.commit()
    db.refresh(current_user)
    return current_user
