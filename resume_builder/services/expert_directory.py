"""
Expert Directory
Seeded reference list of reviewers for paid submissions
"""
import logging
from typing import List

from sqlalchemy.orm import Session

from resume_builder.models import Expert

logger = logging.getLogger(__name__)

DEFAULT_EXPERTS = [
    {
        "name": "Dr. Rajesh Kumar",
        "email": "rajesh@launchpadindia.in",
        "specialization": "Engineering & Tech",
        "experience_years": 8,
        "rating": 4.9,
        "total_reviews": 450,
        "background": "Ex-COEP Professor, Google India",
        "expertise": ["Software Engineering", "Data Science", "Product Management"]
    },
    {
        "name": "Priya Sharma",
        "email": "priya@launchpadindia.in",
        "specialization": "Business & Finance",
        "experience_years": 6,
        "rating": 4.8,
        "total_reviews": 320,
        "background": "IIM Pune, Ex-McKinsey",
        "expertise": ["Business Analysis", "Consulting", "Finance", "Marketing"]
    },
    {
        "name": "Amit Patel",
        "email": "amit@launchpadindia.in",
        "specialization": "Design & Creative",
        "experience_years": 5,
        "rating": 4.9,
        "total_reviews": 280,
        "background": "NID Graduate, Ex-Flipkart",
        "expertise": ["UI/UX Design", "Product Design", "Creative Direction"]
    }
]


def seed_experts(db: Session) -> int:
    """Insert default experts missing by email; returns how many were added"""
    added = 0
    for data in DEFAULT_EXPERTS:
        exists = db.query(Expert.id).filter(Expert.email == data["email"]).first()
        if exists:
            continue
        db.add(Expert(**data))
        added += 1
        logger.info(f"Added expert: {data['name']}")

    if added:
        db.commit()
    return added


def list_experts(db: Session) -> List[Expert]:
    """Active experts, best rated first"""
    return (
        db.query(Expert)
        .filter(Expert.is_active.is_(True))
        .order_by(Expert.rating.desc(), Expert.name)
        .all()
    )
