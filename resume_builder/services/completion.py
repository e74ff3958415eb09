"""
Completion Scorer
Derives a 0-100 completion percentage from which resume sections have content
"""
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Sequence

from resume_builder.models.resume import SECTION_COLUMNS

TOTAL_SECTIONS = len(SECTION_COLUMNS)


def is_section_complete(section: Any) -> bool:
    """A section counts when it is a non-empty list or a dict with at least one key"""
    if isinstance(section, (list, tuple)):
        return len(section) > 0
    if isinstance(section, dict):
        return len(section) > 0
    return False


def calculate_completion(sections: Sequence[Any]) -> int:
    """
    Score a sequence of section values

    Args:
        sections: Section values, one per slot

    Returns:
        int: round(100 * complete / len(sections)), rounding halves up; 0 for no slots
    """
    if not sections:
        return 0

    completed = sum(1 for section in sections if is_section_complete(section))
    ratio = Decimal(100 * completed) / Decimal(len(sections))
    return int(ratio.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def score_resume(resume) -> int:
    """Score the fixed section slots of a stored resume"""
    return calculate_completion(resume.section_values())
