"""
Ratings and reviews for the SkillSwap matching system.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, TYPE_CHECKING

import numpy as np

from ..config import (
    ANONYMOUS_REVIEWER,
    RATING_MIN,
    RATING_MAX,
    RECENT_REVIEWS,
    RECENT_REVIEWS_DETAILED,
)
from ..errors import NotFoundError, ValidationError
from ..models.feedback import Feedback
from .profiles import get_display_name

if TYPE_CHECKING:
    from ..models.state import AppState


def submit_feedback(
    state: "AppState",
    reviewer_id: str,
    reviewed_user_id: str,
    skill_name: str,
    rating: int,
    comment: Optional[str] = None,
) -> Feedback:
    """
    Rate a partner for a skill. A second review of the same user and skill
    by the same reviewer replaces the first.
    """
    if reviewed_user_id not in state.profiles:
        raise NotFoundError(f"No such user: {reviewed_user_id}")
    if reviewer_id == reviewed_user_id:
        raise ValidationError("You cannot review yourself.")
    if isinstance(rating, bool) or not isinstance(rating, int) or not RATING_MIN <= rating <= RATING_MAX:
        raise ValidationError(f"Rating must be an integer between {RATING_MIN} and {RATING_MAX}.")
    if not (skill_name or "").strip():
        raise ValidationError("Skill name cannot be empty.")

    fb = Feedback(
        reviewer_id=reviewer_id,
        reviewed_user_id=reviewed_user_id,
        skill_name=skill_name,
        rating=rating,
        comment=comment,
    )
    state.feedback = [f for f in state.feedback if f.key != fb.key]
    state.feedback.append(fb)
    return fb


def reviews_for(state: "AppState", user_id: str) -> List[Feedback]:
    """Reviews received by a user, newest first."""
    rows = [f for f in state.feedback if f.reviewed_user_id == user_id]
    return sorted(rows, key=lambda f: f.created_at, reverse=True)


def review_stats(state: "AppState", user_id: str, detailed: bool = False) -> Dict[str, Any]:
    """
    Returns:
    - average_rating (0.0 when there are no reviews)
    - total_reviews
    - rating_distribution: {1..5: count}
    - recent_reviews: newest 3 (10 when detailed), with reviewer_name
    """
    reviews = reviews_for(state, user_id)
    ratings = np.array([f.rating for f in reviews], dtype=int)

    counts = np.bincount(ratings, minlength=RATING_MAX + 1) if ratings.size else np.zeros(RATING_MAX + 1, dtype=int)
    distribution = {r: int(counts[r]) for r in range(RATING_MIN, RATING_MAX + 1)}

    limit = RECENT_REVIEWS_DETAILED if detailed else RECENT_REVIEWS
    recent = []
    for f in reviews[:limit]:
        row = f.to_dict()
        row["reviewer_name"] = get_display_name(state, f.reviewer_id, fallback=ANONYMOUS_REVIEWER)
        recent.append(row)

    return {
        "average_rating": float(ratings.mean()) if ratings.size else 0.0,
        "total_reviews": int(ratings.size),
        "rating_distribution": distribution,
        "recent_reviews": recent,
    }
