"""
Admin statistics for the SkillSwap matching system.
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import Any, Dict, List, Optional, TYPE_CHECKING

import numpy as np

from ..config import (
    ANONYMOUS_REVIEWER,
    MESSAGE_ACTIVITY_DAYS,
    TOP_RATED_MIN_REVIEWS,
    TOP_RATED_N,
    TOP_SKILLS_N,
    URGENCY_LABELS,
    URGENCY_MAX,
)
from ..models.skill import normalize_skill_name
from .profiles import get_display_name

if TYPE_CHECKING:
    from ..models.state import AppState


def top_skills(state: "AppState", n: int = TOP_SKILLS_N) -> List[Dict[str, Any]]:
    """Most listed skills (case-insensitive), shown under their first-listed spelling."""
    counts: Dict[str, int] = {}
    labels: Dict[str, str] = {}
    for s in state.skills:
        key = s.normalized_name
        if not key:
            continue
        labels.setdefault(key, s.skill_name.strip())
        counts[key] = counts.get(key, 0) + 1
    ranked = sorted(counts.items(), key=lambda kv: kv[1], reverse=True)
    return [{"skill_name": labels[k], "count": c} for k, c in ranked[:n]]


def top_rated_users(
    state: "AppState",
    n: int = TOP_RATED_N,
    min_reviews: int = TOP_RATED_MIN_REVIEWS,
) -> List[Dict[str, Any]]:
    by_user: Dict[str, List[int]] = {}
    for f in state.feedback:
        by_user.setdefault(f.reviewed_user_id, []).append(f.rating)

    rows = []
    for uid, ratings in by_user.items():
        if len(ratings) < min_reviews:
            continue
        rows.append(
            {
                "user_id": uid,
                "display_name": get_display_name(state, uid, fallback=ANONYMOUS_REVIEWER),
                "avg_rating": float(np.mean(ratings)),
                "review_count": len(ratings),
            }
        )
    rows.sort(key=lambda r: r["avg_rating"], reverse=True)
    return rows[:n]


def message_activity(state: "AppState", today: Optional[date] = None, days: int = MESSAGE_ACTIVITY_DAYS) -> List[Dict[str, Any]]:
    """Messages per day for the last `days` days, oldest first, today included."""
    today = today or date.today()
    dates = [(today - timedelta(days=i)).isoformat() for i in range(days - 1, -1, -1)]
    per_day = {d: 0 for d in dates}
    for m in state.messages:
        d = m.created_at[:10]
        if d in per_day:
            per_day[d] += 1
    return [{"date": d, "count": per_day[d]} for d in dates]


def urgency_distribution(state: "AppState") -> List[Dict[str, Any]]:
    urgencies = np.array([s.urgency for s in state.skills], dtype=int)
    counts = np.bincount(urgencies, minlength=URGENCY_MAX + 1) if urgencies.size else np.zeros(URGENCY_MAX + 1, dtype=int)
    return [{"urgency": label, "count": int(counts[u])} for u, label in URGENCY_LABELS.items()]


def admin_stats(state: "AppState", today: Optional[date] = None) -> Dict[str, Any]:
    return {
        "total_users": len(state.profiles),
        "total_skills": len(state.skills),
        "total_messages": len(state.messages),
        "total_feedback": len(state.feedback),
        "top_skills": top_skills(state),
        "top_rated_users": top_rated_users(state),
        "message_activity": message_activity(state, today=today),
        "urgency_distribution": urgency_distribution(state),
    }
