"""
Scoring utilities for the SkillSwap matching system.
"""

from __future__ import annotations

from typing import Dict, List, Optional, TYPE_CHECKING

from ..config import (
    SKILL_DIFF_BASE,
    SKILL_DIFF_PENALTY,
    URGENCY_WEIGHT,
    TIMEZONE_SAME_SCORE,
    TIMEZONE_DIFF_SCORE,
    PERCENTAGE_MAX,
)
from ..models.skill import normalize_skill_name

if TYPE_CHECKING:
    from ..models.skill import SkillEntry


def skill_diff_score(level_a: int, level_b: int) -> int:
    """Rewards similar skill levels; floored at 0."""
    return int(max(0, SKILL_DIFF_BASE - abs(int(level_a) - int(level_b)) * SKILL_DIFF_PENALTY))


def urgency_score(urgency_a: int, urgency_b: int) -> int:
    return int((int(urgency_a) + int(urgency_b)) * URGENCY_WEIGHT)


def same_timezone(tz_a: Optional[str], tz_b: Optional[str]) -> bool:
    """Both known and equal. An unknown timezone is never equal to anything."""
    a = (tz_a or "").strip().casefold()
    b = (tz_b or "").strip().casefold()
    return bool(a) and a == b


def timezone_score(tz_a: Optional[str], tz_b: Optional[str]) -> int:
    # Flat credit only; nearby zones are scored like any other different zone.
    return TIMEZONE_SAME_SCORE if same_timezone(tz_a, tz_b) else TIMEZONE_DIFF_SCORE


def compute_weighted_components(
    mine: "SkillEntry",
    theirs: "SkillEntry",
    my_timezone: Optional[str],
    their_timezone: Optional[str],
) -> Dict[str, int]:
    """
    Returns components of the weighted score for one complementary pair:
    - skill_diff: max(0, 20 - |levelA - levelB| * 5)
    - urgency: (urgencyA + urgencyB) * 5
    - timezone: 15 if same timezone else 5
    - total
    """
    sd = skill_diff_score(mine.skill_level, theirs.skill_level)
    us = urgency_score(mine.urgency, theirs.urgency)
    tz = timezone_score(my_timezone, their_timezone)
    return {
        "skill_diff": sd,
        "urgency": us,
        "timezone": tz,
        "total": int(sd + us + tz),
    }


def compute_weighted_score(
    mine: "SkillEntry",
    theirs: "SkillEntry",
    my_timezone: Optional[str],
    their_timezone: Optional[str],
) -> int:
    return compute_weighted_components(mine, theirs, my_timezone, their_timezone)["total"]


def compute_overlap_components(
    my_teach: List[str],
    my_learn: List[str],
    their_offered: List[str],
    their_wanted: List[str],
) -> Dict[str, object]:
    """
    Percentage overlap between my skill lists and one other user's lists.

    mutual_skills counts my teaching names they want plus their offered
    names I want; lists are counted as given, names compared normalized.
    """
    teach_n = [normalize_skill_name(s) for s in my_teach]
    learn_n = [normalize_skill_name(s) for s in my_learn]
    offered_n = [normalize_skill_name(s) for s in their_offered]
    wanted_n = [normalize_skill_name(s) for s in their_wanted]

    wanted_set = {s for s in wanted_n if s}
    learn_set = {s for s in learn_n if s}

    i_teach_hits = [s for s in teach_n if s and s in wanted_set]
    they_teach_hits = [s for s in offered_n if s and s in learn_set]

    mutual_skills = len(i_teach_hits) + len(they_teach_hits)
    total_possible = max(len(my_teach) + len(my_learn), 1)
    score = min((mutual_skills / total_possible) * 100.0, PERCENTAGE_MAX)

    return {
        "mutual_skills": int(mutual_skills),
        "total_possible": int(total_possible),
        "can_teach_them": bool(i_teach_hits),
        "they_can_teach_me": bool(they_teach_hits),
        "score": float(score),
    }
