"""
Matching algorithms for the SkillSwap matching system.
"""

from .complementarity import (
    same_skill,
    match_directions,
    is_complementary,
    is_mutual_pair,
)
from .scoring import (
    skill_diff_score,
    urgency_score,
    same_timezone,
    timezone_score,
    compute_weighted_components,
    compute_weighted_score,
    compute_overlap_components,
)
from .matcher import (
    STRATEGIES,
    boolean_overlap_matches,
    weighted_score_matches,
    percentage_overlap_matches,
    compute_matches,
    matches_for_user,
    set_matcher_verbose,
)
from .filters import filter_matches, sort_matches, match_summary

__all__ = [
    "same_skill",
    "match_directions",
    "is_complementary",
    "is_mutual_pair",
    "skill_diff_score",
    "urgency_score",
    "same_timezone",
    "timezone_score",
    "compute_weighted_components",
    "compute_weighted_score",
    "compute_overlap_components",
    "STRATEGIES",
    "boolean_overlap_matches",
    "weighted_score_matches",
    "percentage_overlap_matches",
    "compute_matches",
    "matches_for_user",
    "set_matcher_verbose",
    "filter_matches",
    "sort_matches",
    "match_summary",
]
