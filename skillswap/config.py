"""
Configuration constants for the SkillSwap matching system.
"""

from __future__ import annotations

import os
from typing import Dict, List

# =====================================================
# State Persistence
# =====================================================

STATE_FILE = os.environ.get("SKILLSWAP_STATE_FILE", "skillswap_state.json")

# =====================================================
# Verbosity
# =====================================================

# Matcher prints are on unless SKILLSWAP_VERBOSE=0
VERBOSE_DEFAULT: bool = os.environ.get("SKILLSWAP_VERBOSE", "1").strip().lower() not in ("0", "false", "no", "off")

# =====================================================
# Skill Ranges
# =====================================================

SKILL_LEVEL_MIN: int = 1
SKILL_LEVEL_MAX: int = 5
URGENCY_MIN: int = 1
URGENCY_MAX: int = 3

# Missing level/urgency on a stored row
DEFAULT_SKILL_LEVEL: int = 1
DEFAULT_URGENCY: int = 1

URGENCY_LABELS: Dict[int, str] = {1: "Low", 2: "Medium", 3: "High"}

# =====================================================
# Matching Strategies
# =====================================================

STRATEGY_BOOLEAN = "boolean-overlap"
STRATEGY_WEIGHTED = "weighted-score"
STRATEGY_PERCENTAGE = "percentage-overlap"

STRATEGY_NAMES: List[str] = [STRATEGY_BOOLEAN, STRATEGY_WEIGHTED, STRATEGY_PERCENTAGE]

DEFAULT_STRATEGY: str = os.environ.get("SKILLSWAP_MATCH_STRATEGY", STRATEGY_PERCENTAGE)

# =====================================================
# Weighted Score
# =====================================================

# skill_diff = max(0, SKILL_DIFF_BASE - |levelA - levelB| * SKILL_DIFF_PENALTY)
SKILL_DIFF_BASE: int = 20
SKILL_DIFF_PENALTY: int = 5

# urgency = (urgencyA + urgencyB) * URGENCY_WEIGHT
URGENCY_WEIGHT: int = 5

TIMEZONE_SAME_SCORE: int = 15
TIMEZONE_DIFF_SCORE: int = 5

# Display cap for the weighted list
WEIGHTED_TOP_N: int = 10

# =====================================================
# Percentage Overlap
# =====================================================

PERCENTAGE_MAX: float = 100.0

# =====================================================
# Match Sorting
# =====================================================

SORT_COMPATIBILITY = "compatibility"
SORT_MUTUAL = "mutual"
SORT_RECENT = "recent"

SORT_MODES: List[str] = [SORT_COMPATIBILITY, SORT_MUTUAL, SORT_RECENT]

# =====================================================
# Display
# =====================================================

ANONYMOUS_USER = "Anonymous User"
ANONYMOUS_REVIEWER = "Anonymous"

AVAILABILITY_STATUSES: List[str] = ["available", "busy", "unavailable"]

# =====================================================
# Requests / Feedback
# =====================================================

REQUEST_PENDING = "pending"
REQUEST_ACCEPTED = "accepted"
REQUEST_DECLINED = "declined"

RATING_MIN: int = 1
RATING_MAX: int = 5

RECENT_REVIEWS: int = 3
RECENT_REVIEWS_DETAILED: int = 10

# =====================================================
# Admin Statistics
# =====================================================

TOP_SKILLS_N: int = 10
TOP_RATED_N: int = 10
TOP_RATED_MIN_REVIEWS: int = 2
MESSAGE_ACTIVITY_DAYS: int = 7

# =====================================================
# Gaussian Defaults for random users
# =====================================================

GAUSS_LEVEL_MEAN: float = 3.0
GAUSS_LEVEL_STD: float = 1.2
GAUSS_URGENCY_MEAN: float = 2.0
GAUSS_URGENCY_STD: float = 0.8

RANDOM_SKILLS: List[str] = ["Guitar", "Python", "Spanish", "Cooking", "Chess", "Photography"]
RANDOM_TIMEZONES: List[str] = ["UTC", "America/New_York", "Europe/Berlin", "Asia/Tokyo"]
