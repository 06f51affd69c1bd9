"""
SkillSwap - Main package.

Users list skills they can teach or want to learn and get matched with
complementary users. This package provides the match scorer (three
strategies behind compute_matches), the services the views call
(requests, messages, feedback, notifications, admin statistics), a JSON
state store and a menu-driven CLI.
"""

from .config import (
    STATE_FILE,
    STRATEGY_BOOLEAN,
    STRATEGY_WEIGHTED,
    STRATEGY_PERCENTAGE,
    STRATEGY_NAMES,
    DEFAULT_STRATEGY,
    ANONYMOUS_USER,
    WEIGHTED_TOP_N,
)

from .errors import (
    SkillSwapError,
    ValidationError,
    NotFoundError,
    PermissionDeniedError,
    InvalidStateError,
)

from .models import (
    SkillEntry,
    normalize_skill_name,
    UserProfile,
    MatchCandidate,
    SkillRequest,
    Message,
    Feedback,
    Notification,
    AppState,
)

from .matching import (
    is_complementary,
    is_mutual_pair,
    STRATEGIES,
    compute_matches,
    matches_for_user,
    filter_matches,
    sort_matches,
    match_summary,
    set_matcher_verbose,
)

from .persistence import load_state, save_state, reconcile_state

__version__ = "0.1.0"

__all__ = [
    # Config
    "STATE_FILE",
    "STRATEGY_BOOLEAN",
    "STRATEGY_WEIGHTED",
    "STRATEGY_PERCENTAGE",
    "STRATEGY_NAMES",
    "DEFAULT_STRATEGY",
    "ANONYMOUS_USER",
    "WEIGHTED_TOP_N",
    # Errors
    "SkillSwapError",
    "ValidationError",
    "NotFoundError",
    "PermissionDeniedError",
    "InvalidStateError",
    # Models
    "SkillEntry",
    "normalize_skill_name",
    "UserProfile",
    "MatchCandidate",
    "SkillRequest",
    "Message",
    "Feedback",
    "Notification",
    "AppState",
    # Matching
    "is_complementary",
    "is_mutual_pair",
    "STRATEGIES",
    "compute_matches",
    "matches_for_user",
    "filter_matches",
    "sort_matches",
    "match_summary",
    "set_matcher_verbose",
    # Persistence
    "load_state",
    "save_state",
    "reconcile_state",
]
