"""
Match computation for the SkillSwap matching system.

Three scoring strategies are available behind compute_matches():
- "boolean-overlap": every complementary skill entry, unscored, in pool order
- "weighted-score": one candidate per complementary (mine, theirs) pair,
  scored by level similarity + combined urgency + timezone, top 10
- "percentage-overlap": one candidate per other user, scored by the share
  of my skills they complement, mutual swaps first
"""

from __future__ import annotations

from typing import Callable, Dict, List, Mapping, Optional, Sequence, Tuple, TYPE_CHECKING

import builtins

from ..config import (
    ANONYMOUS_USER,
    DEFAULT_STRATEGY,
    STRATEGY_BOOLEAN,
    STRATEGY_WEIGHTED,
    STRATEGY_PERCENTAGE,
    VERBOSE_DEFAULT,
    WEIGHTED_TOP_N,
)
from ..models.candidate import MatchCandidate
from .complementarity import is_complementary, is_mutual_pair, match_directions
from .scoring import compute_weighted_components, compute_overlap_components

if TYPE_CHECKING:
    from ..models.skill import SkillEntry
    from ..models.profile import UserProfile
    from ..models.state import AppState


# ------------------------------
# Verbosity control
# ------------------------------
_MATCHER_VERBOSE = VERBOSE_DEFAULT


def set_matcher_verbose(flag: bool) -> None:
    """Enable/disable internal matcher prints (useful in tests/experiments)."""
    global _MATCHER_VERBOSE
    _MATCHER_VERBOSE = bool(flag)


def _vprint(*args, **kwargs) -> None:
    """Verbose print that won't spam output when verbosity is disabled."""
    if _MATCHER_VERBOSE:
        builtins.print(*args, **kwargs)


Profiles = Mapping[str, "UserProfile"]
Strategy = Callable[[Sequence["SkillEntry"], Sequence["SkillEntry"], Profiles], List[MatchCandidate]]


def _resolve_profile(profiles: Profiles, user_id: str) -> Tuple[str, Optional["UserProfile"]]:
    profile = profiles.get(user_id)
    if profile is None or not profile.display_name:
        return ANONYMOUS_USER, profile
    return profile.display_name, profile


def _my_timezone(my_skills: Sequence["SkillEntry"], profiles: Profiles) -> Optional[str]:
    profile = profiles.get(my_skills[0].user_id)
    return profile.timezone if profile else None


def _candidate_from_entry(
    theirs: "SkillEntry",
    profiles: Profiles,
    score: Optional[float],
    breakdown: Dict,
    is_mutual: bool,
) -> MatchCandidate:
    name, profile = _resolve_profile(profiles, theirs.user_id)
    return MatchCandidate(
        user_id=theirs.user_id,
        display_name=name,
        skill_name=theirs.skill_name,
        is_teaching=theirs.is_teaching,
        is_learning=theirs.is_learning,
        skill_level=theirs.skill_level,
        urgency=theirs.urgency,
        compatibility_score=score,
        score_breakdown=breakdown,
        is_mutual=is_mutual,
        skills_offered=[theirs.skill_name] if theirs.is_teaching else [],
        skills_wanted=[theirs.skill_name] if theirs.is_learning else [],
        bio=profile.bio if profile else None,
        location=profile.location if profile else None,
    )


def boolean_overlap_matches(
    my_skills: Sequence["SkillEntry"],
    candidate_pool: Sequence["SkillEntry"],
    profiles: Profiles,
) -> List[MatchCandidate]:
    """Every pool entry complementary to at least one of mine, in pool order."""
    out: List[MatchCandidate] = []
    for theirs in candidate_pool:
        teach = learn = False
        for mine in my_skills:
            can_teach, can_learn = match_directions(mine, theirs)
            teach = teach or can_teach
            learn = learn or can_learn
        if not (teach or learn):
            continue
        mutual = any(is_mutual_pair(mine, theirs) for mine in my_skills)
        breakdown = {"can_teach_them": teach, "they_can_teach_me": learn}
        out.append(_candidate_from_entry(theirs, profiles, None, breakdown, mutual))
    return out


def weighted_score_matches(
    my_skills: Sequence["SkillEntry"],
    candidate_pool: Sequence["SkillEntry"],
    profiles: Profiles,
) -> List[MatchCandidate]:
    """
    Score every complementary (mine, theirs) pair, sort descending and keep
    the top WEIGHTED_TOP_N. Ties keep the order pairs were visited in
    (my entries outer, pool entries inner).
    """
    my_tz = _my_timezone(my_skills, profiles)
    scored: List[MatchCandidate] = []
    for mine in my_skills:
        for theirs in candidate_pool:
            if not is_complementary(mine, theirs):
                continue
            their_profile = profiles.get(theirs.user_id)
            their_tz = their_profile.timezone if their_profile else None
            comps = compute_weighted_components(mine, theirs, my_tz, their_tz)
            breakdown = {
                "skill_diff": comps["skill_diff"],
                "urgency": comps["urgency"],
                "timezone": comps["timezone"],
            }
            scored.append(
                _candidate_from_entry(
                    theirs,
                    profiles,
                    float(comps["total"]),
                    breakdown,
                    is_mutual_pair(mine, theirs),
                )
            )
    scored.sort(key=lambda c: c.compatibility_score, reverse=True)
    return scored[:WEIGHTED_TOP_N]


def percentage_overlap_matches(
    my_skills: Sequence["SkillEntry"],
    candidate_pool: Sequence["SkillEntry"],
    profiles: Profiles,
) -> List[MatchCandidate]:
    """
    One candidate per other user who complements me in at least one
    direction, scored 0..100. Mutual swaps first, then score descending.
    """
    my_teach = [s.skill_name for s in my_skills if s.is_teaching]
    my_learn = [s.skill_name for s in my_skills if s.is_learning]
    if not my_teach and not my_learn:
        return []

    # Group pool by user, first-appearance order
    grouped: Dict[str, List["SkillEntry"]] = {}
    for entry in candidate_pool:
        grouped.setdefault(entry.user_id, []).append(entry)

    out: List[MatchCandidate] = []
    for user_id, entries in grouped.items():
        offered = [e.skill_name for e in entries if e.is_teaching]
        wanted = [e.skill_name for e in entries if e.is_learning]
        comps = compute_overlap_components(my_teach, my_learn, offered, wanted)
        can_teach = bool(comps["can_teach_them"])
        can_learn = bool(comps["they_can_teach_me"])
        if not (can_teach or can_learn):
            continue

        first = next(e for e in entries if any(is_complementary(m, e) for m in my_skills))
        name, profile = _resolve_profile(profiles, user_id)
        out.append(
            MatchCandidate(
                user_id=user_id,
                display_name=name,
                skill_name=first.skill_name,
                is_teaching=first.is_teaching,
                is_learning=first.is_learning,
                skill_level=first.skill_level,
                urgency=first.urgency,
                compatibility_score=float(comps["score"]),
                score_breakdown={
                    "mutual_skills": comps["mutual_skills"],
                    "total_possible": comps["total_possible"],
                    "can_teach_them": can_teach,
                    "they_can_teach_me": can_learn,
                },
                is_mutual=can_teach and can_learn,
                skills_offered=offered,
                skills_wanted=wanted,
                bio=profile.bio if profile else None,
                location=profile.location if profile else None,
            )
        )

    out.sort(key=lambda c: (not c.is_mutual, -c.compatibility_score))
    return out


STRATEGIES: Dict[str, Strategy] = {
    STRATEGY_BOOLEAN: boolean_overlap_matches,
    STRATEGY_WEIGHTED: weighted_score_matches,
    STRATEGY_PERCENTAGE: percentage_overlap_matches,
}


def compute_matches(
    my_skills: Sequence["SkillEntry"],
    candidate_pool: Sequence["SkillEntry"],
    profiles: Profiles,
    strategy: str = DEFAULT_STRATEGY,
) -> List[MatchCandidate]:
    """
    Rank candidate partners for the owner of my_skills.

    candidate_pool must not contain the caller's own entries; this is not
    re-checked here. Pure: inputs are not mutated and nothing is printed.
    Raises ValueError for an unknown strategy name.
    """
    fn = STRATEGIES.get(strategy)
    if fn is None:
        raise ValueError(f"Unknown match strategy: {strategy!r} (expected one of {sorted(STRATEGIES)})")
    if not my_skills or not candidate_pool:
        return []
    return fn(my_skills, candidate_pool, profiles)


def matches_for_user(state: "AppState", user_id: str, strategy: Optional[str] = None) -> List[MatchCandidate]:
    """
    Fetch the user's own entries and everyone else's from the state and
    run compute_matches over them.
    """
    strategy = strategy or DEFAULT_STRATEGY
    my_skills = [s for s in state.skills if s.user_id == user_id]
    pool = [s for s in state.skills if s.user_id != user_id]

    if not my_skills:
        _vprint(f"User {user_id} has no skills listed; no matches.")
        return []

    matches = compute_matches(my_skills, pool, state.profiles, strategy)
    _vprint(f"[{strategy}] {len(matches)} match(es) for {user_id} from {len(pool)} pool entries.")
    return matches
