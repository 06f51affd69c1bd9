"""
Search and sort over computed matches (the match page controls).
"""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from ..config import SORT_COMPATIBILITY, SORT_MUTUAL, SORT_RECENT, SORT_MODES
from ..models.candidate import MatchCandidate


def filter_matches(candidates: Sequence[MatchCandidate], search_term: Optional[str]) -> List[MatchCandidate]:
    """Keep candidates whose name or any listed skill contains the term (case-insensitive)."""
    term = (search_term or "").strip().casefold()
    if not term:
        return list(candidates)

    def hit(c: MatchCandidate) -> bool:
        fields = [c.display_name, c.skill_name, *c.skills_offered, *c.skills_wanted]
        return any(term in (f or "").casefold() for f in fields)

    return [c for c in candidates if hit(c)]


def _score_desc(c: MatchCandidate) -> float:
    # Unscored candidates sort after every scored one
    return -c.compatibility_score if c.compatibility_score is not None else float("inf")


def sort_matches(candidates: Sequence[MatchCandidate], sort_by: str = SORT_COMPATIBILITY) -> List[MatchCandidate]:
    """
    Sort modes:
    - "compatibility": score descending
    - "mutual": mutual swaps first, then score descending
    - "recent": keep the given order
    """
    if sort_by not in SORT_MODES:
        raise ValueError(f"Unknown sort mode: {sort_by!r} (expected one of {SORT_MODES})")
    if sort_by == SORT_RECENT:
        return list(candidates)
    if sort_by == SORT_MUTUAL:
        return sorted(candidates, key=lambda c: (not c.is_mutual, _score_desc(c)))
    return sorted(candidates, key=_score_desc)


def match_summary(candidates: Sequence[MatchCandidate]) -> Dict[str, int]:
    return {
        "total": len(candidates),
        "mutual": sum(1 for c in candidates if c.is_mutual),
    }
