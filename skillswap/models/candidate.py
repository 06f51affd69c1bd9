"""
Match candidate model for the SkillSwap matching system.

Candidates are built fresh on every scoring pass and never persisted.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from typing import Any, Dict, List, Optional


@dataclass
class MatchCandidate:
    user_id: str
    display_name: str
    skill_name: str
    is_teaching: bool
    is_learning: bool
    skill_level: int
    urgency: int
    compatibility_score: Optional[float] = None  # None for boolean-overlap
    score_breakdown: Dict[str, Any] = field(default_factory=dict)
    is_mutual: bool = False
    skills_offered: List[str] = field(default_factory=list)
    skills_wanted: List[str] = field(default_factory=list)
    bio: Optional[str] = None
    location: Optional[str] = None

    def to_dict(self) -> Dict:
        return asdict(self)
