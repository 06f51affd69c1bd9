"""
Feedback (rating) model for the SkillSwap matching system.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from typing import Dict, Optional, Tuple

from ..config import RATING_MIN, RATING_MAX
from .fields import coerce_int, coerce_optional_str, coerce_str, new_id, now_iso
from .skill import normalize_skill_name


@dataclass
class Feedback:
    reviewer_id: str
    reviewed_user_id: str
    skill_name: str
    rating: int  # 1..5 stars
    comment: Optional[str] = None
    id: str = field(default_factory=new_id)
    created_at: str = field(default_factory=now_iso)

    def __post_init__(self) -> None:
        self.skill_name = coerce_str(self.skill_name).strip()
        self.rating = coerce_int(self.rating, RATING_MIN, RATING_MIN, RATING_MAX)
        self.comment = coerce_optional_str(self.comment)

    @property
    def key(self) -> Tuple[str, str, str]:
        """One review per reviewer, reviewed user and skill."""
        return self.reviewer_id, self.reviewed_user_id, normalize_skill_name(self.skill_name)

    def to_dict(self) -> Dict:
        return asdict(self)

    @staticmethod
    def from_dict(d: Dict) -> "Feedback":
        d2 = dict(d)
        d2.setdefault("skill_name", "")
        d2.setdefault("rating", RATING_MIN)
        known = {k: d2[k] for k in Feedback.__dataclass_fields__ if k in d2}
        return Feedback(**known)
