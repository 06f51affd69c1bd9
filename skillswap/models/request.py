"""
Skill exchange request model for the SkillSwap matching system.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from typing import Dict, Optional

from ..config import REQUEST_PENDING
from .fields import coerce_optional_str, new_id, now_iso


@dataclass
class SkillRequest:
    from_user_id: str
    to_user_id: str
    skill_offered: Optional[str] = None
    skill_wanted: Optional[str] = None
    message: Optional[str] = None
    status: str = REQUEST_PENDING  # "pending" | "accepted" | "declined"
    id: str = field(default_factory=new_id)
    created_at: str = field(default_factory=now_iso)
    updated_at: Optional[str] = None

    def __post_init__(self) -> None:
        self.skill_offered = coerce_optional_str(self.skill_offered)
        self.skill_wanted = coerce_optional_str(self.skill_wanted)
        self.message = coerce_optional_str(self.message)

    def involves(self, user_id: str) -> bool:
        return user_id in (self.from_user_id, self.to_user_id)

    def other_party(self, user_id: str) -> str:
        return self.to_user_id if self.from_user_id == user_id else self.from_user_id

    def to_dict(self) -> Dict:
        return asdict(self)

    @staticmethod
    def from_dict(d: Dict) -> "SkillRequest":
        d2 = dict(d)
        d2.setdefault("status", REQUEST_PENDING)
        known = {k: d2[k] for k in SkillRequest.__dataclass_fields__ if k in d2}
        return SkillRequest(**known)
