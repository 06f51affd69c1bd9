"""
Notification model for the SkillSwap matching system.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from typing import Dict, Optional

from .fields import new_id, now_iso


@dataclass
class Notification:
    user_id: str
    type: str  # "skill_request" | "request_accepted" | "request_declined" | "message"
    title: str
    message: str
    related_id: Optional[str] = None
    is_read: bool = False
    id: str = field(default_factory=new_id)
    created_at: str = field(default_factory=now_iso)

    def to_dict(self) -> Dict:
        return asdict(self)

    @staticmethod
    def from_dict(d: Dict) -> "Notification":
        d2 = dict(d)
        d2.setdefault("message", "")
        d2.setdefault("is_read", False)
        known = {k: d2[k] for k in Notification.__dataclass_fields__ if k in d2}
        return Notification(**known)
