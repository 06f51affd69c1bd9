"""
Chat message model for the SkillSwap matching system.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from typing import Dict, Optional

from .fields import new_id, now_iso


@dataclass
class Message:
    sender_id: str
    recipient_id: str
    content: str
    id: str = field(default_factory=new_id)
    created_at: str = field(default_factory=now_iso)
    read_at: Optional[str] = None

    @property
    def is_read(self) -> bool:
        return self.read_at is not None

    def to_dict(self) -> Dict:
        return asdict(self)

    @staticmethod
    def from_dict(d: Dict) -> "Message":
        d2 = dict(d)
        d2.setdefault("content", "")
        known = {k: d2[k] for k in Message.__dataclass_fields__ if k in d2}
        return Message(**known)
