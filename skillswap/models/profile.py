"""
User profile model for the SkillSwap matching system.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Dict, Optional

from ..config import AVAILABILITY_STATUSES
from .fields import coerce_bool, coerce_optional_str, coerce_str


@dataclass
class UserProfile:
    user_id: str
    display_name: Optional[str] = None
    bio: Optional[str] = None
    location: Optional[str] = None
    timezone: Optional[str] = None
    availability_status: str = "available"  # "available" | "busy" | "unavailable"
    is_admin: bool = False

    def __post_init__(self) -> None:
        self.display_name = coerce_optional_str(self.display_name)
        self.bio = coerce_optional_str(self.bio)
        self.location = coerce_optional_str(self.location)
        self.timezone = coerce_optional_str(self.timezone)
        status = coerce_str(self.availability_status).strip().lower()
        self.availability_status = status if status in AVAILABILITY_STATUSES else "available"
        self.is_admin = coerce_bool(self.is_admin)

    def to_dict(self) -> Dict:
        return asdict(self)

    @staticmethod
    def from_dict(d: Dict) -> "UserProfile":
        known = {k: d[k] for k in UserProfile.__dataclass_fields__ if k in d}
        return UserProfile(**known)
