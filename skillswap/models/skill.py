"""
Skill entry model for the SkillSwap matching system.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from typing import Dict

from ..config import (
    SKILL_LEVEL_MIN,
    SKILL_LEVEL_MAX,
    URGENCY_MIN,
    URGENCY_MAX,
    DEFAULT_SKILL_LEVEL,
    DEFAULT_URGENCY,
)
from .fields import coerce_bool, coerce_int, coerce_str, new_id, now_iso


def normalize_skill_name(name: str) -> str:
    """Case-insensitive key for a skill name."""
    return coerce_str(name).strip().casefold()


@dataclass
class SkillEntry:
    user_id: str
    skill_name: str
    is_teaching: bool = False
    is_learning: bool = False
    skill_level: int = DEFAULT_SKILL_LEVEL  # 1..5
    urgency: int = DEFAULT_URGENCY  # 1..3 (Low, Medium, High)
    id: str = field(default_factory=new_id)
    created_at: str = field(default_factory=now_iso)

    def __post_init__(self) -> None:
        self.skill_name = coerce_str(self.skill_name)
        self.is_teaching = coerce_bool(self.is_teaching)
        self.is_learning = coerce_bool(self.is_learning)
        self.skill_level = coerce_int(self.skill_level, DEFAULT_SKILL_LEVEL, SKILL_LEVEL_MIN, SKILL_LEVEL_MAX)
        self.urgency = coerce_int(self.urgency, DEFAULT_URGENCY, URGENCY_MIN, URGENCY_MAX)

    @property
    def normalized_name(self) -> str:
        return normalize_skill_name(self.skill_name)

    def to_dict(self) -> Dict:
        return asdict(self)

    @staticmethod
    def from_dict(d: Dict) -> "SkillEntry":
        # Back-compat: rows written before level/urgency existed
        d2 = dict(d)
        d2.setdefault("skill_name", "")
        d2.setdefault("is_teaching", False)
        d2.setdefault("is_learning", False)
        d2.setdefault("skill_level", DEFAULT_SKILL_LEVEL)
        d2.setdefault("urgency", DEFAULT_URGENCY)
        known = {k: d2[k] for k in SkillEntry.__dataclass_fields__ if k in d2}
        return SkillEntry(**known)
