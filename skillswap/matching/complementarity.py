"""
Complementarity rules for the SkillSwap matching system.
"""

from __future__ import annotations

from typing import Tuple, TYPE_CHECKING

from ..models.skill import normalize_skill_name

if TYPE_CHECKING:
    from ..models.skill import SkillEntry


def same_skill(mine: "SkillEntry", theirs: "SkillEntry") -> bool:
    """Names equal under case-insensitive comparison. An empty name never matches."""
    a = normalize_skill_name(mine.skill_name)
    return bool(a) and a == normalize_skill_name(theirs.skill_name)


def match_directions(mine: "SkillEntry", theirs: "SkillEntry") -> Tuple[bool, bool]:
    """
    Returns (i_can_teach_them, they_can_teach_me) for one pair of entries.
    Both are False when the skill names differ.
    """
    if not same_skill(mine, theirs):
        return False, False
    return (
        bool(mine.is_teaching and theirs.is_learning),
        bool(mine.is_learning and theirs.is_teaching),
    )


def is_complementary(mine: "SkillEntry", theirs: "SkillEntry") -> bool:
    """True if teach/learn roles line up in at least one direction."""
    teach, learn = match_directions(mine, theirs)
    return teach or learn


def is_mutual_pair(mine: "SkillEntry", theirs: "SkillEntry") -> bool:
    """True if roles line up in both directions for the same skill."""
    teach, learn = match_directions(mine, theirs)
    return teach and learn
