"""
Skill listing for the SkillSwap matching system.
"""

from __future__ import annotations

from typing import List, TYPE_CHECKING

from ..errors import NotFoundError, PermissionDeniedError, ValidationError
from ..models.skill import SkillEntry

if TYPE_CHECKING:
    from ..models.state import AppState


def add_skill(
    state: "AppState",
    user_id: str,
    skill_name: str,
    is_teaching: bool,
    is_learning: bool,
    skill_level: int = 1,
    urgency: int = 1,
) -> SkillEntry:
    """
    Add a skill entry for a user.

    The entry point is where a meaningful entry is enforced: a non-empty
    name and at least one of teaching/learning.
    """
    name = (skill_name or "").strip()
    if not name:
        raise ValidationError("Skill name cannot be empty.")
    if not is_teaching and not is_learning:
        raise ValidationError("Please select whether you want to teach or learn this skill.")

    entry = SkillEntry(
        user_id=user_id,
        skill_name=name,
        is_teaching=is_teaching,
        is_learning=is_learning,
        skill_level=skill_level,
        urgency=urgency,
    )
    state.skills.append(entry)
    return entry


def remove_skill(state: "AppState", skill_id: str, user_id: str) -> SkillEntry:
    for i, s in enumerate(state.skills):
        if s.id != skill_id:
            continue
        if s.user_id != user_id:
            raise PermissionDeniedError("You can only remove your own skills.")
        return state.skills.pop(i)
    raise NotFoundError(f"No skill with id {skill_id}.")


def skills_for_user(state: "AppState", user_id: str) -> List[SkillEntry]:
    return [s for s in state.skills if s.user_id == user_id]
