"""
Profiles and user management for the SkillSwap matching system.
"""

from __future__ import annotations

from typing import List, Optional, TYPE_CHECKING

from ..config import ANONYMOUS_USER
from ..errors import NotFoundError, ValidationError
from ..models.profile import UserProfile

if TYPE_CHECKING:
    from ..models.state import AppState


def upsert_profile(state: "AppState", user_id: str, **fields) -> UserProfile:
    """Create the profile or update the given fields of an existing one."""
    user_id = (user_id or "").strip()
    if not user_id:
        raise ValidationError("User ID cannot be empty.")

    current = state.profiles.get(user_id)
    data = current.to_dict() if current else {"user_id": user_id}
    for k, v in fields.items():
        if k not in UserProfile.__dataclass_fields__ or k == "user_id":
            raise ValidationError(f"Unknown profile field: {k}")
        data[k] = v
    profile = UserProfile.from_dict(data)
    state.profiles[user_id] = profile
    return profile


def get_display_name(state: "AppState", user_id: str, fallback: str = ANONYMOUS_USER) -> str:
    profile = state.profiles.get(user_id)
    if profile is None or not profile.display_name:
        return fallback
    return profile.display_name


def search_profiles(state: "AppState", term: str, exclude_user_id: Optional[str] = None) -> List[UserProfile]:
    """
    Profiles whose display name or user ID contains the term
    (case-insensitive), sorted by name. Users without a display name are
    only reachable by their ID.
    """
    needle = (term or "").strip().casefold()
    if not needle:
        return []
    hits = [
        p
        for uid, p in state.profiles.items()
        if uid != exclude_user_id and (needle in (p.display_name or "").casefold() or needle in uid.casefold())
    ]
    return sorted(hits, key=lambda p: ((p.display_name or "").casefold(), p.user_id))


def set_admin(state: "AppState", user_id: str, flag: bool) -> UserProfile:
    """Grant or revoke the admin role."""
    profile = state.profiles.get(user_id)
    if profile is None:
        raise NotFoundError(f"No such user: {user_id}")
    profile.is_admin = bool(flag)
    return profile


def admin_ids(state: "AppState") -> List[str]:
    return [uid for uid, p in state.profiles.items() if p.is_admin]


def can_enter_admin(state: "AppState", user_id: Optional[str]) -> bool:
    """
    Admin mode is open to admins only. While nobody holds the role it is
    open to everyone, so a fresh install can register its first admin.
    """
    admins = admin_ids(state)
    if not admins:
        return True
    return user_id in admins


def delete_user(state: "AppState", user_id: str) -> None:
    """Delete a user and every row that references them."""
    if user_id not in state.profiles:
        raise NotFoundError(f"No such user: {user_id}")

    state.profiles.pop(user_id, None)
    state.skills = [s for s in state.skills if s.user_id != user_id]
    state.messages = [m for m in state.messages if user_id not in (m.sender_id, m.recipient_id)]
    state.feedback = [f for f in state.feedback if user_id not in (f.reviewer_id, f.reviewed_user_id)]
    state.notifications = [n for n in state.notifications if n.user_id != user_id]

    to_delete = [k for k, r in state.requests.items() if r.involves(user_id)]
    for k in to_delete:
        state.requests.pop(k, None)
