"""
Notifications for the SkillSwap matching system.
"""

from __future__ import annotations

from typing import List, Optional, TYPE_CHECKING

from ..errors import NotFoundError, PermissionDeniedError
from ..models.notification import Notification

if TYPE_CHECKING:
    from ..models.state import AppState


def notify(
    state: "AppState",
    user_id: str,
    type: str,
    title: str,
    message: str,
    related_id: Optional[str] = None,
) -> Notification:
    """Append a notification for a user."""
    n = Notification(user_id=user_id, type=type, title=title, message=message, related_id=related_id)
    state.notifications.append(n)
    return n


def notifications_for(state: "AppState", user_id: str) -> List[Notification]:
    """Newest first."""
    rows = [n for n in state.notifications if n.user_id == user_id]
    return sorted(rows, key=lambda n: n.created_at, reverse=True)


def unread_notifications(state: "AppState", user_id: str) -> List[Notification]:
    return [n for n in notifications_for(state, user_id) if not n.is_read]


def mark_read(state: "AppState", notification_id: str, user_id: str) -> None:
    for n in state.notifications:
        if n.id != notification_id:
            continue
        if n.user_id != user_id:
            raise PermissionDeniedError("You can only update your own notifications.")
        n.is_read = True
        return
    raise NotFoundError(f"No notification with id {notification_id}.")


def mark_all_read(state: "AppState", user_id: str) -> int:
    """Mark every unread notification of a user as read; returns how many changed."""
    changed = 0
    for n in state.notifications:
        if n.user_id == user_id and not n.is_read:
            n.is_read = True
            changed += 1
    return changed
