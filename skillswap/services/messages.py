"""
Direct messages for the SkillSwap matching system.
"""

from __future__ import annotations

from typing import List, TYPE_CHECKING

from ..errors import NotFoundError, ValidationError
from ..models.fields import now_iso
from ..models.message import Message

if TYPE_CHECKING:
    from ..models.state import AppState


def send_message(state: "AppState", sender_id: str, recipient_id: str, content: str) -> Message:
    text = (content or "").strip()
    if not text:
        raise ValidationError("Message cannot be empty.")
    if recipient_id not in state.profiles:
        raise NotFoundError(f"No such user: {recipient_id}")
    if sender_id == recipient_id:
        raise ValidationError("You cannot message yourself.")
    msg = Message(sender_id=sender_id, recipient_id=recipient_id, content=text)
    state.messages.append(msg)
    return msg


def conversation(state: "AppState", user_a: str, user_b: str) -> List[Message]:
    """Messages between two users, oldest first."""
    pair = {user_a, user_b}
    rows = [m for m in state.messages if {m.sender_id, m.recipient_id} == pair]
    return sorted(rows, key=lambda m: m.created_at)


def mark_conversation_read(state: "AppState", user_id: str, other_id: str) -> int:
    """Mark messages from other_id to user_id as read; returns how many changed."""
    stamp = now_iso()
    changed = 0
    for m in state.messages:
        if m.sender_id == other_id and m.recipient_id == user_id and m.read_at is None:
            m.read_at = stamp
            changed += 1
    return changed


def unread_count(state: "AppState", user_id: str) -> int:
    return sum(1 for m in state.messages if m.recipient_id == user_id and m.read_at is None)


def conversation_partners(state: "AppState", user_id: str) -> List[str]:
    """Users this user has exchanged messages with, most recent conversation first."""
    rows = [m for m in state.messages if user_id in (m.sender_id, m.recipient_id)]
    rows.sort(key=lambda m: m.created_at, reverse=True)
    partners: List[str] = []
    for m in rows:
        other = m.recipient_id if m.sender_id == user_id else m.sender_id
        if other not in partners:
            partners.append(other)
    return partners
