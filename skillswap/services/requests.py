"""
Skill exchange requests for the SkillSwap matching system.

A request goes pending -> accepted or pending -> declined, once. Only the
recipient answers it; every transition notifies the other side.
"""

from __future__ import annotations

from typing import List, Optional, TYPE_CHECKING

from ..config import REQUEST_PENDING, REQUEST_ACCEPTED, REQUEST_DECLINED
from ..errors import InvalidStateError, NotFoundError, PermissionDeniedError, ValidationError
from ..models.fields import now_iso
from ..models.request import SkillRequest
from .notifications import notify
from .profiles import get_display_name

if TYPE_CHECKING:
    from ..models.state import AppState


def send_request(
    state: "AppState",
    from_user_id: str,
    to_user_id: str,
    skill_offered: Optional[str] = None,
    skill_wanted: Optional[str] = None,
    message: Optional[str] = None,
) -> SkillRequest:
    """Create a pending request and notify the recipient."""
    if to_user_id not in state.profiles:
        raise NotFoundError(f"No such user: {to_user_id}")
    if from_user_id == to_user_id:
        raise ValidationError("You cannot send a request to yourself.")

    req = SkillRequest(
        from_user_id=from_user_id,
        to_user_id=to_user_id,
        skill_offered=skill_offered,
        skill_wanted=skill_wanted,
        message=message,
    )
    if not req.skill_offered and not req.skill_wanted:
        raise ValidationError("Please specify at least one skill.")

    state.requests[req.id] = req
    sender = get_display_name(state, from_user_id)
    notify(
        state,
        to_user_id,
        "skill_request",
        "New Skill Exchange Request",
        f"{sender} wants to exchange skills with you",
        related_id=req.id,
    )
    return req


def _answer(state: "AppState", request_id: str, user_id: str, status: str) -> SkillRequest:
    req = state.requests.get(request_id)
    if req is None:
        raise NotFoundError(f"No request with id {request_id}.")
    if req.to_user_id != user_id:
        raise PermissionDeniedError("Only the recipient can answer this request.")
    if req.status != REQUEST_PENDING:
        raise InvalidStateError(f"Request is already {req.status}.")
    req.status = status
    req.updated_at = now_iso()
    return req


def accept_request(state: "AppState", request_id: str, user_id: str) -> SkillRequest:
    req = _answer(state, request_id, user_id, REQUEST_ACCEPTED)
    notify(
        state,
        req.from_user_id,
        "request_accepted",
        "Skill Request Accepted!",
        "Your skill exchange request has been accepted",
        related_id=req.id,
    )
    return req


def decline_request(state: "AppState", request_id: str, user_id: str) -> SkillRequest:
    req = _answer(state, request_id, user_id, REQUEST_DECLINED)
    notify(
        state,
        req.from_user_id,
        "request_declined",
        "Skill Request Declined",
        "Your skill exchange request was declined",
        related_id=req.id,
    )
    return req


def incoming_requests(state: "AppState", user_id: str) -> List[SkillRequest]:
    rows = [r for r in state.requests.values() if r.to_user_id == user_id]
    return sorted(rows, key=lambda r: r.created_at, reverse=True)


def outgoing_requests(state: "AppState", user_id: str) -> List[SkillRequest]:
    rows = [r for r in state.requests.values() if r.from_user_id == user_id]
    return sorted(rows, key=lambda r: r.created_at, reverse=True)


def pending_incoming_count(state: "AppState", user_id: str) -> int:
    return sum(1 for r in incoming_requests(state, user_id) if r.status == REQUEST_PENDING)


def accepted_sessions(state: "AppState", user_id: str) -> List[SkillRequest]:
    """Accepted requests involving the user, most recently updated first."""
    rows = [r for r in state.requests.values() if r.status == REQUEST_ACCEPTED and r.involves(user_id)]
    return sorted(rows, key=lambda r: r.updated_at or r.created_at, reverse=True)


def all_requests(state: "AppState", status: Optional[str] = None) -> List[SkillRequest]:
    """Every request in the system, newest first; optionally only one status."""
    rows = [r for r in state.requests.values() if status is None or r.status == status]
    return sorted(rows, key=lambda r: r.created_at, reverse=True)


def delete_request(state: "AppState", request_id: str) -> SkillRequest:
    """Admin removal of a request, whatever its status."""
    req = state.requests.pop(request_id, None)
    if req is None:
        raise NotFoundError(f"No request with id {request_id}.")
    return req
