"""
State persistence for the SkillSwap matching system.

A local JSON file stands in for the hosted backend's tables.
"""

from __future__ import annotations

import json
import os
from typing import Dict, List, Optional, Tuple

from ..config import STATE_FILE, REQUEST_PENDING, REQUEST_ACCEPTED, REQUEST_DECLINED
from ..models.state import AppState


def load_state(path: Optional[str] = None) -> AppState:
    """Load application state from file."""
    path = path or STATE_FILE
    if not os.path.exists(path):
        return AppState()

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        st = AppState.from_dict(data)
    except Exception as e:
        print(f"Failed to load state from {path}: {e}")
        st = AppState()

    reconcile_state(st)
    return st


def save_state(state: AppState, path: Optional[str] = None) -> None:
    """Save application state to file."""
    path = path or STATE_FILE
    tmp_path = f"{path}.tmp"
    try:
        data = state.to_dict()
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
        os.replace(tmp_path, path)
    except Exception as e:
        print(f"Failed to save state to {path}: {e}")
    finally:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)


def reconcile_state(state: AppState) -> None:
    """
    Make state internally consistent:
    - Remove requests, messages, feedback and notifications that reference
      users without a profile.
    - Reset requests with an unknown status to pending.
    - Keep only the latest feedback per (reviewer, reviewed user, skill).
    Skills of users without a profile are kept; they match as "Anonymous User".
    """
    known = set(state.profiles.keys())

    to_delete: List[str] = []
    for k, r in state.requests.items():
        if r.from_user_id not in known or r.to_user_id not in known:
            to_delete.append(k)
    for k in to_delete:
        state.requests.pop(k, None)

    for r in state.requests.values():
        if r.status not in (REQUEST_PENDING, REQUEST_ACCEPTED, REQUEST_DECLINED):
            r.status = REQUEST_PENDING

    state.messages = [m for m in state.messages if m.sender_id in known and m.recipient_id in known]
    state.notifications = [n for n in state.notifications if n.user_id in known]

    latest: Dict[Tuple[str, str, str], int] = {}
    for i, fb in enumerate(state.feedback):
        latest[fb.key] = i
    keep = set(latest.values())
    state.feedback = [
        fb
        for i, fb in enumerate(state.feedback)
        if i in keep and fb.reviewer_id in known and fb.reviewed_user_id in known
    ]
