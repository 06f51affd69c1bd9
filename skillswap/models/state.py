"""
Application state model for the SkillSwap matching system.

AppState holds the rows the hosted backend owns (profiles, skills,
requests, messages, feedback, notifications). It is passed explicitly to
every operation; nothing reaches it through a module global.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List

from .profile import UserProfile
from .skill import SkillEntry
from .request import SkillRequest
from .message import Message
from .feedback import Feedback
from .notification import Notification


@dataclass
class AppState:
    profiles: Dict[str, UserProfile] = field(default_factory=dict)  # key=user_id
    skills: List[SkillEntry] = field(default_factory=list)  # insertion order
    requests: Dict[str, SkillRequest] = field(default_factory=dict)  # key=request id
    messages: List[Message] = field(default_factory=list)
    feedback: List[Feedback] = field(default_factory=list)
    notifications: List[Notification] = field(default_factory=list)

    def to_dict(self) -> Dict:
        return {
            "profiles": {uid: p.to_dict() for uid, p in self.profiles.items()},
            "skills": [s.to_dict() for s in self.skills],
            "requests": {k: r.to_dict() for k, r in self.requests.items()},
            "messages": [m.to_dict() for m in self.messages],
            "feedback": [f.to_dict() for f in self.feedback],
            "notifications": [n.to_dict() for n in self.notifications],
        }

    @staticmethod
    def from_dict(d: Dict) -> "AppState":
        st = AppState()
        for uid, pd in d.get("profiles", {}).items():
            pd2 = dict(pd)
            pd2.setdefault("user_id", uid)
            st.profiles[uid] = UserProfile.from_dict(pd2)

        st.skills = [SkillEntry.from_dict(sd) for sd in d.get("skills", [])]

        for k, rd in d.get("requests", {}).items():
            rd2 = dict(rd)
            rd2.setdefault("id", k)
            st.requests[k] = SkillRequest.from_dict(rd2)

        # Back-compat: these tables may not exist in older files
        st.messages = [Message.from_dict(md) for md in d.get("messages", [])]
        st.feedback = [Feedback.from_dict(fd) for fd in d.get("feedback", [])]
        st.notifications = [Notification.from_dict(nd) for nd in d.get("notifications", [])]
        return st
