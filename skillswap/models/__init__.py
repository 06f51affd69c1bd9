"""
Data models for the SkillSwap matching system.
"""

from .skill import SkillEntry, normalize_skill_name
from .profile import UserProfile
from .candidate import MatchCandidate
from .request import SkillRequest
from .message import Message
from .feedback import Feedback
from .notification import Notification
from .state import AppState

__all__ = [
    "SkillEntry",
    "normalize_skill_name",
    "UserProfile",
    "MatchCandidate",
    "SkillRequest",
    "Message",
    "Feedback",
    "Notification",
    "AppState",
]
