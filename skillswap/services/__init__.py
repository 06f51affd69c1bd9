"""
Services used by the SkillSwap views: skills, profiles, requests,
messages, feedback, notifications and admin statistics.

Every function takes the AppState explicitly and raises a SkillSwapError
subclass when the operation is rejected.
"""

from .skills import add_skill, remove_skill, skills_for_user
from .profiles import (
    upsert_profile,
    get_display_name,
    search_profiles,
    delete_user,
    set_admin,
    admin_ids,
    can_enter_admin,
)
from .requests import (
    send_request,
    accept_request,
    decline_request,
    incoming_requests,
    outgoing_requests,
    pending_incoming_count,
    accepted_sessions,
    all_requests,
    delete_request,
)
from .messages import (
    send_message,
    conversation,
    mark_conversation_read,
    unread_count,
    conversation_partners,
)
from .feedback import submit_feedback, reviews_for, review_stats
from .notifications import notify, notifications_for, unread_notifications, mark_read, mark_all_read
from .analytics import top_skills, top_rated_users, message_activity, urgency_distribution, admin_stats

__all__ = [
    "add_skill",
    "remove_skill",
    "skills_for_user",
    "upsert_profile",
    "get_display_name",
    "search_profiles",
    "delete_user",
    "set_admin",
    "admin_ids",
    "can_enter_admin",
    "send_request",
    "accept_request",
    "decline_request",
    "incoming_requests",
    "outgoing_requests",
    "pending_incoming_count",
    "accepted_sessions",
    "all_requests",
    "delete_request",
    "send_message",
    "conversation",
    "mark_conversation_read",
    "unread_count",
    "conversation_partners",
    "submit_feedback",
    "reviews_for",
    "review_stats",
    "notify",
    "notifications_for",
    "unread_notifications",
    "mark_read",
    "mark_all_read",
    "top_skills",
    "top_rated_users",
    "message_activity",
    "urgency_distribution",
    "admin_stats",
]
