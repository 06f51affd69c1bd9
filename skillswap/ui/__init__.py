"""
User interface for the SkillSwap matching system.
"""

from .helpers import input_int_in_range, input_yes_no, input_optional, input_choice
from .admin import (
    register_new_user,
    prompt_skill,
    add_skill_for_user,
    delete_user_by_id,
    delete_all_users_and_reset,
    sample_gaussian_clipped,
    bulk_generate_random_users,
    show_all_users,
    show_admin_stats,
    show_weighted_scores_for_user,
    manage_requests,
    toggle_admin_role,
)
from .user_mode import (
    show_matches,
    offer_swap,
    request_from_matches,
    respond_to_requests,
    show_requests,
    messages_menu,
    rate_partner,
    show_notifications,
    show_reviews,
    manage_my_skills,
    edit_profile,
    user_mode,
)
from .visualization import build_match_graph, show_match_graph

__all__ = [
    "input_int_in_range",
    "input_yes_no",
    "input_optional",
    "input_choice",
    "register_new_user",
    "prompt_skill",
    "add_skill_for_user",
    "delete_user_by_id",
    "delete_all_users_and_reset",
    "sample_gaussian_clipped",
    "bulk_generate_random_users",
    "show_all_users",
    "show_admin_stats",
    "show_weighted_scores_for_user",
    "manage_requests",
    "toggle_admin_role",
    "show_matches",
    "offer_swap",
    "request_from_matches",
    "respond_to_requests",
    "show_requests",
    "messages_menu",
    "rate_partner",
    "show_notifications",
    "show_reviews",
    "manage_my_skills",
    "edit_profile",
    "user_mode",
    "build_match_graph",
    "show_match_graph",
]
