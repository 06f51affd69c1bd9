"""
Admin mode for the SkillSwap matching system.
"""

from __future__ import annotations

import random
from typing import List, TYPE_CHECKING

from ..config import (
    SKILL_LEVEL_MIN,
    SKILL_LEVEL_MAX,
    URGENCY_MIN,
    URGENCY_MAX,
    STRATEGY_WEIGHTED,
    GAUSS_LEVEL_MEAN,
    GAUSS_LEVEL_STD,
    GAUSS_URGENCY_MEAN,
    GAUSS_URGENCY_STD,
    RANDOM_SKILLS,
    RANDOM_TIMEZONES,
)
from ..errors import SkillSwapError
from ..matching import matches_for_user
from ..persistence import save_state
from ..services import (
    add_skill,
    admin_stats,
    all_requests,
    delete_request,
    delete_user,
    get_display_name,
    set_admin,
    upsert_profile,
)
from .helpers import input_choice, input_int_in_range, input_optional, input_yes_no

if TYPE_CHECKING:
    from ..models.state import AppState


def register_new_user(state: "AppState") -> None:
    """Register a new user."""
    print("\n=== Register New User ===")
    user_id = input("Enter user ID: ").strip()
    if not user_id:
        print("User ID cannot be empty.")
        return
    if user_id in state.profiles:
        print("User with this ID already exists.")
        return

    display_name = input_optional("Display name: ")
    bio = input_optional("Bio (optional): ")
    location = input_optional("Location (optional): ")
    timezone = input_optional("Timezone, e.g. Europe/Berlin (optional): ")

    upsert_profile(
        state,
        user_id,
        display_name=display_name,
        bio=bio,
        location=location,
        timezone=timezone,
    )
    save_state(state)
    print(f"User {user_id} registered.\n")


def prompt_skill(state: "AppState", user_id: str) -> None:
    """Ask for one skill entry and add it for the user."""
    name = input("Skill name: ").strip()
    teaching = input_yes_no("Can you teach it? (y/n) [n]: ")
    learning = input_yes_no("Do you want to learn it? (y/n) [n]: ")
    level = input_int_in_range(f"Skill level ({SKILL_LEVEL_MIN}-{SKILL_LEVEL_MAX}): ", SKILL_LEVEL_MIN, SKILL_LEVEL_MAX)
    urgency = input_int_in_range("Urgency (1=Low, 2=Medium, 3=High): ", URGENCY_MIN, URGENCY_MAX)
    try:
        entry = add_skill(state, user_id, name, teaching, learning, skill_level=level, urgency=urgency)
    except SkillSwapError as e:
        print(f"Error: {e}")
        return
    save_state(state)
    print(f"Skill '{entry.skill_name}' added.")


def add_skill_for_user(state: "AppState") -> None:
    print("\n=== Add Skill ===")
    user_id = input("Enter user ID: ").strip()
    if user_id not in state.profiles:
        print("No such user.")
        return
    prompt_skill(state, user_id)


def delete_user_by_id(state: "AppState") -> None:
    """Delete a user by ID."""
    print("\n=== Delete User ===")
    user_id = input("Enter user ID to delete: ").strip()
    try:
        delete_user(state, user_id)
    except SkillSwapError as e:
        print(f"Error: {e}")
        return
    save_state(state)
    print(f"User {user_id} deleted.\n")


def delete_all_users_and_reset(state: "AppState") -> None:
    """Delete all users and every table."""
    print("\n!!! WARNING: This deletes ALL users, skills, requests, messages and feedback !!!")
    confirm = input("Type 'YES' to confirm: ").strip()
    if confirm != "YES":
        print("Aborted.")
        return

    state.profiles.clear()
    state.skills.clear()
    state.requests.clear()
    state.messages.clear()
    state.feedback.clear()
    state.notifications.clear()
    save_state(state)
    print("System reset complete.\n")


def sample_gaussian_clipped(mean: float, std: float, lo: int, hi: int) -> int:
    """Sample from a Gaussian distribution and clip to [lo, hi]."""
    val = random.gauss(mean, std)
    val = max(float(lo), min(float(hi), val))
    return int(round(val))


def bulk_generate_random_users(state: "AppState") -> None:
    """Generate random users whose skill levels and urgencies are Gaussian."""
    print("\n=== Bulk Generate Random Users (Gaussian) ===")
    n_users = input_int_in_range("How many users? ", 0, 100000)
    if n_users == 0:
        print("Nothing to generate.")
        return
    skills_per_user = input_int_in_range(f"Skills per user (1-{len(RANDOM_SKILLS)}): ", 1, len(RANDOM_SKILLS))

    def unique_user_id(idx: int) -> str:
        base = f"rand_{idx}"
        uid = base
        c = 1
        while uid in state.profiles:
            c += 1
            uid = f"{base}_{c}"
        return uid

    for i in range(1, n_users + 1):
        uid = unique_user_id(i)
        upsert_profile(state, uid, display_name=f"Random User {i}", timezone=random.choice(RANDOM_TIMEZONES))
        for name in random.sample(RANDOM_SKILLS, skills_per_user):
            teaching = random.random() < 0.5
            add_skill(
                state,
                uid,
                name,
                is_teaching=teaching,
                is_learning=not teaching or random.random() < 0.2,
                skill_level=sample_gaussian_clipped(GAUSS_LEVEL_MEAN, GAUSS_LEVEL_STD, SKILL_LEVEL_MIN, SKILL_LEVEL_MAX),
                urgency=sample_gaussian_clipped(GAUSS_URGENCY_MEAN, GAUSS_URGENCY_STD, URGENCY_MIN, URGENCY_MAX),
            )

    save_state(state)
    print(f"Generated {n_users} users with {skills_per_user} skill(s) each.\n")


def show_all_users(state: "AppState") -> None:
    """Show all registered users."""
    print("\n=== All Users ===")
    if not state.profiles:
        print("No users registered.")
        return

    for p in state.profiles.values():
        print(f"\nUser ID: {p.user_id}")
        print(f"  Display name : {p.display_name or '-'}")
        print(f"  Location     : {p.location or '-'}")
        print(f"  Timezone     : {p.timezone or '-'}")
        print(f"  Availability : {p.availability_status}")
        print(f"  Role         : {'admin' if p.is_admin else 'user'}")
        rows = [s for s in state.skills if s.user_id == p.user_id]
        if not rows:
            print("  Skills       : (none)")
            continue
        print("  Skills:")
        for s in rows:
            roles = "/".join(r for r, on in (("teach", s.is_teaching), ("learn", s.is_learning)) if on)
            print(f"    - {s.skill_name} [{roles}] level={s.skill_level} urgency={s.urgency}")


def show_admin_stats(state: "AppState") -> None:
    stats = admin_stats(state)
    print("\n=== Admin Statistics ===")
    print(f"Users: {stats['total_users']} | Skills: {stats['total_skills']} | "
          f"Messages: {stats['total_messages']} | Feedback: {stats['total_feedback']}")

    print("\nTop skills:")
    for row in stats["top_skills"] or [{"skill_name": "(none)", "count": 0}]:
        print(f"  {row['skill_name']:20s} {row['count']}")

    print("\nTop rated users (2+ reviews):")
    if not stats["top_rated_users"]:
        print("  (none)")
    for row in stats["top_rated_users"]:
        print(f"  {row['display_name']:20s} {row['avg_rating']:.2f} ({row['review_count']} reviews)")

    print("\nMessages, last 7 days:")
    for row in stats["message_activity"]:
        print(f"  {row['date']}  {row['count']}")

    print("\nUrgency distribution:")
    for row in stats["urgency_distribution"]:
        print(f"  {row['urgency']:7s} {row['count']}")


def show_weighted_scores_for_user(state: "AppState") -> None:
    """Show the weighted-score breakdown of a specific user's matches."""
    print("\n=== Weighted Scores for a Specific User ===")
    user_id = input("Enter user ID: ").strip()
    if user_id not in state.profiles:
        print("No such user.")
        return

    matches = matches_for_user(state, user_id, STRATEGY_WEIGHTED)
    if not matches:
        print("No complementary partners.")
        return

    rows: List[tuple] = [
        (
            m.display_name,
            m.skill_name,
            m.compatibility_score,
            m.score_breakdown["skill_diff"],
            m.score_breakdown["urgency"],
            m.score_breakdown["timezone"],
        )
        for m in matches
    ]
    print(f"\nScores for {user_id}:")
    print("partner              | skill          | total | level | urgency | tz")
    for name, skill, total, sd, us, tz in rows:
        print(f"{name:20s} | {skill:14s} | {total:5.0f} | {sd:5d} | {us:7d} | {tz:2d}")


def manage_requests(state: "AppState") -> None:
    """List every skill exchange request and optionally delete one."""
    print("\n=== Request Management ===")
    rows = all_requests(state)
    print(f"{len(rows)} request(s)")
    if not rows:
        return
    labels = []
    for r in rows:
        skills = " / ".join(s for s in (r.skill_offered, r.skill_wanted) if s)
        labels.append(
            f"{get_display_name(state, r.from_user_id)} -> {get_display_name(state, r.to_user_id)} "
            f"| {skills} | {r.status.upper()} | {r.created_at[:10]}"
        )
    for i, label in enumerate(labels, start=1):
        print(f"  {i}) {label}")
    if not input_yes_no("Delete one of them? (y/n) [n]: "):
        return

    r = rows[input_choice("Delete: ", labels)]
    try:
        delete_request(state, r.id)
    except SkillSwapError as e:
        print(f"Error: {e}")
        return
    save_state(state)
    print("Request deleted.")


def toggle_admin_role(state: "AppState") -> None:
    """Grant or revoke the admin role of a user."""
    print("\n=== Toggle Admin Role ===")
    user_id = input("Enter user ID: ").strip()
    profile = state.profiles.get(user_id)
    if profile is None:
        print("No such user.")
        return
    flag = not profile.is_admin
    set_admin(state, user_id, flag)
    save_state(state)
    print(f"User {user_id} is now {'an admin' if flag else 'a regular user'}.")
