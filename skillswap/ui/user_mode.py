"""
User mode for the SkillSwap matching system.
"""

from __future__ import annotations

from typing import List, Optional, TYPE_CHECKING

from ..config import (
    AVAILABILITY_STATUSES,
    DEFAULT_STRATEGY,
    REQUEST_PENDING,
    SORT_MODES,
    STRATEGY_BOOLEAN,
    STRATEGY_NAMES,
    URGENCY_LABELS,
)
from ..errors import SkillSwapError
from ..matching import filter_matches, match_summary, matches_for_user, sort_matches
from ..persistence import save_state
from ..services import (
    accept_request,
    accepted_sessions,
    conversation,
    conversation_partners,
    decline_request,
    get_display_name,
    incoming_requests,
    mark_all_read,
    mark_conversation_read,
    notifications_for,
    outgoing_requests,
    pending_incoming_count,
    remove_skill,
    review_stats,
    search_profiles,
    send_message,
    send_request,
    skills_for_user,
    submit_feedback,
    unread_count,
    upsert_profile,
)
from .admin import prompt_skill
from .helpers import input_choice, input_int_in_range, input_optional, input_yes_no

if TYPE_CHECKING:
    from ..models.candidate import MatchCandidate
    from ..models.state import AppState


def _print_match(i: int, m: "MatchCandidate") -> None:
    score = "-" if m.compatibility_score is None else f"{m.compatibility_score:.0f}"
    mutual = " [MUTUAL]" if m.is_mutual else ""
    print(f"{i:2d}) {m.display_name} ({m.user_id}) | {m.skill_name} | score={score}{mutual}")
    if m.skills_offered:
        print(f"      offers : {', '.join(m.skills_offered)}")
    if m.skills_wanted:
        print(f"      wants  : {', '.join(m.skills_wanted)}")
    if m.location:
        print(f"      where  : {m.location}")


def show_matches(state: "AppState", user_id: str) -> List["MatchCandidate"]:
    """Compute, filter, sort and print matches for a user."""
    print("\nScoring strategy:")
    options = [f"{s} (default)" if s == DEFAULT_STRATEGY else s for s in STRATEGY_NAMES]
    strategy = STRATEGY_NAMES[input_choice("Choose: ", options)]

    matches = matches_for_user(state, user_id, strategy)
    summary = match_summary(matches)

    term = input_optional("Search skills or users (empty = all): ")
    shown = filter_matches(matches, term)
    if strategy != STRATEGY_BOOLEAN:
        print("Sort by:")
        shown = sort_matches(shown, SORT_MODES[input_choice("Choose: ", SORT_MODES)])

    print(f"\nTotal matches: {summary['total']} | Mutual swaps: {summary['mutual']} | Filtered: {len(shown)}")
    if not shown:
        if not matches:
            print("No compatible matches found. Try adding more skills to increase your match potential.")
        else:
            print("No matches for the current filters.")
        return shown
    for i, m in enumerate(shown, start=1):
        _print_match(i, m)
    return shown


def _send_swap_request(
    state: "AppState",
    user_id: str,
    target_id: str,
    default_offered: Optional[str] = None,
    default_wanted: Optional[str] = None,
) -> None:
    offered = input_optional(f"Skill you offer [{default_offered or '-'}]: ") or default_offered
    wanted = input_optional(f"Skill you want [{default_wanted or '-'}]: ") or default_wanted
    note = input_optional("Message (optional): ")
    try:
        send_request(state, user_id, target_id, offered, wanted, note)
    except SkillSwapError as e:
        print(f"Error: {e}")
        return
    save_state(state)
    print(f"Your skill exchange request has been sent to {get_display_name(state, target_id)}.")


def request_from_matches(state: "AppState", user_id: str, matches: List["MatchCandidate"]) -> None:
    """Send a request to one of the listed matches, skills prefilled from the match."""
    labels = [f"{m.display_name} ({m.user_id}) | {m.skill_name}" for m in matches]
    m = matches[input_choice("Send request to: ", labels)]
    # Their learning entry is something I teach; their teaching entry something I want
    _send_swap_request(
        state,
        user_id,
        m.user_id,
        default_offered=m.skill_name if m.is_learning else None,
        default_wanted=m.skill_name if m.is_teaching else None,
    )


def offer_swap(state: "AppState", user_id: str) -> None:
    """Send a skill exchange request to a user found by name or ID."""
    term = input("Search user by display name or ID: ").strip()
    hits = search_profiles(state, term, exclude_user_id=user_id)
    if not hits:
        print("No users found.")
        return
    labels = [f"{p.display_name or '-'} ({p.user_id})" for p in hits]
    target = hits[input_choice("Send request to: ", labels)]
    _send_swap_request(state, user_id, target.user_id)


def respond_to_requests(state: "AppState", user_id: str) -> None:
    pending = [r for r in incoming_requests(state, user_id) if r.status == REQUEST_PENDING]
    if not pending:
        print("No pending requests.")
        return
    for r in pending:
        print(f"\nFrom {get_display_name(state, r.from_user_id)}:")
        print(f"  offers : {r.skill_offered or '-'}")
        print(f"  wants  : {r.skill_wanted or '-'}")
        if r.message:
            print(f"  message: {r.message}")
        print("  1) Accept  2) Decline  3) Skip")
        choice = input_int_in_range("Choose (1-3): ", 1, 3)
        try:
            if choice == 1:
                accept_request(state, r.id, user_id)
                print("Request accepted. You can now start chatting with this user.")
            elif choice == 2:
                decline_request(state, r.id, user_id)
                print("The request has been declined.")
        except SkillSwapError as e:
            print(f"Error: {e}")
    save_state(state)


def show_requests(state: "AppState", user_id: str) -> None:
    print("\nOutgoing requests:")
    out = outgoing_requests(state, user_id)
    if not out:
        print("  (none)")
    for r in out:
        print(f"  to {get_display_name(state, r.to_user_id)}: {r.status.upper()}")

    print("\nActive skill exchanges:")
    sessions = accepted_sessions(state, user_id)
    if not sessions:
        print("  (none)")
    for r in sessions:
        other = r.other_party(user_id)
        skills = " / ".join(s for s in (r.skill_offered, r.skill_wanted) if s)
        print(f"  with {get_display_name(state, other)} ({other}): {skills}")


def messages_menu(state: "AppState", user_id: str) -> None:
    partners = conversation_partners(state, user_id)
    print(f"\nUnread messages: {unread_count(state, user_id)}")
    options = [f"{get_display_name(state, p)} ({p})" for p in partners] + ["New conversation"]
    idx = input_choice("Open: ", options)
    if idx == len(partners):
        hits = search_profiles(state, input("Search user by display name or ID: "), exclude_user_id=user_id)
        if not hits:
            print("No users found.")
            return
        labels = [f"{p.display_name or '-'} ({p.user_id})" for p in hits]
        other = hits[input_choice("Message: ", labels)].user_id
    else:
        other = partners[idx]

    for m in conversation(state, user_id, other):
        who = "you" if m.sender_id == user_id else get_display_name(state, m.sender_id)
        print(f"  [{m.created_at[:16]}] {who}: {m.content}")
    mark_conversation_read(state, user_id, other)

    text = input_optional("Reply (empty = skip): ")
    if text:
        try:
            send_message(state, user_id, other, text)
        except SkillSwapError as e:
            print(f"Error: {e}")
    save_state(state)


def rate_partner(state: "AppState", user_id: str) -> None:
    sessions = accepted_sessions(state, user_id)
    if not sessions:
        print("You can rate partners once a skill exchange has been accepted.")
        return
    labels = [
        f"{get_display_name(state, r.other_party(user_id))}: {r.skill_offered or r.skill_wanted}"
        for r in sessions
    ]
    r = sessions[input_choice("Rate: ", labels)]
    rating = input_int_in_range("Rating (1-5 stars): ", 1, 5)
    comment = input_optional("Comment (optional): ")
    try:
        submit_feedback(state, user_id, r.other_party(user_id), r.skill_offered or r.skill_wanted, rating, comment)
    except SkillSwapError as e:
        print(f"Error: {e}")
        return
    save_state(state)
    print("Thank you for your feedback!")


def show_notifications(state: "AppState", user_id: str) -> None:
    rows = notifications_for(state, user_id)
    if not rows:
        print("No notifications.")
        return
    for n in rows:
        flag = "*" if not n.is_read else " "
        print(f" {flag} {n.title}: {n.message}")
    if input_yes_no("Mark all as read? (y/n) [y]: ", default=True):
        mark_all_read(state, user_id)
        save_state(state)


def show_reviews(state: "AppState", user_id: str) -> None:
    stats = review_stats(state, user_id, detailed=True)
    if not stats["total_reviews"]:
        print("No reviews yet.")
        return
    print(f"\nAverage rating: {stats['average_rating']:.1f} ({stats['total_reviews']} reviews)")
    for stars in range(5, 0, -1):
        print(f"  {stars}* {stats['rating_distribution'][stars]}")
    for row in stats["recent_reviews"]:
        print(f"  {row['reviewer_name']} on {row['skill_name']}: {row['rating']}* {row['comment'] or ''}")


def _print_my_skills(state: "AppState", user_id: str) -> None:
    rows = skills_for_user(state, user_id)
    if not rows:
        print("You have no skills listed yet.")
        return
    for i, s in enumerate(rows, start=1):
        roles = "/".join(r for r, on in (("teach", s.is_teaching), ("learn", s.is_learning)) if on)
        print(f" {i:2d}) {s.skill_name} [{roles}] level={s.skill_level} urgency={URGENCY_LABELS[s.urgency]}")


def manage_my_skills(state: "AppState", user_id: str) -> None:
    """List the user's skills, then add or remove one."""
    _print_my_skills(state, user_id)
    action = input_choice("Choose: ", ["Add a skill", "Remove a skill", "Back"])
    if action == 0:
        prompt_skill(state, user_id)
    elif action == 1:
        rows = skills_for_user(state, user_id)
        if not rows:
            print("Nothing to remove.")
            return
        entry = rows[input_choice("Remove: ", [s.skill_name for s in rows])]
        try:
            remove_skill(state, entry.id, user_id)
        except SkillSwapError as e:
            print(f"Error: {e}")
            return
        save_state(state)
        print(f"Skill '{entry.skill_name}' removed.")


def edit_profile(state: "AppState", user_id: str) -> None:
    """Edit display name, bio, location, timezone and availability. Empty input keeps a field."""
    profile = state.profiles[user_id]
    print("\n=== Edit Profile ===")
    fields = {}
    for key, label in (
        ("display_name", "Display name"),
        ("bio", "Bio"),
        ("location", "Location"),
        ("timezone", "Timezone, e.g. Europe/Berlin"),
    ):
        value = input_optional(f"{label} [{getattr(profile, key) or '-'}]: ")
        if value is not None:
            fields[key] = value

    print(f"Availability (currently {profile.availability_status}):")
    fields["availability_status"] = AVAILABILITY_STATUSES[input_choice("Choose: ", AVAILABILITY_STATUSES)]

    try:
        upsert_profile(state, user_id, **fields)
    except SkillSwapError as e:
        print(f"Error: {e}")
        return
    save_state(state)
    print("Profile updated.")


def user_mode(state: "AppState") -> None:
    """Run the user mode interface."""
    print("\n=== User Mode ===")
    user_id = input("Enter your user ID: ").strip()
    if user_id not in state.profiles:
        print("No such user. Please contact the admin to register.")
        return

    while True:
        print(f"\n=== {get_display_name(state, user_id)} ===")
        print(f"(Pending requests: {pending_incoming_count(state, user_id)} | "
              f"Unread messages: {unread_count(state, user_id)})")
        print("1) Find matches")
        print("2) My skills (add / remove)")
        print("3) Offer a skill swap")
        print("4) Answer incoming requests")
        print("5) My requests and exchanges")
        print("6) Messages")
        print("7) Rate a partner")
        print("8) Notifications")
        print("9) My reviews")
        print("10) Edit my profile")
        print("11) Exit user mode")
        choice = input_int_in_range("Choose (1-11): ", 1, 11)

        if choice == 1:
            shown = show_matches(state, user_id)
            if shown and input_yes_no("Send a request to one of them? (y/n) [n]: "):
                request_from_matches(state, user_id, shown)
        elif choice == 2:
            manage_my_skills(state, user_id)
        elif choice == 3:
            offer_swap(state, user_id)
        elif choice == 4:
            respond_to_requests(state, user_id)
        elif choice == 5:
            show_requests(state, user_id)
        elif choice == 6:
            messages_menu(state, user_id)
        elif choice == 7:
            rate_partner(state, user_id)
        elif choice == 8:
            show_notifications(state, user_id)
        elif choice == 9:
            show_reviews(state, user_id)
        elif choice == 10:
            edit_profile(state, user_id)
        else:
            print("Exiting user mode.")
            return
