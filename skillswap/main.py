"""
Main entry point for the SkillSwap matching system.
"""

from __future__ import annotations

import sys

from .persistence import load_state, save_state, reconcile_state
from .ui import (
    input_int_in_range,
    register_new_user,
    add_skill_for_user,
    delete_user_by_id,
    delete_all_users_and_reset,
    show_all_users,
    bulk_generate_random_users,
    show_admin_stats,
    show_weighted_scores_for_user,
    show_match_graph,
    manage_requests,
    toggle_admin_role,
    user_mode,
)
from .models.state import AppState
from .services import admin_ids, can_enter_admin


def admin_mode(state: AppState) -> None:
    """Admin mode menu."""
    if admin_ids(state):
        admin_id = input("Enter your admin user ID: ").strip()
        if not can_enter_admin(state, admin_id):
            print("Admin access required.")
            return
    else:
        print("(No admin registered yet; use option 11 to grant the role.)")

    while True:
        reconcile_state(state)

        print("\n=== Admin Mode ===")
        print(f"(Users: {len(state.profiles)} | Skills: {len(state.skills)} | Requests: {len(state.requests)})")
        print("1) Register new user")
        print("2) Add a skill for a user")
        print("3) Delete a user by ID")
        print("4) Delete ALL users and reset")
        print("5) Show all users")
        print("6) Bulk-generate random users (Gaussian)")
        print("7) Show admin statistics")
        print("8) Show weighted scores for a specific user")
        print("9) Show match graph")
        print("10) Manage skill requests")
        print("11) Toggle admin role")
        print("12) Return to main menu")

        choice = input_int_in_range("Choose (1-12): ", 1, 12)

        if choice == 1:
            register_new_user(state)
        elif choice == 2:
            add_skill_for_user(state)
        elif choice == 3:
            delete_user_by_id(state)
        elif choice == 4:
            delete_all_users_and_reset(state)
        elif choice == 5:
            show_all_users(state)
        elif choice == 6:
            bulk_generate_random_users(state)
        elif choice == 7:
            show_admin_stats(state)
        elif choice == 8:
            show_weighted_scores_for_user(state)
        elif choice == 9:
            show_match_graph(state)
        elif choice == 10:
            manage_requests(state)
        elif choice == 11:
            toggle_admin_role(state)
        else:
            print("Returning to main menu.")
            save_state(state)
            return


def main() -> None:
    """Main entry point."""
    state = load_state()

    try:
        while True:
            reconcile_state(state)

            print("\n=== SkillSwap ===")
            print("1) Admin mode")
            print("2) User mode")
            print("3) Exit")
            choice = input_int_in_range("Choose (1-3): ", 1, 3)

            if choice == 1:
                admin_mode(state)
            elif choice == 2:
                user_mode(state)
            else:
                print("Goodbye!")
                save_state(state)
                break
    except KeyboardInterrupt:
        print("\nInterrupted. Saving state and exiting...")
        save_state(state)
        sys.exit(0)


if __name__ == "__main__":
    main()
