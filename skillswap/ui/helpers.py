"""
Input helpers for the SkillSwap CLI.
"""

from __future__ import annotations

from typing import Optional


def input_int_in_range(prompt: str, min_val: int, max_val: int) -> int:
    """Get an integer input within the specified range."""
    while True:
        try:
            s = input(prompt).strip()
            val = int(s)
            if min_val <= val <= max_val:
                return val
            print(f"Please enter an integer between {min_val} and {max_val}.")
        except ValueError:
            print("Invalid input. Please enter an integer.")


def input_yes_no(prompt: str, default: bool = False) -> bool:
    """Get a yes/no answer; empty input returns the default."""
    ans = input(prompt).strip().lower()
    if not ans:
        return default
    return ans in ("y", "yes")


def input_optional(prompt: str) -> Optional[str]:
    """Get a free-text answer; empty input returns None."""
    ans = input(prompt).strip()
    return ans or None


def input_choice(prompt: str, options: list) -> int:
    """Print numbered options and return the zero-based index of the chosen one."""
    for i, opt in enumerate(options, start=1):
        print(f"  {i}) {opt}")
    idx = input_int_in_range(prompt, 1, len(options))
    return idx - 1
