"""Shared fixtures for the SkillSwap tests."""

import matplotlib

matplotlib.use("Agg")

import pytest

from skillswap import AppState, SkillEntry, UserProfile, set_matcher_verbose
from skillswap.matching import matcher


@pytest.fixture(autouse=True)
def quiet_matcher():
    """Keep matcher prints out of test output."""
    previous = matcher._MATCHER_VERBOSE
    set_matcher_verbose(False)
    yield
    set_matcher_verbose(previous)


# ============================================================================
# Profile / Skill Fixtures
# ============================================================================

@pytest.fixture
def profiles() -> dict:
    """Three users; alice and bob share a timezone."""
    return {
        "alice": UserProfile(user_id="alice", display_name="Alice", timezone="UTC", location="Berlin"),
        "bob": UserProfile(user_id="bob", display_name="Bob", timezone="UTC"),
        "carol": UserProfile(user_id="carol", display_name="Carol", timezone="Asia/Tokyo"),
    }


@pytest.fixture
def alice_skills() -> list:
    """Alice teaches guitar and wants to learn Spanish."""
    return [
        SkillEntry("alice", "Guitar", is_teaching=True, skill_level=4, urgency=2),
        SkillEntry("alice", "Spanish", is_learning=True, skill_level=1, urgency=3),
    ]


@pytest.fixture
def pool() -> list:
    """Bob is a mutual swap for Alice, Carol a one-way match, Dave no match."""
    return [
        SkillEntry("bob", "guitar", is_learning=True, skill_level=2, urgency=3),
        SkillEntry("bob", "SPANISH", is_teaching=True, skill_level=5, urgency=1),
        SkillEntry("carol", "Guitar", is_learning=True, skill_level=4, urgency=1),
        SkillEntry("dave", "Cooking", is_teaching=True, skill_level=3, urgency=2),
    ]


@pytest.fixture
def state(profiles, alice_skills, pool) -> AppState:
    """State holding the profiles and every skill above."""
    st = AppState()
    st.profiles.update(profiles)
    st.profiles["dave"] = UserProfile(user_id="dave", display_name="Dave")
    st.skills.extend(alice_skills)
    st.skills.extend(pool)
    return st
