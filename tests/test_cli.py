"""CLI flows driven with scripted input."""

import importlib

import pytest

from skillswap import AppState, SkillEntry, SkillRequest, UserProfile, matches_for_user
from skillswap import main as cli_main
from skillswap.ui import admin

user_mode = importlib.import_module("skillswap.ui.user_mode")


@pytest.fixture
def answers(monkeypatch):
    """Feed a list of answers to input() and keep the CLI off the state file."""
    queue = []

    def fake_input(prompt=""):
        return queue.pop(0)

    monkeypatch.setattr("builtins.input", fake_input)
    for module in (admin, user_mode, cli_main):
        monkeypatch.setattr(module, "save_state", lambda *a, **k: None)
    return queue


@pytest.fixture
def nameless_state():
    """Alice teaches guitar; user b has no display name and wants to learn it."""
    st = AppState()
    st.profiles["a"] = UserProfile(user_id="a", display_name="Alice")
    st.profiles["b"] = UserProfile(user_id="b")
    st.skills.append(SkillEntry("a", "Guitar", is_teaching=True))
    st.skills.append(SkillEntry("b", "guitar", is_learning=True))
    return st


class TestReachingNamelessMatches:
    """Users without a display name can still be contacted."""

    def test_request_from_match_list(self, answers, nameless_state):
        matches = matches_for_user(nameless_state, "a")
        assert [(m.user_id, m.display_name) for m in matches] == [("b", "Anonymous User")]
        answers.extend(["1", "", "", ""])

        user_mode.request_from_matches(nameless_state, "a", matches)

        (req,) = nameless_state.requests.values()
        assert req.to_user_id == "b"
        assert req.skill_offered == "guitar"
        assert req.skill_wanted is None

    def test_offer_swap_by_user_id(self, answers, nameless_state):
        answers.extend(["b", "1", "Guitar", "", ""])

        user_mode.offer_swap(nameless_state, "a")

        (req,) = nameless_state.requests.values()
        assert req.to_user_id == "b"
        assert req.skill_offered == "Guitar"

    def test_message_by_user_id(self, answers, nameless_state):
        answers.extend(["1", "b", "1", "hello"])

        user_mode.messages_menu(nameless_state, "a")

        assert [(m.recipient_id, m.content) for m in nameless_state.messages] == [("b", "hello")]


class TestUserMenuActions:
    """Profile editing and skill removal from the user menu."""

    def test_edit_profile_keeps_empty_fields(self, answers, state):
        answers.extend(["", "New bio", "", "Asia/Tokyo", "2"])

        user_mode.edit_profile(state, "alice")

        p = state.profiles["alice"]
        assert p.display_name == "Alice"
        assert p.bio == "New bio"
        assert p.location == "Berlin"
        assert p.timezone == "Asia/Tokyo"
        assert p.availability_status == "busy"

    def test_remove_skill(self, answers, state):
        answers.extend(["2", "1"])

        user_mode.manage_my_skills(state, "alice")

        assert [s.skill_name for s in state.skills if s.user_id == "alice"] == ["Spanish"]


class TestAdminActions:
    """Request management and admin role handling."""

    def test_delete_request(self, answers, state):
        state.requests["r1"] = SkillRequest("alice", "bob", skill_offered="Guitar", id="r1")
        answers.extend(["y", "1"])

        admin.manage_requests(state)

        assert state.requests == {}

    def test_toggle_admin_role(self, answers, state):
        answers.append("alice")
        admin.toggle_admin_role(state)
        assert state.profiles["alice"].is_admin

        answers.append("alice")
        admin.toggle_admin_role(state)
        assert not state.profiles["alice"].is_admin

    def test_admin_mode_refuses_non_admin(self, answers, state, capsys):
        state.profiles["alice"].is_admin = True
        answers.append("bob")

        cli_main.admin_mode(state)

        assert "Admin access required." in capsys.readouterr().out
        assert answers == []

    def test_admin_mode_lets_admin_in(self, answers, state):
        state.profiles["alice"].is_admin = True
        answers.extend(["alice", "12"])

        cli_main.admin_mode(state)

        assert answers == []
