"""JSON state store tests."""

import json

from skillswap import (
    AppState,
    Feedback,
    Message,
    Notification,
    SkillEntry,
    SkillRequest,
    UserProfile,
    load_state,
    reconcile_state,
    save_state,
)


class TestLoadSave:
    """Tests for load_state / save_state."""

    def test_missing_file_gives_empty_state(self, tmp_path):
        st = load_state(str(tmp_path / "nope.json"))
        assert st.profiles == {} and st.skills == []

    def test_round_trip(self, tmp_path, state):
        """Everything saved comes back equal."""
        path = str(tmp_path / "state.json")
        state.requests["r1"] = SkillRequest("alice", "bob", skill_offered="Guitar", id="r1")
        state.messages.append(Message("alice", "bob", "hi"))

        save_state(state, path)
        loaded = load_state(path)

        assert loaded.to_dict() == state.to_dict()

    def test_save_leaves_no_tmp_file(self, tmp_path, state):
        path = tmp_path / "state.json"
        save_state(state, str(path))
        assert path.exists()
        assert not (tmp_path / "state.json.tmp").exists()

    def test_corrupt_file_falls_back_to_empty(self, tmp_path, capsys):
        path = tmp_path / "state.json"
        path.write_text("{not json", encoding="utf-8")

        st = load_state(str(path))

        assert st.to_dict() == AppState().to_dict()
        assert "Failed to load state" in capsys.readouterr().out

    def test_old_file_without_newer_tables(self, tmp_path):
        path = tmp_path / "state.json"
        path.write_text(
            json.dumps(
                {
                    "profiles": {"u1": {"display_name": "One"}},
                    "skills": [{"user_id": "u1", "skill_name": "Chess", "is_teaching": True}],
                }
            ),
            encoding="utf-8",
        )

        st = load_state(str(path))

        assert st.profiles["u1"].user_id == "u1"
        assert st.skills[0].skill_level == 1
        assert st.messages == [] and st.feedback == [] and st.notifications == []


class TestReconcileState:
    """Tests for reconcile_state."""

    def test_drops_rows_of_unknown_users(self, state):
        state.requests["r1"] = SkillRequest("alice", "ghost", id="r1")
        state.requests["r2"] = SkillRequest("alice", "bob", id="r2")
        state.messages.append(Message("ghost", "alice", "boo"))
        state.notifications.append(Notification("ghost", "skill_request", "t", "m"))
        state.feedback.append(Feedback("ghost", "alice", "Guitar", 5))

        reconcile_state(state)

        assert list(state.requests) == ["r2"]
        assert state.messages == []
        assert state.notifications == []
        assert state.feedback == []

    def test_keeps_skills_of_users_without_profile(self, state):
        state.skills.append(SkillEntry("ghost", "Chess", is_teaching=True))
        reconcile_state(state)
        assert any(s.user_id == "ghost" for s in state.skills)

    def test_unknown_status_resets_to_pending(self, state):
        state.requests["r1"] = SkillRequest("alice", "bob", status="maybe", id="r1")
        reconcile_state(state)
        assert state.requests["r1"].status == "pending"

    def test_latest_feedback_per_key_wins(self, state):
        state.feedback.append(Feedback("alice", "bob", "Guitar", 2))
        state.feedback.append(Feedback("alice", "bob", "guitar ", 5))
        state.feedback.append(Feedback("alice", "bob", "Spanish", 4))

        reconcile_state(state)

        assert [(f.skill_name, f.rating) for f in state.feedback] == [("guitar", 5), ("Spanish", 4)]


class TestSaveFailures:
    """save_state never leaves a partial temp file behind."""

    def test_unserializable_value_keeps_previous_file(self, tmp_path, state, capsys):
        path = tmp_path / "state.json"
        save_state(state, str(path))
        before = path.read_text(encoding="utf-8")

        state.skills[0].skill_name = {"not", "json"}
        save_state(state, str(path))

        assert "Failed to save state" in capsys.readouterr().out
        assert not (tmp_path / "state.json.tmp").exists()
        assert path.read_text(encoding="utf-8") == before

    def test_unwritable_directory(self, tmp_path, state, capsys):
        save_state(state, str(tmp_path / "missing" / "state.json"))

        assert "Failed to save state" in capsys.readouterr().out
        assert not (tmp_path / "missing").exists()
