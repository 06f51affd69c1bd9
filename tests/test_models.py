"""Data model unit tests."""

from skillswap import AppState, Feedback, SkillEntry, SkillRequest, UserProfile


class TestSkillEntry:
    """Tests for SkillEntry coercion."""

    def test_defaults(self):
        """Level and urgency default to 1."""
        entry = SkillEntry("u1", "Chess", is_teaching=True)

        assert entry.skill_level == 1
        assert entry.urgency == 1
        assert entry.is_learning is False

    def test_missing_numbers_default_to_one(self):
        """None or garbage numbers fall back to 1 instead of raising."""
        entry = SkillEntry("u1", "Chess", is_teaching=True, skill_level=None, urgency="high")

        assert entry.skill_level == 1
        assert entry.urgency == 1

    def test_out_of_range_values_are_clamped(self):
        """Levels clamp to 1..5 and urgency to 1..3."""
        entry = SkillEntry("u1", "Chess", is_learning=True, skill_level=9, urgency=0)

        assert entry.skill_level == 5
        assert entry.urgency == 1

    def test_numeric_strings_are_parsed(self):
        """Rows from a loosely typed source may carry numbers as strings."""
        entry = SkillEntry.from_dict({"user_id": "u1", "skill_name": "Chess", "skill_level": "3", "urgency": "2"})

        assert entry.skill_level == 3
        assert entry.urgency == 2

    def test_from_dict_with_missing_fields(self):
        """from_dict fills in every missing field."""
        entry = SkillEntry.from_dict({"user_id": "u1"})

        assert entry.skill_name == ""
        assert entry.normalized_name == ""
        assert entry.is_teaching is False
        assert entry.skill_level == 1

    def test_from_dict_ignores_unknown_columns(self):
        """Extra backend columns do not break coercion."""
        entry = SkillEntry.from_dict({"user_id": "u1", "skill_name": "Go", "updated_at": "x"})

        assert entry.skill_name == "Go"

    def test_normalized_name(self):
        """Names compare case-insensitively, ignoring surrounding spaces."""
        assert SkillEntry("u1", "  GuiTar ").normalized_name == "guitar"


class TestUserProfile:
    """Tests for UserProfile."""

    def test_unknown_availability_falls_back(self):
        """Unknown availability status becomes 'available'."""
        profile = UserProfile(user_id="u1", availability_status="asleep")

        assert profile.availability_status == "available"

    def test_blank_strings_become_none(self):
        """Blank display names count as missing."""
        profile = UserProfile(user_id="u1", display_name="   ", timezone="")

        assert profile.display_name is None
        assert profile.timezone is None


class TestFeedback:
    """Tests for Feedback."""

    def test_key_is_case_insensitive_on_skill(self):
        """One review per reviewer, reviewed user and skill."""
        a = Feedback("r", "u", "Guitar", 5)
        b = Feedback("r", "u", "guitar", 3)

        assert a.key == b.key


class TestAppState:
    """Tests for AppState serialization."""

    def test_round_trip(self, state):
        """to_dict / from_dict keeps every table."""
        state.requests["r1"] = SkillRequest(from_user_id="alice", to_user_id="bob", skill_offered="Guitar", id="r1")
        state.feedback.append(Feedback("alice", "bob", "Spanish", 4))

        restored = AppState.from_dict(state.to_dict())

        assert restored.to_dict() == state.to_dict()

    def test_from_dict_with_old_file(self):
        """Files without the newer tables still load."""
        restored = AppState.from_dict({"profiles": {"u1": {"display_name": "U"}}})

        assert restored.profiles["u1"].user_id == "u1"
        assert restored.messages == []
        assert restored.feedback == []
