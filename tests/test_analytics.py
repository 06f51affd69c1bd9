"""Admin statistics tests."""

from datetime import date

from skillswap import AppState, Feedback, Message
from skillswap.services import (
    admin_stats,
    message_activity,
    top_rated_users,
    top_skills,
    urgency_distribution,
)

TODAY = date(2026, 3, 10)


def test_top_skills_case_insensitive(state):
    rows = top_skills(state)

    assert rows[0] == {"skill_name": "Guitar", "count": 3}
    assert {"skill_name": "Spanish", "count": 2} in rows
    assert top_skills(state, n=1) == [rows[0]]


def test_top_rated_users_needs_two_reviews(state):
    state.feedback.extend(
        [
            Feedback("alice", "bob", "Spanish", 5),
            Feedback("carol", "bob", "Guitar", 4),
            Feedback("bob", "alice", "Guitar", 5),
            Feedback("bob", "carol", "Guitar", 2),
            Feedback("alice", "carol", "Guitar", 3),
        ]
    )

    rows = top_rated_users(state)

    assert [(r["user_id"], r["avg_rating"], r["review_count"]) for r in rows] == [
        ("bob", 4.5, 2),
        ("carol", 2.5, 2),
    ]
    assert rows[0]["display_name"] == "Bob"


def test_message_activity_last_seven_days(state):
    state.messages.extend(
        [
            Message("alice", "bob", "a", created_at="2026-03-10T08:00:00+00:00"),
            Message("bob", "alice", "b", created_at="2026-03-10T09:00:00+00:00"),
            Message("bob", "alice", "c", created_at="2026-03-04T09:00:00+00:00"),
            Message("bob", "alice", "too old", created_at="2026-03-03T09:00:00+00:00"),
        ]
    )

    rows = message_activity(state, today=TODAY)

    assert len(rows) == 7
    assert rows[0] == {"date": "2026-03-04", "count": 1}
    assert rows[-1] == {"date": "2026-03-10", "count": 2}
    assert sum(r["count"] for r in rows) == 3


def test_urgency_distribution(state):
    assert urgency_distribution(state) == [
        {"urgency": "Low", "count": 2},
        {"urgency": "Medium", "count": 2},
        {"urgency": "High", "count": 2},
    ]


def test_admin_stats_empty_state():
    stats = admin_stats(AppState(), today=TODAY)

    assert stats["total_users"] == 0
    assert stats["top_skills"] == []
    assert stats["top_rated_users"] == []
    assert [r["count"] for r in stats["urgency_distribution"]] == [0, 0, 0]
    assert len(stats["message_activity"]) == 7


def test_admin_stats_totals(state):
    stats = admin_stats(state, today=TODAY)

    assert stats["total_users"] == 4
    assert stats["total_skills"] == 6
    assert stats["total_messages"] == 0
    assert stats["total_feedback"] == 0
