"""Skill exchange request lifecycle tests."""

import pytest

from skillswap import InvalidStateError, NotFoundError, PermissionDeniedError, ValidationError
from skillswap.services import (
    accept_request,
    accepted_sessions,
    all_requests,
    decline_request,
    delete_request,
    incoming_requests,
    notifications_for,
    outgoing_requests,
    pending_incoming_count,
    send_request,
)


class TestSendRequest:
    """Tests for send_request."""

    def test_creates_pending_request_and_notifies(self, state):
        req = send_request(state, "alice", "bob", skill_offered="Guitar", skill_wanted="Spanish", message="Hi!")

        assert state.requests[req.id].status == "pending"
        notes = notifications_for(state, "bob")
        assert len(notes) == 1
        assert notes[0].type == "skill_request"
        assert notes[0].title == "New Skill Exchange Request"
        assert notes[0].message == "Alice wants to exchange skills with you"
        assert notes[0].related_id == req.id

    def test_unknown_recipient(self, state):
        with pytest.raises(NotFoundError):
            send_request(state, "alice", "ghost", skill_offered="Guitar")

    def test_to_self(self, state):
        with pytest.raises(ValidationError):
            send_request(state, "alice", "alice", skill_offered="Guitar")

    @pytest.mark.parametrize("offered,wanted", [(None, None), ("", "  ")])
    def test_needs_a_skill(self, state, offered, wanted):
        with pytest.raises(ValidationError):
            send_request(state, "alice", "bob", skill_offered=offered, skill_wanted=wanted)
        assert state.requests == {}
        assert state.notifications == []


class TestAnswerRequest:
    """Tests for accept_request / decline_request."""

    @pytest.fixture
    def req(self, state):
        return send_request(state, "alice", "bob", skill_offered="Guitar")

    def test_accept(self, state, req):
        accept_request(state, req.id, "bob")

        assert req.status == "accepted"
        assert req.updated_at is not None
        note = notifications_for(state, "alice")[0]
        assert note.type == "request_accepted"
        assert note.related_id == req.id

    def test_decline(self, state, req):
        decline_request(state, req.id, "bob")

        assert req.status == "declined"
        assert notifications_for(state, "alice")[0].type == "request_declined"

    @pytest.mark.parametrize("answer", [accept_request, decline_request])
    def test_only_recipient_may_answer(self, state, req, answer):
        with pytest.raises(PermissionDeniedError):
            answer(state, req.id, "alice")
        assert req.status == "pending"

    @pytest.mark.parametrize("answer", [accept_request, decline_request])
    def test_answered_once(self, state, req, answer):
        accept_request(state, req.id, "bob")
        with pytest.raises(InvalidStateError):
            answer(state, req.id, "bob")
        assert req.status == "accepted"

    def test_unknown_request(self, state):
        with pytest.raises(NotFoundError):
            accept_request(state, "missing", "bob")


class TestRequestQueries:
    """Tests for the request listing helpers."""

    def test_incoming_outgoing_and_sessions(self, state):
        first = send_request(state, "alice", "bob", skill_offered="Guitar")
        first.created_at = "2026-01-01T00:00:00+00:00"
        second = send_request(state, "carol", "bob", skill_wanted="Spanish")
        second.created_at = "2026-01-02T00:00:00+00:00"

        assert [r.id for r in incoming_requests(state, "bob")] == [second.id, first.id]
        assert [r.id for r in outgoing_requests(state, "alice")] == [first.id]
        assert pending_incoming_count(state, "bob") == 2

        accept_request(state, first.id, "bob")

        assert pending_incoming_count(state, "bob") == 1
        assert [r.id for r in accepted_sessions(state, "alice")] == [first.id]
        assert [r.id for r in accepted_sessions(state, "bob")] == [first.id]
        assert accepted_sessions(state, "carol") == []
        assert first.other_party("bob") == "alice"


class TestRequestManagement:
    """Admin listing and removal of requests."""

    def test_all_requests_newest_first_with_status_filter(self, state):
        first = send_request(state, "alice", "bob", skill_offered="Guitar")
        first.created_at = "2026-01-01T00:00:00+00:00"
        second = send_request(state, "carol", "dave", skill_wanted="Cooking")
        second.created_at = "2026-01-02T00:00:00+00:00"
        decline_request(state, second.id, "dave")

        assert [r.id for r in all_requests(state)] == [second.id, first.id]
        assert [r.id for r in all_requests(state, status="pending")] == [first.id]

    def test_delete_request(self, state):
        req = send_request(state, "alice", "bob", skill_offered="Guitar")

        assert delete_request(state, req.id) is req
        assert state.requests == {}
        with pytest.raises(NotFoundError):
            delete_request(state, req.id)
