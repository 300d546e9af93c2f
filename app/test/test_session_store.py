"""
Test Interview Session Store Module

Tests the persistence adapter against an in-memory SQLite database: exact
round trip of the serialized sequences, owner-scoped lookups, id collisions and
the guarded answers/scores update.

Author: @kcaparas1630
"""

from datetime import datetime, timezone
import pytest
from app.errors.exceptions import DuplicateInterviewError
from app.models.interview_models import serialize_sequence, deserialize_sequence
from app.schemas.interview import InterviewSession


def make_session(session_id="s1", owner_id="user-a", questions=None, created_at=None):
    return InterviewSession(
        id=session_id,
        owner_id=owner_id,
        role="Software Engineer",
        difficulty="Beginner",
        questions=questions if questions is not None else ["1. Q1?", "2. Q2?"],
        answers=[],
        scores=[],
        created_at=created_at or datetime(2026, 1, 1, tzinfo=timezone.utc)
    )

class TestSequenceSerialization:
    """Test the JSON text form of the ordered sequences."""

    def test_round_trip_preserves_order_and_text(self):
        """Test that unicode, quotes and newlines survive."""
        values = ["1. Qu'est-ce que \"REST\"?", "Línea\ncon salto", ""]
        assert deserialize_sequence(serialize_sequence(values)) == values

    def test_empty_column_reads_as_empty_list(self):
        """Test that NULL or empty text reads as an empty list."""
        assert deserialize_sequence(None) == []
        assert deserialize_sequence("") == []

class TestInterviewSessionStore:
    """Test InterviewSessionStore."""

    def test_insert_and_get(self, store):
        """Test that a stored session reads back identically."""
        store.insert(make_session(questions=["1. What is X?", "2. What is Y?"]))
        loaded = store.get_by_id("s1")
        assert loaded.questions == ["1. What is X?", "2. What is Y?"]
        assert loaded.answers == []
        assert loaded.scores == []
        assert loaded.owner_id == "user-a"

    def test_get_by_id_and_owner_hides_foreign_sessions(self, store):
        """Test that another owner's session is indistinguishable from a missing one."""
        store.insert(make_session())
        assert store.get_by_id_and_owner("s1", "user-a") is not None
        assert store.get_by_id_and_owner("s1", "user-b") is None
        assert store.get_by_id_and_owner("missing", "user-a") is None

    def test_insert_collision(self, store):
        """Test that a duplicate id raises a conflict."""
        store.insert(make_session())
        with pytest.raises(DuplicateInterviewError):
            store.insert(make_session())

    def test_update_answers_and_scores(self, store):
        """Test that answers and scores are written together."""
        store.insert(make_session())
        assert store.update_answers_and_scores("s1", ["A1"], [6], expected_answers=[])
        loaded = store.get_by_id("s1")
        assert loaded.answers == ["A1"]
        assert loaded.scores == [6]

    def test_update_rejected_when_answers_changed(self, store):
        """Test that a stale writer does not overwrite a newer answer list."""
        store.insert(make_session())
        assert store.update_answers_and_scores("s1", ["A1"], [6], expected_answers=[])
        assert not store.update_answers_and_scores("s1", ["B1"], [2], expected_answers=[])
        loaded = store.get_by_id("s1")
        assert loaded.answers == ["A1"]
        assert loaded.scores == [6]

    def test_update_requires_equal_lengths(self, store):
        """Test that mismatched answers and scores are refused."""
        store.insert(make_session())
        with pytest.raises(ValueError):
            store.update_answers_and_scores("s1", ["A1"], [], expected_answers=[])

    def test_list_for_owner_newest_first(self, store):
        """Test that listing is scoped to the owner and ordered by creation time."""
        store.insert(make_session("old", created_at=datetime(2026, 1, 1, tzinfo=timezone.utc)))
        store.insert(make_session("new", created_at=datetime(2026, 2, 1, tzinfo=timezone.utc)))
        store.insert(make_session("other", owner_id="user-b"))
        assert [item.id for item in store.list_for_owner("user-a")] == ["new", "old"]
        assert len(store.list_all()) == 3

    def test_delete(self, store):
        """Test that deleting removes only the given session."""
        store.insert(make_session("s1"))
        store.insert(make_session("s2"))
        assert store.delete("s1")
        assert not store.delete("s1")
        assert store.get_by_id("s1") is None
        assert store.get_by_id("s2") is not None
