"""Tests for store failures and write-conflict retries."""

import duckdb
import pytest

import settings
from app.errors import StoreUnavailable
from app.models import VoteRecord, utcnow
from app.repositories import retry_on_conflict


def _conflict(*args):
    raise duckdb.TransactionException("TransactionContext Error: Conflict on update!")


class TestRetryOnConflict:
    def test_exhausted_conflicts(self):
        calls = []

        @retry_on_conflict
        def write():
            calls.append(1)
            _conflict()

        with pytest.raises(StoreUnavailable):
            write()
        assert len(calls) == settings.TX_RETRY_ATTEMPTS

    def test_recovers(self):
        calls = []

        @retry_on_conflict
        def write():
            calls.append(1)
            if len(calls) < 3:
                _conflict()
            return "ok"

        assert write() == "ok"
        assert len(calls) == 3

    def test_io_error_not_retried(self):
        calls = []

        @retry_on_conflict
        def write():
            calls.append(1)
            raise duckdb.IOException("IO Error: disk full")

        with pytest.raises(StoreUnavailable):
            write()
        assert len(calls) == 1

    def test_not_null_violation_propagates(self):
        calls = []

        @retry_on_conflict
        def write():
            calls.append(1)
            raise duckdb.ConstraintException("Constraint Error: NOT NULL constraint failed: vote_record.user_email")

        with pytest.raises(duckdb.ConstraintException):
            write()
        assert len(calls) == 1


class TestStoreFailures:
    def test_io_error_on_query(self, svc, monkeypatch):
        class Broken:
            def execute(self, *args):
                raise duckdb.IOException("IO Error: could not read file")

        monkeypatch.setattr("app.repositories.base.get_db", lambda: Broken())
        with pytest.raises(StoreUnavailable):
            svc.records.count()

    def test_conflicting_ballot_writes_nothing(self, svc, slate, ballot, voter, monkeypatch):
        monkeypatch.setattr(svc.counts, "increment", _conflict)

        with pytest.raises(StoreUnavailable):
            svc.ledger.submit_ballot(voter(1), ballot("c1", "s1"))

        assert not svc.ledger.has_voted(voter(1))
        assert svc.records.count() == 0
        assert svc.counts.count() == 0

    def test_conflicting_delete_keeps_record(self, svc, slate, ballot, voter, monkeypatch):
        svc.ledger.submit_ballot(voter(1), ballot("c1", "s1"))
        monkeypatch.setattr(svc.counts, "decrement", _conflict)

        with pytest.raises(StoreUnavailable):
            svc.management.delete_vote("user-1", "admin-1", "admin@example.com")

        assert svc.ledger.has_voted(voter(1))
        assert svc.tally.get_counts()["President"] == {slate["c1"].id: 1}
        assert svc.audit.list_entries() == []


class TestInsertIfAbsent:
    def test_duplicate(self, svc):
        record = VoteRecord(user_id="u1", user_email="u1@example.com", votes=[], timestamp=utcnow())
        assert svc.records.insert_if_absent(record)
        assert not svc.records.insert_if_absent(record)
        assert svc.records.count() == 1

    def test_missing_field_is_not_a_duplicate(self, svc):
        record = VoteRecord(user_id="u1", user_email=None, votes=[], timestamp=utcnow())
        with pytest.raises(duckdb.ConstraintException):
            svc.records.insert_if_absent(record)
        assert svc.records.count() == 0
