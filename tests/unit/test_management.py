"""Tests for admin vote management and the audit log."""

import pytest

from app.errors import NotAuthorized, VoteNotFound
from app.models import AuditAction, UserRole


class TestDeleteVote:
    def test_restores_pre_vote_state(self, svc, slate, ballot, voter):
        svc.ledger.submit_ballot(voter(1), ballot("c1", "s1"))
        before_counts = svc.tally.get_counts()

        svc.ledger.submit_ballot(voter(2), ballot("c1", "s2"))
        svc.management.delete_vote("user-2", "admin-1", "admin@example.com")

        assert not svc.ledger.has_voted(voter(2))
        assert svc.ledger.get_vote_record("user-2") is None
        counts = svc.tally.get_counts()
        assert counts["President"] == before_counts["President"]
        assert counts["Secretary"] == {slate["s1"].id: 1, slate["s2"].id: 0}

    def test_audit_entry(self, svc, slate, ballot, voter):
        svc.ledger.submit_ballot(voter(1), ballot("c1", "s1"))
        svc.ledger.submit_ballot(voter(2), ballot("c2", "s2"))

        svc.management.delete_vote("user-2", "admin-1", "admin@example.com")

        entries = svc.audit.list_entries()
        assert len(entries) == 1
        entry = entries[0]
        assert entry.action == AuditAction.DELETE_VOTE
        assert entry.performed_by == "admin-1"
        assert entry.performed_by_email == "admin@example.com"
        assert entry.target_user_id == "user-2"
        assert entry.target_user_email == "user2@example.com"
        assert entry.vote_count_before == 2
        assert entry.vote_count_after == 1
        assert entry.details == "Deleted vote for user user2@example.com. Positions: President, Secretary"

    def test_voter_can_vote_again(self, svc, slate, ballot, voter):
        svc.ledger.submit_ballot(voter(1), ballot("c1", "s1"))
        svc.management.delete_vote("user-1", "admin-1", "admin@example.com")

        svc.ledger.submit_ballot(voter(1), ballot("c2", "s2"))
        counts = svc.tally.get_counts()
        assert counts["President"] == {slate["c1"].id: 0, slate["c2"].id: 1}

    def test_missing_record(self, svc, slate):
        with pytest.raises(VoteNotFound) as exc:
            svc.management.delete_vote("ghost", "admin-1", "admin@example.com")
        assert exc.value.message == "Vote record not found for user ghost"
        assert svc.audit.list_entries() == []

    def test_audit_failure_does_not_fail_delete(self, svc, slate, ballot, voter, monkeypatch):
        def broken(entry):
            raise RuntimeError("disk full")

        monkeypatch.setattr(svc.audit_repo, "append", broken)
        svc.ledger.submit_ballot(voter(1), ballot("c1", "s1"))

        record = svc.management.delete_vote("user-1", "admin-1", "admin@example.com")

        assert record.user_id == "user-1"
        assert svc.records.count() == 0
        assert svc.audit.list_entries() == []


class TestAdminGate:
    def test_unknown_identity_is_plain_user(self, svc):
        assert svc.users.get_role("someone") == UserRole.USER
        assert not svc.management.is_admin("someone")
        assert svc.management.is_admin("admin-1")

    def test_delete_refused_for_non_admin(self, svc, slate, ballot, voter):
        svc.ledger.submit_ballot(voter(1), ballot("c1", "s1"))

        with pytest.raises(NotAuthorized):
            svc.management.delete_vote("user-1", "user-2", "user2@example.com")

        assert svc.ledger.has_voted(voter(1))
        assert svc.tally.get_counts()["President"] == {slate["c1"].id: 1}
        assert svc.audit.list_entries() == []

    def test_reset_refused_for_non_admin(self, svc, slate, ballot, voter):
        svc.ledger.submit_ballot(voter(1), ballot("c1", "s1"))

        with pytest.raises(NotAuthorized):
            svc.management.reset_all_votes("", "nobody@example.com")

        assert svc.records.count() == 1
        assert svc.audit.list_entries() == []

    def test_revoked_admin(self, svc, slate, ballot, voter):
        svc.ledger.submit_ballot(voter(1), ballot("c1", "s1"))
        svc.users.set_role("admin-1", "admin@example.com", UserRole.USER)

        with pytest.raises(NotAuthorized):
            svc.management.delete_vote("user-1", "admin-1", "admin@example.com")
        assert svc.records.count() == 1

    def test_granted_admin(self, svc, slate, ballot, voter):
        svc.ledger.submit_ballot(voter(1), ballot("c1", "s1"))
        svc.users.set_role("admin-2", "ops@example.com", UserRole.ADMIN)

        svc.management.delete_vote("user-1", "admin-2", "ops@example.com")

        assert svc.records.count() == 0
        assert svc.users.get("admin-2").email == "ops@example.com"


class TestResetAllVotes:
    def test_zeroes_counts_and_keeps_documents(self, svc, slate, ballot, voter):
        for i in range(3):
            svc.ledger.submit_ballot(voter(i), ballot("c1", "s2"))
        counters = svc.counts.count()

        deleted = svc.management.reset_all_votes("admin-1", "admin@example.com")

        assert deleted == 3
        assert svc.management.get_total_vote_count() == 0
        assert svc.counts.count() == counters
        assert all(c.count == 0 for c in svc.counts.list_all())

    def test_single_audit_entry(self, svc, slate, ballot, voter):
        svc.ledger.submit_ballot(voter(1), ballot("c1", "s1"))
        svc.ledger.submit_ballot(voter(2), ballot("c2", "s1"))

        svc.management.reset_all_votes("admin-1", "admin@example.com")

        entries = svc.audit.list_entries()
        assert len(entries) == 1
        assert entries[0].action == AuditAction.RESET_ALL_VOTES
        assert entries[0].vote_count_before == 2
        assert entries[0].vote_count_after == 0
        assert entries[0].target_user_id is None
        assert entries[0].details == "Reset all votes. Total votes deleted: 2"

    def test_rerun_converges(self, svc, slate, ballot, voter):
        svc.ledger.submit_ballot(voter(1), ballot("c1", "s1"))
        svc.management.reset_all_votes("admin-1", "admin@example.com")

        assert svc.management.reset_all_votes("admin-1", "admin@example.com") == 0
        assert all(c.count == 0 for c in svc.counts.list_all())
        assert len(svc.audit.list_entries()) == 2


class TestVoteRecords:
    def test_total_and_listing(self, svc, slate, ballot, voter):
        for i in range(3):
            svc.ledger.submit_ballot(voter(i), ballot("c1", "s1"))

        assert svc.management.get_total_vote_count() == 3
        assert {r.user_id for r in svc.management.list_vote_records()} == {"user-0", "user-1", "user-2"}

    def test_subscription(self, svc, slate, ballot, voter):
        seen = []
        svc.management.subscribe_to_vote_records(seen.append)
        svc.ledger.submit_ballot(voter(1), ballot("c1", "s1"))
        svc.management.delete_vote("user-1", "admin-1", "admin@example.com")

        assert [len(records) for records in seen] == [0, 1, 0]


class TestAuditLog:
    def test_newest_first(self, svc):
        svc.audit.append(AuditAction.DELETE_VOTE, "a", "a@example.com", "first")
        svc.audit.append(AuditAction.RESET_ALL_VOTES, "a", "a@example.com", "second")
        svc.audit.append(AuditAction.DELETE_VOTE, "a", "a@example.com", "third")

        assert [e.details for e in svc.audit.list_entries()] == ["third", "second", "first"]
        assert [e.details for e in svc.audit.list_entries(AuditAction.DELETE_VOTE)] == ["third", "first"]

    def test_append_returns_entry(self, svc):
        entry = svc.audit.append(AuditAction.DELETE_VOTE, "a", "a@example.com", "x", vote_count_before=1)
        assert svc.audit_repo.get(entry.id).vote_count_before == 1

    def test_append_failure_returns_none(self, svc, monkeypatch):
        monkeypatch.setattr(svc.audit_repo, "append", lambda entry: 1 / 0)
        assert svc.audit.append(AuditAction.DELETE_VOTE, "a", "a@example.com", "x") is None

    def test_subscribe(self, svc):
        seen = []
        svc.audit.subscribe(seen.append)
        svc.audit.append(AuditAction.RESET_ALL_VOTES, "a", "a@example.com", "x")
        assert [len(entries) for entries in seen] == [0, 1]
