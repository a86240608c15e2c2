"""Tests for dashboard results."""

import pytest

from app.errors import IncompleteBallot
from app.models import CandidateResult, Selection
from app.services.dashboard.service import pick_winner
from app.services.voting.validation import validate_tallies


def _result(cid: str, votes: int) -> CandidateResult:
    return CandidateResult(id=cid, name=cid.upper(), image="", votes=votes, percentage=0.0)


class TestPickWinner:
    def test_highest_count(self):
        assert pick_winner([_result("a", 1), _result("b", 3), _result("c", 2)]).id == "b"

    def test_tie_goes_to_first(self):
        assert pick_winner([_result("a", 2), _result("b", 5), _result("c", 5)]).id == "b"

    def test_no_votes(self):
        assert pick_winner([_result("a", 0), _result("b", 0)]) is None

    def test_empty(self):
        assert pick_winner([]) is None


class TestPositionResults:
    def test_percentages_and_winner(self, svc, slate, ballot, voter):
        for i, (p, s) in enumerate([("c1", "s1"), ("c1", "s1"), ("c2", "s2")]):
            svc.ledger.submit_ballot(voter(i), ballot(p, s))

        president, secretary = svc.dashboard.position_results()

        assert president.position == "President"
        assert president.total_votes == 3
        assert [(r.name, r.votes, r.percentage) for r in president.results] == [
            ("Sarah Johnson", 2, 66.7),
            ("Michael Chen", 1, 33.3),
        ]
        assert president.winner.id == slate["c1"].id
        assert secretary.winner.id == slate["s1"].id

    def test_tied_position(self, svc, slate, ballot, voter):
        svc.ledger.submit_ballot(voter(1), ballot("c2", "s1"))
        svc.ledger.submit_ballot(voter(2), ballot("c1", "s2"))

        president = svc.dashboard.position_results()[0]
        assert president.winner.id == slate["c1"].id

    def test_before_any_votes(self, svc, slate):
        for position in svc.dashboard.position_results():
            assert position.total_votes == 0
            assert position.winner is None
            assert all(r.percentage == 0.0 for r in position.results)

    def test_subscription(self, svc, slate, ballot, voter):
        seen = []
        svc.dashboard.subscribe_to_results(seen.append)
        svc.ledger.submit_ballot(voter(1), ballot("c2", "s2"))

        assert seen[0][0].winner is None
        assert seen[-1][0].winner.id == slate["c2"].id


class TestOverview:
    def test_totals(self, svc, slate, ballot, voter):
        svc.ledger.submit_ballot(voter(1), ballot("c1", "s1"))
        svc.ledger.submit_ballot(voter(2), ballot("c2", "s1"))

        assert svc.dashboard.get_overview() == {
            "positions_count": 2,
            "candidates_count": 4,
            "voters_count": 2,
            "total_votes_cast": 4,
        }


class TestPositionRename:
    def test_votes_stay_under_old_name(self, svc, slate, ballot, voter):
        svc.ledger.submit_ballot(voter(1), ballot("c1", "s1"))
        svc.positions.rename(slate["President"].id, "Chair")

        with pytest.raises(IncompleteBallot):
            svc.ledger.submit_ballot(voter(2), ballot("c1", "s1"))

        svc.ledger.submit_ballot(
            voter(2),
            {
                "Chair": Selection(candidate_id=slate["c2"].id, candidate_name="Michael Chen"),
                "Secretary": Selection(candidate_id=slate["s1"].id, candidate_name="James Wilson"),
            },
        )

        assert svc.tally.get_counts() == {
            "President": {slate["c1"].id: 1},
            "Chair": {slate["c2"].id: 1},
            "Secretary": {slate["s1"].id: 2},
        }

        chair, secretary = svc.dashboard.position_results()
        assert chair.position == "Chair"
        assert chair.total_votes == 1
        assert [r.votes for r in chair.results] == [0, 1]
        assert chair.winner.id == slate["c2"].id
        assert secretary.total_votes == 2

        assert validate_tallies(svc.records, svc.counts)["valid"]
