"""Tally integrity check - compares stored counters with the ballots."""

from app.repositories import VoteCountRepository, VoteRecordRepository


def validate_tallies(record_repo: VoteRecordRepository, count_repo: VoteCountRepository) -> dict:
    """Report counters that drifted from the vote records they summarize."""
    issues = []
    stats = {}

    expected = record_repo.selection_totals()
    stored = {(c.position, c.candidate_id): c.count for c in count_repo.list_all()}

    stats["records"] = record_repo.count()
    stats["counters"] = len(stored)
    stats["votes_counted"] = sum(stored.values())
    stats["votes_in_records"] = sum(expected.values())

    drift = []
    for key in sorted(set(expected) | set(stored)):
        want = expected.get(key, 0)
        have = stored.get(key)
        if have is None:
            issues.append(f"{key[0]}/{key[1]}: no counter for {want} recorded votes")
            drift.append({"position": key[0], "candidate_id": key[1], "expected": want, "stored": 0})
        elif have != want:
            issues.append(f"{key[0]}/{key[1]}: counter {have}, records {want}")
            drift.append({"position": key[0], "candidate_id": key[1], "expected": want, "stored": have})

    stats["drifted"] = len(drift)

    return {
        "valid": len(issues) == 0,
        "stats": stats,
        "issues": issues,
        "drift": drift,
    }
