#!/usr/bin/env python3
"""
Admin console for election vote data.

Usage:
    python manage.py                      # Overview + results
    python manage.py results              # Per-position results
    python manage.py records              # List ballots (newest first)
    python manage.py audit                # Audit trail (newest first)
    python manage.py delete <user_id>     # Delete one voter's ballot
    python manage.py reset --yes          # Delete all ballots, zero all counts
    python manage.py grant <user_id> <email>  # Give an identity the admin role
    python manage.py --validate           # Check counters against ballots

Admin identity for delete/reset: --admin-id ID --admin-email EMAIL,
or the ADMIN_ID / ADMIN_EMAIL environment variables. The acting identity must
hold the admin role (see grant).
"""

import sys
from pathlib import Path

# Add project to path
sys.path.insert(0, str(Path(__file__).parent))

from app.container import container  # noqa: E402
from app.errors import VotingError  # noqa: E402
from app.models import UserRole  # noqa: E402
from settings import ADMIN_EMAIL, ADMIN_ID  # noqa: E402
from settings.logging import setup_logging  # noqa: E402
from web.api import admin, dashboard  # noqa: E402
from web.api.errors import ValidationError  # noqa: E402

logger = setup_logging(level="INFO", to_file=True)


def _pop_option(args: list[str], name: str, default: str) -> str:
    """Remove `name VALUE` from args and return VALUE."""
    if name in args:
        i = args.index(name)
        if i + 1 < len(args):
            value = args[i + 1]
            del args[i : i + 2]
            return value
        del args[i]
    return default


def show_results():
    overview = dashboard.get_overview()
    results = dashboard.get_results()

    print("\n" + "=" * 60)
    print("ELECTION RESULTS")
    print("=" * 60)
    print(f"Positions: {overview.positions_count}  Candidates: {overview.candidates_count}")
    print(f"Voters: {overview.voters_count}  Votes cast: {overview.total_votes_cast}")

    for p in results.items:
        print(f"\n{p.position} ({p.total_votes} votes)")
        for r in p.results:
            mark = "  🏆" if r.is_winner else ""
            print(f"  {r.name:<30} {r.votes:>5}  {r.percentage:>5}%{mark}")
    print("=" * 60 + "\n")


def show_records():
    records = admin.get_vote_records()
    print(f"\n{records.total} ballots\n")
    for r in records.items:
        picks = ", ".join(f"{v.position}: {v.candidate_name or v.candidate_id}" for v in r.votes)
        print(f"  {r.timestamp:%Y-%m-%d %H:%M:%S}  {r.user_email or r.user_id}  [{picks}]")
    print()


def show_audit():
    logs = admin.get_audit_logs()
    print(f"\n{len(logs.items)} audit entries\n")
    for e in logs.items:
        counts = ""
        if e.vote_count_before is not None:
            counts = f" ({e.vote_count_before} -> {e.vote_count_after})"
        print(f"  {e.timestamp:%Y-%m-%d %H:%M:%S}  {e.action:<16} {e.performed_by_email}{counts}  {e.details}")
    print()


def run_validation() -> bool:
    result = admin.check_tallies()
    status = "✅" if result.valid else "❌"
    print(f"\nTally check {status}")
    for key, value in result.stats.items():
        print(f"  {key}: {value:,}")
    for issue in result.issues:
        print(f"  ⚠️  {issue}")
    print()
    return result.valid


def main():
    args = sys.argv[1:]
    admin_id = _pop_option(args, "--admin-id", ADMIN_ID)
    admin_email = _pop_option(args, "--admin-email", ADMIN_EMAIL)

    container.init()

    if "--validate" in args or args == ["validate"]:
        sys.exit(0 if run_validation() else 1)

    command = args[0] if args else "results"

    try:
        if command == "results":
            show_results()
        elif command == "records":
            show_records()
        elif command == "audit":
            show_audit()
        elif command == "delete" and len(args) == 2:
            resp = admin.delete_vote(args[1], admin_id, admin_email)
            logger.info("Deleted ballot of {} ({}); {} ballots remain", resp.user_id, ", ".join(resp.positions), resp.total_votes)
        elif command == "grant" and len(args) == 3:
            user = container.users.set_role(args[1], args[2], UserRole.ADMIN)
            logger.info("{} <{}> is now {}", user.user_id, user.email, user.role)
        elif command == "reset":
            if "--yes" not in args:
                print("Refusing to reset without --yes")
                sys.exit(1)
            resp = admin.reset_all_votes(admin_id, admin_email)
            logger.info("Reset complete: {} ballots deleted", resp.deleted)
        else:
            print(__doc__)
            sys.exit(1)
    except (VotingError, ValidationError) as e:
        logger.error("{}", e.message)
        sys.exit(1)


if __name__ == "__main__":
    main()
