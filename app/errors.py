"""Domain errors raised by the voting services."""


class VotingError(Exception):
    """Base class for errors surfaced to callers with a readable message."""

    def __init__(self, message: str = "Voting error"):
        self.message = message
        super().__init__(self.message)


class NotAuthenticated(VotingError):
    """No usable identity was supplied."""

    def __init__(self, message: str = "User must be authenticated to vote"):
        super().__init__(message)


class NotAuthorized(VotingError):
    """Identity lacks the admin role required for vote management."""

    def __init__(self, user_id: str = ""):
        self.user_id = user_id
        super().__init__("Admin access required")


class InvalidPin(VotingError):
    """PIN credentials are malformed."""

    def __init__(self, message: str = "PIN must be exactly 6 digits"):
        super().__init__(message)


class AlreadyVoted(VotingError):
    """Identity already has a vote record."""

    def __init__(self, user_id: str = ""):
        self.user_id = user_id
        super().__init__("You have already voted")


class IncompleteBallot(VotingError):
    """Ballot does not carry one selection per current position."""

    def __init__(self, required: int, provided: int, missing: list[str] | None = None):
        self.required = required
        self.provided = provided
        self.missing = missing or []
        if required == 0:
            message = "No positions are open for voting."
        else:
            message = f"Please vote for all {required} positions. You have voted for {provided}."
        if self.missing:
            message += f" Missing: {', '.join(self.missing)}"
        super().__init__(message)


class VoteNotFound(VotingError):
    """Admin tried to delete a vote record that does not exist."""

    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__(f"Vote record not found for user {user_id}")


class StoreUnavailable(VotingError):
    """Storage backend failed (I/O, connection, or unresolved write conflicts)."""

    def __init__(self, message: str = "Vote store unavailable"):
        super().__init__(message)


class AuditLogFailure(VotingError):
    """Audit entry could not be persisted. Never propagated past the audit log."""

    def __init__(self, message: str = "Failed to write audit log"):
        super().__init__(message)

