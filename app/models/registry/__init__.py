"""Registry domain models - positions and candidates."""

from app.models.registry.candidate import CANDIDATE_DDL, CANDIDATE_INDEXES, CANDIDATE_SEQ_DDL
from app.models.registry.entities import Candidate, Position
from app.models.registry.position import POSITION_DDL

__all__ = [
    "POSITION_DDL",
    "CANDIDATE_SEQ_DDL",
    "CANDIDATE_DDL",
    "CANDIDATE_INDEXES",
    "Position",
    "Candidate",
]
