from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel


class LookupStatus(StrEnum):
    REGISTERED = "registered"
    UNREGISTERED = "unregistered"
    INDETERMINATE = "indeterminate"


class LookupOutcome(BaseModel):
    """Classification of a single candidate's DNS lookup."""

    domain: str
    status: LookupStatus
    error: str | None = None


class RunStats(BaseModel):
    """Statistics for a single dispatcher run."""

    words: int = 0
    tlds: int = 0
    trie_nodes: int = 0
    candidates_generated: int = 0
    duplicates_skipped: int = 0
    empty_labels_skipped: int = 0
    registered: int = 0
    unregistered: int = 0
    indeterminate: int = 0

    @property
    def outcomes(self) -> int:
        return self.registered + self.unregistered + self.indeterminate

    def record(self, outcome: LookupOutcome) -> None:
        match outcome.status:
            case LookupStatus.REGISTERED:
                self.registered += 1
            case LookupStatus.UNREGISTERED:
                self.unregistered += 1
            case LookupStatus.INDETERMINATE:
                self.indeterminate += 1
