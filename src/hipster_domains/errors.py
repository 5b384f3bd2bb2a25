from __future__ import annotations


class FatalInputError(Exception):
    """A run input (TLD list or word list) could not be obtained."""

    def __init__(self, source: str, reason: str) -> None:
        super().__init__(f"could not get {source}: {reason}")
        self.source = source
        self.reason = reason
