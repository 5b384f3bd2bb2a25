from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import TextIO

from .models import LookupOutcome


class OutputHandler(ABC):
    @abstractmethod
    def emit_unregistered(self, outcome: LookupOutcome) -> None: ...

    @abstractmethod
    def emit_error(self, outcome: LookupOutcome) -> None: ...


class StdoutHandler(OutputHandler):
    """Available domains to stdout, lookup errors to stderr."""

    def __init__(self, out: TextIO | None = None, err: TextIO | None = None) -> None:
        self.out = out
        self.err = err

    def emit_unregistered(self, outcome: LookupOutcome) -> None:
        out = self.out if self.out is not None else sys.stdout
        print(outcome.domain, file=out, flush=True)

    def emit_error(self, outcome: LookupOutcome) -> None:
        err = self.err if self.err is not None else sys.stderr
        print(f"{outcome.domain}: {outcome.error}", file=err, flush=True)
