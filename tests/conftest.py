from __future__ import annotations

import asyncio

import pytest

from hipster_domains.models import LookupOutcome
from hipster_domains.output import OutputHandler
from hipster_domains.resolver import NsLookup, Resolver, ResolveStatus


class StubResolver(Resolver):
    """Answers from a dict of domain -> NsLookup; unknown names are NXDOMAIN."""

    def __init__(self, answers: dict[str, NsLookup] | None = None, delay: float = 0.0) -> None:
        self.answers = answers or {}
        self.delay = delay
        self.calls: list[str] = []
        self.in_flight = 0
        self.max_in_flight = 0

    async def lookup_ns(self, domain: str) -> NsLookup:
        self.calls.append(domain)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self.delay)
        finally:
            self.in_flight -= 1
        return self.answers.get(domain, NsLookup(domain, ResolveStatus.NOT_FOUND))


class CollectingHandler(OutputHandler):
    def __init__(self) -> None:
        self.unregistered: list[str] = []
        self.errors: list[str] = []

    def emit_unregistered(self, outcome: LookupOutcome) -> None:
        self.unregistered.append(outcome.domain)

    def emit_error(self, outcome: LookupOutcome) -> None:
        self.errors.append(f"{outcome.domain}: {outcome.error}")


def registered(domain: str) -> NsLookup:
    return NsLookup(domain, ResolveStatus.FOUND, records=[f"ns1.{domain}."])


def timed_out(domain: str) -> NsLookup:
    return NsLookup(domain, ResolveStatus.TRANSIENT, error="The DNS operation timed out.")


@pytest.fixture
def handler() -> CollectingHandler:
    return CollectingHandler()
