"""DNS layer: name-server lookups reduced to a tagged result kind."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import StrEnum

import dns.asyncresolver
import dns.exception
import dns.resolver
import structlog

log = structlog.get_logger()


class ResolveStatus(StrEnum):
    FOUND = "found"
    NOT_FOUND = "not_found"
    TRANSIENT = "transient"
    OTHER = "other"


@dataclass(frozen=True)
class NsLookup:
    """Result of one NS query."""

    domain: str
    status: ResolveStatus
    records: list[str] = field(default_factory=list)
    error: str | None = None


class Resolver(ABC):
    """Anything that can answer "does this name have name servers"."""

    @abstractmethod
    async def lookup_ns(self, domain: str) -> NsLookup:
        """Query NS records for ``domain``. Must not raise for DNS failures."""


def _describe(exc: Exception) -> str:
    return str(exc) or type(exc).__name__


class DnsResolver(Resolver):
    """dnspython-backed resolver using the system resolver configuration."""

    def __init__(self, lifetime: float = 10.0) -> None:
        self.lifetime = lifetime
        self._resolver = dns.asyncresolver.Resolver()
        self._resolver.lifetime = lifetime

    async def lookup_ns(self, domain: str) -> NsLookup:
        try:
            answer = await self._resolver.resolve(domain, "NS", search=False)
        except dns.resolver.NXDOMAIN:
            return NsLookup(domain, ResolveStatus.NOT_FOUND)
        except dns.resolver.NoAnswer:
            # The name exists but is not a zone apex.
            return NsLookup(domain, ResolveStatus.FOUND)
        except (dns.exception.Timeout, dns.resolver.NoNameservers) as e:
            return NsLookup(domain, ResolveStatus.TRANSIENT, error=_describe(e))
        except dns.exception.DNSException as e:
            return NsLookup(domain, ResolveStatus.OTHER, error=_describe(e))
        return NsLookup(domain, ResolveStatus.FOUND, records=[rr.to_text() for rr in answer])
