from __future__ import annotations

from .models import LookupOutcome, LookupStatus
from .resolver import Resolver, ResolveStatus


async def check_domain(domain: str, resolver: Resolver) -> LookupOutcome:
    """Classify ``domain`` as registered, unregistered or indeterminate."""
    result = await resolver.lookup_ns(domain)
    match result.status:
        case ResolveStatus.FOUND:
            return LookupOutcome(domain=domain, status=LookupStatus.REGISTERED)
        case ResolveStatus.NOT_FOUND:
            return LookupOutcome(domain=domain, status=LookupStatus.UNREGISTERED)
        case _:
            return LookupOutcome(
                domain=domain,
                status=LookupStatus.INDETERMINATE,
                error=result.error or str(result.status),
            )
