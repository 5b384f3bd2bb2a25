from __future__ import annotations

import asyncio
import sys

import structlog

from .config import Settings, settings
from .dispatcher import Dispatcher
from .errors import FatalInputError
from .logging_config import setup_logging
from .models import RunStats
from .output import OutputHandler, StdoutHandler
from .resolver import DnsResolver, Resolver
from .sources import fetch_tlds, read_words

log = structlog.get_logger()


async def run(
    cfg: Settings = settings,
    resolver: Resolver | None = None,
    handler: OutputHandler | None = None,
) -> RunStats:
    log.info("starting_hipster_domains", workers=cfg.workers, tld_url=cfg.tld_url)

    # 1. Load inputs; either failing stops the run before any lookup
    words = read_words(cfg.words_path)
    tlds = await fetch_tlds(cfg.tld_url, timeout=cfg.http_timeout)

    # 2. Build the trie and check every candidate
    dispatcher = Dispatcher(
        resolver or DnsResolver(lifetime=cfg.dns_lifetime),
        handler or StdoutHandler(),
        workers=cfg.workers,
        queue_size=cfg.queue_size,
        allow_empty_label=cfg.allow_empty_label,
        deduplicate=cfg.deduplicate,
    )
    stats = await dispatcher.run(words, tlds)

    log.info("run_complete", **stats.model_dump())
    return stats


def main() -> None:
    setup_logging()
    try:
        asyncio.run(run())
    except FatalInputError as e:
        log.error("fatal_input_error", source=e.source, reason=e.reason)
        print(f"Could not get {e.source}: {e.reason}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
