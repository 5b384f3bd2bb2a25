"""Fan candidate domains out to a fixed pool of DNS workers."""

from __future__ import annotations

import asyncio
from collections.abc import Iterable
from enum import StrEnum

import structlog

from .candidates import GenerationCounts, generate_candidates
from .checker import check_domain
from .models import LookupOutcome, LookupStatus, RunStats
from .output import OutputHandler
from .resolver import Resolver
from .suffix_trie import SuffixTrie

log = structlog.get_logger()

PROGRESS_EVERY = 10_000

# Queue closure marker; one is enqueued per worker.
_CLOSED = object()


class DispatcherState(StrEnum):
    IDLE = "idle"
    BUILDING = "building"
    DISPATCHING = "dispatching"
    DRAINING = "draining"
    DONE = "done"


class Dispatcher:
    """Builds the TLD trie and checks every candidate exactly once.

    One producer walks the word list and hands candidates to ``workers``
    coroutines through a bounded queue; ``queue.put`` suspends while the queue
    is full, so at most ``workers + queue_size`` candidates are in flight.
    Results go to ``handler`` in completion order. A dispatcher runs once.
    """

    def __init__(
        self,
        resolver: Resolver,
        handler: OutputHandler,
        *,
        workers: int = 100,
        queue_size: int = 1,
        allow_empty_label: bool = False,
        deduplicate: bool = True,
    ) -> None:
        if workers < 1:
            raise ValueError(f"workers must be at least 1, got {workers}")
        if queue_size < 1:
            raise ValueError(f"queue_size must be at least 1, got {queue_size}")
        self.resolver = resolver
        self.handler = handler
        self.workers = workers
        self.queue_size = queue_size
        self.allow_empty_label = allow_empty_label
        self.deduplicate = deduplicate
        self.state = DispatcherState.IDLE
        self.stats = RunStats()
        self.trie: SuffixTrie | None = None

    async def run(self, words: Iterable[str], tlds: Iterable[str]) -> RunStats:
        if self.state is not DispatcherState.IDLE:
            raise RuntimeError(f"dispatcher cannot run from state {self.state}")

        self.state = DispatcherState.BUILDING
        self.trie = SuffixTrie.build(tlds)
        self.stats.tlds = len(self.trie)
        self.stats.trie_nodes = self.trie.node_count
        log.info("trie_built", tlds=self.stats.tlds, nodes=self.stats.trie_nodes)

        self.state = DispatcherState.DISPATCHING
        queue: asyncio.Queue[object] = asyncio.Queue(maxsize=self.queue_size)
        tasks = [
            asyncio.create_task(self._worker(queue), name=f"dns-worker-{i}")
            for i in range(self.workers)
        ]
        log.info("dispatch_started", workers=self.workers, queue_size=self.queue_size)

        try:
            await self._produce(words, queue)

            self.state = DispatcherState.DRAINING
            log.info("dispatch_draining", candidates=self.stats.candidates_generated)
            for _ in tasks:
                await queue.put(_CLOSED)
            await asyncio.gather(*tasks)
        finally:
            pending = [t for t in tasks if not t.done()]
            for task in pending:
                task.cancel()
            await asyncio.gather(*pending, return_exceptions=True)
            self.state = DispatcherState.DONE

        return self.stats

    async def _produce(self, words: Iterable[str], queue: asyncio.Queue[object]) -> None:
        counts = GenerationCounts()

        def counted(items: Iterable[str]):
            for word in items:
                self.stats.words += 1
                yield word

        candidates = generate_candidates(
            counted(words),
            self.trie,
            allow_empty_label=self.allow_empty_label,
            deduplicate=self.deduplicate,
            counts=counts,
        )
        for candidate in candidates:
            await queue.put(candidate)
            self.stats.candidates_generated += 1
            if self.stats.candidates_generated % PROGRESS_EVERY == 0:
                log.info(
                    "dispatch_progress",
                    candidates=self.stats.candidates_generated,
                    checked=self.stats.outcomes,
                    unregistered=self.stats.unregistered,
                )

        self.stats.duplicates_skipped = counts.duplicates
        self.stats.empty_labels_skipped = counts.empty_labels

    async def _worker(self, queue: asyncio.Queue[object]) -> None:
        while True:
            item = await queue.get()
            if item is _CLOSED:
                return
            outcome = await self._check(item)
            self.stats.record(outcome)
            try:
                if outcome.status is LookupStatus.UNREGISTERED:
                    self.handler.emit_unregistered(outcome)
                elif outcome.status is LookupStatus.INDETERMINATE:
                    self.handler.emit_error(outcome)
            except Exception:
                log.exception("emit_failed", domain=outcome.domain, status=outcome.status)

    async def _check(self, domain: str) -> LookupOutcome:
        try:
            return await check_domain(domain, self.resolver)
        except Exception as e:
            log.exception("lookup_failed", domain=domain)
            return LookupOutcome(
                domain=domain,
                status=LookupStatus.INDETERMINATE,
                error=str(e) or type(e).__name__,
            )
