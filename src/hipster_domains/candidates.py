from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from .suffix_trie import SuffixTrie


@dataclass
class GenerationCounts:
    """Candidates dropped while generating, for the run summary."""

    duplicates: int = 0
    empty_labels: int = 0


def _splits(word: str, trie: SuffixTrie) -> Iterator[tuple[str, str]]:
    for suffix in trie.match_all_suffixes(word):
        yield word[: len(word) - len(suffix)], suffix


def split_word(word: str, trie: SuffixTrie, *, allow_empty_label: bool = False) -> list[str]:
    """Split ``word`` into ``label.tld`` candidates, shortest TLD first."""
    return [
        f"{label}.{suffix}"
        for label, suffix in _splits(word, trie)
        if label or allow_empty_label
    ]


def generate_candidates(
    words: Iterable[str],
    trie: SuffixTrie,
    *,
    allow_empty_label: bool = False,
    deduplicate: bool = True,
    counts: GenerationCounts | None = None,
) -> Iterator[str]:
    """Yield candidates for every word in order.

    With ``deduplicate`` a candidate reachable from several words is yielded
    only the first time. Dropped candidates are tallied in ``counts``.
    """
    counts = counts if counts is not None else GenerationCounts()
    seen: set[str] = set()
    for word in words:
        for label, suffix in _splits(word, trie):
            if not label and not allow_empty_label:
                counts.empty_labels += 1
                continue
            candidate = f"{label}.{suffix}"
            if deduplicate:
                if candidate in seen:
                    counts.duplicates += 1
                    continue
                seen.add(candidate)
            yield candidate
