"""Reverse trie for finding every known TLD that ends a string."""

from __future__ import annotations

from collections.abc import Iterable

_ROOT = 0


class SuffixTrie:
    """Suffix index stored as a flat node arena.

    Node ``i`` is ``_children[i]`` (character -> child index) plus
    ``_terminal[i]``. Index 0 is the root and stands for the empty suffix.
    Suffixes are inserted last character first, so walking a string backwards
    from its end follows the trie downwards.
    """

    __slots__ = ("_children", "_terminal", "_size", "_frozen")

    def __init__(self) -> None:
        self._children: list[dict[str, int]] = [{}]
        self._terminal: list[bool] = [False]
        self._size = 0
        self._frozen = False

    @classmethod
    def build(cls, suffixes: Iterable[str]) -> SuffixTrie:
        trie = cls()
        for suffix in suffixes:
            trie.add_suffix(suffix)
        trie.freeze()
        return trie

    def add_suffix(self, suffix: str) -> None:
        if self._frozen:
            raise RuntimeError("cannot add to a frozen SuffixTrie")
        node = _ROOT
        for ch in reversed(suffix):
            child = self._children[node].get(ch)
            if child is None:
                child = len(self._children)
                self._children.append({})
                self._terminal.append(False)
                self._children[node][ch] = child
            node = child
        if not self._terminal[node]:
            self._terminal[node] = True
            self._size += 1

    def match_all_suffixes(self, candidate: str) -> list[str]:
        """Return every stored suffix of ``candidate``, shortest first.

        Stops at the first character with no matching edge, so the cost is
        bounded by the longest match rather than the number of stored suffixes.
        """
        matches: list[str] = []
        node = _ROOT
        pos = len(candidate)
        while True:
            if self._terminal[node]:
                matches.append(candidate[pos:])
            if pos == 0:
                return matches
            pos -= 1
            child = self._children[node].get(candidate[pos])
            if child is None:
                return matches
            node = child

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def node_count(self) -> int:
        return len(self._children)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, suffix: object) -> bool:
        if not isinstance(suffix, str):
            return False
        node = _ROOT
        for ch in reversed(suffix):
            child = self._children[node].get(ch)
            if child is None:
                return False
            node = child
        return self._terminal[node]
