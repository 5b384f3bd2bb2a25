"""Run inputs: the TLD list over HTTP and the dictionary word file."""

from __future__ import annotations

from pathlib import Path

import httpx
import structlog

from .errors import FatalInputError

log = structlog.get_logger()


def split_lines(text: str) -> list[str]:
    """Lower-case ``text`` and return its lines minus blanks and ``#`` comments."""
    lines = []
    for line in text.lower().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        lines.append(line)
    return lines


async def fetch_tlds(url: str, timeout: float = 30.0, client: httpx.AsyncClient | None = None) -> list[str]:
    """Download the TLD list. Raises FatalInputError on any failure."""
    try:
        if client is None:
            async with httpx.AsyncClient(timeout=timeout, follow_redirects=True) as owned:
                response = await owned.get(url)
        else:
            response = await client.get(url)
        response.raise_for_status()
    except httpx.HTTPError as e:
        raise FatalInputError("TLD list", str(e) or type(e).__name__) from e

    tlds = split_lines(response.text)
    if not tlds:
        raise FatalInputError("TLD list", f"{url} returned no entries")
    log.info("tlds_fetched", url=url, count=len(tlds))
    return tlds


def read_words(path: str | Path) -> list[str]:
    """Read the dictionary file. Raises FatalInputError on any failure."""
    try:
        text = Path(path).read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise FatalInputError("word list", str(e)) from e

    words = split_lines(text)
    if not words:
        raise FatalInputError("word list", f"{path} contains no words")
    log.info("words_loaded", path=str(path), count=len(words))
    return words
