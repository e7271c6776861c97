"""
Input collection for URL processing.

Gathers URLs from command-line values, input files and stdin.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator, Optional, Sequence, TextIO

logger = logging.getLogger(__name__)


def iter_lines(lines: Iterable[str]) -> Iterator[str]:
    """Yield stripped lines, skipping blank ones."""
    for raw_line in lines:
        entry = raw_line.strip()
        if entry:
            yield entry


def read_url_file(path: Path) -> list[str]:
    """
    Read URLs from a text file, one per line.

    Raises:
        FileNotFoundError: If the file does not exist
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"URL list file not found: {path}")

    urls = list(iter_lines(path.read_text(encoding="utf-8").splitlines()))
    logger.debug("Read %d URLs from %s", len(urls), path)
    return urls


def collect_inputs(
    urls: Optional[Sequence[str]] = None,
    files: Optional[Sequence[Path]] = None,
    stream: Optional[TextIO] = None,
) -> list[str]:
    """
    Collect input URLs in order: explicit values, then files, then stream.

    The stream is read only when no URLs or files were given and it is not
    an interactive terminal.

    Args:
        urls: URL strings passed directly
        files: Paths of files with one URL per line
        stream: Fallback stream (usually stdin)

    Returns:
        Stripped, non-empty input lines
    """
    collected = list(iter_lines(urls or []))
    for path in files or []:
        collected.extend(read_url_file(path))

    if urls or files or stream is None:
        return collected

    if stream.isatty():
        logger.debug("Stdin is a terminal; not reading URLs from it")
        return collected

    collected.extend(iter_lines(stream))
    return collected
