"""Echidna manifest processing.

A manifest lists the files of a previously published document, one per line,
the first whitespace-delimited token being a URL or path.  Those locations are
excluded from link checking.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Tuple
from urllib.parse import urljoin, urlparse

logger = logging.getLogger(__name__)

IgnoreList = Tuple[str, ...]

_BASE = "file:///"


def _ignore_path(token: str) -> str:
    """Return the URL path of *token* without its leading slash.

    Raises:
        ValueError: If *token* cannot be parsed as a URL.
    """
    pathname = urlparse(urljoin(_BASE, token)).path
    return pathname[1:] if pathname.startswith("/") else pathname


def parse_manifest(text: str) -> IgnoreList:
    """Derive the ignore list from manifest *text*.

    Blank lines are skipped.  Lines whose first token is not a parsable URL
    are skipped with a warning.  Order of first appearance is kept and
    duplicates are dropped.
    """
    ignores: List[str] = []
    seen = set()
    for lineno, line in enumerate(text.splitlines(), start=1):
        tokens = line.split()
        if not tokens:
            continue
        try:
            path = _ignore_path(tokens[0])
        except ValueError as exc:
            logger.warning("Skipping manifest line %d (%r): %s", lineno, tokens[0], exc)
            continue
        if not path or path in seen:
            continue
        seen.add(path)
        ignores.append(path)
    return tuple(ignores)


def load_manifest(path: Path) -> IgnoreList:
    """Read and parse the manifest at *path*."""
    manifest_path = Path(path).resolve()
    ignores = parse_manifest(manifest_path.read_text(encoding="utf-8"))
    logger.debug("Loaded %d link-check exclusions from %s", len(ignores), manifest_path)
    return ignores
