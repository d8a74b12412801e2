"""
File-reading layer around the pure parsers.

The parsers never touch the filesystem; this module reads caller-supplied
paths, records which ones could not be read and logs a warning for each.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional, Sequence

from .logging import logger
from .models.chunks import ChunkLoadResult
from .models.entries import BibLoadResult
from .parsing.bib import BibEntryParser
from .parsing.chunks import ChunkScanner

SIBLING_PATTERNS = ("*.rmd", "*.Rmd", "*.qmd", "*.Qmd")


def read_text(path: str | Path) -> Optional[str]:
    """Return file content, or ``None`` when the file cannot be read."""
    try:
        return Path(path).read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        logger.warning(f"Cannot read {path}: {exc}")
        return None


def load_entries(paths: Iterable[str | Path]) -> BibLoadResult:
    """Read and parse bibliography files in order, skipping repeated paths."""
    result = BibLoadResult()
    contents: list[tuple[str, str]] = []
    seen: set[str] = set()
    for raw_path in paths:
        path = str(Path(raw_path).expanduser())
        if path in seen:
            continue
        seen.add(path)
        text = read_text(path)
        if text is None:
            result.unreadable.append(path)
            continue
        result.sources.append(path)
        contents.append((path, text))

    result.entries = BibEntryParser().parse(contents)
    if result.sources and not result.entries:
        logger.warning("Bibliography files found but no entries could be parsed")
    return result


def find_sibling_documents(current_path: str | Path) -> list[str]:
    """R Markdown / Quarto documents next to ``current_path``, excluding it."""
    current = Path(current_path).expanduser()
    directory = current.parent
    found: set[Path] = set()
    for pattern in SIBLING_PATTERNS:
        found.update(p for p in directory.glob(pattern) if p.is_file())
    current_resolved = current.resolve()
    return sorted(str(p) for p in found if p.resolve() != current_resolved)


def load_chunks(
    current_path: str | Path,
    sibling_paths: Iterable[str | Path] = (),
    current_lines: Optional[Sequence[str]] = None,
) -> ChunkLoadResult:
    """Scan the current document (buffer lines if given) and its siblings."""
    result = ChunkLoadResult()
    current = str(current_path)
    if current_lines is None:
        text = read_text(current)
        if text is None:
            result.unreadable.append(current)
            text = ""
        current_lines = text.splitlines()

    siblings: list[tuple[str, list[str]]] = []
    for raw_path in sibling_paths:
        path = str(raw_path)
        text = read_text(path)
        if text is None:
            result.unreadable.append(path)
            continue
        siblings.append((path, text.splitlines()))

    result.chunks = ChunkScanner().scan_documents((current, current_lines), siblings)
    return result
