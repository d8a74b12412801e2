"""
Public API for the citeref package.
"""

from loguru import logger as _loguru_logger

from .formatting import (
    LATEX_CITE_COMMANDS,
    entry_display,
    entry_preview,
    format_citation,
    format_latex,
    insertion_edit,
)
from .loader import load_chunks, load_entries
from .models import (
    BibEntry,
    ChunkRecord,
    CitationMatch,
    CitationStyle,
)
from .parsing import (
    BibEntryParser,
    ChunkScanner,
    CitationLocator,
    CrossrefFormatter,
    CrossrefKind,
    format_crossref,
    locate_citation,
    parse_bib,
    scan_chunks,
)

# Library default: no loguru output until configure_logging() opts in.
_loguru_logger.disable("citeref")

__all__ = [
    "BibEntry",
    "BibEntryParser",
    "ChunkRecord",
    "ChunkScanner",
    "CitationLocator",
    "CitationMatch",
    "CitationStyle",
    "CrossrefFormatter",
    "CrossrefKind",
    "LATEX_CITE_COMMANDS",
    "entry_display",
    "entry_preview",
    "format_citation",
    "format_crossref",
    "format_latex",
    "insertion_edit",
    "load_chunks",
    "load_entries",
    "locate_citation",
    "parse_bib",
    "scan_chunks",
]
