"""Pure text parsers: bibliography entries, chunk headers, citations, crossrefs."""

from .bib import BibEntryParser, parse_bib
from .chunks import CHUNK_TAGS, LABEL_LOOKAHEAD, ChunkScanner, scan_chunks
from .citations import CitationLocator, locate_citation
from .crossref import (
    QUARTO_DIALECT,
    RMARKDOWN_DIALECT,
    CrossrefFormatter,
    CrossrefKind,
    dialect_for_path,
    format_crossref,
)

__all__ = [
    "BibEntryParser",
    "CHUNK_TAGS",
    "ChunkScanner",
    "CitationLocator",
    "CrossrefFormatter",
    "CrossrefKind",
    "LABEL_LOOKAHEAD",
    "QUARTO_DIALECT",
    "RMARKDOWN_DIALECT",
    "dialect_for_path",
    "format_crossref",
    "locate_citation",
    "parse_bib",
    "scan_chunks",
]
