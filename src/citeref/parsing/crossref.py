"""
Cross-reference insertion text for figure and table chunks.

Quarto resolves ``@label`` natively; R Markdown (bookdown) and plain
markdown need ``\\@ref(kind:label)``.
"""

from __future__ import annotations

from enum import Enum
from pathlib import PurePath
from typing import Union

QUARTO_DIALECT = "quarto"
RMARKDOWN_DIALECT = "rmarkdown"


class CrossrefKind(str, Enum):
    FIGURE = "fig"
    TABLE = "tab"


def format_crossref(kind: Union[CrossrefKind, str], label: str, dialect: str) -> str:
    """Return the text to insert for a cross-reference to ``label``.

    ``label`` must be non-empty; unnamed chunks are filtered by the caller.
    """
    kind_value = CrossrefKind(kind).value
    if dialect == QUARTO_DIALECT:
        return f"@{label}"
    return f"\\@ref({kind_value}:{label})"


def dialect_for_path(path: str) -> str:
    """Map a document path to its cross-reference dialect."""
    if PurePath(path).suffix.lower() == ".qmd":
        return QUARTO_DIALECT
    return RMARKDOWN_DIALECT


class CrossrefFormatter:
    """Object form of ``format_crossref`` for presenters that take a formatter."""

    @staticmethod
    def format(kind: Union[CrossrefKind, str], label: str, dialect: str) -> str:
        return format_crossref(kind, label, dialect)
