"""
Completion items for editor completion engines.

Items are built from the same entries and chunks the pickers use; adapters
only translate ``CompletionItem`` into their engine's shape.
"""

from __future__ import annotations

from pathlib import PurePath
from typing import Iterable, Union

from .formatting import format_latex
from .models.chunks import ChunkRecord
from .models.citations import CitationStyle
from .models.completion import CompletionItem, CompletionKind
from .models.entries import BibEntry
from .parsing.crossref import RMARKDOWN_DIALECT, CrossrefKind, format_crossref

TRIGGER_CHARACTERS = ("@",)
DETAIL_SEPARATOR = " · "

_KIND_NOUN = {CrossrefKind.FIGURE: "figure", CrossrefKind.TABLE: "table"}


def citation_items(
    entries: Iterable[BibEntry],
    style: Union[CitationStyle, str] = CitationStyle.MARKDOWN,
) -> list[CompletionItem]:
    style = CitationStyle(style)
    items: list[CompletionItem] = []
    for entry in entries:
        insert = format_latex([entry.key]) if style == CitationStyle.LATEX else f"@{entry.key}"
        detail = DETAIL_SEPARATOR.join(v for v in (entry.author, entry.year, entry.journaltitle) if v)
        documentation = None
        if entry.title:
            documentation = entry.title + (f"\n\n{entry.abstract}" if entry.abstract else "")
        items.append(
            CompletionItem(
                label=insert,
                insert_text=insert,
                kind=CompletionKind.REFERENCE,
                detail=detail or None,
                documentation=documentation,
                data={"type": "citation", "key": entry.key, "format": style.value},
            )
        )
    return items


def crossref_items(
    chunks: Iterable[ChunkRecord],
    kind: Union[CrossrefKind, str],
    dialect: str = RMARKDOWN_DIALECT,
) -> list[CompletionItem]:
    """Cross-reference items; unnamed chunks are listed but insert nothing."""
    kind = CrossrefKind(kind)
    items: list[CompletionItem] = []
    for chunk in chunks:
        basename = PurePath(chunk.file).name
        if chunk.is_named:
            insert = format_crossref(kind, chunk.label, dialect)
            detail = f"{_KIND_NOUN[kind]} · line {chunk.line}"
            if not chunk.is_current:
                detail += f" · {basename}"
            items.append(
                CompletionItem(
                    label=insert,
                    insert_text=insert,
                    kind=CompletionKind.VALUE,
                    detail=detail,
                    data=_chunk_data(chunk, kind),
                )
            )
        else:
            items.append(
                CompletionItem(
                    label=f"[unnamed chunk · line {chunk.line} · {basename}]",
                    insert_text="",
                    kind=CompletionKind.FIELD,
                    detail=f"⚠ needs a label to use in \\@ref({kind.value}:...)",
                    data=_chunk_data(chunk, kind),
                )
            )
    return items


def all_items(
    entries: Iterable[BibEntry],
    chunks: Iterable[ChunkRecord],
    dialect: str = RMARKDOWN_DIALECT,
) -> list[CompletionItem]:
    """Items offered when completion is triggered by ``@``."""
    chunks = list(chunks)
    items = citation_items(entries, CitationStyle.MARKDOWN)
    items.extend(crossref_items(chunks, CrossrefKind.FIGURE, dialect))
    items.extend(crossref_items(chunks, CrossrefKind.TABLE, dialect))
    return items


def _chunk_data(chunk: ChunkRecord, kind: CrossrefKind) -> dict:
    return {
        "type": f"crossref_{kind.value}",
        "label": chunk.label,
        "line": chunk.line,
        "file": chunk.file,
    }
