"""Display, preview and insertion text shared by every presenter."""

from __future__ import annotations

from typing import Iterable, Optional

from .models.citations import CitationMatch, CitationStyle, TextEdit
from .models.entries import BibEntry

LATEX_CITE_COMMANDS = (
    "cite",
    "citep",
    "citet",
    "citeauthor",
    "citeyear",
    "citealt",
    "textcite",
    "parencite",
    "footcite",
    "autocite",
)

DISPLAY_SEPARATOR = " │ "

_PREVIEW_FIELDS = (
    ("Title:    ", "title"),
    ("Author:   ", "author"),
    ("Year:     ", "year"),
    ("Journal:  ", "journaltitle"),
    ("Abstract: ", "abstract"),
)


def entry_display(entry: BibEntry) -> str:
    """``key │ title │ author`` with empty parts omitted."""
    parts = [entry.key]
    parts.extend(value for value in (entry.title, entry.author) if value)
    return DISPLAY_SEPARATOR.join(parts)


def entry_preview(entry: BibEntry) -> str:
    """Labelled blocks for each non-empty field, separated by blank lines."""
    lines: list[str] = []
    for label, field_name in _PREVIEW_FIELDS:
        value = getattr(entry, field_name)
        if value:
            lines.extend([label + value, ""])
    return "\n".join(lines)


def format_citation(keys: Iterable[str]) -> str:
    """Pandoc citation text: ``@a; @b``."""
    return "; ".join(f"@{key}" for key in keys)


def format_latex(keys: Iterable[str], command: str = "cite") -> str:
    """LaTeX citation text: ``\\cite{a, b}``."""
    if command not in LATEX_CITE_COMMANDS:
        raise ValueError(f"Unknown LaTeX citation command: {command!r}")
    return f"\\{command}{{{', '.join(keys)}}}"


def replacement_edit(match: CitationMatch, key: str) -> TextEdit:
    """Edit replacing only the key under the cursor with ``key``."""
    text = key if match.style == CitationStyle.LATEX else f"@{key}"
    return TextEdit(start=match.start, end=match.end, text=text)


def insertion_edit(line: str, column: int, text: str) -> TextEdit:
    """Edit inserting ``text`` before ``column`` when no citation is under the cursor.

    The column is clamped to the line, so inserting past the end appends.
    """
    column = min(max(column, 0), len(line))
    return TextEdit(start=column, end=column - 1, text=text)


def citation_replacement_edit(
    match: CitationMatch,
    keys: Iterable[str],
    command: Optional[str] = None,
) -> TextEdit:
    """Edit replacing the whole ``\\cmd{...}`` around a LaTeX match.

    ``command`` defaults to the command already in the text. Markdown matches
    have no enclosing citation, so the ``@key`` span is replaced with the
    joined markdown citation instead.
    """
    keys = list(keys)
    if match.style == CitationStyle.MARKDOWN:
        return TextEdit(start=match.start, end=match.end, text=format_citation(keys))
    if command is not None and command not in LATEX_CITE_COMMANDS:
        raise ValueError(f"Unknown LaTeX citation command: {command!r}")
    text = f"\\{command or match.command}{{{', '.join(keys)}}}"
    return TextEdit(start=match.command_start, end=match.command_end, text=text)
