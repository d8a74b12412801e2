"""
Resolve a cursor column to the citation token underneath it.

Two syntaxes are recognized, scanned in this order:

1. pandoc markdown ``@key`` (``\\@key`` is escaped and never matches)
2. LaTeX ``\\cmd{key1, key2}`` with no nested braces

Offsets are 0-indexed ``str`` positions and all spans are inclusive.
``\\@ref(fig:label)`` cross-references match neither scan.
"""

from __future__ import annotations

import re
from typing import Iterable, Optional

from loguru import logger

from ..models.citations import CitationMatch, CitationStyle

# ":" and "." only between identifier characters so "@key." ends at the key.
_MARKDOWN_CITATION = re.compile(r"@[\w-]+(?:[:.][\w-]+)*")
_LATEX_CITATION = re.compile(r"\\([A-Za-z]+)\s*\{([^{}]*)\}")
_LATEX_KEY = re.compile(r"[^,\s]+")


class CitationLocator:
    """
    Find the citation key under a column of one line of text.

    ``commands`` optionally restricts the LaTeX scan to a set of command
    names; by default any ``\\name{...}`` is considered.
    """

    def __init__(self, commands: Optional[Iterable[str]] = None) -> None:
        self._commands = frozenset(commands) if commands is not None else None

    def locate(self, line: str, column: int) -> Optional[CitationMatch]:
        if column < 0:
            logger.debug(f"Negative column {column} clamped to 0")
            column = 0
        return self._locate_markdown(line, column) or self._locate_latex(line, column)

    @staticmethod
    def _locate_markdown(line: str, column: int) -> Optional[CitationMatch]:
        for match in _MARKDOWN_CITATION.finditer(line):
            start, end = match.start(), match.end() - 1
            if start > 0 and line[start - 1] == "\\":
                continue
            if start <= column <= end:
                return CitationMatch(
                    key=match.group(0)[1:],
                    start=start,
                    end=end,
                    style=CitationStyle.MARKDOWN,
                )
        return None

    def _locate_latex(self, line: str, column: int) -> Optional[CitationMatch]:
        for match in _LATEX_CITATION.finditer(line):
            command, inside = match.group(1), match.group(2)
            if self._commands is not None and command not in self._commands:
                continue
            brace_open = match.start(2) - 1
            brace_close = match.end() - 1
            segments = list(_LATEX_KEY.finditer(inside))
            for segment in segments:
                key_start = match.start(2) + segment.start()
                key_end = match.start(2) + segment.end() - 1
                if key_start <= column <= key_end:
                    return CitationMatch(
                        key=segment.group(0),
                        start=key_start,
                        end=key_end,
                        style=CitationStyle.LATEX,
                        command=command,
                        all_keys=[s.group(0) for s in segments],
                        command_start=match.start(),
                        command_end=brace_close,
                        brace_open=brace_open,
                        brace_close=brace_close,
                    )
        return None


def locate_citation(line: str, column: int) -> Optional[CitationMatch]:
    """Module-level shortcut for ``CitationLocator().locate``."""
    return CitationLocator().locate(line, column)
