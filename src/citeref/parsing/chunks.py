"""
Chunk header scanner for R Markdown and Quarto documents.

Recognized fence openers::

    ```{r}                      unnamed
    ```{r, echo=FALSE}          unnamed
    ```{r myplot}               "myplot"
    ```{r myplot, fig.cap="x"}  "myplot"
    ```{python}                 label from a following "#| label: name" line

Only ``r`` chunks carry inline labels. Every tag can declare its label with a
``#| label:`` option comment directly below the fence.
"""

from __future__ import annotations

import re
from pathlib import PurePath
from typing import Iterable, Optional, Sequence

from loguru import logger

from ..models.chunks import ChunkRecord

CHUNK_TAGS = frozenset({"r", "python", "julia", "ojs", "observable"})
INLINE_LABEL_TAG = "r"
LABEL_LOOKAHEAD = 20

_FENCE_OPENER = re.compile(r"^```\{([A-Za-z]+)")
_INLINE_LABEL = re.compile(r"^```\{[A-Za-z]+\s+([^\s,}]+)")
_CLOSING_FENCE = re.compile(r"^```")
_OPTION_COMMENT = re.compile(r"^#\|")
_OPTION_LABEL = re.compile(r"^#\|\s*label:\s*([\w.-]+)")


def parse_fence(line: str) -> Optional[str]:
    """Return the inline label of a fence opener.

    ``None`` means the line is not a chunk opener; ``""`` means an opener
    without an inline label.
    """
    opener = _FENCE_OPENER.match(line)
    if not opener or opener.group(1).lower() not in CHUNK_TAGS:
        return None
    if opener.group(1).lower() != INLINE_LABEL_TAG:
        return ""
    inline = _INLINE_LABEL.match(line)
    # ```{r echo=FALSE} starts with an option, not a label
    if not inline or "=" in inline.group(1):
        return ""
    return inline.group(1)


def find_option_label(lines: Sequence[str], start: int) -> str:
    """Look for ``#| label: name`` from 0-based index ``start`` onwards.

    Stops at the closing fence, at the first line that is neither blank nor
    an option comment, or after ``LABEL_LOOKAHEAD`` lines.
    """
    stop = min(start + LABEL_LOOKAHEAD, len(lines))
    for index in range(start, stop):
        line = lines[index]
        if _CLOSING_FENCE.match(line):
            break
        option = _OPTION_LABEL.match(line)
        if option:
            return option.group(1)
        if line.strip() and not _OPTION_COMMENT.match(line):
            break
    return ""


def chunk_display(label: str, line: int, file: str, unnamed_index: int = 0) -> str:
    basename = PurePath(file).name if file else ""
    if label:
        return f"{label}  line {line}  ({basename})"
    return f"[unnamed #{unnamed_index}] line {line}  ({basename})"


class ChunkScanner:
    """
    Turn document lines into ``ChunkRecord`` headers.

    The unnamed counter is local to one ``scan`` call, so the same input
    always yields the same records.
    """

    def scan(self, lines: Sequence[str], source_path: str, is_current: bool = True) -> list[ChunkRecord]:
        records: list[ChunkRecord] = []
        unnamed_count = 0

        for index, line in enumerate(lines):
            label = parse_fence(line)
            if label is None:
                continue
            if not label:
                label = find_option_label(lines, index + 1)

            line_number = index + 1
            if label:
                display = chunk_display(label, line_number, source_path)
            else:
                unnamed_count += 1
                display = chunk_display("", line_number, source_path, unnamed_count)

            records.append(
                ChunkRecord(
                    label=label,
                    display=display,
                    line=line_number,
                    file=source_path,
                    is_current=is_current,
                    header=line,
                )
            )

        logger.debug(f"Scanned {len(records)} chunks ({unnamed_count} unnamed) in {source_path or '<buffer>'}")
        return records

    def scan_documents(
        self,
        current: tuple[str, Sequence[str]],
        siblings: Iterable[tuple[str, Sequence[str]]] = (),
    ) -> list[ChunkRecord]:
        """Scan the current document, then each sibling in the given order.

        A sibling with the same path as the current document is skipped.
        """
        current_path, current_lines = current
        records = self.scan(current_lines, current_path, is_current=True)
        for path, lines in siblings:
            if path == current_path:
                continue
            records.extend(self.scan(lines, path, is_current=False))
        return records


def scan_chunks(lines: Sequence[str], source_path: str, is_current: bool = True) -> list[ChunkRecord]:
    """Module-level shortcut for ``ChunkScanner().scan``."""
    return ChunkScanner().scan(lines, source_path, is_current)
