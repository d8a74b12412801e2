"""
Presentation capability interface.

Pickers, completion adapters and the CLI are presenters: they receive parsed
records and decide how to show them. None of them parse text themselves.
"""

from __future__ import annotations

import json
import sys
from typing import IO, Any, Optional, Protocol, Sequence, runtime_checkable

from .models.chunks import ChunkRecord
from .models.citations import CitationMatch
from .models.entries import BibEntry


@runtime_checkable
class Presenter(Protocol):
    def present_entries(self, entries: Sequence[BibEntry]) -> None: ...

    def present_chunks(self, chunks: Sequence[ChunkRecord]) -> None: ...

    def present_match(self, match: Optional[CitationMatch]) -> None: ...

    def present_text(self, text: str) -> None: ...


class JsonPresenter:
    """Write records as indented JSON, one document per call."""

    def __init__(self, stream: Optional[IO[str]] = None, indent: int = 2) -> None:
        self._stream = stream
        self._indent = indent

    def present_entries(self, entries: Sequence[BibEntry]) -> None:
        self._write([entry.model_dump(mode="json") for entry in entries])

    def present_chunks(self, chunks: Sequence[ChunkRecord]) -> None:
        self._write([chunk.model_dump(mode="json") for chunk in chunks])

    def present_match(self, match: Optional[CitationMatch]) -> None:
        self._write(match.model_dump(mode="json") if match is not None else None)

    def present_text(self, text: str) -> None:
        self._write({"text": text})

    def _write(self, payload: Any) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        print(json.dumps(payload, ensure_ascii=False, indent=self._indent), file=stream)
