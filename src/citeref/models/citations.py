"""
Citation-under-cursor results and the text edits built from them.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class CitationStyle(str, Enum):
    """
    Inline citation syntax.

    - MARKDOWN: pandoc ``@key``
    - LATEX: ``\\cmd{key1, key2}``
    """

    MARKDOWN = "markdown"
    LATEX = "latex"


class CitationMatch(BaseModel):
    """
    Citation token found under a cursor column.

    ``start``/``end`` are 0-indexed inclusive offsets of the span a single-key
    replacement overwrites: ``@key`` for markdown, the bare key for LaTeX.
    LaTeX-only fields are ``None`` (or empty) for markdown matches.
    """

    key: str = Field(description="Citation key under the cursor, without '@'.")
    start: int = Field(ge=0, description="First offset of the replaceable span.")
    end: int = Field(ge=0, description="Last offset (inclusive) of the replaceable span.")
    style: CitationStyle

    command: Optional[str] = Field(default=None, description="LaTeX command name, e.g. 'citep'.")
    all_keys: list[str] = Field(default_factory=list, description="Every key inside the LaTeX braces, in order.")
    command_start: Optional[int] = Field(default=None, description="Offset of the command backslash.")
    command_end: Optional[int] = Field(default=None, description="Offset of the closing brace ending the command.")
    brace_open: Optional[int] = Field(default=None, description="Offset of '{'.")
    brace_close: Optional[int] = Field(default=None, description="Offset of '}'.")


class TextEdit(BaseModel):
    """
    Replace ``line[start:end + 1]`` with ``text``.
    """

    start: int = Field(ge=0)
    end: int = Field(ge=-1, description="Inclusive end; ``start - 1`` for an insertion (see insertion_edit).")
    text: str

    def apply(self, line: str) -> str:
        return line[: self.start] + self.text + line[self.end + 1 :]
