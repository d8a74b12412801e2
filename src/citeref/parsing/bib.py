"""
Line-oriented parser for the BibTeX/BibLaTeX interchange subset.

Accepted shape::

    @article{smith2020,
      title   = {A Great Paper},
      author  = "Smith, John and Doe, Jane",
      abstract = {First line
        continued here},
    }

The parser is a two-state machine (outside entry / inside entry) and is
total over arbitrary text: lines it does not understand contribute nothing.
Only ``title``, ``author``, ``year`` (``date`` as fallback),
``journaltitle`` and ``abstract`` are kept.
"""

from __future__ import annotations

import re
from typing import IO, Iterable, Optional, Union

from loguru import logger

from ..models.entries import BibEntry

BibSource = Union[str, IO[str]]

STORED_FIELDS = ("title", "author", "year", "journaltitle", "abstract")

# @comment / @string / @preamble blocks look like entries but carry no key.
NON_ENTRY_TYPES = frozenset({"comment", "string", "preamble"})

_ENTRY_START = re.compile(r"^\s*@([A-Za-z0-9]+)\s*\{\s*([^,\s}]+)")
# name = {value...  |  name = "value...  |  name = token,
_FIELD_ASSIGNMENT = re.compile(r'^\s*([A-Za-z][\w-]*)\s*=\s*(?:([{"])(.*)|([\w.:/+-]+)\s*,?\s*)$')
_ENTRY_END = re.compile(r"^\s*\}\s*$")
_AUTHOR_SEPARATOR = re.compile(r"\s+and\s+")
_CLOSING_DELIMITER = {"{": "}", '"': '"'}


def _normalize(value: str) -> str:
    return value.replace("{", "").replace("}", "").strip()


def _join_authors(value: str) -> str:
    return _AUTHOR_SEPARATOR.sub("; ", value)


def _cut_at_close(text: str, delimiter: str, depth: int) -> tuple[str, int]:
    """Split ``text`` at the delimiter that closes a field value.

    Returns the value part and the nesting depth still open afterwards
    (0 once the value is closed).
    """
    if delimiter == '"':
        body = text.rstrip().rstrip(",").rstrip()
        if body.endswith('"'):
            return body[:-1], 0
        return text, depth
    for index, char in enumerate(text):
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return text[:index], 0
    return text, depth


class _OpenEntry:
    """Fields collected for the entry currently being parsed."""

    __slots__ = ("key", "fields", "open_field", "delimiter", "depth")

    def __init__(self, key: str) -> None:
        self.key = key
        self.fields = {name: "" for name in STORED_FIELDS}
        self.open_field: Optional[str] = None
        self.delimiter: Optional[str] = None
        self.depth = 0

    @property
    def pending(self) -> bool:
        """True while the last assigned value is still waiting for its closing delimiter."""
        return self.depth > 0

    def close_field(self) -> None:
        self.open_field = None
        self.delimiter = None
        self.depth = 0

    def assign(self, name: str, delimiter: Optional[str], raw_value: str) -> None:
        self.delimiter = delimiter
        self.depth = 0
        if delimiter:
            raw_value, self.depth = _cut_at_close(raw_value, delimiter, 1)
        value = _normalize(raw_value)
        if name == "date":
            if self.fields["year"]:
                self.open_field = None
                return
            name = "year"
        elif name not in STORED_FIELDS:
            self.open_field = None
            return
        if name == "author":
            value = _join_authors(value)
        self.fields[name] = value
        self.open_field = name

    def extend(self, raw_line: str) -> None:
        if self.pending:
            text, self.depth = _cut_at_close(raw_line, self.delimiter or "{", self.depth)
        else:
            text = raw_line.strip().rstrip(",").rstrip()
            closing = _CLOSING_DELIMITER.get(self.delimiter or "")
            if closing and text.endswith(closing):
                text = text[: -len(closing)]
        text = _normalize(text)
        if not text or self.open_field is None:
            return
        current = self.fields[self.open_field]
        combined = f"{current} {text}" if current else text
        if self.open_field == "author":
            combined = _join_authors(combined)
        self.fields[self.open_field] = combined

    def to_entry(self) -> BibEntry:
        return BibEntry(key=self.key, **self.fields)


class BibEntryParser:
    """
    Parse bibliography text into ``BibEntry`` records.

    Stateless between calls: every call builds fresh entries. Duplicate keys
    are kept, in encounter order.
    """

    def parse(self, content_by_file: Iterable[tuple[str, BibSource]]) -> list[BibEntry]:
        """Parse ``(path, text_or_handle)`` pairs in order.

        A handle that fails to read is skipped; surfacing that is the
        caller's job (see ``citeref.loader``).
        """
        entries: list[BibEntry] = []
        for path, source in content_by_file:
            text = self._read(path, source)
            if text is None:
                continue
            parsed = self.parse_text(text)
            logger.debug(f"Parsed {len(parsed)} entries from {path}")
            entries.extend(parsed)
        return entries

    def parse_text(self, text: str) -> list[BibEntry]:
        """Parse the content of a single bibliography source."""
        entries: list[BibEntry] = []
        current: Optional[_OpenEntry] = None
        in_entry = False

        for line in text.splitlines():
            start = _ENTRY_START.match(line)
            if start:
                if current is not None:
                    entries.append(current.to_entry())
                entry_type, key = start.groups()
                if entry_type.lower() in NON_ENTRY_TYPES:
                    current, in_entry = None, False
                    continue
                current, in_entry = _OpenEntry(key), True
                continue

            if not in_entry or current is None:
                continue

            if _ENTRY_END.match(line):
                current.close_field()
                in_entry = False
                continue

            # Inside an unclosed {...} or "..." value every line is value text,
            # even one that reads like "n = 40".
            if current.pending:
                current.extend(line)
                continue

            assignment = _FIELD_ASSIGNMENT.match(line)
            if assignment:
                name, delimiter, delimited, bare = assignment.groups()
                current.assign(name.lower(), delimiter, delimited if delimiter else bare)
            elif current.open_field is not None and (not line or line[0].isspace()):
                current.extend(line)

        if current is not None:
            entries.append(current.to_entry())
        return entries

    @staticmethod
    def _read(path: str, source: BibSource) -> Optional[str]:
        if isinstance(source, str):
            return source
        try:
            return source.read()
        except (OSError, UnicodeDecodeError) as exc:
            logger.debug(f"Skipping unreadable bibliography source {path}: {exc}")
            return None


def parse_bib(content_by_file: Iterable[tuple[str, BibSource]]) -> list[BibEntry]:
    """Module-level shortcut for ``BibEntryParser().parse``."""
    return BibEntryParser().parse(content_by_file)
