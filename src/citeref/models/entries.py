"""
Bibliography records produced by the bib parser and the file loader.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class BibEntry(BaseModel):
    """
    One bibliographic record.

    Missing optional fields are empty strings, never ``None``.
    """

    key: str = Field(min_length=1, description="Citation key, unique identifier used in document text.")
    title: str = Field(default="", description="Entry title with braces removed.")
    author: str = Field(default="", description="Authors joined by '; '.")
    year: str = Field(default="", description="Year, or the date field when year is absent.")
    journaltitle: str = Field(default="", description="Journal title (BibLaTeX journaltitle).")
    abstract: str = Field(default="", description="Abstract text, continuation lines joined by spaces.")


class BibLoadResult(BaseModel):
    """
    Entries parsed from a set of bibliography paths plus the read outcome per path.
    """

    entries: list[BibEntry] = Field(default_factory=list, description="Parsed entries in file order.")
    sources: list[str] = Field(default_factory=list, description="Paths that were read successfully.")
    unreadable: list[str] = Field(default_factory=list, description="Paths that could not be read.")

    @property
    def unreadable_count(self) -> int:
        return len(self.unreadable)
