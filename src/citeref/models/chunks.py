"""
Code chunk headers found in literate documents (R Markdown, Quarto).
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class ChunkRecord(BaseModel):
    """
    One labeled or unlabeled chunk header.

    ``label == ""`` is the explicit unnamed marker; such chunks cannot be
    cross-referenced but are still listed so the user knows they exist.
    """

    label: str = Field(default="", description="Chunk label, empty string when unnamed.")
    display: str = Field(description="Unique human-readable string for pickers.")
    line: int = Field(ge=1, description="1-based line number of the fence header.")
    file: str = Field(description="Path of the source document.")
    is_current: bool = Field(description="True when the chunk lives in the document being edited.")
    header: str = Field(description="Raw fence header line, for previews.")

    @property
    def is_named(self) -> bool:
        return self.label != ""


class ChunkLoadResult(BaseModel):
    """
    Chunks collected from the current document and its siblings.
    """

    chunks: list[ChunkRecord] = Field(default_factory=list)
    unreadable: list[str] = Field(default_factory=list, description="Sibling paths that could not be read.")
