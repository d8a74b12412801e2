from .chunks import ChunkLoadResult, ChunkRecord
from .citations import CitationMatch, CitationStyle, TextEdit
from .completion import CompletionItem, CompletionKind
from .entries import BibEntry, BibLoadResult

__all__ = [
    "BibEntry",
    "BibLoadResult",
    "ChunkRecord",
    "ChunkLoadResult",
    "CitationMatch",
    "CitationStyle",
    "TextEdit",
    "CompletionItem",
    "CompletionKind",
]
