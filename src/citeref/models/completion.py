"""
Plain completion records handed to completion-engine adapters.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field


class CompletionKind(int, Enum):
    """
    LSP ``CompletionItemKind`` values used for citeref items.
    """

    FIELD = 5
    VALUE = 12
    REFERENCE = 18


class CompletionItem(BaseModel):
    label: str = Field(description="Text shown in the completion menu.")
    insert_text: str = Field(description="Text inserted on accept; empty for unusable items.")
    kind: CompletionKind
    detail: Optional[str] = None
    documentation: Optional[str] = None
    data: dict[str, Any] = Field(default_factory=dict)
