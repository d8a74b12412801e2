import pytest
from pydantic import ValidationError

from citeref.models import (
    BibEntry,
    BibLoadResult,
    ChunkRecord,
    CitationMatch,
    CitationStyle,
    TextEdit,
)


def test_bib_entry_defaults_are_empty_strings():
    entry = BibEntry(key="k")
    assert entry.model_dump() == {
        "key": "k",
        "title": "",
        "author": "",
        "year": "",
        "journaltitle": "",
        "abstract": "",
    }


def test_bib_entry_requires_key():
    with pytest.raises(ValidationError):
        BibEntry(key="")


def test_bib_load_result_counts_unreadable():
    result = BibLoadResult(unreadable=["a.bib", "b.bib"])
    assert result.unreadable_count == 2
    assert result.entries == []


def test_chunk_record_named_flag():
    record = ChunkRecord(display="x", line=1, file="f.qmd", is_current=True, header="```{r}")
    assert record.label == ""
    assert not record.is_named


def test_citation_match_serializes_style_value():
    match = CitationMatch(key="k", start=0, end=1, style=CitationStyle.MARKDOWN)
    payload = match.model_dump(mode="json")
    assert payload["style"] == "markdown"
    assert payload["command"] is None


def test_text_edit_pure_insertion():
    edit = TextEdit(start=3, end=2, text="@k ")
    assert edit.apply("abcdef") == "abc@k def"
