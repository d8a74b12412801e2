from pathlib import Path

from citeref.parsing.chunks import (
    LABEL_LOOKAHEAD,
    ChunkScanner,
    find_option_label,
    parse_fence,
    scan_chunks,
)

FIXTURES = Path(__file__).resolve().parents[1] / "fixtures"


def _scan_fixture(name: str):
    path = FIXTURES / name
    return scan_chunks(path.read_text(encoding="utf-8").splitlines(), str(path))


def test_parse_fence_forms():
    assert parse_fence("```{r}") == ""
    assert parse_fence("```{r }") == ""
    assert parse_fence("```{r, echo=FALSE}") == ""
    assert parse_fence("```{r echo=FALSE}") == ""
    assert parse_fence("```{r myplot}") == "myplot"
    assert parse_fence("```{r fig-label, fig.cap='x'}") == "fig-label"
    assert parse_fence("```{R upper}") == "upper"
    assert parse_fence("```{python}") == ""
    assert parse_fence("```{python notalabel}") == ""
    assert parse_fence("```{Julia}") == ""
    assert parse_fence("```{ojs}") == ""


def test_parse_fence_rejects_non_chunks():
    assert parse_fence("```python") is None
    assert parse_fence("```{bash}") is None
    assert parse_fence("```") is None
    assert parse_fence("  ```{r}") is None
    assert parse_fence("text ```{r}") is None


def test_rmd_fixture_finds_five_chunks():
    chunks = _scan_fixture("sample.rmd")
    assert [c.label for c in chunks] == ["setup", "myplot", "mytable", "", "second-figure"]
    assert sum(1 for c in chunks if c.label == "") == 1
    assert all(c.is_current for c in chunks)
    assert chunks[0].file.endswith("sample.rmd")


def test_rmd_fixture_lines_headers_and_display():
    chunks = _scan_fixture("sample.rmd")
    assert chunks[0].line == 6
    assert chunks[0].header == "```{r setup, include=FALSE}"
    assert chunks[0].display == "setup  line 6  (sample.rmd)"
    unnamed = chunks[3]
    assert unnamed.line == 20
    assert unnamed.display == "[unnamed #1] line 20  (sample.rmd)"
    assert chunks[4].header == "```{python}"


def test_qmd_fixture_reads_option_labels():
    chunks = _scan_fixture("sample.qmd")
    assert [c.label for c in chunks] == ["fig-scatter", "tbl-summary", "", "fig-hist"]


def test_label_after_blank_line_is_found():
    lines = ["```{python}", "", "#| label: fig-late", "x = 1", "```"]
    [chunk] = scan_chunks(lines, "doc.qmd")
    assert chunk.label == "fig-late"


def test_python_and_julia_fixtures():
    python_chunks = _scan_fixture("sample_python.qmd")
    assert [c.label for c in python_chunks] == ["fig-scatter", "tbl-summary", "", "fig-hist"]
    assert all(c.header.startswith("```{python}") for c in python_chunks)

    julia_chunks = _scan_fixture("sample_julia.qmd")
    assert [c.label for c in julia_chunks] == ["fig-lineplot", "tbl-data", "", "fig-histogram"]


def test_lookahead_stops_at_code_line():
    lines = ["```{r}", "x <- 1", "#| label: too-late", "```"]
    assert find_option_label(lines, 1) == ""


def test_lookahead_stops_at_closing_fence():
    lines = ["```{r}", "```", "#| label: next-chunk-text"]
    assert find_option_label(lines, 1) == ""


def test_lookahead_is_capped():
    padding = [""] * LABEL_LOOKAHEAD
    lines = ["```{python}", *padding, "#| label: far-away", "```"]
    [chunk] = scan_chunks(lines, "doc.qmd")
    assert chunk.label == ""


def test_inline_label_wins_over_option_label():
    lines = ["```{r inline}", "#| label: option", "```"]
    [chunk] = scan_chunks(lines, "doc.Rmd")
    assert chunk.label == "inline"


def test_unnamed_counter_increments_and_resets_per_scan():
    lines = ["```{r}", "```", "```{python}", "```", "```{r named}", "```", "```{julia}", "```"]
    scanner = ChunkScanner()
    first = scanner.scan(lines, "/tmp/doc.Rmd")
    assert [c.display for c in first if not c.label] == [
        "[unnamed #1] line 1  (doc.Rmd)",
        "[unnamed #2] line 3  (doc.Rmd)",
        "[unnamed #3] line 7  (doc.Rmd)",
    ]
    second = scanner.scan(lines, "/tmp/doc.Rmd")
    assert [c.model_dump() for c in second] == [c.model_dump() for c in first]


def test_scan_documents_marks_siblings_and_skips_current_path():
    current = ("/proj/main.qmd", ["```{r}", "#| label: fig-a", "```"])
    siblings = [
        ("/proj/main.qmd", ["```{r}", "#| label: fig-dup", "```"]),
        ("/proj/other.Rmd", ["```{r}", "```", "```{r tab-b}", "```"]),
    ]
    chunks = ChunkScanner().scan_documents(current, siblings)
    assert [(c.label, c.is_current) for c in chunks] == [
        ("fig-a", True),
        ("", False),
        ("tab-b", False),
    ]
    assert chunks[1].display == "[unnamed #1] line 1  (other.Rmd)"


def test_empty_document_has_no_chunks():
    assert scan_chunks([], "empty.qmd") == []
