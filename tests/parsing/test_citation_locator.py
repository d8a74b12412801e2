import pytest

from citeref.models.citations import CitationStyle
from citeref.parsing.citations import CitationLocator, locate_citation


@pytest.mark.parametrize("column", [4, 5, 13])
def test_markdown_key_found_from_at_sign_to_last_char(column):
    line = "See @smith2020 for details."
    match = locate_citation(line, column)
    assert match is not None
    assert match.key == "smith2020"
    assert match.style == CitationStyle.MARKDOWN
    assert (match.start, match.end) == (4, 13)
    assert match.command is None
    assert match.all_keys == []


@pytest.mark.parametrize("column", [0, 3, 14])
def test_markdown_outside_span_returns_none(column):
    assert locate_citation("See @smith2020 for details.", column) is None


def test_no_citation_returns_none():
    assert locate_citation("No citation here.", 0) is None
    assert locate_citation("", 0) is None


def test_markdown_trailing_punctuation_is_not_part_of_key():
    match = locate_citation("See @smith2020.", 4)
    assert match.key == "smith2020"
    assert match.end == 13


def test_markdown_key_with_internal_punctuation():
    line = "[@doe:2020.v2; @lee_k-1]"
    first = locate_citation(line, 3)
    assert first.key == "doe:2020.v2"
    second = locate_citation(line, 16)
    assert second.key == "lee_k-1"
    assert (second.start, second.end) == (15, 22)


def test_escaped_at_sign_is_skipped():
    line = r"Price \@home and @real"
    assert locate_citation(line, 8) is None
    assert locate_citation(line, 18).key == "real"


def test_latex_cite_command():
    line = r"As shown in \cite{smith2020}."
    match = locate_citation(line, 19)
    assert match is not None
    assert match.key == "smith2020"
    assert match.style == CitationStyle.LATEX
    assert match.command == "cite"
    assert (match.start, match.end) == (18, 26)


def test_latex_citep_variant():
    match = locate_citation(r"\citep{jones2019}", 8)
    assert match.command == "citep"
    assert match.key == "jones2019"


def test_latex_multiple_keys_and_bracket_offsets():
    line = r"x \citep{a1, bb2,  c3} y"
    match = locate_citation(line, 14)
    assert match.key == "bb2"
    assert (match.start, match.end) == (13, 15)
    assert match.all_keys == ["a1", "bb2", "c3"]
    assert match.command_start == 2
    assert match.brace_open == 8
    assert match.brace_close == 21
    assert match.command_end == 21
    assert line[match.command_start : match.command_end + 1] == r"\citep{a1, bb2,  c3}"


def test_latex_column_on_separator_returns_none():
    assert locate_citation(r"\cite{a, b}", 7) is None


def test_latex_nested_braces_only_inner_command_matches():
    line = r"\textbf{\cite{inner}}"
    match = locate_citation(line, 15)
    assert match.command == "cite"
    assert match.key == "inner"


def test_crossref_syntax_is_never_a_citation():
    line = r"See \@ref(fig:myplot)."
    for column in range(len(line)):
        assert locate_citation(line, column) is None


def test_markdown_wins_over_latex_on_same_line():
    line = r"@first and \cite{second}"
    assert locate_citation(line, 2).style == CitationStyle.MARKDOWN
    assert locate_citation(line, 18).style == CitationStyle.LATEX


def test_negative_column_is_clamped():
    match = locate_citation("@start of line", -5)
    assert match.key == "start"


def test_command_filter_restricts_latex_scan():
    locator = CitationLocator(commands={"cite", "citep"})
    assert locator.locate(r"\emph{word}", 7) is None
    assert locator.locate(r"\citep{key}", 8).key == "key"
