"""
Command line entry point for citeref.
"""

from __future__ import annotations

import argparse
from importlib.metadata import PackageNotFoundError, version

from loguru import logger as _loguru_logger

from .formatting import LATEX_CITE_COMMANDS, format_citation, format_latex
from .loader import find_sibling_documents, load_chunks, load_entries
from .logging import configure_logging
from .parsing.citations import CitationLocator
from .parsing.crossref import RMARKDOWN_DIALECT, CrossrefKind, format_crossref
from .presenters import JsonPresenter, Presenter


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="citeref",
        description="citeref CLI: bibliography entries, chunk labels and citations as JSON.",
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Print the installed citeref version and exit.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Log to stderr (-v for INFO, -vv for DEBUG).",
    )
    parser.add_argument(
        "--log-level",
        help="Explicit log level (overrides -v and CITEREF_LOG_LEVEL).",
    )
    subparsers = parser.add_subparsers(dest="command")

    entries = subparsers.add_parser("entries", help="Parse bibliography files.")
    entries.add_argument("bib_files", nargs="+", help="Paths to .bib files.")

    chunks = subparsers.add_parser("chunks", help="List code chunk labels of a document.")
    chunks.add_argument("document", help="Current R Markdown / Quarto document.")
    chunks.add_argument(
        "--sibling",
        action="append",
        default=[],
        help="Additional document to scan (repeatable).",
    )
    chunks.add_argument(
        "--siblings",
        action="store_true",
        help="Also scan *.rmd / *.qmd files next to the document.",
    )

    locate = subparsers.add_parser("locate", help="Find the citation under a column.")
    locate.add_argument("--line", required=True, help="Line of text.")
    locate.add_argument("--column", required=True, type=int, help="0-based column.")

    cite = subparsers.add_parser("cite", help="Format citation text for keys.")
    cite.add_argument("keys", nargs="+", help="Citation keys.")
    cite.add_argument(
        "--latex",
        metavar="COMMAND",
        choices=LATEX_CITE_COMMANDS,
        help="Emit a LaTeX citation using COMMAND instead of markdown.",
    )

    crossref = subparsers.add_parser("crossref", help="Format a figure/table cross-reference.")
    crossref.add_argument("kind", choices=[k.value for k in CrossrefKind])
    crossref.add_argument("label")
    crossref.add_argument(
        "--dialect",
        default=RMARKDOWN_DIALECT,
        help="'quarto' for @label, anything else for \\@ref(kind:label).",
    )
    return parser


def _resolve_log_level(args: argparse.Namespace) -> str | None:
    if args.log_level:
        return args.log_level
    if args.verbose >= 2:
        return "DEBUG"
    if args.verbose == 1:
        return "INFO"
    return None


def main(argv: list[str] | None = None, presenter: Presenter | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    # Only the configure_logging sink may write to the CLI's stderr.
    _loguru_logger.remove()
    configure_logging(_resolve_log_level(args))
    presenter = presenter or JsonPresenter()

    if args.version:
        try:
            print(version("citeref"))
        except PackageNotFoundError:
            print("citeref (not installed)")
        return 0

    if args.command == "entries":
        result = load_entries(args.bib_files)
        presenter.present_entries(result.entries)
        return 1 if result.unreadable_count else 0

    if args.command == "chunks":
        siblings = list(args.sibling)
        if args.siblings:
            siblings.extend(p for p in find_sibling_documents(args.document) if p not in siblings)
        result = load_chunks(args.document, siblings)
        presenter.present_chunks(result.chunks)
        return 1 if result.unreadable else 0

    if args.command == "locate":
        presenter.present_match(CitationLocator().locate(args.line, args.column))
        return 0

    if args.command == "cite":
        text = format_latex(args.keys, args.latex) if args.latex else format_citation(args.keys)
        presenter.present_text(text)
        return 0

    if args.command == "crossref":
        if not args.label.strip():
            parser.error("crossref requires a non-empty label")
        presenter.present_text(format_crossref(args.kind, args.label, args.dialect))
        return 0

    parser.print_help()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
