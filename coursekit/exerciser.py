"""Extract exercise starter code from Markdown chapters into files.

A Markdown comment of the form ``<!-- File some/path.rs -->`` names the file
that the next code block is written to.  Code blocks without such a comment
are ignored, as are comments that are never followed by a code block.
"""

from __future__ import annotations

import argparse
import json
import logging
import shutil
import sys
from collections.abc import Iterable, Iterator, Mapping
from pathlib import Path
from typing import Any

from markdown_it import MarkdownIt

FILENAME_START = "<!-- File "
FILENAME_END = " -->"

log = logging.getLogger(__name__)

_CODE_BLOCK_TOKENS = frozenset({"fence", "code_block"})


def _events(input_contents: str) -> Iterator[tuple[str, str]]:
    """Yield ``(kind, payload)`` events in document order.

    Kinds are ``html``, ``code_start``, ``text`` and ``code_end``.  Only the
    events that matter for extraction are produced.
    """
    parser = MarkdownIt("commonmark")
    for token in parser.parse(input_contents):
        log.debug("%r", token)
        if token.type == "html_block":
            # HTML blocks are reported line by line.
            for line in token.content.splitlines():
                yield "html", line
        elif token.type == "inline":
            for child in token.children or ():
                if child.type == "html_inline":
                    yield "html", child.content
        elif token.type in _CODE_BLOCK_TOKENS:
            yield "code_start", token.info
            if token.content:
                yield "text", token.content
            yield "code_end", token.info


def _filename_from_comment(html: str) -> str | None:
    html = html.strip()
    if (
        html.startswith(FILENAME_START)
        and html.endswith(FILENAME_END)
        and len(html) >= len(FILENAME_START) + len(FILENAME_END)
    ):
        return html[len(FILENAME_START) : len(html) - len(FILENAME_END)]
    return None


def process(output_directory: str | Path, input_contents: str) -> None:
    """Write every code block preceded by a file comment under ``output_directory``."""
    output_directory = Path(output_directory)
    next_filename: str | None = None
    current_file = None
    try:
        for kind, payload in _events(input_contents):
            if kind == "html":
                filename = _filename_from_comment(payload)
                if filename is not None:
                    next_filename = filename
                    log.info("Next file: %r", next_filename)
            elif kind == "code_start":
                log.info("Start %r", payload)
                if next_filename is not None:
                    full_filename = output_directory / next_filename
                    log.info("Opening %s", full_filename)
                    full_filename.parent.mkdir(parents=True, exist_ok=True)
                    current_file = open(
                        full_filename, "w", encoding="utf-8", newline=""
                    )
                    next_filename = None
            elif kind == "text":
                log.info("Text: %r", payload)
                if current_file is not None:
                    current_file.write(payload)
            elif kind == "code_end":
                log.info("End   %r", payload)
                if current_file is not None:
                    current_file.close()
                    current_file = None
    finally:
        if current_file is not None:
            current_file.close()


def _chapters(items: Iterable[Any]) -> Iterator[Mapping[str, Any]]:
    """Walk book items depth first, yielding each chapter."""
    for item in items:
        if isinstance(item, Mapping) and "Chapter" in item:
            chapter = item["Chapter"]
            yield chapter
            yield from _chapters(chapter.get("sub_items") or ())


def process_all(book: Mapping[str, Any], output_directory: str | Path) -> None:
    """Extract exercises from every chapter of ``book``.

    Each chapter's files go into a subdirectory named after the chapter file's
    stem, without its parent directories.
    """
    output_directory = Path(output_directory)
    for chapter in _chapters(book.get("sections") or ()):
        chapter_path = chapter.get("path")
        log.debug("Chapter %r / %r", chapter_path, chapter.get("source_path"))
        if chapter_path is None:
            continue
        stem = Path(chapter_path).stem
        if not stem:
            raise ValueError(f"Chapter {chapter_path!r} has no file stem")
        process(output_directory / stem, chapter.get("content", ""))


def _output_directory(context: Mapping[str, Any]) -> Path:
    config = context.get("config")
    renderer = None
    if isinstance(config, Mapping):
        output = config.get("output")
        if isinstance(output, Mapping):
            renderer = output.get("exerciser")
    if not isinstance(renderer, Mapping):
        raise ValueError("Missing output.exerciser configuration")
    if "output-directory" not in renderer:
        raise ValueError(
            "Missing output.exerciser.output-directory configuration value"
        )
    value = renderer["output-directory"]
    if not isinstance(value, str):
        raise ValueError("Expected a string for output.exerciser.output-directory")
    return Path(value)


def _run(stdin_text: str) -> None:
    try:
        context = json.loads(stdin_text)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Parsing stdin: {exc}") from exc
    if not isinstance(context, Mapping):
        raise ValueError("Parsing stdin: expected a JSON object")

    output_directory = _output_directory(context)
    shutil.rmtree(output_directory, ignore_errors=True)
    try:
        output_directory.mkdir()
    except OSError as exc:
        raise ValueError(
            f"Failed to create output directory {str(output_directory)!r}: {exc}"
        ) from exc

    process_all(context.get("book") or {}, output_directory)


def main(argv: list[str] | None = None) -> int:
    """Render a book's exercises from a render context read on standard input."""
    argparse.ArgumentParser(
        description="Extract starter code for exercises from Markdown files."
    ).parse_args(argv)
    logging.basicConfig(level=logging.WARNING)
    try:
        _run(sys.stdin.read())
    except (ValueError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())