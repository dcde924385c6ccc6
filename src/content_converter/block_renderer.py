"""Rendering of ONES wiki block documents to Markdown-like text.

Each top-level block is rendered according to its kind. Tables and code
blocks pull their content from other root entries by id. A block that fails
to render contributes nothing; it never aborts the rest of the document.
"""

import logging
from typing import Any

from src.models.wiki_document import BlockKind, WikiBlock, WikiDocument, as_text

from .document_parser import WikiDocumentParser

logger = logging.getLogger(__name__)

NO_CONTENT = "No valid content extracted"


def extract_text_from_text_array(runs: Any) -> str:
    """Concatenate the text of an array of inline runs.

    Each run contributes its "insert" text; a run marked with
    attributes.type == "br" contributes a newline instead.

    Args:
        runs: The runs array; anything else yields ''

    Returns:
        Plain text of the runs
    """
    if not isinstance(runs, list):
        return ""

    parts = []
    for run in runs:
        if not isinstance(run, dict) or "insert" not in run:
            continue

        attributes = run.get("attributes")
        if isinstance(attributes, dict) and as_text(attributes.get("type")) == "br":
            parts.append("\n")
            continue

        parts.append(as_text(run["insert"]))

    return "".join(parts)


class BlockRenderer:
    """Renders a block document to text.

    Example:
        >>> BlockRenderer().render('{"blocks": [{"type": "text", "heading": 2, '
        ...                        '"text": [{"insert": "Title"}]}]}')
        '## Title'
    """

    def __init__(self, parser: WikiDocumentParser = None):
        self._parser = parser or WikiDocumentParser()

    def render(self, raw: str) -> str:
        """Render a block document from its JSON string.

        Raises:
            ContentParseError: If the JSON cannot be parsed as a block document
        """
        document = self._parser.parse_from_string(raw)
        return self.render_document(document)

    def render_document(self, document: WikiDocument) -> str:
        """Render a parsed document, joining non-empty blocks with newlines."""
        rendered = []
        for block in document.blocks:
            block_text = self.render_block(block, document)
            if block_text:
                rendered.append(block_text + "\n")

        result = "".join(rendered).strip()
        return result if result else NO_CONTENT

    def render_block(self, block: WikiBlock, document: WikiDocument) -> str:
        """Render one block; any failure yields ''."""
        try:
            kind = block.kind
            if kind == BlockKind.TEXT:
                return self._render_text(block)
            elif kind == BlockKind.LIST:
                return self._render_list(block)
            elif kind == BlockKind.TABLE:
                return self._render_table(block, document)
            elif kind == BlockKind.EMBED:
                return self._render_embed(block)
            elif kind == BlockKind.CODE:
                return self._render_code(block, document)
            else:
                if block.has_text:
                    return extract_text_from_text_array(block.text_runs)
                return ""
        except Exception as e:
            logger.debug(f"Skipping {block.type or 'untyped'} block: {e}")
            return ""

    def _render_text(self, block: WikiBlock) -> str:
        prefix = ""
        heading = block.heading
        if heading is not None and heading > 0:
            prefix = "#" * heading + " "

        return prefix + extract_text_from_text_array(block.text_runs) + "\n"

    def _render_list(self, block: WikiBlock) -> str:
        text = extract_text_from_text_array(block.text_runs)
        if not text.strip():
            return ""

        indent = "  " * max(0, block.level - 1)
        marker = "1. " if block.ordered else "- "
        return f"{indent}{marker}{text}\n"

    def _render_table(self, block: WikiBlock, document: WikiDocument) -> str:
        """Render a table as pipe rows.

        Each child id points to a cell: an array of content nodes whose text
        runs are joined into the row. A row closes after every `cols` children.
        """
        parts = ["\n### Table\n\n"]
        cols = block.cols if block.cols > 0 else 2

        for index, cell_id in enumerate(block.children, start=1):
            cell = document.resolve(cell_id)
            if isinstance(cell, list):
                for cell_content in cell:
                    if not isinstance(cell_content, dict) or "text" not in cell_content:
                        continue
                    cell_text = extract_text_from_text_array(cell_content["text"])
                    if cell_text.strip():
                        parts.append(f"| {cell_text} ")

            if index % cols == 0:
                parts.append("|\n")

        parts.append("\n")
        return "".join(parts)

    def _render_embed(self, block: WikiBlock) -> str:
        if block.embed_type != "image":
            return ""

        embed_data = block.embed_data
        if embed_data is None:
            return ""

        src = as_text(embed_data["src"]) if "src" in embed_data else "Unknown image"
        return f"\n[Image: {src}]\n"

    def _render_code(self, block: WikiBlock, document: WikiDocument) -> str:
        parts = [f"\n```{block.language}\n"]

        for child_id in block.children:
            child = document.resolve(child_id)
            if isinstance(child, dict) and "text" in child:
                parts.append(extract_text_from_text_array(child["text"]) + "\n")

        parts.append("```\n")
        return "".join(parts)
