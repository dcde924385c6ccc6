"""Rendering of wiki HTML content to Markdown-like text.

Used for pages the API returns as HTML and as the fallback when a block
document cannot be parsed. Struck-through content is dropped. Headings,
paragraphs, list items and table cells are emitted from their own text in
document order, followed by dedicated table, image and link sections.
"""

import logging
import re

from bs4 import BeautifulSoup
from bs4.element import (
    Comment,
    Declaration,
    Doctype,
    NavigableString,
    ProcessingInstruction,
    Tag,
)

logger = logging.getLogger(__name__)

NO_CONTENT = "No valid content extracted"
STRIKETHROUGH_TAGS = ["s", "strike", "del"]
HEADING_PATTERN = re.compile(r"^h([1-6])$")
INLINE_TEXT_TAGS = {"div", "span", "strong", "b"}
NON_TEXT_STRINGS = (Comment, Declaration, Doctype, ProcessingInstruction)
SKIPPED_TAGS = {"script", "style"}

# Elements whose boundaries separate words in extracted text
BLOCK_TAGS = {
    "address", "article", "aside", "blockquote", "body", "dd", "div", "dl",
    "dt", "figcaption", "figure", "footer", "form", "h1", "h2", "h3", "h4",
    "h5", "h6", "header", "hr", "li", "main", "nav", "ol", "p", "pre",
    "section", "table", "tbody", "td", "tfoot", "th", "thead", "tr", "ul",
}


def normalize_whitespace(text: str) -> str:
    """Collapse runs of whitespace into single spaces and strip the ends."""
    return " ".join(text.split())


def own_text(element: Tag) -> str:
    """Text of an element's direct text nodes, excluding descendants.

    Each direct <br> child counts as a space.
    """
    pieces = []
    for child in element.children:
        if isinstance(child, NavigableString):
            if not isinstance(child, NON_TEXT_STRINGS):
                pieces.append(str(child))
        elif isinstance(child, Tag) and child.name == "br":
            pieces.append(" ")
    return normalize_whitespace("".join(pieces))


def _collect_text(element: Tag, pieces: list) -> None:
    for child in element.children:
        if isinstance(child, NavigableString):
            if not isinstance(child, NON_TEXT_STRINGS):
                pieces.append(str(child))
        elif isinstance(child, Tag):
            if child.name in SKIPPED_TAGS:
                continue
            if child.name == "br":
                pieces.append(" ")
            elif child.name in BLOCK_TAGS:
                pieces.append(" ")
                _collect_text(child, pieces)
                pieces.append(" ")
            else:
                _collect_text(child, pieces)


def element_text(element: Tag) -> str:
    """All text of an element and its descendants, whitespace-normalized.

    Inline markup does not split words; block boundaries and <br> do.
    """
    pieces: list = []
    _collect_text(element, pieces)
    return normalize_whitespace("".join(pieces))


class HtmlRenderer:
    """Renders HTML to text.

    Example:
        >>> HtmlRenderer().render("<p>This is a test paragraph.</p>")
        'This is a test paragraph.'
    """

    def __init__(self):
        """Initialize HtmlRenderer with lxml parser."""
        self.parser = "lxml"

    def render(self, html: str) -> str:
        """Render HTML to text; never raises.

        Returns:
            The rendered text, "No valid content extracted" when nothing was
            found, or "Content processing failed: <reason>" on errors
        """
        try:
            soup = BeautifulSoup(html, self.parser)

            for element in soup.find_all(STRIKETHROUGH_TAGS):
                element.extract()

            result = self._render_elements(soup)

            if not result:
                all_text = element_text(soup)
                if all_text:
                    result = "Page content:\n" + all_text

            result += self._render_tables(soup)
            result += self._render_images(soup)
            result += self._render_links(soup)

            result = result.strip()
            return result if result else NO_CONTENT

        except Exception as e:
            logger.warning(f"HTML rendering failed: {e}")
            return f"Content processing failed: {e}"

    def _render_elements(self, soup: BeautifulSoup) -> str:
        """Emit the own text of every element in document order."""
        parts = []

        for element in soup.find_all(True):
            tag_name = element.name.lower()
            text = own_text(element)
            if not text:
                continue

            heading = HEADING_PATTERN.match(tag_name)
            if heading:
                parts.append("#" * int(heading.group(1)) + " " + text + "\n\n")
            elif tag_name == "p":
                parts.append(text + "\n\n")
            elif tag_name == "li":
                parent = element.parent
                if parent is not None and parent.name == "ol":
                    parts.append("- " + text + "\n")
                else:
                    parts.append("• " + text + "\n")
            elif tag_name in ("td", "th"):
                parts.append("**" + text + "** ")
            elif tag_name in INLINE_TEXT_TAGS:
                # Short fragments are mostly icons and separators
                if len(text) > 2:
                    parts.append(text + " ")

        return "".join(parts)

    def _render_tables(self, soup: BeautifulSoup) -> str:
        """Render every table as key/value lines.

        Rows with two or more cells become "**key**: value" from the first two
        cells; single-cell rows become "- text".
        """
        tables = soup.find_all("table")
        if not tables:
            return ""

        parts = ["\n\n=== Table data ===\n"]
        for table_index, table in enumerate(tables, start=1):
            parts.append(f"\n## Table {table_index}\n")

            for row in table.find_all("tr"):
                cells = row.find_all(["th", "td"])
                if len(cells) >= 2:
                    key = element_text(cells[0])
                    value = element_text(cells[1])
                    if key and value:
                        parts.append(f"**{key}**: {value}\n")
                elif len(cells) == 1:
                    cell_text = element_text(cells[0])
                    if cell_text:
                        parts.append(f"- {cell_text}\n")

        return "".join(parts)

    def _render_images(self, soup: BeautifulSoup) -> str:
        images = soup.find_all("img")
        if not images:
            return ""

        parts = ["\n\n=== Image information ===\n"]
        for img in images:
            alt = img.get("alt") or "No description"
            src = img.get("src") or ""
            line = f"[Image: {alt}"
            if src:
                line += f" - {src}"
            parts.append(line + "]\n")

        return "".join(parts)

    def _render_links(self, soup: BeautifulSoup) -> str:
        links = soup.find_all("a", href=True)
        if not links:
            return ""

        parts = ["\n\n=== Link information ===\n"]
        for link in links:
            text = element_text(link)
            href = link.get("href", "")
            if text and href and not href.startswith("#"):
                parts.append(f"[Link: {text}]({href})\n")

        return "".join(parts)
