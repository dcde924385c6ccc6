"""Block document fixtures for renderer and tool tests.

Provides builders for ONES wiki block documents: a root object with an
ordered "blocks" array plus id-keyed entries referenced by tables and code
blocks.
"""

import json
from typing import Any, Dict, List, Optional

WikiRoot = Dict[str, Any]
WikiNode = Dict[str, Any]


def runs(*texts: str) -> List[WikiNode]:
    """Create a text run array, one run per string."""
    return [{"insert": text} for text in texts]


def br_run() -> WikiNode:
    """Create a line break run."""
    return {"insert": "\n", "attributes": {"type": "br"}}


def create_doc(blocks: List[WikiNode], **entries: Any) -> WikiRoot:
    """Create a block document root with extra id-keyed entries."""
    root: WikiRoot = {"blocks": blocks}
    root.update(entries)
    return root


def create_text(text: str, heading: Optional[int] = None) -> WikiNode:
    """Create a text block, optionally a heading."""
    block: WikiNode = {"type": "text", "text": runs(text)}
    if heading is not None:
        block["heading"] = heading
    return block


def create_list_item(text: str, ordered: bool = False, level: int = 1) -> WikiNode:
    """Create a list block."""
    return {"type": "list", "ordered": ordered, "level": level, "text": runs(text)}


def create_cell(text: str) -> List[WikiNode]:
    """Create a table cell entry: an array of content nodes."""
    return [{"type": "text", "text": runs(text)}]


def to_json(root: WikiRoot) -> str:
    return json.dumps(root, ensure_ascii=False)


SAMPLE_DOCUMENT = create_doc(
    [
        create_text("Release Notes", heading=1),
        create_text("Highlights of this release."),
        create_list_item("Faster sync"),
        create_list_item("Nested detail", level=2),
        create_list_item("First step", ordered=True),
        {"type": "table", "cols": 2, "children": ["c1", "c2", "c3", "c4"]},
        {"type": "embed", "embedType": "image", "embedData": {"src": "https://img.example.com/a.png"}},
        {"type": "code", "language": "python", "children": ["l1", "l2"]},
    ],
    c1=create_cell("Name"),
    c2=create_cell("Value"),
    c3=create_cell("Timeout"),
    c4=create_cell("30s"),
    l1={"text": runs("def main():")},
    l2={"text": runs("    return 0")},
)

SAMPLE_HTML_PAGE = """
<html><body>
<h1>Team Handbook</h1>
<p>Welcome to the handbook.</p>
<p>Old policy <del>removed text</del> still here.</p>
<ol><li>Read the guide</li></ol>
<ul><li>Ask questions</li></ul>
<table>
  <tr><th>Owner</th><td>Platform team</td></tr>
  <tr><td>Single cell row</td></tr>
</table>
<img src="https://img.example.com/logo.png" alt="Logo">
<img src="https://img.example.com/raw.png">
<a href="https://docs.example.com">Documentation</a>
<a href="#section">Anchor only</a>
</body></html>
"""
