"""Data models for the ONES wiki block document format.

A block document is a JSON object whose "blocks" entry lists the top-level
blocks in order. Tables and code blocks do not nest their content: their
"children" are ids of other entries in the same root object. The document is
therefore kept as a flat index and children are resolved on demand; the same
id may be referenced from several places.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class BlockKind(Enum):
    """Kinds of top-level blocks."""

    TEXT = "text"
    LIST = "list"
    TABLE = "table"
    EMBED = "embed"
    CODE = "code"

    # Anything else, including a missing type
    UNKNOWN = "unknown"


def as_int(value: Any, default: int) -> int:
    """Coerce a JSON scalar to int, falling back to default."""
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return default
    return default


def as_bool(value: Any, default: bool = False) -> bool:
    """Coerce a JSON scalar to bool, falling back to default."""
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, str):
        return value.strip().lower() == "true"
    return default


def as_text(value: Any) -> str:
    """Render a JSON scalar as text; containers and null become ''."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    return ""


@dataclass
class WikiBlock:
    """One top-level block of a wiki document.

    Wraps the raw JSON mapping so unexpected fields never break parsing;
    kind-specific accessors apply the format's defaults.

    Attributes:
        data: The block's JSON object
    """

    data: Dict[str, Any] = field(default_factory=dict)

    @property
    def type(self) -> str:
        return as_text(self.data.get("type"))

    @property
    def kind(self) -> BlockKind:
        """Get the BlockKind enum value."""
        try:
            return BlockKind(self.type)
        except ValueError:
            return BlockKind.UNKNOWN

    @property
    def heading(self) -> Optional[int]:
        """Heading level, or None for a plain paragraph."""
        if "heading" not in self.data:
            return None
        return as_int(self.data["heading"], 0)

    @property
    def ordered(self) -> bool:
        return as_bool(self.data.get("ordered"), False)

    @property
    def level(self) -> int:
        return as_int(self.data.get("level"), 1) if "level" in self.data else 1

    @property
    def cols(self) -> int:
        return as_int(self.data.get("cols"), 2) if "cols" in self.data else 2

    @property
    def children(self) -> List[str]:
        """Ids of the entries this block references."""
        children = self.data.get("children")
        if not isinstance(children, list):
            return []
        return [as_text(child) for child in children]

    @property
    def text_runs(self) -> Any:
        """The raw "text" field (normally a list of runs)."""
        return self.data.get("text")

    @property
    def has_text(self) -> bool:
        return "text" in self.data

    @property
    def embed_type(self) -> str:
        return as_text(self.data.get("embedType"))

    @property
    def embed_data(self) -> Optional[Dict[str, Any]]:
        embed_data = self.data.get("embedData")
        return embed_data if isinstance(embed_data, dict) else None

    @property
    def language(self) -> str:
        return as_text(self.data.get("language"))


@dataclass
class WikiDocument:
    """A parsed block document.

    Attributes:
        nodes: Every entry of the root object, keyed by id
        blocks: Top-level blocks in document order
    """

    nodes: Dict[str, Any] = field(default_factory=dict)
    blocks: List[WikiBlock] = field(default_factory=list)

    def resolve(self, node_id: str) -> Any:
        """Look up a referenced entry; None when the id is unknown."""
        return self.nodes.get(node_id)
