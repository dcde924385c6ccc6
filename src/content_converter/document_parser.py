"""Parser for ONES wiki block documents.

This module parses the JSON content returned by the wiki API into a
WikiDocument index for rendering.
"""

import json
import logging
from typing import Any, Dict

from src.models.wiki_document import WikiBlock, WikiDocument
from src.ones_client.errors import ContentParseError

logger = logging.getLogger(__name__)


class WikiDocumentParser:
    """Parser for block documents.

    Converts the JSON root object to a WikiDocument whose blocks keep the
    order of the "blocks" array.
    """

    def parse_document(self, root: Dict[str, Any]) -> WikiDocument:
        """Parse a decoded block document.

        Args:
            root: The document as a dictionary (parsed JSON)

        Returns:
            WikiDocument indexing every root entry by id

        Raises:
            ContentParseError: If the root is not a JSON object
        """
        if not isinstance(root, dict):
            raise ContentParseError(
                f"Block document must be a JSON object, got {type(root).__name__}"
            )

        blocks_data = root.get("blocks")
        if not isinstance(blocks_data, list):
            logger.debug("Block document has no blocks array")
            blocks_data = []

        blocks = [
            WikiBlock(data=block) if isinstance(block, dict) else WikiBlock()
            for block in blocks_data
        ]

        return WikiDocument(nodes=root, blocks=blocks)

    def parse_from_string(self, raw: str) -> WikiDocument:
        """Parse a block document from its JSON string.

        Raises:
            ContentParseError: If the string is not valid JSON or not an object
        """
        try:
            root = json.loads(raw)
        except ValueError as e:
            raise ContentParseError(f"Invalid block document JSON: {e}") from e
        return self.parse_document(root)
