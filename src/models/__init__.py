"""Data models for wiki page references and block documents."""

from src.models.wiki_document import BlockKind, WikiBlock, WikiDocument
from src.models.wiki_reference import WikiReference

__all__ = ['BlockKind', 'WikiBlock', 'WikiDocument', 'WikiReference']
