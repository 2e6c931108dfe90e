"""Content collection schemas and validation."""

from .schemas import (
    BlogFrontmatter,
    COLLECTIONS,
    ContentSchema,
    MediaGallery,
    MediaItem,
    ProjectFrontmatter,
    VisualFrontmatter,
)
from .loader import (
    CollectionReport,
    ContentEntry,
    ContentError,
    load_all_collections,
    load_collection,
    parse_document,
    validate_entry,
)

__all__ = [
    "BlogFrontmatter",
    "COLLECTIONS",
    "ContentSchema",
    "MediaGallery",
    "MediaItem",
    "ProjectFrontmatter",
    "VisualFrontmatter",
    "CollectionReport",
    "ContentEntry",
    "ContentError",
    "load_all_collections",
    "load_collection",
    "parse_document",
    "validate_entry",
]
