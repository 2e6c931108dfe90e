"""
Content collection loading and validation.

Reads every entry of a collection directory, parses its YAML front matter
and validates it against the collection schema. Invalid entries are reported,
not raised, so one broken file does not hide problems in the others.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Tuple
import logging

import yaml
from pydantic import ValidationError

from portfolio_sync.content.schemas import COLLECTIONS, ContentSchema
from portfolio_sync.extractors import FrontMatterParser
from portfolio_sync.utils import ContentFileScanner

logger = logging.getLogger(__name__)


@dataclass
class ContentEntry:
    """A validated collection entry."""
    slug: str
    path: Path
    data: ContentSchema
    body: str


@dataclass
class ContentError:
    """A collection entry that failed validation."""
    slug: str
    path: Path
    errors: List[str]


@dataclass
class CollectionReport:
    """Validation outcome for one collection."""
    collection: str
    entries: List[ContentEntry] = field(default_factory=list)
    errors: List[ContentError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


def parse_document(text: str) -> Tuple[Dict[str, Any], str]:
    """
    Split a content file into its YAML header and body.

    A file without a `---` delimited header has no fields; the whole
    text is the body.

    Raises:
        yaml.YAMLError: If the header is not valid YAML
        ValueError: If the header is not a mapping
    """
    match = FrontMatterParser.DOCUMENT_PATTERN.match(text)
    if not match:
        return {}, text

    header = yaml.safe_load(match.group(1)) or {}
    if not isinstance(header, dict):
        raise ValueError("Front matter must be a mapping of field names to values")
    return header, match.group(2)


def _format_errors(error: ValidationError) -> List[str]:
    messages = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"]) or "<root>"
        messages.append(f"{location}: {item['msg']}")
    return messages


def validate_entry(collection: str, path: Path) -> ContentEntry:
    """
    Validate one content file.

    Raises:
        ValueError: If the collection is unknown or the header is not a mapping
        OSError, UnicodeDecodeError: If the file cannot be read as UTF-8
        yaml.YAMLError: If the header is not valid YAML
        ValidationError: If the front matter does not fit the schema
    """
    if collection not in COLLECTIONS:
        raise ValueError(f"Unknown collection: {collection}")

    schema = COLLECTIONS[collection]
    header, body = parse_document(path.read_text(encoding='utf-8'))
    data = schema.model_validate(header)
    return ContentEntry(slug=path.stem, path=path, data=data, body=body)


def load_collection(content_dir: Path, collection: str) -> CollectionReport:
    """
    Validate every entry in content_dir/collection.

    Args:
        content_dir: Root content directory (e.g. src/content)
        collection: Collection name (projects, visuals, blog)

    Returns:
        CollectionReport with valid entries and per-file errors

    Raises:
        ValueError: If the collection is unknown
    """
    if collection not in COLLECTIONS:
        raise ValueError(f"Unknown collection: {collection}")

    report = CollectionReport(collection=collection)
    collection_dir = Path(content_dir) / collection

    if not collection_dir.is_dir():
        logger.warning(f"Collection directory not found: {collection_dir}")
        return report

    for path in ContentFileScanner(collection_dir).scan():
        try:
            report.entries.append(validate_entry(collection, path))
        except ValidationError as e:
            logger.debug(f"Invalid {collection} entry {path.name}: {e}")
            report.errors.append(ContentError(slug=path.stem, path=path, errors=_format_errors(e)))
        except UnicodeDecodeError as e:
            logger.debug(f"Unreadable {collection} entry {path.name}: {e}")
            report.errors.append(ContentError(
                slug=path.stem, path=path,
                errors=[f"<file>: not valid UTF-8 ({e.reason} at byte {e.start})"],
            ))
        except OSError as e:
            logger.debug(f"Unreadable {collection} entry {path.name}: {e}")
            report.errors.append(ContentError(slug=path.stem, path=path, errors=[f"<file>: {e}"]))
        except (yaml.YAMLError, ValueError) as e:
            logger.debug(f"Malformed front matter in {collection} entry {path.name}: {e}")
            message = " ".join(str(e).split())
            report.errors.append(ContentError(
                slug=path.stem, path=path, errors=[f"<front matter>: {message}"]
            ))

    logger.info(
        f"Collection {collection}: {len(report.entries)} valid, {len(report.errors)} invalid"
    )
    return report


def load_all_collections(content_dir: Path) -> List[CollectionReport]:
    """Validate every known collection under content_dir."""
    return [load_collection(content_dir, name) for name in COLLECTIONS]
