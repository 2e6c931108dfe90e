"""
Front matter splitting for content files.

Supports the narrow header dialect used by the site's MDX files:

    ---
    title: Ghosted
    techStack:
      - Go
      - Bubble Tea
    ---
    Body text

Only flat `key: value` fields and single-level lists are understood. Lines
that fit neither shape are dropped, and malformed input never raises: a file
without a recognizable header comes back as an empty mapping plus the whole
text as body.
"""

import re
from enum import Enum
from typing import Dict, List, Optional
import logging

from portfolio_sync.schemas import FieldValue, FrontMatter

logger = logging.getLogger(__name__)


class ParserState(str, Enum):
    NO_FIELD_OPEN = "no_field_open"
    LIST_ACCUMULATING = "list_accumulating"


class FrontMatterParser:
    """
    Line-oriented header parser with two states.

    In LIST_ACCUMULATING, list items are collected for the open field. Any
    field line finalizes the open list before doing anything else, so a list
    is always assigned before the next field is opened or written.
    """

    DOCUMENT_PATTERN = re.compile(r'\A---\n(.*?)\n---\n(.*)\Z', re.DOTALL)

    FIELD_OPEN_PATTERN = re.compile(r'^(\w+):\s*$')
    LIST_ITEM_PATTERN = re.compile(r'^\s+-\s+(.+)$')
    FIELD_VALUE_PATTERN = re.compile(r'^(\w+):\s*(.+)$')

    def __init__(self):
        self._reset()

    def _reset(self):
        self.fields: Dict[str, FieldValue] = {}
        self.state = ParserState.NO_FIELD_OPEN
        self.open_field: Optional[str] = None
        self.items: List[str] = []

    def split(self, text: str) -> FrontMatter:
        """
        Split text into header fields and body.

        Args:
            text: Raw content file text

        Returns:
            FrontMatter with parsed fields and the verbatim body
        """
        match = self.DOCUMENT_PATTERN.match(text or "")
        if not match:
            return FrontMatter(fields={}, body=text or "")

        header, body = match.group(1), match.group(2)
        return FrontMatter(fields=self.parse_header(header), body=body)

    def parse_header(self, header: str) -> Dict[str, FieldValue]:
        """Parse the lines between the delimiters into a field mapping."""
        self._reset()

        for line in header.split("\n"):
            self.feed(line)

        self.finish()
        return self.fields

    def feed(self, line: str):
        """Process one header line."""
        open_match = self.FIELD_OPEN_PATTERN.match(line)
        if open_match:
            self._open_list(open_match.group(1))
            return

        item_match = self.LIST_ITEM_PATTERN.match(line)
        if item_match:
            if self.state is ParserState.LIST_ACCUMULATING:
                self.items.append(item_match.group(1))
            return

        value_match = self.FIELD_VALUE_PATTERN.match(line)
        if value_match:
            self._close_list()
            self.fields[value_match.group(1)] = value_match.group(2)
            return

        logger.debug(f"Ignoring unrecognized front matter line: {line!r}")

    def finish(self):
        """Finalize a list still open after the last header line."""
        self._close_list()

    def _open_list(self, name: str):
        self._close_list()
        self.state = ParserState.LIST_ACCUMULATING
        self.open_field = name
        self.items = []

    def _close_list(self):
        if self.state is ParserState.LIST_ACCUMULATING and self.open_field:
            self.fields[self.open_field] = list(self.items)
        self.state = ParserState.NO_FIELD_OPEN
        self.open_field = None
        self.items = []


def split_frontmatter(text: str) -> FrontMatter:
    """
    Convenience function to split a content file into fields and body.

    Example:
        >>> result = split_frontmatter("---\\nname: Alpha\\n---\\nBody")
        >>> result.fields, result.body
        ({'name': 'Alpha'}, 'Body')
    """
    return FrontMatterParser().split(text)
