"""
Feature phrase extraction from README markdown.

Guesses short capability descriptions from a README using two heuristics:
- Bullet points under feature-style headings (## Features, ## Key Features, ...)
- Bold runs (**...**) that read like a short description rather than a label

Results are suggestions for a human reviewer, never authoritative.
"""

import re
from typing import List, Optional
import logging

logger = logging.getLogger(__name__)

MAX_FEATURES = 20


class FeatureExtractor:
    """
    Extract feature phrases from README text.

    Handles:
    - Section headings: ## Features, ## Core Features, ## Key Features, ## Capabilities
    - Bold title followed by a plain description line
    - Standalone bold phrases between 10 and 100 characters without a colon
    """

    # Section body runs until the next "##" heading or a trailing newline at end of text
    SECTION_PATTERNS = [
        re.compile(r'## Features?\n(.*?)(?=\n##|\n\Z)', re.IGNORECASE | re.DOTALL),
        re.compile(r'## Core Features?\n(.*?)(?=\n##|\n\Z)', re.IGNORECASE | re.DOTALL),
        re.compile(r'## Key Features?\n(.*?)(?=\n##|\n\Z)', re.IGNORECASE | re.DOTALL),
        re.compile(r'## Capabilities\n(.*?)(?=\n##|\n\Z)', re.IGNORECASE | re.DOTALL),
    ]

    # **Title**\nDescription line
    BOLD_BLOCK_PATTERN = re.compile(r'\*\*[^*]+\*\*\n[^*\n]+')

    BULLET_PATTERN = re.compile(r'^[ \t]*[-*][ \t]+(.+)$', re.MULTILINE)

    BOLD_RUN_PATTERN = re.compile(r'\*\*([^*]+)\*\*')

    MIN_BOLD_LENGTH = 10
    MAX_BOLD_LENGTH = 100

    def __init__(self, max_features: int = MAX_FEATURES):
        self.max_features = max_features

    def extract(self, readme: Optional[str]) -> List[str]:
        """
        Extract feature phrases from README text.

        Args:
            readme: Raw README markdown (None or empty is allowed)

        Returns:
            Unique phrases in first-seen order, at most max_features long
        """
        if not readme:
            return []

        candidates = []

        # 1. Bullets under feature-style headings
        for pattern in self.SECTION_PATTERNS:
            for match in pattern.finditer(readme):
                candidates.extend(self._extract_bullets(match.group(1)))

        # 2. Bold title + description blocks
        for match in self.BOLD_BLOCK_PATTERN.finditer(readme):
            candidates.extend(self._extract_bullets(match.group(0)))

        # 3. Standalone bold phrases
        for match in self.BOLD_RUN_PATTERN.finditer(readme):
            phrase = match.group(1)
            if self._is_feature_phrase(phrase):
                candidates.append(phrase)

        features = list(dict.fromkeys(candidates))[:self.max_features]
        logger.debug(f"Extracted {len(features)} features from {len(candidates)} candidates")
        return features

    def _extract_bullets(self, section: str) -> List[str]:
        """Return the text of every bulleted line, marker stripped."""
        bullets = []
        for match in self.BULLET_PATTERN.finditer(section):
            text = match.group(1).strip()
            if text:
                bullets.append(text)
        return bullets

    def _is_feature_phrase(self, phrase: str) -> bool:
        """Bold text reads like a feature, not a "Label:" or a single word."""
        length = len(phrase.strip())
        return self.MIN_BOLD_LENGTH < length < self.MAX_BOLD_LENGTH and ':' not in phrase


def extract_features(readme: Optional[str]) -> List[str]:
    """
    Convenience function to extract feature phrases from a README.

    Example:
        >>> extract_features("## Features\\n- Fast search\\n- Offline mode\\n")
        ['Fast search', 'Offline mode']
    """
    return FeatureExtractor().extract(readme)
