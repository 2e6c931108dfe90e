"""Extraction components for README, commit and content file text."""

from .feature_extractor import FeatureExtractor, extract_features, MAX_FEATURES
from .commit_summarizer import extract_recent_changes
from .frontmatter import FrontMatterParser, ParserState, split_frontmatter

__all__ = [
    "FeatureExtractor",
    "extract_features",
    "MAX_FEATURES",
    "extract_recent_changes",
    "FrontMatterParser",
    "ParserState",
    "split_frontmatter",
]
