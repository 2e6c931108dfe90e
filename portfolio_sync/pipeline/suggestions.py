"""
Content suggestions derived from fetched repository data.

Every function here is a pure function of RepoData, so re-running on the
same fetched data always produces the same suggestions.
"""

from typing import Callable, List, Tuple

from portfolio_sync.schemas import CvProjectEntry, RepoData

MAX_KEYWORDS = 8

CV_ENTRY_TYPE = "application"


def _mentions_any_change(data: RepoData, *needles: str, case_sensitive: Tuple[str, ...] = ()) -> bool:
    for change in data.recent_changes:
        lowered = change.lower()
        if any(needle in lowered for needle in needles):
            return True
        if any(needle in change for needle in case_sensitive):
            return True
    return False


# (rule, highlight) pairs, checked in order
HIGHLIGHT_RULES: List[Tuple[Callable[[RepoData], bool], str]] = [
    (
        lambda d: "tui" in d.repo.topics or "TUI" in d.readme,
        "Full-featured Terminal User Interface with vim-style navigation and keyboard shortcuts",
    ),
    (
        lambda d: "cli" in d.repo.topics or "CLI" in d.readme,
        "Scriptable CLI interface designed for AI agent integration with JSON I/O",
    ),
    (
        lambda d: "AI agent" in d.readme or "agent pipeline" in d.readme,
        "Multi-agent pipeline for automated document generation and job application workflow",
    ),
    (
        lambda d: _mentions_any_change(d, "compile", case_sensitive=("PDF",)),
        "Document compilation system converting Typst files to PDFs with smart naming",
    ),
    (
        lambda d: _mentions_any_change(d, "fetch"),
        "Job board integration fetching postings from Lever, Greenhouse, Workday, LinkedIn",
    ),
]

# README marker -> keyword
README_KEYWORDS: List[Tuple[Tuple[str, ...], str]] = [
    (("Bubble Tea",), "Bubble Tea"),
    (("TUI",), "TUI"),
    (("CLI",), "CLI"),
    (("AI agent",), "AI Integration"),
    (("open source", "MIT"), "Open Source"),
]


def generate_suggested_highlights(data: RepoData) -> List[str]:
    """Suggest MDX highlights from topics, README markers and recent changes."""
    return [highlight for rule, highlight in HIGHLIGHT_RULES if rule(data)]


def generate_cv_keywords(data: RepoData) -> List[str]:
    """
    Suggest cv.json keywords.

    Language first, then capitalized topics, then README markers; duplicates
    removed and the list capped at MAX_KEYWORDS.
    """
    keywords = []

    if data.repo.language:
        keywords.append(data.repo.language)

    for topic in data.repo.topics:
        keywords.append(_capitalize(topic))

    for markers, keyword in README_KEYWORDS:
        if any(marker in data.readme for marker in markers):
            keywords.append(keyword)

    return list(dict.fromkeys(keywords))[:MAX_KEYWORDS]


def build_cv_entry(data: RepoData, highlights: List[str], keywords: List[str]) -> CvProjectEntry:
    """Assemble the suggested cv.json project entry."""
    return CvProjectEntry(
        name=_capitalize(data.repo.name),
        description=data.repo.description,
        highlights=list(highlights),
        keywords=list(keywords),
        start_date=data.repo.created_at[:7],
        url=data.repo.html_url,
        type=CV_ENTRY_TYPE,
    )


def _capitalize(value: str) -> str:
    """Upper-case the first character only ("bubble-tea" -> "Bubble-tea")."""
    return value[:1].upper() + value[1:]
