"""Summarize recent commit messages into human-readable change lines."""

from typing import List, Sequence
import logging

from portfolio_sync.schemas import CommitRecord

logger = logging.getLogger(__name__)

MAX_COMMITS = 10
MIN_SUMMARY_LENGTH = 10


def extract_recent_changes(commits: Sequence[CommitRecord]) -> List[str]:
    """
    Keep the first line of each of the most recent commits.

    Merge commits and trivially short messages are dropped. Input order
    (most recent first) is preserved and nothing is deduplicated.

    Args:
        commits: Commit records, most recent first

    Returns:
        Change summaries from at most the first MAX_COMMITS commits
    """
    changes = []

    for commit in commits[:MAX_COMMITS]:
        summary = commit.summary
        if summary.startswith("Merge") or len(summary.strip()) < MIN_SUMMARY_LENGTH:
            logger.debug(f"Skipping commit {commit.sha[:7]}: {summary!r}")
            continue
        changes.append(summary)

    return changes
