"""
Pipeline runner that orchestrates a project sync.

This module coordinates:
1. Parsing the GitHub URL
2. Fetching repository metadata, README and commits
3. Extracting features and recent changes
4. Locating the local project MDX file and reading its front matter
5. Generating highlight, keyword and cv.json suggestions
"""

from pathlib import Path
from typing import Optional
import logging

from portfolio_sync.config import SyncSettings
from portfolio_sync.extractors import extract_features, extract_recent_changes, split_frontmatter
from portfolio_sync.github import GitHubClient, GitHubRepoRef, parse_github_url
from portfolio_sync.pipeline.suggestions import (
    build_cv_entry,
    generate_cv_keywords,
    generate_suggested_highlights,
)
from portfolio_sync.schemas import FrontMatter, RepoData, SyncResult
from portfolio_sync.utils import find_project_file

logger = logging.getLogger(__name__)


class ProjectSyncPipeline:
    """Fetches one repository and computes advisory content updates."""

    def __init__(
        self,
        repo_url: str,
        settings: Optional[SyncSettings] = None,
        client: Optional[GitHubClient] = None,
    ):
        """
        Initialize the sync pipeline.

        Args:
            repo_url: GitHub repository URL, as written in the project MDX file
            settings: Sync settings (default: read from environment)
            client: GitHub client (default: one built from settings)

        Raises:
            ValueError: If repo_url is not a GitHub repository URL
        """
        self.repo_url = repo_url
        self.settings = settings or SyncSettings.from_env()
        self.client = client or GitHubClient(self.settings)

        ref = parse_github_url(repo_url)
        if ref is None:
            raise ValueError(f"Invalid GitHub URL: {repo_url}")
        self.ref: GitHubRepoRef = ref

    def fetch(self) -> RepoData:
        """
        Fetch repository data and run the extractors.

        Raises:
            GitHubAPIError: If repository metadata cannot be fetched
        """
        repo = self.client.fetch_repo(self.ref)
        readme = self.client.fetch_readme(self.ref)
        commits = self.client.fetch_commits(self.ref)

        return RepoData(
            repo=repo,
            readme=readme,
            commits=commits,
            features=extract_features(readme),
            recent_changes=extract_recent_changes(commits),
        )

    def find_existing_project(self) -> Optional[Path]:
        """Find the local project MDX file that references this repository."""
        return find_project_file(self.settings.projects_dir, self.repo_url)

    def run(self) -> SyncResult:
        """Run the full sync and return the suggestions."""
        logger.info(f"Syncing {self.ref.full_name}")
        data = self.fetch()

        project_file = self.find_existing_project()
        existing: Optional[FrontMatter] = None
        if project_file is not None:
            try:
                existing = split_frontmatter(project_file.read_text(encoding='utf-8', errors='ignore'))
            except OSError as e:
                logger.warning(f"Could not read project file {project_file}: {e}")
                project_file = None
        else:
            logger.info(f"No project file references {self.repo_url}")

        highlights = generate_suggested_highlights(data)
        keywords = generate_cv_keywords(data)

        return SyncResult(
            data=data,
            project_file=project_file,
            existing_frontmatter=existing,
            suggested_highlights=highlights,
            suggested_keywords=keywords,
            cv_entry=build_cv_entry(data, highlights, keywords),
        )
