"""
GitHub API client for repository metadata, README text and commits.

Calls are made sequentially with no retry policy. Only the repository
metadata request is fatal; README and commit failures degrade to empty
values with a warning.
"""

import re
from dataclasses import dataclass
from typing import List, Optional
import logging

import requests

from portfolio_sync.config import SyncSettings
from portfolio_sync.schemas import CommitRecord, GitHubRepo

logger = logging.getLogger(__name__)

GITHUB_URL_PATTERN = re.compile(r'github\.com/([^/]+)/([^/]+)')

README_BRANCHES = ("main", "master")


class GitHubAPIError(RuntimeError):
    """Repository metadata could not be fetched."""


@dataclass(frozen=True)
class GitHubRepoRef:
    """Owner/repository pair parsed from a GitHub URL."""
    owner: str
    repo: str

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"


def parse_github_url(url: str) -> Optional[GitHubRepoRef]:
    """
    Parse `https://github.com/<owner>/<repo>[.git]`.

    Returns:
        GitHubRepoRef, or None when the URL does not name a repository
    """
    match = GITHUB_URL_PATTERN.search(url or "")
    if not match:
        return None

    repo = re.sub(r'\.git$', '', match.group(2))
    if not repo:
        return None

    return GitHubRepoRef(owner=match.group(1), repo=repo)


class GitHubClient:
    """Read-only client for the handful of GitHub endpoints the sync needs."""

    def __init__(
        self,
        settings: Optional[SyncSettings] = None,
        session: Optional[requests.Session] = None
    ):
        """
        Initialize the client.

        Args:
            settings: Sync settings (token, base URLs, timeout)
            session: HTTP session to use (default: a new requests.Session)
        """
        self.settings = settings or SyncSettings.from_env()
        self.session = session or requests.Session()

    @property
    def api_headers(self) -> dict:
        headers = {
            "Accept": "application/vnd.github.v3+json",
            "User-Agent": self.settings.user_agent,
        }
        if self.settings.github_token:
            headers["Authorization"] = f"Bearer {self.settings.github_token}"
        return headers

    def fetch_repo(self, ref: GitHubRepoRef) -> GitHubRepo:
        """
        Fetch repository metadata.

        Raises:
            GitHubAPIError: On network failure or a non-success status
        """
        url = f"{self.settings.github_api_url}/repos/{ref.full_name}"
        logger.info(f"Fetching repository metadata: {ref.full_name}")

        try:
            resp = self.session.get(url, headers=self.api_headers, timeout=self.settings.http_timeout)
        except requests.RequestException as e:
            raise GitHubAPIError(f"Failed to fetch repo {ref.full_name}: {e}") from e

        if not resp.ok:
            raise GitHubAPIError(f"Failed to fetch repo {ref.full_name}: {resp.status_code}")

        try:
            return GitHubRepo.model_validate(resp.json())
        except ValueError as e:
            raise GitHubAPIError(f"Unexpected repo payload for {ref.full_name}: {e}") from e

    def fetch_readme(self, ref: GitHubRepoRef) -> str:
        """
        Fetch README.md from the main branch, falling back to master.

        Returns:
            README text, or "" when neither branch has one
        """
        for branch in README_BRANCHES:
            url = f"{self.settings.github_raw_url}/{ref.full_name}/{branch}/README.md"
            try:
                resp = self.session.get(
                    url,
                    headers={"User-Agent": self.settings.user_agent},
                    timeout=self.settings.http_timeout
                )
            except requests.RequestException as e:
                logger.warning(f"Could not fetch README from {branch}: {e}")
                continue

            if resp.ok:
                logger.debug(f"Fetched README from {branch} ({len(resp.text)} chars)")
                return resp.text

            logger.debug(f"No README on {branch}: {resp.status_code}")

        logger.warning(f"Could not fetch README for {ref.full_name}")
        return ""

    def fetch_commits(self, ref: GitHubRepoRef, per_page: int = 20) -> List[CommitRecord]:
        """
        Fetch the most recent commits, newest first.

        Returns:
            Commit records, or [] when the request fails
        """
        url = f"{self.settings.github_api_url}/repos/{ref.full_name}/commits"

        try:
            resp = self.session.get(
                url,
                headers=self.api_headers,
                params={"per_page": per_page},
                timeout=self.settings.http_timeout
            )
        except requests.RequestException as e:
            logger.warning(f"Could not fetch commits for {ref.full_name}: {e}")
            return []

        if not resp.ok:
            logger.warning(f"Could not fetch commits for {ref.full_name}: {resp.status_code}")
            return []

        try:
            payload = resp.json()
        except ValueError as e:
            logger.warning(f"Malformed commit list for {ref.full_name}: {e}")
            return []

        return [CommitRecord.from_api(item) for item in payload if isinstance(item, dict)]
