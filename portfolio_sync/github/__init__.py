"""GitHub access for the sync pipeline."""

from .client import GitHubAPIError, GitHubClient, GitHubRepoRef, parse_github_url

__all__ = ["GitHubAPIError", "GitHubClient", "GitHubRepoRef", "parse_github_url"]
