"""
Shared fixtures: a fake HTTP session standing in for the GitHub API.
"""

from pathlib import Path

import pytest
import requests

from portfolio_sync.config import SyncSettings


SAMPLE_README = """# Ghosted

A terminal job application tracker.

## Features
- Track applications from the terminal
- Vim-style TUI navigation
- Export to JSON for AI agent workflows

## Install

Licensed under MIT.
"""

SAMPLE_REPO = {
    "name": "ghosted",
    "description": "Job application tracker for the terminal",
    "topics": ["go", "tui"],
    "language": "Go",
    "html_url": "https://github.com/celloopa/ghosted",
    "created_at": "2024-03-05T12:00:00Z",
    "updated_at": "2024-06-01T08:30:00Z",
    "pushed_at": "2024-06-01T08:30:00Z",
}

SAMPLE_COMMITS = [
    {"sha": "a1b2c3d4", "commit": {"message": "Add fetch command for job boards\n\nDetails", "author": {"date": "2024-06-01T08:30:00Z"}}},
    {"sha": "b2c3d4e5", "commit": {"message": "Merge branch 'feature/pdf'", "author": {"date": "2024-05-30T10:00:00Z"}}},
    {"sha": "c3d4e5f6", "commit": {"message": "fix", "author": {"date": "2024-05-29T10:00:00Z"}}},
    {"sha": "d4e5f6a7", "commit": {"message": "Compile Typst resumes to PDF", "author": {"date": "2024-05-28T10:00:00Z"}}},
]


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, status_code=200, json_data=None, text=""):
        self.status_code = status_code
        self._json = json_data
        self.text = text

    @property
    def ok(self):
        return self.status_code < 400

    def json(self):
        if self._json is None:
            raise ValueError("No JSON body")
        return self._json


class FakeSession:
    """
    Routes GET requests by URL suffix.

    routes maps a URL suffix to a FakeResponse or an exception instance.
    Unrouted URLs return 404. Every call is recorded.
    """

    def __init__(self, routes=None):
        self.routes = routes or {}
        self.calls = []

    def get(self, url, headers=None, params=None, timeout=None):
        self.calls.append({"url": url, "headers": headers or {}, "params": params, "timeout": timeout})
        for suffix, response in self.routes.items():
            if url.endswith(suffix):
                if isinstance(response, Exception):
                    raise response
                return response
        return FakeResponse(status_code=404)


def github_routes(readme=SAMPLE_README, commits=SAMPLE_COMMITS, repo=SAMPLE_REPO):
    """Routes for a healthy repository with a README on main."""
    return {
        "/repos/celloopa/ghosted": FakeResponse(json_data=repo),
        "/celloopa/ghosted/main/README.md": FakeResponse(text=readme),
        "/repos/celloopa/ghosted/commits": FakeResponse(json_data=commits),
    }


@pytest.fixture
def settings(tmp_path) -> SyncSettings:
    """Settings pointing at a temporary content tree."""
    content_dir = tmp_path / "content"
    (content_dir / "projects").mkdir(parents=True)
    return SyncSettings(
        github_token=None,
        content_dir=content_dir,
        cv_path=tmp_path / "cv.json",
    )


@pytest.fixture
def project_file(settings) -> Path:
    """A project MDX file that links to the sample repository."""
    path = settings.projects_dir / "ghosted.mdx"
    path.write_text(
        "---\n"
        "title: Ghosted\n"
        "description: Job tracker\n"
        "github: https://github.com/celloopa/ghosted\n"
        "techStack:\n"
        "  - Go\n"
        "  - Bubble Tea\n"
        "role: Developer\n"
        "highlights:\n"
        "  - Keyboard-driven interface\n"
        "  - Local-first storage\n"
        "---\n"
        "Ghosted keeps track of job applications.\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def network_error():
    return requests.ConnectionError("connection refused")
