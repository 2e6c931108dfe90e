"""
Runtime configuration for portfolio-sync.

Values come from environment variables, optionally loaded from a .env file
found by walking up from the current working directory.
"""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv, find_dotenv
from pydantic import BaseModel, Field

load_dotenv(find_dotenv())


class SyncSettings(BaseModel):
    """Settings shared by the sync pipeline, content checks and CV export."""
    github_token: Optional[str] = Field(None, description="Token for higher GitHub API rate limits")
    github_api_url: str = Field("https://api.github.com", description="GitHub REST API base URL")
    github_raw_url: str = Field("https://raw.githubusercontent.com", description="Raw file host base URL")
    user_agent: str = Field("portfolio-sync-script", description="User-Agent sent with every request")
    content_dir: Path = Field(Path("src/content"), description="Root of the content collections")
    cv_path: Path = Field(Path("src/data/cv.json"), description="CV document served by the export endpoint")
    http_timeout: Optional[float] = Field(None, description="Per-request timeout in seconds (None waits indefinitely)")

    @property
    def projects_dir(self) -> Path:
        """Directory holding project MDX files."""
        return self.content_dir / "projects"

    @classmethod
    def from_env(cls) -> "SyncSettings":
        """Build settings from the process environment."""
        values = {}

        token = os.getenv("GITHUB_TOKEN")
        if token:
            values["github_token"] = token

        if os.getenv("GITHUB_API_URL"):
            values["github_api_url"] = os.environ["GITHUB_API_URL"].rstrip("/")
        if os.getenv("GITHUB_RAW_URL"):
            values["github_raw_url"] = os.environ["GITHUB_RAW_URL"].rstrip("/")
        if os.getenv("PORTFOLIO_CONTENT_DIR"):
            values["content_dir"] = Path(os.environ["PORTFOLIO_CONTENT_DIR"])
        if os.getenv("PORTFOLIO_CV_PATH"):
            values["cv_path"] = Path(os.environ["PORTFOLIO_CV_PATH"])
        if os.getenv("PORTFOLIO_HTTP_TIMEOUT"):
            values["http_timeout"] = float(os.environ["PORTFOLIO_HTTP_TIMEOUT"])

        return cls(**values)
