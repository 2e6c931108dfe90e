"""
Centralized Pydantic schemas for the sync pipeline.

Architecture:
- GitHubRepo: Repository metadata returned by the GitHub API
- CommitRecord: Minimal commit metadata (sha, message, date)
- RepoData: Everything fetched and extracted for one repository
- FrontMatter: Result of splitting a content file into header fields and body
- CvProjectEntry: Suggested cv.json project entry
- SyncResult: Complete output of one sync run
"""

from pathlib import Path
from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, List, Optional, Union


# ============================================================================
# GITHUB SCHEMAS
# ============================================================================

class GitHubRepo(BaseModel):
    """Repository metadata from GET /repos/{owner}/{repo}."""
    name: str = Field(description="Repository name")
    description: Optional[str] = Field(None, description="Repository description")
    topics: List[str] = Field(default_factory=list, description="Repository topics")
    language: Optional[str] = Field(None, description="Primary language")
    html_url: str = Field(description="Canonical web URL")
    created_at: str = Field(description="ISO creation timestamp")
    updated_at: str = Field("", description="ISO last update timestamp")
    pushed_at: str = Field("", description="ISO last push timestamp")


class CommitRecord(BaseModel):
    """Minimal metadata about one commit."""
    sha: str = Field(description="Commit identifier")
    message: str = Field(description="Full commit message")
    date: str = Field("", description="Author timestamp")

    @property
    def summary(self) -> str:
        """First line of the message."""
        return self.message.split("\n")[0]

    @classmethod
    def from_api(cls, payload: Dict[str, Any]) -> "CommitRecord":
        """Build from one item of GET /repos/{owner}/{repo}/commits."""
        commit = payload.get("commit") or {}
        author = commit.get("author") or {}
        return cls(
            sha=payload.get("sha", ""),
            message=commit.get("message") or "",
            date=author.get("date") or "",
        )


class RepoData(BaseModel):
    """Fetched repository data plus extracted features and recent changes."""
    repo: GitHubRepo
    readme: str = Field("", description="Raw README markdown (empty when unavailable)")
    commits: List[CommitRecord] = Field(default_factory=list)
    features: List[str] = Field(default_factory=list, description="Feature phrases extracted from the README")
    recent_changes: List[str] = Field(default_factory=list, description="Filtered commit summaries")


# ============================================================================
# CONTENT SCHEMAS
# ============================================================================

FieldValue = Union[str, List[str]]


class FrontMatter(BaseModel):
    """Header fields and body of a content file."""
    fields: Dict[str, FieldValue] = Field(default_factory=dict)
    body: str = ""


class CvProjectEntry(BaseModel):
    """Suggested project entry for cv.json."""
    model_config = ConfigDict(populate_by_name=True)

    name: str
    description: Optional[str] = None
    highlights: List[str] = Field(default_factory=list)
    keywords: List[str] = Field(default_factory=list)
    start_date: str = Field(alias="startDate", description="Creation month, YYYY-MM")
    url: str
    type: str = "application"

    def to_cv_dict(self) -> Dict[str, Any]:
        """Serialize with cv.json key names, in cv.json key order."""
        return self.model_dump(by_alias=True)


# ============================================================================
# OUTPUT SCHEMAS
# ============================================================================

class SyncResult(BaseModel):
    """Complete, printable output of a sync run."""
    data: RepoData
    project_file: Optional[Path] = Field(None, description="Local MDX file referencing the repository")
    existing_frontmatter: Optional[FrontMatter] = None
    suggested_highlights: List[str] = Field(default_factory=list)
    suggested_keywords: List[str] = Field(default_factory=list)
    cv_entry: CvProjectEntry
