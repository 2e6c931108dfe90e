"""
Pydantic schemas for the site's content collections.

Collections:
- projects: Software projects with tech stack and highlights
- visuals: Design and media work grouped by category
- blog: Posts with publish/update dates

Field names follow the front matter keys used in the content files
(camelCase); Python attributes are snake_case.
"""

from datetime import date, datetime
from typing import Dict, List, Literal, Optional, Type

from pydantic import AnyUrl, BaseModel, ConfigDict, Field, field_validator


# ============================================================================
# MEDIA SCHEMAS
# ============================================================================

class MediaItem(BaseModel):
    """One image or video in a gallery."""
    src: str
    alt: Optional[str] = None
    caption: Optional[str] = None


class MediaGallery(BaseModel):
    """Gallery section with a column layout."""
    layout: Literal["full", "two", "three"]
    items: List[MediaItem]


# ============================================================================
# COLLECTION SCHEMAS
# ============================================================================

class ContentSchema(BaseModel):
    """Base for collection front matter schemas."""
    model_config = ConfigDict(populate_by_name=True)


class ProjectFrontmatter(ContentSchema):
    """Front matter of a projects/*.mdx entry."""
    title: str
    description: str
    image: Optional[str] = None
    url: Optional[AnyUrl] = None
    github: Optional[AnyUrl] = None
    tech_stack: List[str] = Field(alias="techStack")
    role: str
    highlights: List[str]
    featured: bool = False
    order: float = 0
    media: Optional[List[MediaGallery]] = None


class VisualFrontmatter(ContentSchema):
    """Front matter of a visuals/*.mdx entry."""
    title: str
    description: str
    category: Literal["packaging", "graphic", "motion", "video", "photography"]
    image: Optional[str] = None
    tags: Optional[List[str]] = None
    featured: bool = False
    order: float = 0
    media: Optional[List[MediaGallery]] = None


class BlogFrontmatter(ContentSchema):
    """Front matter of a blog/*.mdx entry."""
    title: str
    description: str
    publish_date: datetime = Field(alias="publishDate")
    updated_date: Optional[datetime] = Field(None, alias="updatedDate")
    image: Optional[str] = None
    tags: Optional[List[str]] = None
    draft: bool = False

    @field_validator('publish_date', 'updated_date', mode='before')
    @classmethod
    def convert_date_to_datetime(cls, v):
        """YAML reads bare dates (2024-01-15) as dates, not datetimes."""
        if isinstance(v, date) and not isinstance(v, datetime):
            return datetime(v.year, v.month, v.day)
        return v


COLLECTIONS: Dict[str, Type[ContentSchema]] = {
    "projects": ProjectFrontmatter,
    "visuals": VisualFrontmatter,
    "blog": BlogFrontmatter,
}
