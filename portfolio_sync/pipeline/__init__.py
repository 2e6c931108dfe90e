"""Project sync pipeline and suggestion rules."""

from .runner import ProjectSyncPipeline
from .suggestions import build_cv_entry, generate_cv_keywords, generate_suggested_highlights

__all__ = [
    "ProjectSyncPipeline",
    "build_cv_entry",
    "generate_cv_keywords",
    "generate_suggested_highlights",
]
