"""
Utility functions for portfolio-sync.
"""

from .file_scanner import ContentFileScanner, find_project_file

__all__ = [
    'ContentFileScanner',
    'find_project_file'
]
