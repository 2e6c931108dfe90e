"""
File scanner for content directories.

Walks a content directory to find MDX/Markdown files. Used by the sync
pipeline to locate the project file that references a repository, and by
the content checker to enumerate collection entries.
"""

from pathlib import Path
from typing import Iterator, List, Optional, Set
import logging

logger = logging.getLogger(__name__)


class ContentFileScanner:
    """
    Recursively scan a content directory for supported file types.

    Excludes hidden entries and common build/cache directories.
    """

    SUPPORTED_EXTENSIONS = {'.md', '.mdx'}

    DEFAULT_EXCLUDE_DIRS = {
        'node_modules',
        '__pycache__',
        'dist',
        'build',
        '.astro',
    }

    def __init__(
        self,
        base_path: Path,
        extensions: Optional[Set[str]] = None,
        exclude_dirs: Optional[Set[str]] = None
    ):
        """
        Initialize the file scanner.

        Args:
            base_path: Base directory to scan
            extensions: File extensions to include (default: .md, .mdx)
            exclude_dirs: Directory names to exclude (default: common build dirs)

        Raises:
            ValueError: If base_path is missing or not a directory
        """
        self.base_path = Path(base_path).resolve()
        self.extensions = extensions or self.SUPPORTED_EXTENSIONS
        self.exclude_dirs = exclude_dirs or self.DEFAULT_EXCLUDE_DIRS

        if not self.base_path.exists():
            raise ValueError(f"Base path does not exist: {self.base_path}")

        if not self.base_path.is_dir():
            raise ValueError(f"Base path is not a directory: {self.base_path}")

    def scan(self) -> List[Path]:
        """
        Scan the base directory for content files.

        Returns:
            Matching files, sorted by path for consistent ordering
        """
        files = sorted(
            path for path in self._walk_directory(self.base_path)
            if path.suffix in self.extensions
        )
        logger.debug(f"Found {len(files)} content files under {self.base_path}")
        return files

    def find_containing(self, needle: str) -> Optional[Path]:
        """
        Find the first file whose text contains needle.

        Args:
            needle: Substring to look for (e.g. a repository URL)

        Returns:
            Path of the first match in scan order, or None
        """
        for path in self.scan():
            content = path.read_text(encoding='utf-8', errors='ignore')
            if needle in content:
                logger.info(f"Found matching content file: {path.name}")
                return path

        return None

    def _walk_directory(self, directory: Path) -> Iterator[Path]:
        try:
            for item in directory.iterdir():
                if item.name.startswith('.'):
                    continue

                if item.is_dir():
                    if item.name in self.exclude_dirs:
                        continue
                    yield from self._walk_directory(item)

                elif item.is_file():
                    yield item

        except PermissionError:
            logger.warning(f"Permission denied accessing: {directory}")


def find_project_file(projects_dir: Path, repo_url: str) -> Optional[Path]:
    """
    Locate the project MDX file that references repo_url.

    A missing projects directory is not an error; it just means no file.

    Example:
        >>> find_project_file(Path("src/content/projects"), "https://github.com/celloopa/ghosted")
        PosixPath('.../src/content/projects/ghosted.mdx')
    """
    try:
        scanner = ContentFileScanner(projects_dir, extensions={'.mdx'})
    except ValueError as e:
        logger.warning(f"Skipping project file lookup: {e}")
        return None

    return scanner.find_containing(repo_url)
