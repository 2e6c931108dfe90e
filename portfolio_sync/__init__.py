"""
Portfolio Sync - content tooling for a personal portfolio site.

Main Components:
- Extractors: README feature phrases, commit summaries, front matter splitting
- GitHub: repository metadata, README and commit fetching
- Pipeline: sync orchestration and content suggestions
- Content: collection schemas and validation
- Server: JSON export endpoint for the CV document

Usage:
    from portfolio_sync.pipeline import ProjectSyncPipeline

    pipeline = ProjectSyncPipeline(repo_url="https://github.com/celloopa/ghosted")
    result = pipeline.run()
"""

__version__ = "0.1.0"
