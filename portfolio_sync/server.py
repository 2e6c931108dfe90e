"""FastAPI server exposing the CV document as JSON."""

import json
import logging
from pathlib import Path
from typing import Any, Optional

from fastapi import FastAPI, HTTPException, Response

from portfolio_sync import __version__
from portfolio_sync.config import SyncSettings

logger = logging.getLogger(__name__)


def load_cv(cv_path: Path) -> Any:
    """
    Read the CV document.

    Raises:
        FileNotFoundError: If cv_path does not exist
        ValueError: If the file is not valid JSON
    """
    with open(cv_path, encoding='utf-8') as f:
        return json.load(f)


def render_cv(cv: Any) -> str:
    """Serialize the CV the way the export endpoint serves it."""
    return json.dumps(cv, indent=2, ensure_ascii=False)


def create_app(settings: Optional[SyncSettings] = None) -> FastAPI:
    """Build the export application for the given settings."""
    settings = settings or SyncSettings.from_env()

    app = FastAPI(
        title="Portfolio Content Export",
        version=__version__,
    )

    @app.get("/cv.json", tags=["Export"])
    async def cv_json() -> Response:
        """CV document, pretty-printed."""
        try:
            cv = load_cv(settings.cv_path)
        except FileNotFoundError:
            logger.warning(f"CV document not found: {settings.cv_path}")
            raise HTTPException(status_code=404, detail="CV document not found")
        except ValueError as e:
            logger.error(f"CV document is not valid JSON: {e}")
            raise HTTPException(status_code=500, detail="CV document is not valid JSON")

        return Response(content=render_cv(cv), media_type="application/json")

    return app
