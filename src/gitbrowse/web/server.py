"""Launch the API under uvicorn."""
from __future__ import annotations

import logging

from gitbrowse.config import Settings

logger = logging.getLogger(__name__)


def launch(settings: Settings, log_level: str = "info") -> None:
    """Serve the API on ``settings.host:settings.port`` until interrupted."""
    import uvicorn

    from gitbrowse.web.api import create_app

    app = create_app(settings)
    logger.info("Started server on port %s (repositories in %s)", settings.port, settings.repos_root)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=log_level.lower())
