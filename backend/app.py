"""
FastAPI application for the PR portfolio page.

Serves a single HTML page at "/". The document is re-read on every
request so a fresh fetch shows up without restarting the server.
Nothing here writes to disk or calls GitHub.
"""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.responses import HTMLResponse

from models.config_models import Config
from renderer import get_style, render_page
from storage.document_store import load_document

logger = logging.getLogger(__name__)


def create_app(config: Optional[Config] = None) -> FastAPI:
    """Build the FastAPI app.

    Args:
        config: Application config (loaded from the environment if omitted)

    Returns:
        FastAPI app with the "/" route

    Raises:
        ValueError: If the configured render style is unknown
    """
    if config is None:
        from utils.config_loader import load_config
        config = load_config()

    data_path = config.data_path
    style = config.render.style
    get_style(style)  # Fail at startup, not on the first request

    app = FastAPI(
        title="PR Portfolio",
        description="Static portfolio page of a GitHub user's pull requests",
        version="1.0.0",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    @app.get("/", response_class=HTMLResponse)
    def index() -> HTMLResponse:
        """Render the portfolio page from the current document."""
        document = load_document(data_path)
        return HTMLResponse(content=render_page(document, style=style))

    logger.info(f"FastAPI app initialized (data: {data_path}, style: {style})")
    return app
